# Super Admin Page Object

"""
Page object for the admin roles tab, used to grant roles to test users.
"""

from .base_user import BaseUser
from oppia_acceptance.data.test_constants import URLS
from selenium.webdriver.common.by import By
from selenium.webdriver.support.ui import WebDriverWait
from selenium.common.exceptions import TimeoutException
import logging

logger = logging.getLogger(__name__)

ROLE_EDITOR_USERNAME_INPUT = 'input.e2e-test-username-for-role-editor'
ROLE_EDIT_BUTTON = 'button.e2e-test-role-edit-button'
ADD_NEW_ROLE_BUTTON = 'button.e2e-test-add-new-role-button'
NEW_ROLE_SELECTOR = '.e2e-test-new-role-selector'
USER_ROLE_DESCRIPTIONS = '.e2e-test-user-role-description'


def role_option_locator(role):
    return (By.XPATH, f"//mat-option[.//span[normalize-space()='{role}']]")


class SuperAdmin(BaseUser):
    """Dev super admin, allowed to assign roles to other users."""

    def navigate_to_roles_tab(self):
        """Navigate to the roles tab of the admin page."""
        return self.navigate_to(URLS.ADMIN_ROLES_TAB)

    def open_role_editor_for(self, username):
        """Load the role editor for a user."""
        self.type_or_fail(ROLE_EDITOR_USERNAME_INPUT, username, "role editor username input")
        self.click_or_fail(ROLE_EDIT_BUTTON, "role edit button")
        if not self.find_element_safely(ADD_NEW_ROLE_BUTTON):
            raise AssertionError(f"Role editor did not open for {username}")

    def get_user_roles(self):
        """Roles listed in the open role editor, lower-cased."""
        return [text.lower() for text in self.get_texts(USER_ROLE_DESCRIPTIONS)]

    def assign_role_to_user(self, username, role):
        """
        Grant a role to a user through the admin roles tab.

        Args:
            username: Username of the user to update
            role: Role name as listed in test_constants.Roles
        """
        logger.info(f"Assigning role '{role}' to {username}")
        self.navigate_to_roles_tab()
        self.open_role_editor_for(username)

        if role in self.get_user_roles():
            logger.info(f"{username} already has role '{role}'")
            return

        self.click_or_fail(ADD_NEW_ROLE_BUTTON, "add new role button")
        self.click_or_fail(NEW_ROLE_SELECTOR, "new role selector")
        self.click_or_fail(role_option_locator(role), f"role option '{role}'")
        self.expect_user_to_have_role(username, role)

    def expect_user_to_have_role(self, username, role):
        """
        Assert the open role editor lists a role for the user.

        Raises:
            AssertionError: If the role does not show up
        """
        try:
            WebDriverWait(self.driver, self.timeout).until(
                lambda driver: role in self.get_user_roles()
            )
        except TimeoutException:
            raise AssertionError(
                f"Expected {username} to have role '{role}', found {self.get_user_roles()}"
            )
        logger.info(f"✓ {username} has role '{role}'")
