# Base User Page Object

"""
A signed-in application user driving their own browser session.
Handles sign up, modals and toast notifications shared by every role.
"""

from .base_page import BasePage, as_locator
from oppia_acceptance.data.test_constants import URLS
from selenium.webdriver.support.ui import WebDriverWait
from selenium.common.exceptions import TimeoutException, WebDriverException
import logging

logger = logging.getLogger(__name__)

# Sign in (auth emulator) and sign up
SIGN_IN_EMAIL_INPUT = 'input.e2e-test-sign-in-email-input'
SIGN_IN_BUTTON = 'button.e2e-test-sign-in-button'
USERNAME_INPUT = 'input.e2e-test-username-input'
AGREE_TO_TERMS_CHECKBOX = 'input.e2e-test-agree-to-terms-checkbox'
REGISTER_BUTTON = 'button.e2e-test-register-user:not([disabled])'

# Modals and toasts
WELCOME_MODAL = '.e2e-test-welcome-modal'
DISMISS_WELCOME_MODAL_BUTTON = 'button.e2e-test-dismiss-welcome-modal'
TOAST_WARNING_MESSAGE = '.e2e-test-toast-warning-message'
CLOSE_TOAST_WARNING_BUTTON = '.e2e-test-close-toast-warning'


class BaseUser(BasePage):
    """Base class for every user role."""

    def __init__(self, driver, username, email, base_url=None):
        super().__init__(driver, base_url)
        self.username = username
        self.email = email

    def __repr__(self):
        return f"<{type(self).__name__} {self.username}>"

    def sign_up_new_user(self):
        """
        Sign in through the auth emulator and complete the sign-up form.

        Raises:
            AssertionError: If a sign up step cannot be completed
        """
        logger.info(f"Signing up new user: {self.username} ({self.email})")
        self.navigate_to(URLS.LOGIN)

        self.type_or_fail(SIGN_IN_EMAIL_INPUT, self.email, "sign in email input")
        self.click_or_fail(SIGN_IN_BUTTON, "sign in button")

        if not self.wait_for_url_contains(URLS.SIGNUP):
            raise AssertionError(f"Sign in for {self.email} did not reach the sign up page")

        self.type_or_fail(USERNAME_INPUT, self.username, "username input")
        self.click_or_fail(AGREE_TO_TERMS_CHECKBOX, "terms checkbox")
        self.click_or_fail(REGISTER_BUTTON, "register button")

        if not self.wait_for_url_does_not_contain(URLS.SIGNUP):
            raise AssertionError(f"Sign up for {self.username} did not complete")

        logger.info(f"Signed up {self.username}")

    def wait_for_url_does_not_contain(self, text, timeout=None):
        """Wait until the current URL no longer contains some text."""
        try:
            WebDriverWait(self.driver, timeout or self.timeout).until(
                lambda driver: text not in driver.current_url
            )
            return True
        except TimeoutException:
            logger.warning(f"URL still contains '{text}'")
            return False

    def dismiss_welcome_modal(self):
        """Close the editor welcome modal and wait for it to go away."""
        self.click_or_fail(DISMISS_WELCOME_MODAL_BUTTON, "welcome modal dismiss button")
        self.wait_for_element_to_disappear(WELCOME_MODAL)
        logger.info("Welcome modal dismissed")

    def get_toast_message(self, timeout=None):
        """Return the text of the visible warning toast, or '' if none shows."""
        return self.get_element_text(TOAST_WARNING_MESSAGE, timeout)

    def expect_to_see_error_toast_message(self, expected_message, timeout=None):
        """
        Assert that the warning toast shows exactly the expected message.

        Waits for the toast text, which can render after the toast itself.

        Raises:
            AssertionError: If no toast appears or its text differs
        """
        locator = as_locator(TOAST_WARNING_MESSAGE)
        try:
            WebDriverWait(self.driver, timeout if timeout is not None else self.timeout).until(
                lambda driver: driver.find_element(*locator).text.strip() == expected_message
            )
        except TimeoutException:
            actual_message = self.get_toast_message(timeout=0)
            raise AssertionError(
                f"Expected toast message '{expected_message}', got '{actual_message}'"
            )
        logger.info(f"✓ Error toast shown: {expected_message}")

    def close_toast_message(self):
        """Close the warning toast."""
        self.click_or_fail(CLOSE_TOAST_WARNING_BUTTON, "toast close button")
        if not self.wait_for_element_to_disappear(TOAST_WARNING_MESSAGE):
            raise AssertionError("Toast message did not close")

    def close_browser(self):
        """Quit this user's browser session."""
        try:
            self.driver.quit()
            logger.info(f"Browser closed for {self.username}")
        except WebDriverException as e:
            logger.warning(f"Error closing browser for {self.username}: {e}")
