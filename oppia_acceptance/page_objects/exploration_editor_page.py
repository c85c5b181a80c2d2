# Exploration Editor Page Object

"""
Page object for the creator dashboard and the exploration editor.
Handles creating a minimal exploration, saving it and publishing it.
"""

from .base_user import BaseUser
from oppia_acceptance.data.test_constants import URLS
from selenium.webdriver.common.by import By
import logging
import re

logger = logging.getLogger(__name__)

EXPLORATION_ID_PATTERN = re.compile(r'/create/([^/#?]+)')

# Creator dashboard
CREATE_EXPLORATION_BUTTON = 'button.e2e-test-create-new-exploration-button'

# State editor
STATE_CONTENT_EDITOR = '.e2e-test-edit-content-div'
RICH_TEXT_EDITOR = '.e2e-test-rte'
SAVE_CONTENT_BUTTON = 'button.e2e-test-save-state-content'
ADD_INTERACTION_BUTTON = 'button.e2e-test-open-add-interaction-modal'
END_INTERACTION_TILE = '.e2e-test-interaction-tile-EndExploration'
SAVE_INTERACTION_BUTTON = 'button.e2e-test-save-interaction'

# Settings and saving
SETTINGS_TAB = '.e2e-test-settings-tab'
TITLE_INPUT = 'input.e2e-test-exploration-title-input'
SAVE_CHANGES_BUTTON = 'button.e2e-test-save-changes'
COMMIT_MESSAGE_INPUT = 'textarea.e2e-test-commit-message-input'
SAVE_DRAFT_BUTTON = 'button.e2e-test-save-draft-button'

# Publishing
PUBLISH_BUTTON = 'button.e2e-test-publish-exploration'
MODAL_TITLE_INPUT = 'input.e2e-test-exploration-title-modal'
MODAL_OBJECTIVE_INPUT = 'input.e2e-test-exploration-objective-modal'
MODAL_CATEGORY_DROPDOWN = '.e2e-test-exploration-category-dropdown'
CONFIRM_PRE_PUBLICATION_BUTTON = 'button.e2e-test-confirm-pre-publication'
CONFIRM_PUBLISH_BUTTON = 'button.e2e-test-confirm-publish'
SHARE_PUBLISH_MODAL = '.e2e-test-share-publish-modal'
CLOSE_SHARE_PUBLISH_BUTTON = 'button.e2e-test-share-publish-close'

DEFAULT_CATEGORY = 'Algebra'


class ExplorationPublishError(Exception):
    """Raised when publishing does not produce an exploration id."""
    pass


def parse_exploration_id(url):
    """
    Extract the exploration id from an exploration editor URL.

    Returns:
        str or None: The id, e.g. 'abc123' for '/create/abc123#/settings'
    """
    if not url:
        return None
    match = EXPLORATION_ID_PATTERN.search(url)
    return match.group(1) if match else None


def option_locator(text):
    return (By.XPATH, f"//mat-option[.//span[normalize-space()='{text}']]")


class ExplorationEditor(BaseUser):
    """Page object for a user creating and publishing explorations."""

    def navigate_to_creator_dashboard_page(self):
        """Navigate to the creator dashboard."""
        return self.navigate_to(URLS.CREATOR_DASHBOARD)

    def navigate_to_exploration_editor_page(self):
        """Create a new exploration from the dashboard and open its editor."""
        self.click_or_fail(CREATE_EXPLORATION_BUTTON, "create exploration button")
        if not self.wait_for_url_contains('/create/'):
            raise AssertionError("Exploration editor did not open")
        logger.info(f"Opened exploration editor: {self.get_current_url()}")

    def update_card_content(self, content):
        self.click_or_fail(STATE_CONTENT_EDITOR, "state content editor")
        self.type_or_fail(RICH_TEXT_EDITOR, content, "rich text editor")
        self.click_or_fail(SAVE_CONTENT_BUTTON, "save content button")

    def add_end_interaction(self):
        self.click_or_fail(ADD_INTERACTION_BUTTON, "add interaction button")
        self.click_or_fail(END_INTERACTION_TILE, "end exploration tile")
        self.click_or_fail(SAVE_INTERACTION_BUTTON, "save interaction button")

    def save_exploration_draft(self, commit_message):
        self.click_or_fail(SAVE_CHANGES_BUTTON, "save changes button")
        self.type_or_fail(COMMIT_MESSAGE_INPUT, commit_message, "commit message input")
        self.click_or_fail(SAVE_DRAFT_BUTTON, "save draft button")
        self.wait_for_element_to_disappear(SAVE_DRAFT_BUTTON)

    def create_exploration_with_title(self, title):
        """
        Build a minimal one-card exploration and save it as a draft.

        Args:
            title: Exploration title
        """
        logger.info(f"Creating exploration '{title}'")
        self.update_card_content(f"Content for {title}")
        self.add_end_interaction()

        self.click_or_fail(SETTINGS_TAB, "settings tab")
        self.type_or_fail(TITLE_INPUT, title, "exploration title input")
        # Title is committed when the input loses focus
        self.click_or_fail(SETTINGS_TAB, "settings tab")

        self.save_exploration_draft(f"Create {title}")
        logger.info(f"✓ Exploration '{title}' saved as draft")

    def _fill_publication_metadata(self, title):
        """Fill whatever metadata the pre-publication modal still asks for."""
        title_input = self.find_element_safely(MODAL_TITLE_INPUT, timeout=2)
        if title_input and not title_input.get_attribute('value'):
            self.type_or_fail(MODAL_TITLE_INPUT, title, "modal title input")

        objective_input = self.find_element_safely(MODAL_OBJECTIVE_INPUT, timeout=2)
        if objective_input and not objective_input.get_attribute('value'):
            self.type_or_fail(MODAL_OBJECTIVE_INPUT, f"Learn about {title}", "objective input")

        if self.find_element_safely(MODAL_CATEGORY_DROPDOWN, timeout=2):
            self.click_or_fail(MODAL_CATEGORY_DROPDOWN, "category dropdown")
            self.click_or_fail(option_locator(DEFAULT_CATEGORY), f"category '{DEFAULT_CATEGORY}'")

    def publish_exploration_with_title(self, title):
        """
        Publish the exploration currently open in the editor.

        Args:
            title: Title to use if the publication modal asks for one

        Returns:
            str: Id of the published exploration

        Raises:
            ExplorationPublishError: If no exploration id can be read afterwards
        """
        logger.info(f"Publishing exploration '{title}'")
        self.click_or_fail(PUBLISH_BUTTON, "publish button")
        self._fill_publication_metadata(title)

        self.click_or_fail(CONFIRM_PRE_PUBLICATION_BUTTON, "pre-publication confirm button")
        self.click_or_fail(CONFIRM_PUBLISH_BUTTON, "publish confirm button")

        if not self.find_element_safely(SHARE_PUBLISH_MODAL):
            raise ExplorationPublishError(f"Publication of '{title}' was not confirmed")

        exploration_id = parse_exploration_id(self.get_current_url())
        self.click_or_fail(CLOSE_SHARE_PUBLISH_BUTTON, "share modal close button")

        if not exploration_id:
            raise ExplorationPublishError(
                f"Could not read exploration id from {self.get_current_url()}"
            )

        logger.info(f"✓ Published '{title}' as {exploration_id}")
        return exploration_id
