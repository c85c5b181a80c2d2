# Voiceover Admin Page Object

"""
Page object for a voiceover admin managing the voiceover artists of an
exploration from the exploration editor's settings tab.
"""

from .base_user import BaseUser
from oppia_acceptance.data.test_constants import URLS
from selenium.webdriver.common.by import By
from selenium.webdriver.support.ui import WebDriverWait
from selenium.common.exceptions import TimeoutException
import logging

logger = logging.getLogger(__name__)

SETTINGS_TAB = '.e2e-test-settings-tab'
VOICE_ARTIST_SECTION = '.e2e-test-voice-artist-roles'
EDIT_VOICE_ARTIST_ROLES_BUTTON = 'button.e2e-test-edit-voice-artist-roles'
NEW_VOICE_ARTIST_USERNAME_INPUT = '#newVoicAartistUsername'
ADD_VOICE_ARTIST_BUTTON = 'button.e2e-test-add-voice-artist-role-button'
VOICE_ARTIST_NAMES = '.e2e-test-voiceArtist-role-names'
CONFIRM_REMOVE_VOICE_ARTIST_BUTTON = 'button.e2e-test-confirm-remove-voice-artist'


def remove_voice_artist_locator(username):
    return (
        By.XPATH,
        f"//*[contains(@class, 'e2e-test-voiceArtist-role-names') and normalize-space()='{username}']"
        "/following::button[contains(@class, 'e2e-test-remove-voice-artist-role-button')][1]"
    )


class VoiceoverAdmin(BaseUser):
    """Page object for the voiceover admin role."""

    def navigate_to_exploration_editor(self, exploration_id):
        """
        Open the editor of an existing exploration.

        Raises:
            ValueError: If no exploration id is given
        """
        if not exploration_id:
            raise ValueError("Cannot navigate to exploration editor: exploration id is missing")
        return self.navigate_to(URLS.exploration_editor(exploration_id))

    def navigate_to_exploration_settings_tab(self):
        """Switch to the settings tab and wait for the voice artist section."""
        self.click_or_fail(SETTINGS_TAB, "settings tab")
        if not self.find_element_safely(VOICE_ARTIST_SECTION):
            raise AssertionError("Voice artist section not shown on settings tab")

    def get_voiceover_artists(self):
        """
        Usernames currently listed as voiceover artists.

        Returns:
            list: Usernames, in display order
        """
        return [name for name in self.get_texts(VOICE_ARTIST_NAMES) if name]

    def add_voiceover_artist_to_exploration(self, username):
        """Submit a username in the add voice artist form."""
        logger.info(f"Adding voiceover artist: {username}")
        self.click_or_fail(EDIT_VOICE_ARTIST_ROLES_BUTTON, "edit voice artist roles button")
        self.type_or_fail(NEW_VOICE_ARTIST_USERNAME_INPUT, username, "voice artist username input")
        self.click_or_fail(ADD_VOICE_ARTIST_BUTTON, "add voice artist button")

    def remove_voiceover_artist_from_exploration(self, username):
        """Remove a listed voiceover artist and confirm the removal."""
        logger.info(f"Removing voiceover artist: {username}")
        self.click_or_fail(remove_voice_artist_locator(username), f"remove button for {username}")
        self.click_or_fail(CONFIRM_REMOVE_VOICE_ARTIST_BUTTON, "confirm removal button")
        self.expect_voiceover_artists_list_does_not_contain(username, wait=True)

    def _wait_for_artists(self, condition, timeout):
        try:
            WebDriverWait(self.driver, timeout if timeout is not None else self.timeout).until(
                lambda driver: condition(self.get_voiceover_artists())
            )
            return True
        except TimeoutException:
            return False

    def expect_voiceover_artists_list_contains(self, username, timeout=None):
        """
        Assert that a username shows up in the voiceover artist list.

        Waits for the list to update, since additions are saved asynchronously.

        Raises:
            AssertionError: If the username is not listed in time
        """
        if not self._wait_for_artists(lambda artists: username in artists, timeout):
            raise AssertionError(
                f"Expected voiceover artists to contain '{username}', got {self.get_voiceover_artists()}"
            )
        logger.info(f"✓ Voiceover artists contain {username}")

    def expect_voiceover_artists_list_does_not_contain(self, username, wait=False, timeout=None):
        """
        Assert that a username is not in the voiceover artist list.

        Args:
            username: Username to look for
            wait: Wait for the username to disappear instead of checking once

        Raises:
            AssertionError: If the username is listed
        """
        if wait:
            absent = self._wait_for_artists(lambda artists: username not in artists, timeout)
        else:
            absent = username not in self.get_voiceover_artists()

        if not absent:
            raise AssertionError(
                f"Expected voiceover artists not to contain '{username}', got {self.get_voiceover_artists()}"
            )
        logger.info(f"✓ Voiceover artists do not contain {username}")

    def verify_voiceover_artist_still_omitted(self, username, expected_artists):
        """
        Assert a rejected username was not added and the list is unchanged.

        Args:
            username: Username whose addition was rejected
            expected_artists: Artist list read before the rejected addition

        Raises:
            AssertionError: If the username is listed or the list changed
        """
        self.expect_voiceover_artists_list_does_not_contain(username)
        artists = self.get_voiceover_artists()
        if artists != list(expected_artists):
            raise AssertionError(
                f"Expected voiceover artists to stay {list(expected_artists)}, got {artists}"
            )
        logger.info(f"✓ Voiceover artists unchanged after rejecting {username}")
