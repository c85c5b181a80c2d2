# Fake WebDriver fixtures for offline unit tests

"""
Fixtures standing in for WebDriver sessions so page objects and utilities
can be tested without a browser or server.
"""

from unittest.mock import MagicMock

import pytest

from oppia_acceptance.utils import ConsoleReporter, UserFactory

BASE_URL = 'http://oppia.test:8181'


def _make_element(text='', displayed=True, value=''):
    """Create a fake WebElement."""
    element = MagicMock(name=f'element<{text}>')
    element.text = text
    element.is_displayed.return_value = displayed
    element.is_enabled.return_value = True
    element.get_attribute.return_value = value
    return element


@pytest.fixture
def app_url():
    """Base URL the fake pages live under."""
    return BASE_URL


@pytest.fixture
def make_element():
    """Factory for fake WebElements."""
    return _make_element


@pytest.fixture
def fake_driver():
    """MagicMock driver whose pages are always fully loaded."""
    driver = MagicMock(name='driver')
    driver.execute_script.return_value = 'complete'
    driver.current_url = f'{BASE_URL}/'
    driver.find_elements.return_value = []
    return driver


@pytest.fixture(autouse=True)
def reset_shared_state():
    """Keep class-level reporter and factory state from leaking between tests."""
    ConsoleReporter.reset()
    yield
    ConsoleReporter.reset()
    UserFactory.close_all_browsers()
