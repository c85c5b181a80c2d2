# Pytest Configuration and Fixtures for the Oppia Acceptance Suite

"""
Central pytest configuration for the voiceover acceptance suite.

Acceptance tests drive real browsers against a running server; they are
skipped when the server cannot be reached. Unit tests under tests/unit run
offline against fake drivers.
"""

import logging

import pytest

from oppia_acceptance.config import LOGGING_CONFIG, TEST_CONFIG, get_base_url, get_browser_type
from oppia_acceptance.utils import (
    ConsoleReporter, ServerUnavailableError, UserFactory, check_server_available
)

# Configure logging
logging.basicConfig(
    level=getattr(logging, LOGGING_CONFIG['level'], logging.INFO),
    format=LOGGING_CONFIG['format']
)
logger = logging.getLogger(__name__)

# Reachability of the server under test, probed once per session
_server_status = {}


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "acceptance: browser tests that need a running server"
    )
    config.addinivalue_line(
        "markers", "voiceover_admin: voiceover admin workflow tests"
    )
    config.addinivalue_line(
        "markers", "critical: marks tests as critical functionality"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if '/acceptance/' in item.nodeid or item.nodeid.startswith('acceptance/'):
            item.add_marker(pytest.mark.acceptance)
        if 'voiceover' in item.nodeid:
            item.add_marker(pytest.mark.voiceover_admin)


def _server_unavailable_reason(base_url):
    if base_url not in _server_status:
        try:
            check_server_available(base_url)
            _server_status[base_url] = None
        except ServerUnavailableError as e:
            _server_status[base_url] = str(e)
    return _server_status[base_url]


def pytest_runtest_setup(item):
    """Skip acceptance tests when the server under test is down."""
    if item.get_closest_marker('acceptance') is None:
        return

    reason = _server_unavailable_reason(get_base_url())
    if reason:
        pytest.skip(f"Server under test not available: {reason}")


@pytest.fixture(autouse=True)
def console_error_check(request):
    """Fail acceptance tests that produced unexpected console errors."""
    yield
    if request.node.get_closest_marker('acceptance') is not None:
        ConsoleReporter.report_console_errors(UserFactory.active_drivers())


# Session-level setup and teardown
@pytest.fixture(scope="session", autouse=True)
def test_session_setup():
    """Setup and teardown for the entire test session."""
    logger.info("=" * 50)
    logger.info("Oppia Acceptance Suite Starting")
    logger.info(f"Target URL: {get_base_url()}")
    logger.info(f"Browser: {get_browser_type()}")
    logger.info(f"Spec timeout: {TEST_CONFIG['default_spec_timeout']}s")
    logger.info("=" * 50)

    yield

    # Browsers left open by a failed module
    UserFactory.close_all_browsers()

    logger.info("=" * 50)
    logger.info("Oppia Acceptance Suite Complete")
    logger.info("=" * 50)
