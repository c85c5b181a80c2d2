# Unit tests for ConsoleReporter

"""
Tests for filtering browser console errors against ignore patterns.
"""

import re
from unittest.mock import MagicMock

import pytest
from selenium.common.exceptions import WebDriverException

from oppia_acceptance.utils import ConsoleErrorsFound, ConsoleReporter

BAD_REQUEST_MESSAGE = (
    'http://localhost:8181/voice_artist_management_handler/exploration/abc123 - '
    'Failed to load resource: the server responded with a status of 400 (Bad Request)'
)
TOAST_ECHO_MESSAGE = 'Sorry, we could not find the specified user.'


def log_entry(message, level='SEVERE', source='console-api'):
    return {'level': level, 'message': message, 'source': source, 'timestamp': 0}


class TestCollectConsoleErrors:
    """Test reading and filtering the browser log."""

    def test_severe_entries_are_reported(self, fake_driver):
        fake_driver.get_log.return_value = [log_entry('TypeError: x is undefined')]

        errors = ConsoleReporter.collect_console_errors(fake_driver)

        fake_driver.get_log.assert_called_once_with('browser')
        assert [e['message'] for e in errors] == ['TypeError: x is undefined']

    def test_non_error_levels_are_skipped(self, fake_driver):
        fake_driver.get_log.return_value = [
            log_entry('debug output', level='INFO'),
            log_entry('deprecated API', level='WARNING'),
        ]

        assert ConsoleReporter.collect_console_errors(fake_driver) == []

    def test_specific_patterns_are_ignored(self, fake_driver):
        ConsoleReporter.set_console_errors_to_ignore([
            re.compile(
                'http://localhost:8181/voice_artist_management_handler/exploration/.*'
                'Failed to load resource: the server responded with a status of 400'
            ),
            re.compile('Sorry, we could not find the specified user.'),
        ])
        fake_driver.get_log.return_value = [
            log_entry(BAD_REQUEST_MESSAGE, source='network'),
            log_entry(TOAST_ECHO_MESSAGE),
            log_entry('Unexpected failure'),
        ]

        errors = ConsoleReporter.collect_console_errors(fake_driver)

        assert [e['message'] for e in errors] == ['Unexpected failure']

    def test_string_patterns_are_compiled(self, fake_driver):
        ConsoleReporter.set_console_errors_to_ignore([r'status of 400'])
        fake_driver.get_log.return_value = [log_entry(BAD_REQUEST_MESSAGE)]

        assert ConsoleReporter.collect_console_errors(fake_driver) == []

    def test_global_patterns_always_apply(self, fake_driver, monkeypatch):
        monkeypatch.setattr(
            'oppia_acceptance.utils.console_reporter.ignored_console_errors_for_all_tests',
            [re.compile(r'favicon\.ico')]
        )
        fake_driver.get_log.return_value = [
            log_entry('http://localhost:8181/favicon.ico - Failed to load resource: 404')
        ]

        assert ConsoleReporter.collect_console_errors(fake_driver) == []

    def test_nothing_is_ignored_globally_by_default(self, fake_driver):
        fake_driver.get_log.return_value = [
            log_entry('http://localhost:8181/favicon.ico - Failed to load resource: 404')
        ]

        assert len(ConsoleReporter.collect_console_errors(fake_driver)) == 1

    def test_reset_clears_specific_patterns(self, fake_driver):
        ConsoleReporter.set_console_errors_to_ignore([TOAST_ECHO_MESSAGE])
        ConsoleReporter.reset()
        fake_driver.get_log.return_value = [log_entry(TOAST_ECHO_MESSAGE)]

        assert len(ConsoleReporter.collect_console_errors(fake_driver)) == 1

    def test_driver_without_browser_log(self, fake_driver):
        fake_driver.get_log.side_effect = WebDriverException('log type not supported')

        assert ConsoleReporter.collect_console_errors(fake_driver) == []


class TestReportConsoleErrors:
    """Test failing on unexpected errors across sessions."""

    def test_no_errors_passes(self, fake_driver):
        fake_driver.get_log.return_value = []

        ConsoleReporter.report_console_errors([fake_driver])

    def test_errors_from_all_drivers_are_raised(self, fake_driver):
        other_driver = MagicMock()
        fake_driver.get_log.return_value = [log_entry('first failure')]
        other_driver.get_log.return_value = [log_entry('second failure')]

        with pytest.raises(ConsoleErrorsFound) as excinfo:
            ConsoleReporter.report_console_errors([fake_driver, other_driver])

        assert [e['message'] for e in excinfo.value.errors] == ['first failure', 'second failure']
        assert '2 unexpected console error(s)' in str(excinfo.value)

    def test_entry_without_message(self, fake_driver):
        fake_driver.get_log.return_value = [{'level': 'SEVERE', 'source': 'network', 'timestamp': 0}]

        with pytest.raises(ConsoleErrorsFound, match='1 unexpected console error'):
            ConsoleReporter.report_console_errors([fake_driver])
