# Console Error Reporter for Acceptance Tests

"""
Collects browser console errors from WebDriver sessions and fails tests on
errors that are not explicitly expected.

Test modules register the console errors their scenario is known to
produce with ConsoleReporter.set_console_errors_to_ignore(); everything else
logged at SEVERE level is reported.
"""

import logging
import re

from selenium.common.exceptions import WebDriverException

from oppia_acceptance.data.test_constants import ignored_console_errors_for_all_tests

logger = logging.getLogger(__name__)

ERROR_LEVEL = 'SEVERE'


class ConsoleErrorsFound(Exception):
    """Raised when unexpected console errors were logged during a test."""

    def __init__(self, errors):
        self.errors = list(errors)
        lines = '\n'.join(f"  - {error.get('message', '')}" for error in self.errors)
        super().__init__(f"{len(self.errors)} unexpected console error(s):\n{lines}")


def _compile(pattern):
    if isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern)


class ConsoleReporter:
    """Filters and reports console errors across browser sessions."""

    _specific_errors_to_ignore = []

    @classmethod
    def set_console_errors_to_ignore(cls, patterns):
        """
        Replace the list of test-specific console errors to ignore.

        Args:
            patterns: Iterable of compiled regexes or regex strings
        """
        cls._specific_errors_to_ignore = [_compile(p) for p in patterns]
        logger.debug(f"Ignoring {len(cls._specific_errors_to_ignore)} test-specific console errors")

    @classmethod
    def reset(cls):
        cls._specific_errors_to_ignore = []

    @classmethod
    def ignored_patterns(cls):
        return list(ignored_console_errors_for_all_tests) + list(cls._specific_errors_to_ignore)

    @classmethod
    def is_ignored(cls, message):
        """Check whether a console message matches any ignore pattern."""
        return any(pattern.search(message) for pattern in cls.ignored_patterns())

    @classmethod
    def collect_console_errors(cls, driver):
        """
        Read new console entries from a driver and keep unexpected errors.

        Reading the browser log drains it, so each entry is seen once.

        Returns:
            list: Log entry dicts with 'level', 'message' and 'source'
        """
        try:
            entries = driver.get_log('browser')
        except (AttributeError, WebDriverException) as e:
            # Firefox and remote drivers may not expose the browser log
            logger.debug(f"Browser log not available: {e}")
            return []

        errors = []
        for entry in entries:
            if entry.get('level') != ERROR_LEVEL:
                continue
            message = entry.get('message', '')
            if cls.is_ignored(message):
                logger.debug(f"Ignored expected console error: {message}")
                continue
            errors.append(entry)

        return errors

    @classmethod
    def report_console_errors(cls, drivers):
        """
        Collect console errors from every driver and fail on unexpected ones.

        Raises:
            ConsoleErrorsFound: If any unexpected console error was logged
        """
        errors = []
        for driver in drivers:
            errors.extend(cls.collect_console_errors(driver))

        if errors:
            for error in errors:
                logger.error(f"Console error: {error.get('message')}")
            raise ConsoleErrorsFound(errors)
