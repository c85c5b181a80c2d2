# Acceptance Test Data

"""
Centralized constants for acceptance tests.
"""

from .test_constants import (
    DEFAULT_SPEC_TIMEOUT, URLS, Roles, SUPER_ADMIN,
    ignored_console_errors_for_all_tests
)

__all__ = [
    'DEFAULT_SPEC_TIMEOUT',
    'URLS',
    'Roles',
    'SUPER_ADMIN',
    'ignored_console_errors_for_all_tests'
]
