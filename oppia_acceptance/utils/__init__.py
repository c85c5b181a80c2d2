# Acceptance Test Utilities

"""
Browser bootstrap, user creation and console error reporting.
"""

from .browser import (
    BrowserLaunchError, ServerUnavailableError, check_server_available, create_driver
)
from .console_reporter import ConsoleErrorsFound, ConsoleReporter
from .user_factory import UserCreationError, UserFactory

__all__ = [
    'BrowserLaunchError',
    'ServerUnavailableError',
    'check_server_available',
    'create_driver',
    'ConsoleErrorsFound',
    'ConsoleReporter',
    'UserCreationError',
    'UserFactory'
]
