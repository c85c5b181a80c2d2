# Acceptance Test Configuration for Oppia Voiceover Workflows

"""
Configuration for browser-driven acceptance testing against a running Oppia
server. Values can be overridden through environment variables so the same
suite runs locally and in CI.
"""

import os


def _env_flag(name, default):
    """Read a boolean flag from the environment."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


# Environment Configuration
TEST_CONFIG = {
    # Target server (Oppia dev server with the auth emulator)
    'base_url': 'http://localhost:8181',

    # Network resilience settings
    'retry_attempts': 3,
    'retry_delay_base': 2,  # seconds, for exponential backoff
    'request_timeout': 10,  # seconds for the reachability probe

    # Browser configuration
    'browser': 'chrome',  # Chrome exposes console logs through get_log('browser')
    'headless': True,
    'window_size': (1920, 1080),
    'implicit_wait': 0,  # explicit waits only
    'page_load_timeout': 30,
    'element_timeout': 10,

    # Per-test wall-clock limit, seconds
    'default_spec_timeout': 300,
}

# Logging Configuration
LOGGING_CONFIG = {
    'level': os.getenv('ACCEPTANCE_LOG_LEVEL', 'INFO').upper(),
    'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


def get_base_url():
    """Get the base URL of the server under test, without a trailing slash."""
    return os.getenv('OPPIA_BASE_URL', TEST_CONFIG['base_url']).rstrip('/')


def get_browser_type():
    """Get the browser to launch ('chrome' or 'firefox')."""
    return os.getenv('ACCEPTANCE_BROWSER', TEST_CONFIG['browser']).lower()


def is_headless():
    """Whether browsers should start without a visible window."""
    return _env_flag('ACCEPTANCE_HEADLESS', TEST_CONFIG['headless'])
