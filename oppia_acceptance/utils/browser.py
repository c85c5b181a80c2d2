# Browser and Server Utilities for Acceptance Tests

"""
Creates WebDriver sessions for acceptance tests and checks that the server
under test is reachable before any browser is launched.
"""

import logging

import requests
from selenium import webdriver
from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.chrome.service import Service as ChromeService
from selenium.webdriver.firefox.options import Options as FirefoxOptions
from selenium.webdriver.firefox.service import Service as FirefoxService
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from oppia_acceptance.config import TEST_CONFIG, get_browser_type, is_headless

logger = logging.getLogger(__name__)

# webdriver-manager cache lifetime, avoids GitHub API rate limiting
DRIVER_CACHE_DAYS = 30


class BrowserLaunchError(Exception):
    """Raised when no WebDriver session can be started."""
    pass


class ServerUnavailableError(Exception):
    """Raised when the server under test does not answer."""
    pass


def build_chrome_options():
    """Configure Chrome options for testing."""
    options = ChromeOptions()

    if is_headless():
        options.add_argument('--headless=new')

    width, height = TEST_CONFIG['window_size']
    options.add_argument('--no-sandbox')
    options.add_argument('--disable-dev-shm-usage')
    options.add_argument('--disable-gpu')
    options.add_argument('--disable-extensions')
    options.add_argument(f'--window-size={width},{height}')

    # Stability options for CI runs
    options.add_argument('--disable-background-timer-throttling')
    options.add_argument('--disable-renderer-backgrounding')
    options.add_argument('--disable-backgrounding-occluded-windows')
    options.add_argument('--disable-default-apps')
    options.add_argument('--disable-popup-blocking')
    options.add_argument('--no-first-run')
    options.add_argument('--password-store=basic')
    options.add_argument('--use-mock-keychain')

    # Needed so ConsoleReporter can read console errors
    options.set_capability('goog:loggingPrefs', {'browser': 'ALL'})

    logger.debug(f"Chrome configured with headless={is_headless()}")
    return options


def build_firefox_options():
    """Configure Firefox options for testing."""
    options = FirefoxOptions()

    if is_headless():
        options.add_argument('--headless')

    width, height = TEST_CONFIG['window_size']
    options.add_argument(f'--width={width}')
    options.add_argument(f'--height={height}')

    # Disable animations and transitions that can cause instability
    options.set_preference('toolkit.cosmeticAnimations.enabled', False)
    options.set_preference('browser.tabs.animate', False)
    options.set_preference('app.update.enabled', False)
    options.set_preference('extensions.update.enabled', False)

    logger.debug(f"Firefox configured with headless={is_headless()}")
    return options


def _start_chrome():
    options = build_chrome_options()
    try:
        driver = webdriver.Chrome(service=ChromeService(), options=options)
        logger.info("Chrome browser instance created using system chromedriver")
        return driver
    except Exception as system_error:
        logger.info(f"System chromedriver not usable, using webdriver-manager: {system_error}")
        from webdriver_manager.chrome import ChromeDriverManager
        from webdriver_manager.core.driver_cache import DriverCacheManager
        cache_manager = DriverCacheManager(valid_range=DRIVER_CACHE_DAYS)
        service = ChromeService(ChromeDriverManager(cache_manager=cache_manager).install())
        driver = webdriver.Chrome(service=service, options=options)
        logger.info("Chrome browser instance created using webdriver-manager")
        return driver


def _start_firefox():
    options = build_firefox_options()
    try:
        driver = webdriver.Firefox(service=FirefoxService(), options=options)
        logger.info("Firefox browser instance created using system geckodriver")
        return driver
    except Exception as system_error:
        logger.info(f"System geckodriver not usable, using webdriver-manager: {system_error}")
        from webdriver_manager.firefox import GeckoDriverManager
        from webdriver_manager.core.driver_cache import DriverCacheManager
        cache_manager = DriverCacheManager(valid_range=DRIVER_CACHE_DAYS)
        service = FirefoxService(GeckoDriverManager(cache_manager=cache_manager).install())
        driver = webdriver.Firefox(service=service, options=options)
        logger.info("Firefox browser instance created using webdriver-manager")
        return driver


def create_driver(browser_type=None):
    """
    Start a new browser session.

    Args:
        browser_type: 'chrome' or 'firefox'; defaults to the configured browser

    Returns:
        WebDriver: Ready-to-use driver with timeouts applied

    Raises:
        BrowserLaunchError: If the browser could not be started
    """
    browser_type = (browser_type or get_browser_type()).lower()
    starters = {'chrome': _start_chrome, 'firefox': _start_firefox}

    if browser_type not in starters:
        raise BrowserLaunchError(f"Unsupported browser: {browser_type}")

    try:
        driver = starters[browser_type]()
    except Exception as e:
        logger.error(f"Failed to create {browser_type} browser instance: {e}")
        raise BrowserLaunchError(f"Cannot start {browser_type}: {e}") from e

    driver.implicitly_wait(TEST_CONFIG['implicit_wait'])
    driver.set_page_load_timeout(TEST_CONFIG['page_load_timeout'])
    return driver


@retry(
    stop=stop_after_attempt(TEST_CONFIG['retry_attempts']),
    wait=wait_exponential(multiplier=1, min=TEST_CONFIG['retry_delay_base'], max=10),
    retry=retry_if_exception_type(ServerUnavailableError),
    reraise=True
)
def check_server_available(base_url):
    """
    Verify the server under test answers HTTP requests.

    Args:
        base_url: Base URL of the application

    Returns:
        bool: True if the server responded

    Raises:
        ServerUnavailableError: If the server is unreachable after retries
    """
    try:
        response = requests.get(base_url, timeout=TEST_CONFIG['request_timeout'])
    except requests.RequestException as e:
        logger.warning(f"Server at {base_url} not reachable: {e}")
        raise ServerUnavailableError(f"{base_url} is not reachable: {e}") from e

    if response.status_code >= 500:
        raise ServerUnavailableError(f"{base_url} answered with status {response.status_code}")

    logger.info(f"Server at {base_url} is available (status {response.status_code})")
    return True
