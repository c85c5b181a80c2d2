# Base Page Object for Acceptance Tests

"""
Base page object providing common functionality and resilient element finding.
"""

from selenium.webdriver.common.by import By
from selenium.webdriver.support.ui import WebDriverWait
from selenium.webdriver.support import expected_conditions as EC
from selenium.common.exceptions import TimeoutException, WebDriverException
import time
import logging

from oppia_acceptance.config import TEST_CONFIG, get_base_url

logger = logging.getLogger(__name__)


def as_locator(identifier):
    """Normalize a CSS selector string or (By, selector) tuple to a locator."""
    if isinstance(identifier, str):
        return (By.CSS_SELECTOR, identifier)
    return identifier


class BasePage:
    """Base page object with common functionality for all pages."""

    def __init__(self, driver, base_url=None):
        self.driver = driver
        self.base_url = base_url or get_base_url()
        self.timeout = TEST_CONFIG['element_timeout']

    def find_element_safely(self, identifier, timeout=None):
        """
        Find an element, waiting for it to be present.

        Args:
            identifier: CSS selector string or tuple of (method, selector)
            timeout: Maximum time to wait for element

        Returns:
            WebElement if found, None otherwise
        """
        locator = as_locator(identifier)
        try:
            wait = WebDriverWait(self.driver, timeout if timeout is not None else self.timeout)
            element = wait.until(EC.presence_of_element_located(locator))
            logger.debug(f"Found element using {locator[0]}: {locator[1]}")
            return element
        except TimeoutException:
            logger.warning(f"Could not find element: {locator[1]}")
            return None

    def find_clickable_element(self, identifier, timeout=None):
        """Find element and ensure it's clickable."""
        locator = as_locator(identifier)
        try:
            wait = WebDriverWait(self.driver, timeout if timeout is not None else self.timeout)
            return wait.until(EC.element_to_be_clickable(locator))
        except TimeoutException:
            logger.warning(f"Element not clickable: {locator[1]}")
            return None

    def safe_click(self, identifier, timeout=None):
        """
        Safely click an element.

        Falls back to scrolling into view and then to a JavaScript click
        when the element is covered or off-screen.
        """
        element = self.find_clickable_element(identifier, timeout)
        if not element:
            return False

        try:
            # Strategy 1: Direct click
            element.click()
            return True
        except WebDriverException as e1:
            logger.debug(f"Direct click failed: {e1}")

        try:
            # Strategy 2: Scroll into view and click
            self.driver.execute_script("arguments[0].scrollIntoView({block: 'center'});", element)
            time.sleep(0.3)
            element.click()
            return True
        except WebDriverException as e2:
            logger.debug(f"Scroll and click failed: {e2}")

        try:
            # Strategy 3: JavaScript click
            self.driver.execute_script("arguments[0].click();", element)
            return True
        except WebDriverException as e3:
            logger.error(f"All click strategies failed for {identifier}: {e3}")
            return False

    def click_or_fail(self, identifier, description=None, timeout=None):
        """Click an element and raise if it cannot be clicked."""
        if not self.safe_click(identifier, timeout):
            raise AssertionError(f"Could not click {description or identifier}")

    def safe_send_keys(self, identifier, text, clear_first=True):
        """Safely send keys to an element."""
        element = self.find_clickable_element(identifier)
        if not element:
            return False

        try:
            if clear_first:
                element.clear()
            element.send_keys(text)
            return True
        except WebDriverException as e:
            logger.error(f"Failed to send keys to {identifier}: {e}")
            return False

    def type_or_fail(self, identifier, text, description=None):
        """Type into an element and raise if it cannot be typed into."""
        if not self.safe_send_keys(identifier, text):
            raise AssertionError(f"Could not type into {description or identifier}")

    def wait_for_page_load(self, timeout=None):
        """Wait for the document to finish loading."""
        try:
            if self.driver.execute_script("return document.readyState") == "complete":
                return True

            WebDriverWait(self.driver, timeout or TEST_CONFIG['page_load_timeout']).until(
                lambda driver: driver.execute_script("return document.readyState") == "complete"
            )
            return True
        except TimeoutException:
            logger.warning(f"Page load timeout after {timeout}s, but continuing...")
            return True

    def wait_for_url_contains(self, text, timeout=None):
        """Wait for URL to contain specific text."""
        try:
            WebDriverWait(self.driver, timeout or self.timeout).until(
                EC.url_contains(text)
            )
            return True
        except TimeoutException:
            logger.warning(f"URL did not contain '{text}' within {timeout or self.timeout}s")
            return False

    def wait_for_element_to_disappear(self, identifier, timeout=None):
        """Wait until an element is gone or hidden."""
        try:
            WebDriverWait(self.driver, timeout or self.timeout).until(
                EC.invisibility_of_element_located(as_locator(identifier))
            )
            return True
        except TimeoutException:
            logger.warning(f"Element still visible: {identifier}")
            return False

    def get_element_text(self, identifier, timeout=None):
        """Get text content of element."""
        element = self.find_element_safely(identifier, timeout)
        if element:
            return element.text.strip()
        return ""

    def get_texts(self, identifier):
        """Get the stripped text of every element currently matching a selector."""
        elements = self.driver.find_elements(*as_locator(identifier))
        return [element.text.strip() for element in elements]

    def navigate_to(self, path=""):
        """Navigate to a page and wait for its DOM to be ready."""
        url = f"{self.base_url}{path}"
        logger.info(f"Navigating to: {url}")
        self.driver.get(url)

        try:
            WebDriverWait(self.driver, 5).until(
                lambda driver: driver.execute_script("return document.readyState") in ["interactive", "complete"]
            )
            logger.debug("Page DOM ready, proceeding")
            return True
        except TimeoutException:
            logger.warning("Page taking longer to load, using fallback wait")
            return self.wait_for_page_load()

    def get_current_url(self):
        """Get current page URL."""
        return self.driver.current_url

