"""
Browser Driver
The seam between page objects and a browser engine.

Page objects only use the BrowserDriver / Element protocols below, so any
automation engine can be substituted. PlaywrightDriver is the shipped
implementation; every action blocks until Playwright reports it done, which
keeps steps strictly ordered.
"""

import logging
from typing import Optional, Protocol
from urllib.parse import urljoin

from playwright.sync_api import Browser, BrowserContext, Locator, Page, Playwright, expect, sync_playwright

from .config import FrameworkConfig

logger = logging.getLogger(__name__)


class Element(Protocol):
    """Capabilities of a located element"""

    def click(self) -> None: ...

    def type(self, text: str) -> None: ...

    def clear(self) -> None: ...

    def select(self, value: str) -> None: ...

    def text(self) -> str: ...

    def assert_visible(self, timeout: Optional[int] = None) -> None: ...

    def assert_contains_text(self, text: str, timeout: Optional[int] = None) -> None: ...

    def assert_not_exists(self, timeout: Optional[int] = None) -> None: ...

    def scroll_into_view(self) -> None: ...

    def hover(self) -> None: ...

    def find(self, selector: str) -> "Element": ...

    def filter_text(self, text: str) -> "Element": ...

    def count(self) -> int: ...


class BrowserDriver(Protocol):
    """Capabilities the core needs from a browser"""

    def visit(self, url: str) -> None: ...

    def get(self, selector: str, timeout: Optional[int] = None) -> Element: ...

    def contains(self, text: str, timeout: Optional[int] = None) -> Element: ...

    def wait_for_ready(self) -> None: ...

    def current_url(self) -> str: ...

    def screenshot(self) -> bytes: ...

    def close(self) -> None: ...


class PlaywrightElement:
    """Element backed by a Playwright locator (the first match is acted on)"""

    def __init__(self, locator: Locator, timeout: Optional[int] = None):
        self.locator = locator
        self.timeout = timeout

    def _timeout(self, timeout: Optional[int]) -> Optional[int]:
        return timeout if timeout is not None else self.timeout

    def click(self):
        self.locator.first.click(timeout=self.timeout)

    def type(self, text: str):
        self.locator.first.press_sequentially(str(text), timeout=self.timeout)

    def clear(self):
        self.locator.first.clear(timeout=self.timeout)

    def select(self, value: str):
        self.locator.first.select_option(value, timeout=self.timeout)

    def text(self) -> str:
        return self.locator.first.text_content(timeout=self.timeout) or ""

    def assert_visible(self, timeout: Optional[int] = None):
        expect(self.locator.first).to_be_visible(timeout=self._timeout(timeout))

    def assert_contains_text(self, text: str, timeout: Optional[int] = None):
        expect(self.locator.first).to_contain_text(text, timeout=self._timeout(timeout))

    def assert_not_exists(self, timeout: Optional[int] = None):
        expect(self.locator).to_have_count(0, timeout=self._timeout(timeout))

    def scroll_into_view(self):
        self.locator.first.scroll_into_view_if_needed(timeout=self.timeout)

    def hover(self):
        self.locator.first.hover(timeout=self.timeout)

    def find(self, selector: str) -> "PlaywrightElement":
        return PlaywrightElement(self.locator.locator(selector), self.timeout)

    def filter_text(self, text: str) -> "PlaywrightElement":
        return PlaywrightElement(self.locator.filter(has_text=text), self.timeout)

    def count(self) -> int:
        return self.locator.count()


class PlaywrightDriver:
    """BrowserDriver over playwright.sync_api"""

    def __init__(self, page: Page, config: FrameworkConfig,
                 playwright: Optional[Playwright] = None,
                 browser: Optional[Browser] = None,
                 context: Optional[BrowserContext] = None):
        self.page = page
        self.config = config
        self.playwright = playwright
        self.browser = browser
        self.context = context
        self._is_closed = False

    @classmethod
    def launch(cls, config: FrameworkConfig) -> "PlaywrightDriver":
        """Start Playwright, open a browser and a fresh page"""
        playwright = sync_playwright().start()
        try:
            browser_type = getattr(playwright, config.browser)
            browser = browser_type.launch(headless=config.headless)
            context = browser.new_context(
                viewport={"width": config.viewport_width, "height": config.viewport_height}
            )
            page = context.new_page()
            page.set_default_timeout(config.default_timeout_ms)
        except Exception:
            logger.error("Failed to create browser instance.", exc_info=True)
            playwright.stop()
            raise

        logger.info(f"Launched {config.browser} (headless={config.headless})")
        return cls(page, config, playwright=playwright, browser=browser, context=context)

    def _absolute(self, url: str) -> str:
        if url.startswith(("http://", "https://", "about:", "file:")):
            return url
        return urljoin(self.config.base_url.rstrip("/") + "/", url.lstrip("/"))

    def visit(self, url: str):
        target = self._absolute(url)
        logger.info(f"Navigating to {target}")
        self.page.goto(target)

    def get(self, selector: str, timeout: Optional[int] = None) -> PlaywrightElement:
        return PlaywrightElement(self.page.locator(selector), timeout)

    def contains(self, text: str, timeout: Optional[int] = None) -> PlaywrightElement:
        return PlaywrightElement(self.page.get_by_text(text), timeout)

    def wait_for_ready(self):
        self.page.wait_for_load_state("load")
        expect(self.page.locator("body")).to_be_visible()

    def current_url(self) -> str:
        return self.page.url

    def screenshot(self) -> bytes:
        return self.page.screenshot()

    def close(self):
        if self._is_closed:
            return
        if self.browser:
            self.browser.close()
        if self.playwright:
            self.playwright.stop()
        self._is_closed = True
        logger.info("Browser instance closed successfully.")
