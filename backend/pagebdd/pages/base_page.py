"""
Base Page
Shared behaviour of every page object: navigation and primitive element
interactions addressed by logical selector name.
"""

import logging
from typing import ClassVar, Dict, Optional

from ..context.test_context import TestContext
from ..data.resolver import PageDataResolver
from ..driver import BrowserDriver, Element
from .definitions import PageDefinition, select_page_definition

logger = logging.getLogger(__name__)


class BasePage:
    """
    Page object base class.

    Subclasses set PAGE_NAME and URL_KEY, and may declare STATIC_URL and
    STATIC_SELECTORS; fixture selectors take precedence when the page
    fixture provides them.
    """

    PAGE_NAME: ClassVar[str] = ""
    URL_KEY: ClassVar[str] = ""
    STATIC_URL: ClassVar[Optional[str]] = None
    STATIC_SELECTORS: ClassVar[Optional[Dict[str, str]]] = None

    def __init__(self, driver: BrowserDriver, resolver: PageDataResolver, context: TestContext,
                 definition: Optional[PageDefinition] = None):
        self.driver = driver
        self.resolver = resolver
        self.context = context
        self.definition = definition or select_page_definition(
            self.PAGE_NAME,
            resolver,
            self.URL_KEY,
            static_selectors=self.STATIC_SELECTORS,
            static_url=self.STATIC_URL,
        )

    @property
    def page_name(self) -> str:
        return self.definition.page_name

    @property
    def url(self) -> str:
        return self.definition.url

    @property
    def selectors(self) -> Dict[str, str]:
        return self.definition.selectors

    def visit(self):
        logger.info(f"Visiting {self.page_name} page ({self.url})")
        self.driver.visit(self.url)

    def wait_for_page_load(self):
        self.driver.wait_for_ready()

    def get_element(self, selector_name: str, timeout: Optional[int] = None) -> Element:
        """Locate an element by logical name; unknown names raise SelectorNotFoundError"""
        return self.driver.get(self.definition.selector(selector_name), timeout)

    def click_element(self, selector_name: str):
        self.get_element(selector_name).click()

    def type_text(self, selector_name: str, text: str):
        self.get_element(selector_name).type(text)

    def clear_and_type(self, selector_name: str, text: str):
        element = self.get_element(selector_name)
        element.clear()
        element.type(text)

    def is_element_visible(self, selector_name: str, timeout: Optional[int] = None) -> Element:
        element = self.get_element(selector_name, timeout)
        element.assert_visible(timeout)
        return element

    def element_contains_text(self, selector_name: str, text: str, timeout: Optional[int] = None):
        self.get_element(selector_name, timeout).assert_contains_text(text, timeout)

    def get_element_text(self, selector_name: str) -> str:
        return self.get_element(selector_name).text().strip()

    def take_screenshot(self, name: Optional[str] = None) -> bytes:
        logger.debug(f"Screenshot '{name or type(self).__name__}'")
        return self.driver.screenshot()
