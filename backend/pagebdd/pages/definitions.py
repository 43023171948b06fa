"""
Page Definitions
Where a page object gets its URL and selectors from.

Two providers exist: selectors declared in the page class (static) and
selectors read from the page fixture. The provider is chosen once, when the
page object is built; whenever the page fixture declares selectors the
fixture wins.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Mapping, Optional

from ..data.resolver import PageDataResolver
from ..errors import FixtureNotFoundError, SelectorNotFoundError

logger = logging.getLogger(__name__)


class PageDefinition(ABC):
    """URL and logical-name -> locator mapping of one logical page"""

    def __init__(self, page_name: str):
        self.page_name = page_name
        self._url: Optional[str] = None

    @property
    def url(self) -> str:
        """Resolved on first access, then reused"""
        if self._url is None:
            self._url = self._load_url()
        return self._url

    @property
    @abstractmethod
    def selectors(self) -> Dict[str, str]:
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        ...

    @abstractmethod
    def _load_url(self) -> str:
        ...

    def selector(self, name: str) -> str:
        selector = self.selectors.get(name)
        if not selector:
            raise SelectorNotFoundError(self.page_name, name)
        return selector


class StaticPageDefinition(PageDefinition):
    """Selectors and URL declared as constants in the page class"""

    def __init__(self, page_name: str, url: str, selectors: Mapping[str, str]):
        super().__init__(page_name)
        self._static_url = url
        self._selectors = dict(selectors)

    @property
    def selectors(self) -> Dict[str, str]:
        return self._selectors

    @property
    def source(self) -> str:
        return "static"

    def _load_url(self) -> str:
        return self._static_url


class FixturePageDefinition(PageDefinition):
    """Selectors from fixture 'selectors', URL from fixture 'urls.<url_key>'"""

    def __init__(self, page_name: str, resolver: PageDataResolver, url_key: str):
        super().__init__(page_name)
        self.resolver = resolver
        self.url_key = url_key
        self._selectors: Optional[Dict[str, str]] = None

    @property
    def selectors(self) -> Dict[str, str]:
        if self._selectors is None:
            self._selectors = self.resolver.get_selectors(self.page_name)
        return self._selectors

    @property
    def source(self) -> str:
        return "fixture"

    def _load_url(self) -> str:
        return self.resolver.get_url(self.page_name, self.url_key)


def select_page_definition(page_name: str, resolver: PageDataResolver, url_key: str,
                           static_selectors: Optional[Mapping[str, str]] = None,
                           static_url: Optional[str] = None) -> PageDefinition:
    """
    Pick the provider for a page.

    Fixture-backed when the page fixture exists and declares 'selectors',
    otherwise the static declaration. With neither available the page
    cannot be built and FixtureNotFoundError is raised.
    """
    if resolver.fixture_store.has_fixture(page_name):
        if "selectors" in resolver.fixture_store.load(page_name):
            logger.debug(f"Page '{page_name}' uses fixture selectors")
            return FixturePageDefinition(page_name, resolver, url_key)

    if static_selectors is not None and static_url is not None:
        logger.debug(f"Page '{page_name}' uses static selectors")
        return StaticPageDefinition(page_name, static_url, static_selectors)

    raise FixtureNotFoundError(
        page_name,
        str(resolver.fixture_store.fixture_path(page_name)),
        "no fixture selectors and no static declaration"
    )
