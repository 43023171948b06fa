"""
Fixture Store
Loads one JSON document per logical page and caches it for the whole run.

Fixtures live at <fixtures_dir>/pages/<pageName>Data.json, e.g.
fixtures/pages/loginData.json for the "login" page. The store only reads
them; nothing in the framework writes fixtures.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from ..errors import FixtureNotFoundError

logger = logging.getLogger(__name__)


class FixtureStore:
    """
    Page fixture loader with a process-lifetime cache.

    The first load() of a page performs I/O; every later call returns the
    same object without touching the disk again.
    """

    PAGES_SUBDIR = "pages"
    FILE_SUFFIX = "Data.json"

    def __init__(self, fixtures_dir: Union[str, Path]):
        self.fixtures_dir = Path(fixtures_dir)
        self._cache: Dict[str, Dict[str, Any]] = {}

    def fixture_path(self, page_name: str) -> Path:
        """Path of the backing file for a page"""
        return self.fixtures_dir / self.PAGES_SUBDIR / f"{page_name}{self.FILE_SUFFIX}"

    def has_fixture(self, page_name: str) -> bool:
        """Whether a page has backing data (cached or on disk)"""
        return page_name in self._cache or self.fixture_path(page_name).is_file()

    def load(self, page_name: str) -> Dict[str, Any]:
        """
        Load the fixture document for a page.

        The returned dict is the cached document itself, shared by every
        caller for the rest of the session. Treat it as read-only; the
        resolver hands out copies.

        Raises:
            FixtureNotFoundError: no file, unreadable JSON, or a non-object root
        """
        cached = self._cache.get(page_name)
        if cached is not None:
            logger.debug(f"Fixture cache hit for page '{page_name}'")
            return cached

        path = self.fixture_path(page_name)
        if not path.is_file():
            raise FixtureNotFoundError(page_name, str(path))

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise FixtureNotFoundError(page_name, str(path), f"invalid JSON ({e})") from e

        if not isinstance(data, dict):
            raise FixtureNotFoundError(
                page_name, str(path), f"root must be an object, got {type(data).__name__}"
            )

        self._cache[page_name] = data
        logger.info(f"Loaded fixture for page '{page_name}' from {path}")
        return data

    @property
    def cached_pages(self) -> List[str]:
        return list(self._cache.keys())

    def clear_cache(self):
        """Forget every loaded fixture (test support; the runner never calls this)"""
        self._cache.clear()
