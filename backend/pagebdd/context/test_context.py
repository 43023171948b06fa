"""
Test Context
Per-scenario key/value scratch space that threads data between steps.

Reading a key that was never written raises ContextKeyMissingError: a
missing value almost always means a broken step order, so it must not look
like None. Use get_or_default() or has() when absence is meaningful.

Assertion pairs use the reserved suffixes: store_for_assertion("k", a, e)
writes "k_actual" and "k_expected", and assert_stored_values("k") compares
them later.
"""

import logging
from typing import Any, Dict, Iterator, List, Mapping

from ..errors import AssertionMismatchError, ContextKeyMissingError

logger = logging.getLogger(__name__)

ACTUAL_SUFFIX = "_actual"
EXPECTED_SUFFIX = "_expected"

_SCALAR_TYPES = (str, int, float, bool, bytes, type(None))

_MISSING = object()


def _scalar_kind(value: Any) -> type:
    # int and float are one numeric kind; bool is not a number here
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float
    return type(value)


def strictly_equal(actual: Any, expected: Any) -> bool:
    """
    Equality without coercion.

    Scalars match when they are of the same kind and compare equal
    (90 == 90.0, but True != 1 and "1" != 1). Composite values only match
    themselves; compare serialized forms when structural equality is wanted.
    """
    if isinstance(actual, _SCALAR_TYPES) and isinstance(expected, _SCALAR_TYPES):
        return _scalar_kind(actual) is _scalar_kind(expected) and actual == expected
    return actual is expected


class TestContext:
    """
    Key/value store for one scenario.

    The runner calls clear_all() before every scenario; a cleared context
    behaves exactly like a fresh one.
    """

    # Not a pytest test class
    __test__ = False

    def __init__(self):
        self._data: Dict[str, Any] = {}

    def set(self, key: str, value: Any):
        self._data[key] = value
        logger.debug(f"Context set '{key}'")

    def get(self, key: str) -> Any:
        value = self._data.get(key, _MISSING)
        if value is _MISSING:
            raise ContextKeyMissingError(key)
        return value

    def get_or_default(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def has(self, key: str) -> bool:
        return key in self._data

    def set_multiple(self, data: Mapping[str, Any]):
        for key, value in data.items():
            self.set(key, value)

    def get_all(self) -> Dict[str, Any]:
        """Shallow snapshot of every entry"""
        return dict(self._data)

    def keys(self) -> List[str]:
        return list(self._data.keys())

    def clear(self, key: str):
        """Remove one key; absent keys are ignored"""
        self._data.pop(key, None)

    def clear_all(self):
        self._data.clear()
        logger.debug("Context cleared")

    def __contains__(self, key: str) -> bool:
        return self.has(key)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    # ==================== DEFERRED ASSERTIONS ====================

    def store_for_assertion(self, key: str, actual: Any, expected: Any):
        self.set(f"{key}{ACTUAL_SUFFIX}", actual)
        self.set(f"{key}{EXPECTED_SUFFIX}", expected)

    def assert_stored_values(self, key: str):
        """
        Compare a stored actual/expected pair.

        Raises:
            ContextKeyMissingError: either half of the pair was never stored
            AssertionMismatchError: the values are not strictly equal
        """
        actual = self.get_actual(key)
        expected = self.get_expected(key)

        if not strictly_equal(actual, expected):
            raise AssertionMismatchError(key, expected, actual)

    def get_actual(self, key: str) -> Any:
        return self.get(f"{key}{ACTUAL_SUFFIX}")

    def get_expected(self, key: str) -> Any:
        return self.get(f"{key}{EXPECTED_SUFFIX}")

    # ==================== NAMESPACED ENTRIES ====================

    def store_page_title(self, page_name: str, actual_title: str, expected_title: str):
        self.store_for_assertion(f"{page_name}_title", actual_title, expected_title)

    def assert_page_title(self, page_name: str):
        self.assert_stored_values(f"{page_name}_title")

    def store_user_data(self, user_id: str, user_data: Any):
        self.set(f"user_{user_id}", user_data)

    def get_user_data(self, user_id: str) -> Any:
        return self.get(f"user_{user_id}")

    def store_form_data(self, form_name: str, form_data: Any):
        self.set(f"form_{form_name}", form_data)

    def get_form_data(self, form_name: str) -> Any:
        return self.get(f"form_{form_name}")

    def store_api_response(self, endpoint: str, response: Any):
        self.set(f"api_{endpoint}", response)

    def get_api_response(self, endpoint: str) -> Any:
        return self.get(f"api_{endpoint}")
