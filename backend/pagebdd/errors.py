"""
Framework Errors
Every failure the core can raise. None of them is retried or swallowed:
they propagate to the runner, which marks the scenario failed.
"""

from typing import Any, Optional


class PageBddError(Exception):
    """Base class for framework errors"""


class FixtureNotFoundError(PageBddError):
    """No usable fixture document exists for a logical page"""

    def __init__(self, page_name: str, path: Optional[str] = None, reason: Optional[str] = None):
        self.page_name = page_name
        self.path = path
        message = f"Fixture for page '{page_name}' not found"
        if path:
            message += f" at '{path}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class DataPathNotFoundError(PageBddError):
    """A dotted data path does not resolve within a page fixture"""

    def __init__(self, page_name: str, data_path: str):
        self.page_name = page_name
        self.data_path = data_path
        super().__init__(f"Data path '{data_path}' not found in page '{page_name}'")


class SelectorNotFoundError(PageBddError):
    """A logical selector name is missing from a page's selector mapping"""

    def __init__(self, page_name: str, selector_name: str):
        self.page_name = page_name
        self.selector_name = selector_name
        super().__init__(f"Selector '{selector_name}' not found in page object '{page_name}'")


class ContextKeyMissingError(PageBddError, KeyError):
    """A context key was read before being set (or after being cleared)"""

    def __init__(self, key: str):
        self.key = key
        super().__init__(key)

    def __str__(self):
        return f"Key '{self.key}' not found in test context"


class AssertionMismatchError(PageBddError, AssertionError):
    """Stored actual and expected values differ"""

    def __init__(self, key: str, expected: Any, actual: Any):
        self.key = key
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Assertion failed for '{key}': Expected {expected!r}, but got {actual!r}"
        )


class RecordNotFoundError(PageBddError):
    """A domain record id (user, product, order type, address) is unknown"""

    def __init__(self, record_type: str, record_id: Any, page_name: Optional[str] = None):
        self.record_type = record_type
        self.record_id = record_id
        self.page_name = page_name
        message = f"{record_type} with ID '{record_id}' not found"
        if page_name:
            message += f" in page '{page_name}' test data"
        super().__init__(message)


class StepDefinitionNotFoundError(PageBddError):
    """No registered step definition matches a step's text"""

    def __init__(self, step_text: str):
        self.step_text = step_text
        super().__init__(f"No step definition found for: {step_text}")


class InvalidFixtureValueError(PageBddError, ValueError):
    """A fixture value exists but has the wrong shape for its use"""

    def __init__(self, page_name: str, data_path: str, value: Any, expected: str):
        self.page_name = page_name
        self.data_path = data_path
        self.value = value
        super().__init__(
            f"Value at '{data_path}' in page '{page_name}' must be {expected}, got {value!r}"
        )
