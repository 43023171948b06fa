"""
Assertion Helper
"Store then assert" entry points used by every step definition.

Assertions go through the test context instead of being checked inline, so
every compared pair stays in the context afterwards and can be attached to
the report.
"""

import logging
from typing import Any, Sized

from .test_context import TestContext

logger = logging.getLogger(__name__)


class AssertionHelper:
    """Namespaced assertions over one TestContext"""

    def __init__(self, context: TestContext):
        self.context = context

    def store_for_assertion(self, key: str, actual: Any, expected: Any):
        self.context.store_for_assertion(key, actual, expected)

    def assert_stored_values(self, key: str):
        self.context.assert_stored_values(key)

    def assert_and_store(self, key: str, actual: Any, expected: Any):
        """Store the pair under key and compare it immediately"""
        logger.debug(f"Asserting '{key}': actual={actual!r} expected={expected!r}")
        self.store_for_assertion(key, actual, expected)
        self.assert_stored_values(key)

    def assert_page_title(self, page_name: str, actual_title: str, expected_title: str):
        self.context.store_page_title(page_name, actual_title, expected_title)
        self.context.assert_page_title(page_name)

    def assert_form_field(self, field_name: str, actual_value: Any, expected_value: Any):
        self.assert_and_store(f"form_{field_name}", actual_value, expected_value)

    def assert_user_data(self, user_id: str, actual_data: Any, expected_data: Any):
        self.assert_and_store(f"user_{user_id}", actual_data, expected_data)

    def assert_api_response(self, endpoint: str, actual_response: Any, expected_response: Any):
        self.assert_and_store(f"api_{endpoint}", actual_response, expected_response)

    def assert_element_text(self, element_name: str, actual_text: str, expected_text: str):
        self.assert_and_store(f"element_{element_name}", actual_text, expected_text)

    def assert_element_count(self, element_name: str, actual_count: int, expected_count: int):
        self.assert_and_store(f"count_{element_name}", actual_count, expected_count)

    def assert_url(self, actual_url: str, expected_url: str):
        self.assert_and_store("current_url", actual_url, expected_url)

    def assert_boolean(self, key: str, actual_value: bool, expected_value: bool):
        self.assert_and_store(f"bool_{key}", actual_value, expected_value)

    def assert_array_length(self, array_name: str, actual_array: Sized, expected_length: int):
        self.assert_and_store(f"array_length_{array_name}", len(actual_array), expected_length)

    def assert_object_property(self, object_name: str, property_name: str,
                               actual_value: Any, expected_value: Any):
        self.assert_and_store(f"obj_{object_name}_{property_name}", actual_value, expected_value)
