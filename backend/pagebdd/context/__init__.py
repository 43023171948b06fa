"""
Test Context

Per-scenario storage for values threaded between steps, plus the
store-then-assert helpers built on it.
"""

from .test_context import TestContext, strictly_equal
from .assertions import AssertionHelper

__all__ = [
    "TestContext",
    "AssertionHelper",
    "strictly_equal"
]
