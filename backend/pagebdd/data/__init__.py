"""
Fixture Data

Page fixtures loaded once per run and resolved through strict dotted paths.
"""

from .fixture_store import FixtureStore
from .resolver import PageDataResolver

__all__ = [
    "FixtureStore",
    "PageDataResolver"
]
