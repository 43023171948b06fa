"""
pagebdd

Data-driven BDD browser testing:
- Feature files describe scenarios, regex step definitions drive page objects
- Page objects read selectors, URLs and test data from per-page JSON fixtures
- A per-scenario test context threads values between steps
- Assertions are stored as actual/expected pairs before being compared,
  so every comparison can be inspected and reported afterwards
"""

from .config import FrameworkConfig
from .errors import (
    PageBddError,
    FixtureNotFoundError,
    DataPathNotFoundError,
    SelectorNotFoundError,
    ContextKeyMissingError,
    AssertionMismatchError,
    RecordNotFoundError,
    StepDefinitionNotFoundError,
    InvalidFixtureValueError
)
from .data import FixtureStore, PageDataResolver
from .context import TestContext, AssertionHelper
from .session import TestSession
from .runner import GherkinExecutor, run_feature_file

__all__ = [
    # Configuration
    "FrameworkConfig",
    # Errors
    "PageBddError",
    "FixtureNotFoundError",
    "DataPathNotFoundError",
    "SelectorNotFoundError",
    "ContextKeyMissingError",
    "AssertionMismatchError",
    "RecordNotFoundError",
    "StepDefinitionNotFoundError",
    "InvalidFixtureValueError",
    # Core
    "FixtureStore",
    "PageDataResolver",
    "TestContext",
    "AssertionHelper",
    # Execution
    "TestSession",
    "GherkinExecutor",
    "run_feature_file"
]

__version__ = "1.0.0"
