"""
Step Definitions

Regex-matched Gherkin steps that drive page objects and record observed
and expected values in the test context.
"""

from typing import List

from .library import StepDefinitionLibrary
from .login_steps import LoginSteps
from .order_steps import OrderSteps
from .common_steps import CommonSteps

DEFAULT_LIBRARIES = (LoginSteps, OrderSteps, CommonSteps)


def build_step_libraries(session, library_classes=DEFAULT_LIBRARIES) -> List[StepDefinitionLibrary]:
    """Instantiate step libraries (and their page objects) for a session"""
    return [library_class(session) for library_class in library_classes]


__all__ = [
    "StepDefinitionLibrary",
    "LoginSteps",
    "OrderSteps",
    "CommonSteps",
    "DEFAULT_LIBRARIES",
    "build_step_libraries"
]
