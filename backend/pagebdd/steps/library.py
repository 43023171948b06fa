"""
Step Definition Library
Maps Gherkin step text to handlers using regex patterns.

Handlers receive the captured groups as strings, plus the step's data table
as a last argument when the step has one. Converting strings to ints and
other types is the handler's job; page objects and the context store get
typed values.
"""

import logging
import re
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, Pattern, Tuple

from ..models import GherkinStep

logger = logging.getLogger(__name__)


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


class StepDefinitionLibrary:
    """
    Base class for step libraries.

    Subclasses return their pattern -> handler mapping from
    _register_steps(). Patterns must match the whole step text.
    """

    def __init__(self, session):
        self.session = session
        self.context = session.context
        self.assertions = session.assertions
        self.resolver = session.resolver
        self.driver = session.driver

        self.step_definitions: List[Tuple[Pattern, Callable]] = [
            (re.compile(pattern, re.IGNORECASE), handler)
            for pattern, handler in self._register_steps().items()
        ]

    def _register_steps(self) -> Dict[str, Callable]:
        return {}

    def find(self, step_text: str) -> Optional[Tuple[Callable, tuple]]:
        """Handler and captured groups for a step, or None"""
        for pattern, handler in self.step_definitions:
            match = pattern.fullmatch(step_text.strip())
            if match:
                return handler, match.groups()
        return None

    def match_and_execute(self, step: GherkinStep) -> bool:
        """
        Match a Gherkin step to a step definition and execute it.
        Returns True if matched and executed, False if nothing matched.
        Errors raised by the handler propagate unchanged.
        """
        found = self.find(step.text)
        if found is None:
            return False

        handler, args = found
        logger.debug(f"Step '{step.text}' -> {type(self).__name__}.{handler.__name__}")
        if step.data_table is not None:
            handler(*args, step.data_table)
        else:
            handler(*args)
        return True
