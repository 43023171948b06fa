from .parser import GherkinParser, parse_gherkin

__all__ = [
    "GherkinParser",
    "parse_gherkin"
]
