"""
Test Session
Explicit container for everything a run shares: configuration, browser
driver, fixture cache, test context and report sink.

Lifetimes: the fixture cache lives as long as the session; the context is
emptied by start_scenario() before every scenario.
"""

import logging
from typing import Any, Optional

from .config import FrameworkConfig
from .context.assertions import AssertionHelper
from .context.test_context import TestContext
from .data.fixture_store import FixtureStore
from .data.resolver import PageDataResolver
from .driver import BrowserDriver, PlaywrightDriver
from .reporting import DirectoryReportSink, MemoryReportSink, ReportSink, safe_attach_json

logger = logging.getLogger(__name__)


class TestSession:
    __test__ = False

    def __init__(self, config: FrameworkConfig, driver: BrowserDriver,
                 fixture_store: Optional[FixtureStore] = None,
                 context: Optional[TestContext] = None,
                 report_sink: Optional[ReportSink] = None):
        self.config = config
        self.driver = driver
        self.fixture_store = fixture_store or FixtureStore(config.fixtures_dir)
        self.resolver = PageDataResolver(self.fixture_store)
        self.context = context or TestContext()
        self.assertions = AssertionHelper(self.context)
        if report_sink is None:
            report_sink = DirectoryReportSink(config.report_dir) if config.report_dir else MemoryReportSink()
        self.report_sink = report_sink

    @classmethod
    def launch(cls, config: FrameworkConfig, **kwargs) -> "TestSession":
        """Session with a freshly launched Playwright browser"""
        return cls(config, PlaywrightDriver.launch(config), **kwargs)

    def start_scenario(self):
        """Pre-scenario hook: no context entry survives into the next scenario"""
        self.context.clear_all()

    def attach_json(self, name: str, data: Any) -> bool:
        return safe_attach_json(self.report_sink, name, data)

    def close(self):
        self.driver.close()
