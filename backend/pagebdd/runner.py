"""
Gherkin Test Executor
Executes Gherkin scenarios against the step libraries of a TestSession.

Before every scenario the test context is cleared, so no entry leaks from
one scenario into the next. A failing step stops its scenario; the error is
recorded in the result and diagnostics (context snapshot, screenshot) go to
the report sink on a best-effort basis.
"""

import logging
import time
from typing import List, Optional, Sequence

from .config import FrameworkConfig
from .errors import StepDefinitionNotFoundError
from .gherkin.parser import GherkinParser
from .logging_config import configure_logging
from .models import FeatureResult, GherkinFeature, GherkinScenario, GherkinStep, ScenarioResult
from .reporting import PNG_MIME, safe_attach
from .session import TestSession
from .steps import StepDefinitionLibrary, build_step_libraries

logger = logging.getLogger(__name__)


class GherkinExecutor:
    """Runs features and scenarios, one at a time, in file order"""

    def __init__(self, session: TestSession,
                 step_libraries: Optional[Sequence[StepDefinitionLibrary]] = None):
        self.session = session
        self.step_libraries: List[StepDefinitionLibrary] = (
            list(step_libraries) if step_libraries is not None else build_step_libraries(session)
        )

    def execute_feature(self, feature: GherkinFeature,
                        scenario_filter: Optional[List[str]] = None,
                        tag_filter: Optional[List[str]] = None) -> FeatureResult:
        """
        Execute all scenarios in a feature

        Args:
            feature: GherkinFeature to execute
            scenario_filter: Optional list of scenario names to run
            tag_filter: Optional list of tags to filter scenarios

        Returns:
            FeatureResult with execution results
        """
        feature_result = FeatureResult(feature_name=feature.name)

        scenarios_to_run = feature.scenarios
        if scenario_filter:
            scenarios_to_run = [s for s in scenarios_to_run if s.name in scenario_filter]
        if tag_filter:
            scenarios_to_run = [s for s in scenarios_to_run
                                if any(tag in s.tags or tag in feature.tags for tag in tag_filter)]

        logger.info(f"Feature: {feature.name} ({len(scenarios_to_run)} scenario(s))")
        for scenario in scenarios_to_run:
            feature_result.add_result(self.execute_scenario(scenario, feature.background))

        logger.info(
            f"Feature finished: {feature_result.passed} passed, {feature_result.failed} failed "
            f"in {feature_result.total_duration:.2f}s"
        )
        return feature_result

    def execute_scenario(self, scenario: GherkinScenario,
                         background: Optional[List[GherkinStep]] = None) -> ScenarioResult:
        """
        Execute a single scenario

        Args:
            scenario: GherkinScenario to execute
            background: Optional background steps to run first

        Returns:
            ScenarioResult with execution result
        """
        result = ScenarioResult(scenario_name=scenario.name)
        start_time = time.time()

        self.session.start_scenario()
        logger.info(f"Executing Scenario: {scenario.name} {' '.join(scenario.tags)}".rstrip())

        try:
            for step in list(background or []) + list(scenario.steps):
                self._execute_step(step, result)
            result.status = "passed"
            logger.info(f"Scenario PASSED: {scenario.name}")

        except Exception as e:
            result.status = "failed"
            result.error_message = str(e)
            result.error_type = type(e).__name__
            logger.error(f"Scenario FAILED: {scenario.name}: {type(e).__name__}: {e}")
            self._attach_failure_screenshot(scenario)

        finally:
            result.duration = time.time() - start_time
            result.context_snapshot = self.session.context.get_all()
            self.session.attach_json(f"Context - {scenario.name}", result.context_snapshot)

        return result

    def _execute_step(self, step: GherkinStep, result: ScenarioResult):
        step_text = str(step)
        logger.info(f"   {step_text}")
        result.logs.append(f"Executing: {step_text}")

        try:
            for library in self.step_libraries:
                if library.match_and_execute(step):
                    break
            else:
                raise StepDefinitionNotFoundError(step.text)
        except Exception as e:
            result.failed_step = step_text
            result.logs.append(f"Failed: {step_text} - {e}")
            raise

        result.logs.append(f"Success: {step_text}")

    def _attach_failure_screenshot(self, scenario: GherkinScenario):
        try:
            screenshot = self.session.driver.screenshot()
        except Exception as e:
            logger.warning(f"Could not capture failure screenshot: {e}")
            return
        safe_attach(self.session.report_sink, f"Failure Screenshot - {scenario.name}", screenshot, PNG_MIME)

    def execute_feature_file(self, feature_file_path: str, **kwargs) -> FeatureResult:
        """Parse and execute a .feature file"""
        feature = GherkinParser.parse_feature_from_file(feature_file_path)
        return self.execute_feature(feature, **kwargs)


def run_feature_file(feature_file_path: str, config: Optional[FrameworkConfig] = None,
                     **kwargs) -> FeatureResult:
    """
    Quick utility to run a .feature file in a fresh browser

    Args:
        feature_file_path: Path to .feature file
        config: Framework configuration (defaults to the environment)
        **kwargs: scenario_filter / tag_filter for execute_feature

    Returns:
        FeatureResult with execution results
    """
    config = config or FrameworkConfig.from_env()
    configure_logging(config.log_level)
    session = TestSession.launch(config)

    try:
        return GherkinExecutor(session).execute_feature_file(feature_file_path, **kwargs)
    finally:
        session.close()
