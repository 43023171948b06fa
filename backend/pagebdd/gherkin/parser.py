"""
Gherkin Parser
Parses .feature files into structured GherkinFeature objects
"""

import os
import re
from datetime import datetime
from typing import List, Optional

from ..models import DataTable, GherkinFeature, GherkinScenario, GherkinStep, StepKeyword

STEP_PATTERN = re.compile(r'\s*(Given|When|Then|And|But)\s+(.+)')
SECTION_STARTS = ('Background:', 'Scenario:', '@', 'Given', 'When', 'Then', 'And', 'But', '#', '|')


def _parse_table_row(line: str) -> List[str]:
    """'| a | b |' -> ['a', 'b']"""
    cells = line.strip()
    if cells.startswith('|'):
        cells = cells[1:]
    if cells.endswith('|'):
        cells = cells[:-1]
    return [cell.strip() for cell in cells.split('|')]


class GherkinParser:
    """Parse Gherkin .feature files into structured objects"""

    @staticmethod
    def parse_feature(content: str, feature_id: str = None) -> GherkinFeature:
        """
        Parse a complete .feature file content into a GherkinFeature object

        Args:
            content: The .feature file content as string
            feature_id: Optional ID for the feature

        Returns:
            GherkinFeature object
        """
        lines = content.strip().split('\n')

        feature_name = ""
        feature_description = ""
        feature_tags: List[str] = []
        background_steps: List[GherkinStep] = []
        scenarios: List[GherkinScenario] = []

        current_section = None
        current_scenario: Optional[GherkinScenario] = None
        current_steps: List[GherkinStep] = []
        current_tags: List[str] = []
        last_step: Optional[GherkinStep] = None

        for raw_line in lines:
            line = raw_line.rstrip()
            stripped = line.strip()

            if not stripped:
                continue

            if stripped.startswith('#'):
                continue

            if stripped.startswith('Feature:'):
                feature_name = stripped[len('Feature:'):].strip()
                feature_tags = current_tags
                current_tags = []
                current_section = 'feature'
                continue

            # Free text under "Feature:" is the description
            if current_section == 'feature' and not stripped.startswith(SECTION_STARTS):
                feature_description += stripped + ' '
                continue

            if stripped.startswith('Background:'):
                current_section = 'background'
                last_step = None
                continue

            if stripped.startswith('@'):
                current_tags = current_tags + stripped.split()
                continue

            if stripped.startswith('Scenario:'):
                if current_scenario and current_steps:
                    current_scenario.steps = current_steps
                    scenarios.append(current_scenario)

                current_scenario = GherkinScenario(
                    name=stripped[len('Scenario:'):].strip(),
                    tags=current_tags,
                    steps=[]
                )
                current_steps = []
                current_tags = []
                current_section = 'scenario'
                last_step = None
                continue

            if stripped.startswith('|'):
                if last_step is None:
                    raise ValueError(f"Data table row without a preceding step: {stripped}")
                if last_step.data_table is None:
                    last_step.data_table = DataTable()
                last_step.data_table.rows.append(_parse_table_row(stripped))
                continue

            step_match = STEP_PATTERN.match(line)
            if step_match:
                keyword_str, text = step_match.groups()
                step = GherkinStep(keyword=StepKeyword(keyword_str), text=text.strip())

                if current_section == 'background':
                    background_steps.append(step)
                elif current_section == 'scenario':
                    current_steps.append(step)
                last_step = step
                continue

        if current_scenario and current_steps:
            current_scenario.steps = current_steps
            scenarios.append(current_scenario)

        return GherkinFeature(
            id=feature_id or f"feature_{datetime.now().timestamp()}",
            name=feature_name,
            description=feature_description.strip() or None,
            background=background_steps if background_steps else None,
            scenarios=scenarios,
            tags=feature_tags
        )

    @staticmethod
    def parse_feature_from_file(file_path: str) -> GherkinFeature:
        """Parse a .feature file"""
        with open(file_path, 'r', encoding='utf-8') as f:
            content = f.read()

        feature_id = os.path.splitext(os.path.basename(file_path))[0]
        return GherkinParser.parse_feature(content, feature_id)

    @staticmethod
    def extract_scenario_by_name(feature: GherkinFeature, scenario_name: str) -> Optional[GherkinScenario]:
        """Extract a specific scenario by name"""
        for scenario in feature.scenarios:
            if scenario.name.lower() == scenario_name.lower():
                return scenario
        return None

    @staticmethod
    def extract_scenarios_by_tags(feature: GherkinFeature, tags: List[str]) -> List[GherkinScenario]:
        """Scenarios carrying any of the tags (feature tags count for every scenario)"""
        return [
            scenario for scenario in feature.scenarios
            if any(tag in scenario.tags or tag in feature.tags for tag in tags)
        ]

    @staticmethod
    def validate_feature(feature: GherkinFeature) -> List[str]:
        """
        Validate a feature for common issues
        Returns list of validation errors (empty if valid)
        """
        errors = []

        if not feature.name:
            errors.append("Feature must have a name")

        if not feature.scenarios:
            errors.append("Feature must have at least one scenario")

        for idx, scenario in enumerate(feature.scenarios):
            if not scenario.name:
                errors.append(f"Scenario {idx + 1} must have a name")

            if not scenario.steps:
                errors.append(f"Scenario '{scenario.name}' must have at least one step")

            has_when = any(s.keyword == StepKeyword.WHEN for s in scenario.steps)
            has_then = any(s.keyword == StepKeyword.THEN for s in scenario.steps)

            if not has_when:
                errors.append(f"Scenario '{scenario.name}' should have at least one When step")
            if not has_then:
                errors.append(f"Scenario '{scenario.name}' should have at least one Then step")

        return errors


def parse_gherkin(content: str) -> GherkinFeature:
    """Quick utility to parse Gherkin content"""
    return GherkinParser.parse_feature(content)
