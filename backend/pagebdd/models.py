"""
Framework Models
Fixture records, the composite order record, Gherkin structures and
execution results.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional
from datetime import datetime
from enum import Enum


# ============ FIXTURE RECORDS ============

class FixtureRecord(BaseModel):
    """Flat fixture record with an id plus descriptive fields"""
    model_config = ConfigDict(extra="allow")

    id: str


class UserRecord(FixtureRecord):
    """A login user. password=None means the passwordless login path."""
    password: Optional[str] = None
    expectedErrorMessage: Optional[str] = None

    @property
    def is_passwordless(self) -> bool:
        return self.password is None


class ProductRecord(FixtureRecord):
    name: Optional[str] = None
    price: float


class OrderTypeRecord(FixtureRecord):
    name: Optional[str] = None


class AddressRecord(FixtureRecord):
    name: Optional[str] = None


class OrderDetails(BaseModel):
    """Everything known about a placed order, kept in the test context"""
    orderNumber: str
    product: ProductRecord
    quantity: int
    orderType: OrderTypeRecord
    shippingAddress: AddressRecord
    timestamp: str
    totalAmount: float


# ============ GHERKIN ============

class StepKeyword(str, Enum):
    """Gherkin step keywords"""
    GIVEN = "Given"
    WHEN = "When"
    THEN = "Then"
    AND = "And"
    BUT = "But"


class DataTable(BaseModel):
    """Pipe-delimited table attached to a step"""
    rows: List[List[str]] = []

    def rows_hash(self) -> Dict[str, str]:
        """Two-column table as {first cell: second cell}"""
        result = {}
        for row in self.rows:
            if len(row) != 2:
                raise ValueError(f"rows_hash requires exactly two columns, got {len(row)}: {row}")
            result[row[0]] = row[1]
        return result

    def hashes(self) -> List[Dict[str, str]]:
        """First row is the header; every other row becomes a dict"""
        if not self.rows:
            return []
        header = self.rows[0]
        return [dict(zip(header, row)) for row in self.rows[1:]]

    def raw(self) -> List[List[str]]:
        return [list(row) for row in self.rows]


class GherkinStep(BaseModel):
    """A single Gherkin step (Given/When/Then/And/But)"""
    keyword: StepKeyword
    text: str
    data_table: Optional[DataTable] = None

    def __str__(self):
        return f"{self.keyword.value} {self.text}"


class GherkinScenario(BaseModel):
    """A single test scenario in BDD format"""
    name: str
    tags: List[str] = []
    steps: List[GherkinStep]
    description: Optional[str] = None

    def to_gherkin(self) -> str:
        """Convert to Gherkin text format"""
        lines = []
        if self.tags:
            lines.append("  " + " ".join(self.tags))
        lines.append(f"  Scenario: {self.name}")
        if self.description:
            lines.append(f"    {self.description}")
        for step in self.steps:
            lines.append(f"    {step}")
            if step.data_table:
                for row in step.data_table.rows:
                    lines.append("      | " + " | ".join(row) + " |")
        return "\n".join(lines)


class GherkinFeature(BaseModel):
    """A complete feature file with multiple scenarios"""
    id: str
    name: str
    description: Optional[str] = None
    background: Optional[List[GherkinStep]] = None
    scenarios: List[GherkinScenario]
    tags: List[str] = []
    created_at: datetime = Field(default_factory=datetime.now)


# ============ RESULTS ============

class ScenarioResult(BaseModel):
    """Result of executing a single scenario"""
    scenario_name: str
    status: str = "passed"  # "passed", "failed", "skipped"
    duration: float = 0.0
    error_message: Optional[str] = None
    error_type: Optional[str] = None
    failed_step: Optional[str] = None
    logs: List[str] = []
    context_snapshot: Dict[str, Any] = {}

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()


class FeatureResult(BaseModel):
    """Result of executing a feature file"""
    feature_name: str
    scenario_results: List[ScenarioResult] = []
    total_scenarios: int = 0
    passed: int = 0
    failed: int = 0
    skipped: int = 0
    total_duration: float = 0.0

    def add_result(self, result: ScenarioResult):
        self.scenario_results.append(result)
        self.total_scenarios += 1
        self.total_duration += result.duration

        if result.status == "passed":
            self.passed += 1
        elif result.status == "failed":
            self.failed += 1
        elif result.status == "skipped":
            self.skipped += 1

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()
