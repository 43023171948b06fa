"""
Unit tests for GherkinParser and DataTable.
"""

import pytest

from pagebdd.gherkin import GherkinParser, parse_gherkin
from pagebdd.models import DataTable, StepKeyword


ORDER_FEATURE = """
# Orders placed from the storefront
@order @smoke
Feature: Order placement
  Orders are placed through the order form.

  Background:
    Given I am on the place order page

  @happy
  Scenario: Place an order
    When I place an order with the following details:
      | Product ID | PROD-001 |
      | Quantity   | 2        |
    Then I should see order confirmation
    And the order status should be "Processing"

  Scenario: Search history
    When I navigate to order history
    Then I should see the order in search results
"""


class TestParseFeature:
    """Test parsing feature text."""

    def test_feature_header(self):
        """Test feature name, tags and description."""
        feature = parse_gherkin(ORDER_FEATURE)

        assert feature.name == "Order placement"
        assert feature.tags == ["@order", "@smoke"]
        assert feature.description == "Orders are placed through the order form."

    def test_background(self):
        """Test that background steps are kept apart from scenarios."""
        feature = parse_gherkin(ORDER_FEATURE)

        assert len(feature.background) == 1
        assert feature.background[0].keyword == StepKeyword.GIVEN
        assert feature.background[0].text == "I am on the place order page"

    def test_scenarios_and_tags(self):
        """Test scenario names, tags and step keywords."""
        feature = parse_gherkin(ORDER_FEATURE)

        assert [s.name for s in feature.scenarios] == ["Place an order", "Search history"]
        assert feature.scenarios[0].tags == ["@happy"]
        assert feature.scenarios[1].tags == []
        assert [s.keyword for s in feature.scenarios[0].steps] == [
            StepKeyword.WHEN, StepKeyword.THEN, StepKeyword.AND
        ]

    def test_data_table_attached_to_preceding_step(self):
        """Test that table rows belong to the step above them."""
        steps = parse_gherkin(ORDER_FEATURE).scenarios[0].steps

        assert steps[0].data_table.rows == [["Product ID", "PROD-001"], ["Quantity", "2"]]
        assert steps[1].data_table is None

    def test_step_text_keeps_quotes(self):
        """Test that quoted parameters stay in the step text."""
        steps = parse_gherkin(ORDER_FEATURE).scenarios[0].steps

        assert steps[2].text == 'the order status should be "Processing"'
        assert str(steps[2]) == 'And the order status should be "Processing"'

    def test_table_without_step(self):
        """Test that a table row before any step is rejected."""
        content = "Feature: Broken\n  Scenario: x\n    | a | b |\n"

        with pytest.raises(ValueError, match="without a preceding step"):
            parse_gherkin(content)

    def test_parse_from_file_uses_file_name_as_id(self, tmp_path):
        """Test parsing from disk."""
        path = tmp_path / "orders.feature"
        path.write_text(ORDER_FEATURE, encoding="utf-8")

        feature = GherkinParser.parse_feature_from_file(str(path))

        assert feature.id == "orders"
        assert len(feature.scenarios) == 2


class TestFeatureQueries:
    """Test scenario extraction and validation."""

    def test_extract_by_name_is_case_insensitive(self):
        """Test lookup by scenario name."""
        feature = parse_gherkin(ORDER_FEATURE)

        assert GherkinParser.extract_scenario_by_name(feature, "search HISTORY").name == "Search history"
        assert GherkinParser.extract_scenario_by_name(feature, "nope") is None

    def test_extract_by_tags(self):
        """Test scenario and feature tags."""
        feature = parse_gherkin(ORDER_FEATURE)

        assert [s.name for s in GherkinParser.extract_scenarios_by_tags(feature, ["@happy"])] == ["Place an order"]
        assert len(GherkinParser.extract_scenarios_by_tags(feature, ["@smoke"])) == 2

    def test_validate_feature(self):
        """Test that a scenario without When/Then is reported."""
        feature = parse_gherkin("Feature: F\n  Scenario: Only given\n    Given I am on the login page\n")

        errors = GherkinParser.validate_feature(feature)

        assert "Scenario 'Only given' should have at least one When step" in errors
        assert "Scenario 'Only given' should have at least one Then step" in errors

    def test_valid_feature(self):
        """Test that a complete feature has no errors."""
        assert GherkinParser.validate_feature(parse_gherkin(ORDER_FEATURE)) == []

    def test_to_gherkin_includes_table(self):
        """Test scenario rendering back to Gherkin text."""
        scenario = parse_gherkin(ORDER_FEATURE).scenarios[0]

        text = scenario.to_gherkin()

        assert "Scenario: Place an order" in text
        assert "| Product ID | PROD-001 |" in text


class TestDataTable:
    """Test data table helpers."""

    def test_rows_hash(self):
        """Test two-column tables as a dict."""
        table = DataTable(rows=[["Product ID", "PROD-001"], ["Quantity", "2"]])

        assert table.rows_hash() == {"Product ID": "PROD-001", "Quantity": "2"}

    def test_rows_hash_requires_two_columns(self):
        """Test that wider tables are rejected."""
        table = DataTable(rows=[["a", "b", "c"]])

        with pytest.raises(ValueError, match="exactly two columns"):
            table.rows_hash()

    def test_hashes(self):
        """Test header-row tables as a list of dicts."""
        table = DataTable(rows=[["id", "qty"], ["PROD-001", "2"], ["PROD-002", "1"]])

        assert table.hashes() == [{"id": "PROD-001", "qty": "2"}, {"id": "PROD-002", "qty": "1"}]

    def test_raw_is_a_copy(self):
        """Test that raw() cannot modify the table."""
        table = DataTable(rows=[["a", "b"]])
        table.raw()[0][0] = "changed"

        assert table.rows == [["a", "b"]]
