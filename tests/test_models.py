"""Tests for rule/result models, data formats and rule id sanitization."""

import pytest

from d3js_report.exceptions import ConfigurationError, InvalidConfigError
from d3js_report.models import DataFormat, Result, Rule, sanitize_rule_id


class TestSanitizeRuleId:
    def test_colons_become_underscores(self):
        assert sanitize_rule_id("my:rule") == "my_rule"
        assert sanitize_rule_id("dependency:Packages:cycles") == "dependency_Packages_cycles"

    def test_deterministic(self):
        assert sanitize_rule_id("a:b/c d") == sanitize_rule_id("a:b/c d") == "a_b_c_d"

    def test_keeps_safe_characters(self):
        assert sanitize_rule_id("Rule-1.v2_x") == "Rule-1.v2_x"

    def test_path_separators_are_replaced(self):
        assert sanitize_rule_id("../etc") == ".._etc"
        assert sanitize_rule_id("a\\b") == "a_b"

    def test_distinct_ids_may_collide(self):
        assert sanitize_rule_id("a:b") == sanitize_rule_id("a/b")

    @pytest.mark.parametrize("rule_id", ["", ".", ".."])
    def test_rejects_ids_without_a_directory_name(self, rule_id):
        with pytest.raises(InvalidConfigError):
            sanitize_rule_id(rule_id)

    @pytest.mark.parametrize("rule_id", ["lib", "LIB", "Lib"])
    def test_rejects_shared_lib_directory(self, rule_id):
        with pytest.raises(InvalidConfigError, match="shared lib directory"):
            sanitize_rule_id(rule_id)

    def test_lib_prefixed_ids_are_fine(self):
        assert sanitize_rule_id("lib:core") == "lib_core"
        assert sanitize_rule_id("libs") == "libs"


class TestDataFormat:
    def test_parse_is_case_insensitive(self):
        assert DataFormat.parse("csv", "r") is DataFormat.CSV
        assert DataFormat.parse("JSON", "r") is DataFormat.JSON
        assert DataFormat.parse(" Json ", "r") is DataFormat.JSON

    def test_file_names(self):
        assert DataFormat.CSV.file_name == "data.csv"
        assert DataFormat.JSON.file_suffix == ".json"

    def test_unknown_format_names_rule(self):
        with pytest.raises(ConfigurationError) as exc_info:
            DataFormat.parse("xml", "my:rule")
        err = exc_info.value
        assert err.rule_id == "my:rule"
        assert "Illegal data export format xml for rule my:rule" in str(err)
        assert "csv, json" in str(err)

    @pytest.mark.parametrize("value", [None, "", "  "])
    def test_missing_format(self, value):
        with pytest.raises(ConfigurationError, match="not specified for rule r1"):
            DataFormat.parse(value, "r1")


class TestResult:
    def test_row_values_in_column_order(self):
        result = Result(rule=Rule("r"), column_names=["b", "a", "c"], rows=[{"a": 1, "b": 2}])
        assert list(result.row_values(result.rows[0])) == [2, 1, None]
