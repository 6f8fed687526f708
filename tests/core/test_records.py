"""Tests for the structured record adapter."""

from hush.core.records import rule_from_record


class TestRuleFromRecord:
    """Tests for rule_from_record."""

    def test_all_fields(self):
        """Every known field is copied."""
        rule = rule_from_record({
            "id": "uninitvar",
            "fileName": "src\\file1.c",
            "lineNumber": "10",
            "symbolName": "var",
        })
        assert rule.error_id == "uninitvar"
        assert rule.file_name == "src/file1.c"
        assert rule.line_number == 10
        assert rule.symbol_name == "var"
        assert rule.matched is False

    def test_absent_fields_default(self):
        """Missing fields become empty strings and line 0."""
        rule = rule_from_record({"id": "abc"})
        assert rule.file_name == ""
        assert rule.line_number == 0
        assert rule.symbol_name == ""

    def test_unparsable_line_number(self):
        """A bad line number falls back to 0."""
        assert rule_from_record({"id": "abc", "lineNumber": "ten"}).line_number == 0
        assert rule_from_record({"id": "abc", "lineNumber": ""}).line_number == 0

    def test_integer_line_number(self):
        """Decoders that produce ints (TOML) are accepted."""
        assert rule_from_record({"id": "abc", "lineNumber": 5}).line_number == 5

    def test_negative_line_number(self):
        """Negative numbers are not line numbers."""
        assert rule_from_record({"id": "abc", "lineNumber": -5}).line_number == 0

    def test_boolean_line_number(self):
        """Booleans are not treated as integers."""
        assert rule_from_record({"id": "abc", "lineNumber": True}).line_number == 0

    def test_unknown_fields_ignored(self):
        """Extra fields do not affect the rule."""
        rule = rule_from_record({"id": "abc", "comment": "why"})
        assert rule.error_id == "abc"

    def test_none_values(self):
        """None values count as absent."""
        rule = rule_from_record({"id": None, "fileName": None})
        assert rule.error_id == ""
        assert rule.file_name == ""
