"""Tests for the TOML rule file plugin."""

from pathlib import Path

import pytest

from hush.errors import RuleFileError
from hush.plugins.toml import TomlRulesPlugin


@pytest.fixture
def plugin():
    return TomlRulesPlugin()


def _write(tmp_path, content, name="suppressions.toml"):
    path = tmp_path / name
    path.write_text(content)
    return path


class TestCanHandle:
    """Tests for TOML format detection."""

    def test_toml_suffix(self, plugin):
        assert plugin.can_handle(Path("rules.toml")) == 1.0

    def test_table_header(self, plugin, tmp_path):
        path = _write(tmp_path, "# rules\n[[suppress]]\nid = 'abc'\n", name="rules")
        assert plugin.can_handle(path) == 0.9

    def test_other_content(self, plugin, tmp_path):
        path = _write(tmp_path, "abc:file.c\n", name="rules")
        assert plugin.can_handle(path) == 0.0


class TestLoadRules:
    """Tests for reading TOML rule documents."""

    def test_array_of_tables(self, plugin, tmp_path):
        path = _write(
            tmp_path,
            "[[suppress]]\n"
            'id = "uninitvar"\n'
            'fileName = "src/file1.c"\n'
            "lineNumber = 10\n"
            'symbolName = "var"\n'
            "\n"
            "[[suppress]]\n"
            'id = "memleak"\n'
            'lineNumber = "12"\n',
        )
        rules = plugin.load_rules(path)
        assert [r.error_id for r in rules] == ["uninitvar", "memleak"]
        assert rules[0].file_name == "src/file1.c"
        assert rules[0].line_number == 10
        assert rules[0].symbol_name == "var"
        assert rules[1].line_number == 12

    def test_single_table(self, plugin, tmp_path):
        path = _write(tmp_path, '[suppress]\nid = "abc"\n')
        assert [r.error_id for r in plugin.load_rules(path)] == ["abc"]

    def test_no_rules(self, plugin, tmp_path):
        path = _write(tmp_path, 'title = "nothing here"\n')
        assert plugin.load_rules(path) == []

    def test_negative_line_is_zero(self, plugin, tmp_path):
        path = _write(tmp_path, '[[suppress]]\nid = "abc"\nlineNumber = -4\n')
        assert plugin.load_rules(path)[0].line_number == 0

    def test_wrong_type(self, plugin, tmp_path):
        path = _write(tmp_path, 'suppress = "abc"\n')
        with pytest.raises(RuleFileError, match="array of tables"):
            plugin.load_rules(path)

    def test_entry_not_table(self, plugin, tmp_path):
        path = _write(tmp_path, 'suppress = ["abc"]\n')
        with pytest.raises(RuleFileError, match="entry 1 is not a table"):
            plugin.load_rules(path)

    def test_invalid_toml(self, plugin, tmp_path):
        path = _write(tmp_path, "[[suppress]]\nid = \n")
        with pytest.raises(RuleFileError) as exc:
            plugin.load_rules(path)
        assert "Invalid TOML" in str(exc.value)
        assert exc.value.line == 2
