"""Tests for the plain-text rule file plugin."""

from pathlib import Path

import pytest

from hush.plugins.text import TextRulesPlugin


@pytest.fixture
def plugin():
    return TextRulesPlugin()


class TestCanHandle:
    """Tests for text format detection."""

    @pytest.mark.parametrize("name", ["rules.txt", "project.supp", "a.suppressions", "RULES.TXT"])
    def test_known_suffixes(self, plugin, name):
        assert plugin.can_handle(Path(name)) == 1.0

    @pytest.mark.parametrize("name", ["rules.xml", "rules.toml"])
    def test_structured_suffixes(self, plugin, name):
        assert plugin.can_handle(Path(name)) == 0.0

    def test_unknown_suffix_plain_content(self, plugin, tmp_path):
        """Unknown extensions with rule-looking content are likely text."""
        path = tmp_path / "suppressions"
        path.write_text("// comment\nnullPointer:a.c\n")
        assert plugin.can_handle(path) == 0.6

    @pytest.mark.parametrize("content", ["<suppressions/>\n", "[[suppress]]\nid = 'a'\n"])
    def test_unknown_suffix_markup_content(self, plugin, tmp_path, content):
        """Markup-looking content is left to the structured plugins."""
        path = tmp_path / "suppressions"
        path.write_text(content)
        assert plugin.can_handle(path) == 0.0


class TestLoadRules:
    """Tests for reading text rule files."""

    def test_load(self, plugin, rules_file):
        rules = plugin.load_rules(rules_file)
        assert [r.to_line() for r in rules] == [
            "nullPointer:src/parser.cpp:120",
            "unusedFunction:src/legacy/*",
            "uninitvar",
        ]

    def test_crlf_and_backslashes(self, plugin, tmp_path):
        """Windows line endings and separators are handled."""
        path = tmp_path / "rules.txt"
        path.write_bytes(b"abc:src\\win\\a.c:3\r\nxyz\r\n")
        rules = plugin.load_rules(path)
        assert [r.to_line() for r in rules] == ["abc:src/win/a.c:3", "xyz"]

    def test_rules_not_validated(self, plugin, tmp_path):
        """Validation is left to the registry."""
        path = tmp_path / "rules.txt"
        path.write_text("1bad\n")
        assert plugin.load_rules(path)[0].error_id == "1bad"

    def test_missing_file(self, plugin, tmp_path):
        with pytest.raises(FileNotFoundError):
            plugin.load_rules(tmp_path / "missing.txt")
