"""Tests for the plugin hook specification and base class.

Tests verify that:
- HushHookSpec defines the rule-source hooks
- HushPlugin base class provides sensible defaults
- The file helpers shared by plugins behave
"""

from pathlib import Path

import pytest

from hush.plugin import HushHookSpec, HushPlugin, first_content_line, peek_text, read_rule_file


def test_hookspec_defines_required_hooks():
    """HushHookSpec should define both hooks."""
    spec = HushHookSpec()
    assert hasattr(spec, "can_handle")
    assert hasattr(spec, "load_rules")


def test_base_plugin_has_defaults():
    """HushPlugin should opt out of everything by default."""

    class TestPlugin(HushPlugin):
        name = "test"

    plugin = TestPlugin()
    assert plugin.can_handle(Path("rules.txt")) == 0.0
    assert plugin.load_rules(Path("rules.txt")) == []


def test_read_rule_file_missing(tmp_path):
    """Missing rule files raise FileNotFoundError."""
    with pytest.raises(FileNotFoundError, match="File not found"):
        read_rule_file(tmp_path / "missing.txt")


def test_peek_text_unreadable(tmp_path):
    """peek_text returns an empty string for a missing file."""
    assert peek_text(tmp_path / "missing.txt") == ""


def test_peek_text_limits_size(tmp_path):
    path = tmp_path / "big.txt"
    path.write_text("x" * 100)
    assert peek_text(path, 10) == "x" * 10


def test_first_content_line_skips_comments():
    text = "\n// header\n   \n  abc:file.c \nxyz\n"
    assert first_content_line(text) == "abc:file.c"


def test_first_content_line_empty():
    assert first_content_line("// only\n\n") == ""
