"""Tests for the SuppressionRule model."""

import pytest
from pydantic import ValidationError

from hush.models.diagnostic import Diagnostic
from hush.models.rule import SuppressionRule


def _diag(**kwargs):
    defaults = {"error_id": "abc", "file_name": "x/y.cpp", "line_number": 5}
    defaults.update(kwargs)
    return Diagnostic(**defaults)


class TestIsMatch:
    """Tests for SuppressionRule.is_match."""

    def test_empty_rule_matches_everything(self):
        """A rule with no criteria is a catch-all."""
        rule = SuppressionRule()
        assert rule.is_match(_diag())
        assert rule.is_match(Diagnostic(error_id="other"))

    def test_error_id_exact(self):
        """Ids compare by exact equality."""
        rule = SuppressionRule(error_id="abc")
        assert rule.is_match(_diag())
        assert not rule.is_match(_diag(error_id="abcd"))
        assert not rule.is_match(_diag(error_id="ABC"))

    def test_star_id(self):
        """'*' matches any id."""
        rule = SuppressionRule(error_id="*", file_name="x/*")
        assert rule.is_match(_diag(error_id="whatever"))

    def test_file_glob(self):
        """File names are matched as glob patterns."""
        rule = SuppressionRule(error_id="abc", file_name="*.cpp")
        assert rule.is_match(_diag(file_name="x/y.cpp"))
        assert not rule.is_match(_diag(file_name="x/y.h"))

    def test_line_zero_is_any_line(self):
        """Line 0 places no constraint."""
        rule = SuppressionRule(error_id="abc", file_name="x/y.cpp")
        assert rule.is_match(_diag(line_number=1))
        assert rule.is_match(_diag(line_number=999))

    def test_line_number(self):
        """A positive line must equal the diagnostic's line."""
        rule = SuppressionRule(error_id="abc", file_name="x/y.cpp", line_number=5)
        assert rule.is_match(_diag())
        assert not rule.is_match(_diag(line_number=6))

    def test_symbol_whole_entry(self):
        """Symbols match whole newline-terminated entries only."""
        rule = SuppressionRule(error_id="abc", symbol_name="foo")
        assert rule.is_match(_diag(symbol_names="foo\nbar\n"))
        assert rule.is_match(_diag(symbol_names="bar\nfoo\n"))
        assert not rule.is_match(_diag(symbol_names="foobar\n"))
        assert not rule.is_match(_diag(symbol_names="barfoo\n"))
        assert not rule.is_match(_diag())

    def test_match_sets_matched(self):
        """Only a successful match marks the rule."""
        rule = SuppressionRule(error_id="abc")
        assert not rule.is_match(_diag(error_id="zzz"))
        assert rule.matched is False
        assert rule.is_match(_diag())
        assert rule.matched is True

    def test_matched_stays_set(self):
        """A later miss does not clear the flag."""
        rule = SuppressionRule(error_id="abc")
        rule.is_match(_diag())
        rule.is_match(_diag(error_id="zzz"))
        assert rule.matched is True


class TestScope:
    """Tests for rule scope classification."""

    @pytest.mark.parametrize(
        "file_name,expected",
        [
            ("src/a.cpp", True),
            ("src/*.cpp", False),
            ("src/a?.cpp", False),
            ("", False),
        ],
    )
    def test_is_local(self, file_name, expected):
        """Local means one concrete file."""
        rule = SuppressionRule(error_id="abc", file_name=file_name)
        assert rule.is_local() is expected
        assert rule.scope == ("local" if expected else "global")


class TestToLine:
    """Tests for text rendering."""

    def test_id_only(self):
        assert SuppressionRule(error_id="abc").to_line() == "abc"

    def test_with_file(self):
        assert SuppressionRule(error_id="abc", file_name="a.c").to_line() == "abc:a.c"

    def test_with_line(self):
        rule = SuppressionRule(error_id="abc", file_name="a.c", line_number=3)
        assert rule.to_line() == "abc:a.c:3"

    def test_line_without_file_dropped(self):
        """A line number is only rendered together with a file."""
        rule = SuppressionRule(error_id="abc", line_number=3)
        assert rule.to_line() == "abc"


def test_negative_line_rejected():
    """Line numbers cannot be negative."""
    with pytest.raises(ValidationError):
        SuppressionRule(error_id="abc", line_number=-1)
