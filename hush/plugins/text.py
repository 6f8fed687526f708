"""Plain-text rule file plugin for hush.

One rule per line, ``errorId[:fileName[:lineNumber]]``. Blank lines and
lines starting with ``//`` are ignored::

    // legacy code, to be cleaned up
    unusedFunction:src/legacy/*
    nullPointer:src/parser.cpp:120
"""

from __future__ import annotations

from pathlib import Path

from hush.core.parser import parse_rule_text
from hush.models.rule import SuppressionRule
from hush.plugin import HushPlugin, first_content_line, hookimpl, peek_text, read_rule_file

TEXT_SUFFIXES = frozenset({".txt", ".supp", ".suppressions"})
STRUCTURED_SUFFIXES = frozenset({".xml", ".toml"})


class TextRulesPlugin(HushPlugin):
    """Reader for line-oriented suppression files."""

    name = "text"
    version = "1.0.0"
    description = "One errorId[:file[:line]] rule per line"

    @hookimpl
    def can_handle(self, path: Path) -> float:
        suffix = path.suffix.lower()
        if suffix in TEXT_SUFFIXES:
            return 1.0
        if suffix in STRUCTURED_SUFFIXES:
            return 0.0

        # Unknown extension: anything that does not look like markup
        first = first_content_line(peek_text(path))
        if first.startswith(("<", "[")):
            return 0.0
        return 0.6

    @hookimpl
    def load_rules(self, path: Path) -> list[SuppressionRule]:
        return parse_rule_text(read_rule_file(path))
