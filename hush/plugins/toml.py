"""TOML rule file plugin for hush.

Each ``[[suppress]]`` table is one rule, using the same field names as the
XML format::

    [[suppress]]
    id = "uninitvar"
    fileName = "src/file1.c"
    lineNumber = 10
    symbolName = "var"
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional

import tomli

from hush.core.records import RULE_TAG, rule_from_record
from hush.errors import RuleFileError
from hush.models.rule import SuppressionRule
from hush.plugin import HushPlugin, hookimpl, peek_text, read_rule_file

_TABLE_HEADER = re.compile(r"^\s*\[\[\s*suppress\s*\]\]", re.MULTILINE)


def _extract_line_number(error_message: str) -> Optional[int]:
    # tomli error messages contain "(at line N, column M)"
    match = re.search(r"line (\d+)", error_message)
    if match:
        return int(match.group(1))
    return None


class TomlRulesPlugin(HushPlugin):
    """Reader for TOML suppression documents."""

    name = "toml"
    version = "1.0.0"
    description = "[[suppress]] tables with id/fileName/lineNumber/symbolName"

    @hookimpl
    def can_handle(self, path: Path) -> float:
        if path.suffix.lower() == ".toml":
            return 1.0
        if _TABLE_HEADER.search(peek_text(path)):
            return 0.9
        return 0.0

    @hookimpl
    def load_rules(self, path: Path) -> list[SuppressionRule]:
        content = read_rule_file(path)
        try:
            data = tomli.loads(content)
        except tomli.TOMLDecodeError as e:
            raise RuleFileError(
                f"Invalid TOML: {e}",
                line=_extract_line_number(str(e)),
                path=path,
            ) from e

        entries = data.get(RULE_TAG, [])
        # A single [suppress] table instead of an array of tables
        if isinstance(entries, dict):
            entries = [entries]
        if not isinstance(entries, list):
            raise RuleFileError(f"'{RULE_TAG}' must be an array of tables", path=path)

        rules: list[SuppressionRule] = []
        for index, entry in enumerate(entries):
            if not isinstance(entry, dict):
                raise RuleFileError(
                    f"{RULE_TAG} entry {index + 1} is not a table", path=path
                )
            rules.append(rule_from_record(entry))
        return rules
