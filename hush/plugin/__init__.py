"""Plugin system for hush.

This module provides the plugin infrastructure using pluggy.
Plugins implement hooks defined in hookspec.py to read suppression rule
files in a particular format.

Usage:
    from hush.plugin import HushPlugin, hookimpl

    class JsonRulesPlugin(HushPlugin):
        name = "json"

        @hookimpl
        def can_handle(self, path):
            return 1.0 if path.suffix == ".json" else 0.0

        @hookimpl
        def load_rules(self, path):
            return [rule_from_record(r) for r in json.loads(path.read_text())]
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pluggy

from hush.plugin.hookspec import HushHookSpec

if TYPE_CHECKING:
    from hush.models.rule import SuppressionRule

hookimpl = pluggy.HookimplMarker("hush")

__all__ = [
    "HushHookSpec",
    "HushPlugin",
    "first_content_line",
    "hookimpl",
    "peek_text",
    "read_rule_file",
]


def read_rule_file(path: Path) -> str:
    """Read a rule file as text.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {path}")
    return path.read_text(encoding="utf-8", errors="replace")


def peek_text(path: Path, size: int = 4096) -> str:
    """Return the start of a file for format sniffing, "" if unreadable."""
    try:
        with path.open("r", encoding="utf-8", errors="replace") as f:
            return f.read(size)
    except OSError:
        return ""


def first_content_line(text: str) -> str:
    """First line of ``text`` that is neither blank nor a ``//`` comment."""
    for line in text.splitlines():
        stripped = line.strip()
        if stripped and not stripped.startswith("//"):
            return stripped
    return ""


class HushPlugin:
    """Base class for hush rule-source plugins.

    Subclasses must define:
        name: Unique identifier for the plugin (str)

    Hooks (have defaults):
        can_handle(): Detection (default: 0.0)
        load_rules(): Reading (default: empty list)

    Optional attributes:
        version: Plugin version string (str)
        description: Human-readable description (str)
    """

    name: str = "base"
    version: str = "0.0.0"
    description: str = ""

    @hookimpl
    def can_handle(self, path: Path) -> float:
        """Default implementation: cannot handle any files."""
        return 0.0

    @hookimpl
    def load_rules(self, path: Path) -> list["SuppressionRule"]:
        """Default implementation: no rules."""
        return []
