"""SuppressionRule data model for hush.

A rule describes which diagnostics should not be reported. Each of its
four criteria is optional; an unset criterion matches everything.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, ConfigDict, Field

from hush.utils.glob import match_glob

if TYPE_CHECKING:
    from hush.models.diagnostic import Diagnostic

Scope = Literal["local", "global"]

# Error id accepted as "any id"
ANY_ID = "*"

WILDCARD_CHARS = "*?"


class SuppressionRule(BaseModel):
    """A single suppression criterion.

    Attributes:
        error_id: Diagnostic id to suppress, ``"*"`` or empty for any id.
            Compared by exact equality.
        file_name: Normalized file path, may contain ``*``/``?`` wildcards.
            Empty matches any file.
        line_number: Line to suppress, 0 for any line.
        symbol_name: Symbol that must be listed on the diagnostic. Empty
            matches any symbol.
        matched: Set once the rule has suppressed at least one diagnostic.
    """

    model_config = ConfigDict(frozen=False)

    error_id: str = ""
    file_name: str = ""
    line_number: int = Field(default=0, ge=0)
    symbol_name: str = ""
    matched: bool = False

    def is_match(self, diagnostic: Diagnostic) -> bool:
        """Check the diagnostic against every criterion this rule declares.

        A successful match marks the rule as matched.

        Args:
            diagnostic: The diagnostic to check.

        Returns:
            True if all declared criteria hold.
        """
        if self.error_id and self.error_id != ANY_ID and self.error_id != diagnostic.error_id:
            return False
        if self.file_name and not match_glob(self.file_name, diagnostic.file_name):
            return False
        if self.line_number > 0 and self.line_number != diagnostic.line_number:
            return False
        if self.symbol_name and not diagnostic.has_symbol(self.symbol_name):
            return False
        self.matched = True
        return True

    def is_local(self) -> bool:
        """Whether the rule is tied to one concrete file (no wildcards)."""
        return bool(self.file_name) and not any(
            c in self.file_name for c in WILDCARD_CHARS
        )

    @property
    def scope(self) -> Scope:
        """The rule's scope: "local" for one concrete file, else "global"."""
        return "local" if self.is_local() else "global"

    def to_line(self) -> str:
        """Render the rule in the ``id[:file[:line]]`` text format."""
        line = self.error_id
        if self.file_name:
            line += f":{self.file_name}"
            if self.line_number > 0:
                line += f":{self.line_number}"
        return line
