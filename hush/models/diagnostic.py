"""Diagnostic data model for hush.

A diagnostic is one finding reported by the analyzer. hush never changes
diagnostics; it only decides whether each one should be reported.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class Diagnostic(BaseModel):
    """A finding to be checked against the suppression rules.

    Attributes:
        error_id: Analyzer-specific id, e.g. "nullPointer".
        file_name: Path of the file the finding is in, normalized form.
        line_number: Line of the finding (1-indexed, 0 if unknown).
        symbol_names: Names of the symbols involved, each terminated by a
            newline ("foo\\nbar\\n"). A list of names is accepted and joined.
    """

    model_config = ConfigDict(frozen=True)

    error_id: str
    file_name: str = ""
    line_number: int = 0
    symbol_names: str = ""

    @field_validator("symbol_names", mode="before")
    @classmethod
    def join_symbol_names(cls, v: Any) -> Any:
        """Accept a list of symbol names and join it into the blob form."""
        if isinstance(v, (list, tuple)):
            return "".join(f"{name}\n" for name in v)
        return v

    def has_symbol(self, name: str) -> bool:
        """Check whether ``name`` is one whole entry of ``symbol_names``."""
        entry = name + "\n"
        return self.symbol_names.startswith(entry) or f"\n{entry}" in self.symbol_names

    @property
    def symbols(self) -> list[str]:
        """The symbol names as a list."""
        return [s for s in self.symbol_names.split("\n") if s]

    def location(self) -> str:
        """Format as ``file:line`` for display."""
        if not self.file_name:
            return "nofile"
        if self.line_number > 0:
            return f"{self.file_name}:{self.line_number}"
        return self.file_name
