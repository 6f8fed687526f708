"""Exception hierarchy for hush."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class HushError(Exception):
    """Base exception for all hush errors."""


class RuleValidationError(HushError):
    """Raised when a suppression rule fails id validation.

    The message is the human-readable reason, e.g.
    ``Failed to add suppression. Invalid id "1abc"``.
    """


class _LocatedError(HushError):
    """Error carrying optional file path and line context."""

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        path: Optional[Path] = None
    ):
        self.line = line
        self.path = path

        parts = []
        if path:
            parts.append(f"Error in {path}")
        if line is not None:
            parts.append(f"at line {line}")
        if parts:
            full_message = f"{' '.join(parts)}: {message}"
        else:
            full_message = message

        super().__init__(full_message)


class RuleFileError(_LocatedError):
    """Raised when a structured rule document cannot be decoded."""


class DiagnosticFormatError(_LocatedError):
    """Raised when a diagnostics input file is malformed."""


class ConfigError(_LocatedError):
    """Raised for configuration parsing errors."""
