"""Diagnostics input for hush.

Diagnostics are read from JSON Lines, one finding per line::

    {"error_id": "nullPointer", "file_name": "src/a.c", "line_number": 12}
    {"error_id": "unusedFunction", "file_name": "src/b.c", "line_number": 3, "symbol_names": ["helper"]}

Blank lines are skipped. File names are normalized on load so they compare
equal to normalized rule patterns.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, Iterator, Optional

from pydantic import ValidationError

from hush.errors import DiagnosticFormatError
from hush.models.diagnostic import Diagnostic
from hush.utils.path import normalize_path


def parse_diagnostics(
    content: str,
    path: Optional[Path] = None,
    normalize: Callable[[str], str] = normalize_path,
) -> Iterator[Diagnostic]:
    """Parse JSON Lines content into diagnostics.

    Args:
        content: The JSON Lines text.
        path: Source path, for error messages only.
        normalize: Path normalizer applied to each file name.

    Yields:
        Diagnostics in input order.

    Raises:
        DiagnosticFormatError: On invalid JSON or invalid fields.
    """
    for line_no, line in enumerate(content.splitlines(), start=1):
        if not line.strip():
            continue

        try:
            data = json.loads(line)
        except json.JSONDecodeError as e:
            raise DiagnosticFormatError(f"Invalid JSON: {e}", line=line_no, path=path) from e

        if not isinstance(data, dict):
            raise DiagnosticFormatError(
                "Expected a JSON object", line=line_no, path=path
            )

        try:
            diagnostic = Diagnostic.model_validate(data)
        except ValidationError as e:
            # First error is enough to point the user at the bad field
            first = e.errors()[0]
            loc = ".".join(str(part) for part in first["loc"])
            raise DiagnosticFormatError(
                f"Invalid diagnostic field '{loc}': {first['msg']}",
                line=line_no,
                path=path,
            ) from e

        yield diagnostic.model_copy(
            update={"file_name": normalize(diagnostic.file_name)}
        )


def load_diagnostics(
    path: Path,
    normalize: Callable[[str], str] = normalize_path,
) -> list[Diagnostic]:
    """Load a JSON Lines diagnostics file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        DiagnosticFormatError: On malformed content.
    """
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {path}")

    content = path.read_text(encoding="utf-8")
    return list(parse_diagnostics(content, path, normalize))
