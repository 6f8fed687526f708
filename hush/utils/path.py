"""Path helpers for hush."""

from __future__ import annotations


def normalize_path(path: str) -> str:
    """Convert native path separators to forward slashes.

    Rule patterns and diagnostic file names are compared in this form, so
    ``src\\main.cpp`` and ``src/main.cpp`` name the same file.

    Args:
        path: Path as written by the user or reported by the analyzer.

    Returns:
        The path with every backslash replaced by ``/``.
    """
    return path.replace("\\", "/")
