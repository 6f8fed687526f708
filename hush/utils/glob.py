"""Wildcard matching for suppression file patterns.

Only two wildcards are recognised:

- ``*`` matches any run of characters, including an empty one
- ``?`` matches exactly one character

Every other character matches itself. Unlike ``fnmatch`` there are no
character classes and no case folding, and ``/`` is an ordinary character,
so ``src/*`` also matches ``src/a/b.cpp``.
"""

from __future__ import annotations


def match_glob(pattern: str, name: str) -> bool:
    """Check whether ``name`` matches the wildcard ``pattern`` as a whole.

    The scan is greedy. Each ``*`` skips ahead to the next occurrence of the
    character that follows it and records a backtrack point; when a literal
    character later fails to match, the most recent point is restored with
    the name cursor moved one character further.

    Args:
        pattern: Pattern possibly containing ``*`` and ``?``.
        name: Candidate string, e.g. a normalized file path.

    Returns:
        True if the entire name is consumed by the entire pattern.
    """
    p = 0
    n = 0
    plen = len(pattern)
    nlen = len(name)
    backtrack: list[tuple[int, int]] = []

    while True:
        matching = True
        while p < plen and matching:
            char = pattern[p]
            if char == "*":
                # A run of '*' is a single '*'
                while p + 1 < plen and pattern[p + 1] == "*":
                    p += 1
                following = pattern[p + 1] if p + 1 < plen else None
                if following != "?":
                    while n < nlen and name[n] != following:
                        n += 1
                if n < nlen:
                    backtrack.append((p, n))
            elif char == "?":
                if n < nlen:
                    n += 1
                else:
                    matching = False
            elif n < nlen and name[n] == char:
                n += 1
            else:
                matching = False
            p += 1

        if matching and n == nlen:
            return True

        if not backtrack:
            return False

        p, n = backtrack.pop()
        n += 1
