"""Text-format suppression parsing.

A text rule is one line of the form::

    errorId[:fileName[:lineNumber]]

The file name may itself contain colons (``C:\\src\\main.cpp``), so a
trailing ``:N`` is only taken as a line number when the text after the last
colon holds no ``.`` and starts with a positive integer.
"""

from __future__ import annotations

import re
from typing import Callable, Optional

from hush.models.rule import SuppressionRule
from hush.utils.path import normalize_path

COMMENT_PREFIX = "//"

_LEADING_DIGITS = re.compile(r"[0-9]+")


def parse_line_number(text: str) -> Optional[int]:
    """Parse an unsigned line number from the start of ``text``.

    Leading whitespace is skipped and the run of ASCII digits that follows
    is the number; anything after it is ignored, so ``"12x"`` gives 12.

    Args:
        text: Text following the last colon of a file spec.

    Returns:
        The number, or None if ``text`` does not start with a digit.
    """
    match = _LEADING_DIGITS.match(text.lstrip())
    if match is None:
        return None
    return int(match.group())


def parse_rule_line(
    line: str,
    normalize: Callable[[str], str] = normalize_path,
) -> SuppressionRule:
    """Parse one text-format line into a rule.

    Parsing never fails: a malformed file spec simply leaves the file name
    and line number at their defaults. The id is validated later, when the
    rule is added to a registry.

    Args:
        line: A non-empty, non-comment line.
        normalize: Path normalizer applied to the file name.

    Returns:
        An unvalidated SuppressionRule with an empty symbol name.
    """
    error_id, _, file_spec = line.partition(":")
    line_number = 0

    pos = file_spec.rfind(":")
    if pos != -1 and "." not in file_spec[pos + 1:]:
        number = parse_line_number(file_spec[pos + 1:])
        if number:
            line_number = number
            file_spec = file_spec[:pos]

    return SuppressionRule(
        error_id=error_id,
        file_name=normalize(file_spec),
        line_number=line_number,
    )


def iter_rule_lines(text: str):
    """Yield the rule lines of a text-format document.

    Carriage returns count as line breaks. Blank lines and lines starting
    with ``//`` are skipped.
    """
    for line in text.replace("\r", "\n").split("\n"):
        if not line or line.startswith(COMMENT_PREFIX):
            continue
        yield line


def parse_rule_text(
    text: str,
    normalize: Callable[[str], str] = normalize_path,
) -> list[SuppressionRule]:
    """Parse a whole text-format document.

    Args:
        text: Document contents.
        normalize: Path normalizer applied to every file name.

    Returns:
        Unvalidated rules, in document order.
    """
    return [parse_rule_line(line, normalize) for line in iter_rule_lines(text)]
