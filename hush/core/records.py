"""Adapter from decoded structured records to suppression rules.

Structured rule documents (XML, TOML) are decoded by their plugins into
plain field mappings; this module is the one place that knows the field
names and their defaults.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

from hush.core.parser import parse_line_number
from hush.models.rule import SuppressionRule
from hush.utils.path import normalize_path

# Tag of a record that describes a rule
RULE_TAG = "suppress"

# Record field names, as spelled in rule documents
FIELD_ID = "id"
FIELD_FILE_NAME = "fileName"
FIELD_LINE_NUMBER = "lineNumber"
FIELD_SYMBOL_NAME = "symbolName"


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def rule_from_record(
    fields: Mapping[str, Any],
    normalize: Callable[[str], str] = normalize_path,
) -> SuppressionRule:
    """Build a rule from one decoded record.

    Absent fields default to the empty string. ``lineNumber`` falls back to
    0 when absent or not starting with digits. Unknown fields are ignored.

    Args:
        fields: Mapping of field name to field text.
        normalize: Path normalizer applied to ``fileName``.

    Returns:
        An unvalidated SuppressionRule.
    """
    line_number = fields.get(FIELD_LINE_NUMBER)
    if isinstance(line_number, bool) or not isinstance(line_number, int):
        line_number = parse_line_number(_text(line_number))
    if line_number is None or line_number < 0:
        line_number = 0

    return SuppressionRule(
        error_id=_text(fields.get(FIELD_ID)),
        file_name=normalize(_text(fields.get(FIELD_FILE_NAME))),
        line_number=line_number,
        symbol_name=_text(fields.get(FIELD_SYMBOL_NAME)),
    )
