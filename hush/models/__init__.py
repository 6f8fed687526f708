"""Data models for hush."""

from hush.models.diagnostic import Diagnostic
from hush.models.rule import ANY_ID, Scope, SuppressionRule

__all__ = [
    "ANY_ID",
    "Diagnostic",
    "Scope",
    "SuppressionRule",
]
