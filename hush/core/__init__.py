"""Core logic for hush.

This module provides the core functionality:
- SuppressionRegistry: Rule validation, storage and match evaluation
- parse_rule_line / parse_rule_text: Text-format rule parsing
- rule_from_record: Structured record to rule adapter
- PluginManager: Rule-source plugin registration and detection
- ConfigLoader: Configuration file loading
- load_diagnostics: JSON Lines diagnostics input
"""

from hush.core.config import (
    Config,
    ConfigLoader,
    OutputConfig,
    ReportConfig,
    RulesConfig,
)
from hush.core.diagnostics import load_diagnostics, parse_diagnostics
from hush.core.parser import parse_rule_line, parse_rule_text
from hush.core.plugin import (
    NoPluginFoundError,
    PluginConflictError,
    PluginError,
    PluginManager,
)
from hush.core.records import rule_from_record
from hush.core.registry import (
    UNUSED_FUNCTION_ID,
    SuppressionRegistry,
    validate_error_id,
)

__all__ = [
    "Config",
    "ConfigLoader",
    "NoPluginFoundError",
    "OutputConfig",
    "PluginConflictError",
    "PluginError",
    "PluginManager",
    "ReportConfig",
    "RulesConfig",
    "SuppressionRegistry",
    "UNUSED_FUNCTION_ID",
    "load_diagnostics",
    "parse_diagnostics",
    "parse_rule_line",
    "parse_rule_text",
    "rule_from_record",
    "validate_error_id",
]
