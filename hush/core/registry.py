"""Suppression rule registry and match evaluation for hush.

This module provides:
- validate_error_id: Syntax check for rule ids
- SuppressionRegistry: Owns the ordered rule list, validates additions,
  answers "is this diagnostic suppressed?" and reports unused rules

Rules are loaded first and queried afterwards. Loading only appends;
querying only sets the per-rule ``matched`` flag.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Mapping, Optional

from hush.core.parser import iter_rule_lines, parse_rule_line
from hush.core.records import rule_from_record
from hush.errors import RuleValidationError
from hush.models.diagnostic import Diagnostic
from hush.models.rule import ANY_ID, Scope, SuppressionRule
from hush.utils.logging import get_logger
from hush.utils.path import normalize_path

logger = get_logger(__name__)

# Id of the analyzer's unused-function check. Its findings only make sense
# for whole-program runs, so its rules are left out of unused-rule reports
# unless explicitly requested.
UNUSED_FUNCTION_ID = "unusedFunction"


def _is_id_char(char: str) -> bool:
    return char.isascii() and (char.isalnum() or char == "_")


def validate_error_id(error_id: str) -> None:
    """Check that ``error_id`` is usable as a rule id.

    Valid ids are ``"*"`` or a non-empty run of ASCII letters, digits and
    underscores that does not start with a digit.

    Args:
        error_id: The id to check.

    Raises:
        RuleValidationError: If the id is empty or malformed.
    """
    if not error_id:
        raise RuleValidationError("Failed to add suppression. No id.")
    if error_id == ANY_ID:
        return
    if error_id[0].isdigit() or not all(_is_id_char(c) for c in error_id):
        raise RuleValidationError(
            f'Failed to add suppression. Invalid id "{error_id}"'
        )


class SuppressionRegistry:
    """Ordered collection of suppression rules.

    Example usage:
        registry = SuppressionRegistry()
        registry.add_rule_line("nullPointer:src/legacy/*")
        if registry.is_suppressed(diagnostic):
            ...
        for rule in registry.unmatched_rules("global"):
            print(f"Unused suppression: {rule.to_line()}")
    """

    def __init__(self, normalize: Callable[[str], str] = normalize_path) -> None:
        """Initialize an empty registry.

        Args:
            normalize: Path normalizer used for rule and query file names.
        """
        self._rules: list[SuppressionRule] = []
        self._normalize = normalize

    @property
    def rules(self) -> tuple[SuppressionRule, ...]:
        """The rules in insertion order."""
        return tuple(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[SuppressionRule]:
        return iter(self._rules)

    # Loading

    def add_rule(self, rule: SuppressionRule) -> None:
        """Validate a rule and append it.

        Args:
            rule: The rule to add. It is stored as-is, not copied.

        Raises:
            RuleValidationError: If the rule's id is invalid.
        """
        try:
            validate_error_id(rule.error_id)
        except RuleValidationError as e:
            logger.debug("rule_rejected", error_id=rule.error_id, reason=str(e))
            raise

        self._rules.append(rule)
        logger.debug(
            "rule_added",
            error_id=rule.error_id,
            file_name=rule.file_name,
            line_number=rule.line_number,
            symbol_name=rule.symbol_name,
        )

    def add_rules(self, rules: Iterable[SuppressionRule]) -> int:
        """Add rules in order, stopping at the first invalid one.

        Each rule's file name is passed through this registry's normalizer
        first, so rules decoded elsewhere (e.g. by plugins) compare the same
        way as rules parsed by the registry. Rules added before a failure
        stay in the registry.

        Returns:
            Number of rules added.

        Raises:
            RuleValidationError: For the first invalid rule.
        """
        count = 0
        for rule in rules:
            rule.file_name = self._normalize(rule.file_name)
            self.add_rule(rule)
            count += 1
        return count

    def add_rule_line(self, line: str) -> SuppressionRule:
        """Parse one text-format line and add the resulting rule.

        Returns:
            The added rule.

        Raises:
            RuleValidationError: If the parsed id is invalid.
        """
        rule = parse_rule_line(line, self._normalize)
        self.add_rule(rule)
        return rule

    def add_rule_text(self, text: str) -> int:
        """Add every rule of a text-format document.

        Blank lines and ``//`` comments are skipped. Lines are added one at
        a time, so a failing line leaves the earlier ones in place.

        Returns:
            Number of rules added.

        Raises:
            RuleValidationError: For the first line with an invalid id.
        """
        count = 0
        for line in iter_rule_lines(text):
            self.add_rule_line(line)
            count += 1
        return count

    def add_record(self, fields: Mapping[str, Any]) -> SuppressionRule:
        """Add a rule from a decoded structured record.

        Returns:
            The added rule.

        Raises:
            RuleValidationError: If the record's id is invalid.
        """
        rule = rule_from_record(fields, self._normalize)
        self.add_rule(rule)
        return rule

    # Querying

    def _rules_in_scope(self, scope: Optional[Scope]) -> Iterator[SuppressionRule]:
        if scope is None:
            return iter(self._rules)
        return (rule for rule in self._rules if rule.scope == scope)

    def find_match(
        self,
        diagnostic: Diagnostic,
        scope: Optional[Scope] = None,
    ) -> Optional[SuppressionRule]:
        """Find the first rule that suppresses a diagnostic.

        The matching rule is marked as matched.

        Args:
            diagnostic: The diagnostic to check.
            scope: Only consult "local" or "global" rules; None for all.

        Returns:
            The first matching rule in insertion order, or None.
        """
        for rule in self._rules_in_scope(scope):
            if rule.is_match(diagnostic):
                logger.debug(
                    "diagnostic_suppressed",
                    error_id=diagnostic.error_id,
                    location=diagnostic.location(),
                    rule=rule.to_line(),
                )
                return rule
        return None

    def is_suppressed(
        self,
        diagnostic: Diagnostic,
        scope: Optional[Scope] = None,
    ) -> bool:
        """Check whether any rule in ``scope`` suppresses a diagnostic."""
        return self.find_match(diagnostic, scope) is not None

    def is_suppressed_local(self, diagnostic: Diagnostic) -> bool:
        """Check only rules tied to one concrete file."""
        return self.is_suppressed(diagnostic, "local")

    def unmatched_rules(
        self,
        scope: Optional[Scope] = None,
        include_unused_function: bool = False,
        file_name: Optional[str] = None,
    ) -> list[SuppressionRule]:
        """List rules that have not suppressed anything.

        Args:
            scope: "local", "global" or None for all rules.
            include_unused_function: Keep rules for the unusedFunction id.
            file_name: With local scope, only rules for this file.

        Returns:
            Unmatched rules in insertion order.
        """
        if file_name is not None:
            file_name = self._normalize(file_name)

        result: list[SuppressionRule] = []
        for rule in self._rules_in_scope(scope):
            if rule.matched:
                continue
            if not include_unused_function and rule.error_id == UNUSED_FUNCTION_ID:
                continue
            if scope == "local" and file_name is not None and rule.file_name != file_name:
                continue
            result.append(rule)
        return result

    def unmatched_local_rules(
        self,
        file_name: str,
        include_unused_function: bool = False,
    ) -> list[SuppressionRule]:
        """Unmatched rules tied to ``file_name``."""
        return self.unmatched_rules("local", include_unused_function, file_name)

    def unmatched_global_rules(
        self,
        include_unused_function: bool = False,
    ) -> list[SuppressionRule]:
        """Unmatched rules not tied to one concrete file."""
        return self.unmatched_rules("global", include_unused_function)
