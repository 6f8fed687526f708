"""Hook specifications for hush rule-source plugins.

This module defines the pluggy hook specification that plugins implement.
Plugins use the @hookimpl decorator to register their implementations.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from hush.models.rule import SuppressionRule

hookspec = pluggy.HookspecMarker("hush")


class HushHookSpec:
    """Hook specification defining the rule-source plugin interface.

    A rule-source plugin understands one suppression file format. The
    application picks a plugin per file and adds the returned rules to a
    SuppressionRegistry, which validates them.
    """

    @hookspec
    def can_handle(self, path: Path) -> float:
        """Determine if this plugin can read the given rule file.

        Plugins should examine the file name and, if needed, the start of
        its content.

        Args:
            path: Path to the rule file.

        Returns:
            Confidence score from 0.0 to 1.0:
            - 0.0: Cannot read this file
            - 0.5: Might be able to read it (ambiguous)
            - 1.0: Definitely can read this file

            The plugin with the highest confidence score is selected.
            If no plugin has confidence >= 0.5, an error is raised.
        """

    @hookspec
    def load_rules(self, path: Path) -> list["SuppressionRule"]:
        """Read the rule file and return its rules.

        Plugins decode the file and build rules, but do not validate ids;
        the registry does that when the rules are added, in order.

        Args:
            path: Path to the rule file.

        Returns:
            Rules in file order.

        Raises:
            FileNotFoundError: If the file does not exist.
            RuleFileError: If the document cannot be decoded.
        """
