"""Plugin management for hush.

This module provides the PluginManager class that registers the built-in
rule-source plugins, discovers third-party ones via Python entry points,
and picks the right plugin for a rule file.
"""

from __future__ import annotations

from importlib.metadata import entry_points
from pathlib import Path
from typing import Optional

import pluggy

from hush.errors import HushError
from hush.models.rule import SuppressionRule
from hush.plugin import HushHookSpec, HushPlugin
from hush.utils.logging import get_logger

logger = get_logger(__name__)

# Entry point group name for hush plugins
ENTRY_POINT_GROUP = "hush.plugins"


class PluginError(HushError):
    """Base exception for plugin-related errors."""


class PluginConflictError(PluginError):
    """Raised when several plugins claim high confidence for a file."""


class NoPluginFoundError(PluginError):
    """Raised when no plugin can handle a file."""


def builtin_plugins() -> list[HushPlugin]:
    """Instances of the plugins shipped with hush."""
    from hush.plugins.text import TextRulesPlugin
    from hush.plugins.toml import TomlRulesPlugin
    from hush.plugins.xml import XmlRulesPlugin

    return [TextRulesPlugin(), XmlRulesPlugin(), TomlRulesPlugin()]


class PluginManager:
    """Manages rule-source plugin registration and selection.

    Example:
        manager = PluginManager()
        manager.register_builtins()
        manager.discover()

        rules = manager.load_rules(Path("suppressions.xml"))
    """

    def __init__(self) -> None:
        """Initialize the plugin manager."""
        self.pm = pluggy.PluginManager("hush")
        self.pm.add_hookspecs(HushHookSpec)
        self._plugins: dict[str, HushPlugin] = {}

    def register(self, plugin: HushPlugin) -> None:
        """Register a plugin instance.

        Raises:
            PluginError: If a plugin with the same name is registered.
        """
        name = plugin.name
        if name in self._plugins:
            raise PluginError(f"Plugin '{name}' is already registered")
        self._plugins[name] = plugin
        self.pm.register(plugin, name=name)

    def unregister(self, name: str) -> None:
        """Unregister a plugin by name."""
        if name in self._plugins:
            plugin = self._plugins.pop(name)
            self.pm.unregister(plugin)

    def register_builtins(self) -> None:
        """Register the text, xml and toml plugins."""
        for plugin in builtin_plugins():
            self.register(plugin)

    def discover(self) -> list[str]:
        """Discover and register plugins from the 'hush.plugins' entry points.

        Plugins that fail to load, or whose name is already taken, are
        skipped with a warning.

        Returns:
            List of newly registered plugin names.
        """
        discovered = []

        for ep in entry_points(group=ENTRY_POINT_GROUP):
            try:
                plugin_class = ep.load()
                plugin_instance = plugin_class()
                if plugin_instance.name in self._plugins:
                    continue
                self.register(plugin_instance)
                discovered.append(plugin_instance.name)
            except Exception as e:
                logger.warning("plugin_skipped", entry_point=ep.name, error=str(e))

        return discovered

    def list_plugins(self) -> list[str]:
        """List all registered plugin names."""
        return list(self._plugins.keys())

    def get_plugin(self, name: str) -> Optional[HushPlugin]:
        """Get a plugin by name, or None if not registered."""
        return self._plugins.get(name)

    def get_plugin_info(self, name: str) -> Optional[dict[str, str]]:
        """Get name, version and description of a plugin.

        Returns:
            Dictionary with plugin info, or None if not found.
        """
        plugin = self._plugins.get(name)
        if plugin is None:
            return None

        return {
            "name": plugin.name,
            "version": getattr(plugin, "version", "0.0.0"),
            "description": getattr(plugin, "description", ""),
        }

    def auto_detect(self, path: Path) -> str:
        """Pick the plugin for a rule file.

        Calls `can_handle` on every registered plugin and selects the one
        with confidence >= 0.5.

        Args:
            path: Path to the rule file.

        Returns:
            Name of the selected plugin.

        Raises:
            NoPluginFoundError: If no plugin has confidence >= 0.5.
            PluginConflictError: If several plugins have confidence >= 0.5.
        """
        if not self._plugins:
            raise NoPluginFoundError(
                f"No plugins registered. Cannot detect format of {path}"
            )

        scores: list[tuple[str, float]] = []
        for name, plugin in self._plugins.items():
            try:
                confidence = plugin.can_handle(path)
            except Exception as e:
                logger.warning("plugin_detection_failed", plugin=name, error=str(e))
                continue
            if confidence is not None:
                scores.append((name, float(confidence)))

        high_confidence = [(name, score) for name, score in scores if score >= 0.5]

        if not high_confidence:
            if not scores:
                raise NoPluginFoundError(f"No plugin could analyze {path}")
            best = max(scores, key=lambda x: x[1])
            raise NoPluginFoundError(
                f"No plugin has confidence >= 0.5 for {path}. "
                f"Best match: {best[0]} with confidence {best[1]:.2f}"
            )

        if len(high_confidence) > 1:
            conflict_info = ", ".join(
                f"{name} ({score:.2f})" for name, score in high_confidence
            )
            raise PluginConflictError(
                f"Multiple plugins claim confidence >= 0.5 for {path}: {conflict_info}. "
                f"Use --plugin to specify which plugin to use."
            )

        return high_confidence[0][0]

    def load_rules(
        self,
        path: Path,
        plugin_name: Optional[str] = None,
    ) -> list[SuppressionRule]:
        """Read a rule file with the named or auto-detected plugin.

        Raises:
            FileNotFoundError: If the file does not exist.
            PluginError: If the plugin is unknown or cannot be detected.
            RuleFileError: If the plugin cannot decode the file.
        """
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")

        name = plugin_name or self.auto_detect(path)
        plugin = self.get_plugin(name)
        if plugin is None:
            raise PluginError(f"Plugin '{name}' not found")

        rules = plugin.load_rules(path)
        logger.debug("rules_loaded", path=str(path), plugin=name, count=len(rules))
        return rules
