"""Configuration loading and parsing for hush.

This module provides the ConfigLoader class for reading TOML configuration
files and the Config dataclass for storing configuration values.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import tomli

from hush.errors import ConfigError
from hush.utils.git import find_git_root

CONFIG_FILE_NAME = "hush.toml"

OUTPUT_FORMATS = ("text", "json", "count")


@dataclass
class RulesConfig:
    """Suppression rules declared in configuration.

    Attributes:
        files: Rule files, relative paths are resolved against the
            directory of the config file that declared them.
        lines: Inline rules in the text format.
    """

    files: list[Path] = field(default_factory=list)
    lines: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "RulesConfig":
        """Create RulesConfig from a dictionary.

        Raises:
            ConfigError: If ``files`` or ``lines`` is not a list of strings.
        """
        for key in ("files", "lines"):
            value = data.get(key, [])
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise ConfigError(f"'rules.{key}' must be a list of strings")
        return cls(
            files=[Path(p) for p in data.get("files", [])],
            lines=list(data.get("lines", [])),
        )


@dataclass
class ReportConfig:
    """Unused-rule reporting settings."""

    unused_function: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "ReportConfig":
        """Create ReportConfig from a dictionary."""
        return cls(unused_function=bool(data.get("unused_function", False)))


@dataclass
class OutputConfig:
    """Output configuration settings."""

    color: bool = True
    format: str = "text"

    @classmethod
    def from_dict(cls, data: dict) -> "OutputConfig":
        """Create OutputConfig from a dictionary."""
        return cls(
            color=data.get("color", True),
            format=data.get("format", "text")
        )


@dataclass
class Config:
    """Complete hush configuration.

    Attributes:
        rules: Rule files and inline rules to load
        report: Unused-rule reporting settings
        output: Output settings like color and format
    """

    rules: RulesConfig = field(default_factory=RulesConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """Create Config from a dictionary.

        Rule file paths in ``data["rules"]["files"]`` must already be
        resolved; see ConfigLoader.

        Raises:
            ConfigError: If a value has the wrong type or is unknown.
        """
        output = OutputConfig.from_dict(data.get("output", {}))
        if output.format not in OUTPUT_FORMATS:
            raise ConfigError(
                f"Invalid output format '{output.format}'. "
                f"Must be one of: {', '.join(OUTPUT_FORMATS)}"
            )
        return cls(
            rules=RulesConfig.from_dict(data.get("rules", {})),
            report=ReportConfig.from_dict(data.get("report", {})),
            output=output,
        )


class ConfigLoader:
    """Loader for hush TOML configuration files.

    Example usage:
        loader = ConfigLoader()
        config = loader.load(Path("hush.toml"))

        # Or merge every discovered config file
        config = loader.load_merged()
    """

    def load(self, path: Optional[Path]) -> Config:
        """Load configuration from a single TOML file.

        Args:
            path: Path to the TOML configuration file, or None to use defaults

        Returns:
            Config instance with values from file or defaults

        Raises:
            ConfigError: If the file exists but is invalid
            FileNotFoundError: If the path is specified but file doesn't exist
        """
        if path is None:
            return Config()

        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        data = self._read(path)
        try:
            return Config.from_dict(data)
        except ConfigError as e:
            raise ConfigError(str(e), path=path) from e

    def _read(self, path: Path) -> dict:
        """Read one config file, resolving its relative rule file paths."""
        try:
            data = tomli.loads(path.read_text(encoding="utf-8"))
        except tomli.TOMLDecodeError as e:
            line = self._extract_line_number(str(e))
            raise ConfigError(str(e), line=line, path=path) from e

        rules = data.get("rules")
        if isinstance(rules, dict) and isinstance(rules.get("files"), list):
            base_dir = path.parent
            rules["files"] = [
                str(base_dir / p) if isinstance(p, str) and not Path(p).is_absolute() else p
                for p in rules["files"]
            ]
        return data

    def _extract_line_number(self, error_message: str) -> Optional[int]:
        """Extract line number from tomli error message."""
        match = re.search(r"(?:at )?line (\d+)", error_message, re.IGNORECASE)
        if match:
            return int(match.group(1))
        return None

    def discover_configs(self, start_path: Optional[Path] = None) -> list[Path]:
        """Discover configuration files in order of precedence.

        Precedence order (lowest to highest):
        1. User config: ~/.config/hush/config.toml
        2. Git root: <git_root>/hush.toml
        3. Local (start_path): <start_path>/hush.toml

        CLI arguments have highest precedence but are handled separately.

        Args:
            start_path: Starting directory for local config search. If None,
                uses current working directory.

        Returns:
            List of existing config file paths, lowest precedence first.
        """
        start_path = Path.cwd() if start_path is None else Path(start_path).resolve()

        candidates = [Path(os.path.expanduser("~")) / ".config" / "hush" / "config.toml"]

        git_root = find_git_root(start_path)
        if git_root:
            candidates.append(git_root / CONFIG_FILE_NAME)

        candidates.append(start_path / CONFIG_FILE_NAME)

        configs: list[Path] = []
        for candidate in candidates:
            if candidate.exists() and candidate.resolve() not in [c.resolve() for c in configs]:
                configs.append(candidate)
        return configs

    def load_merged(self, start_path: Optional[Path] = None) -> Config:
        """Load and merge configuration from all discovered config files.

        Later (higher precedence) files override values from earlier ones;
        unspecified values fall through to lower precedence files or
        defaults. Lists, such as rule files, are replaced rather than
        concatenated.

        Raises:
            ConfigError: If any config file is invalid.
        """
        merged_data: dict = {}
        last_path: Optional[Path] = None

        for config_path in self.discover_configs(start_path):
            merged_data = self._deep_merge(merged_data, self._read(config_path))
            last_path = config_path

        try:
            return Config.from_dict(merged_data)
        except ConfigError as e:
            raise ConfigError(str(e), path=last_path) from e

    def _deep_merge(self, base: dict, override: dict) -> dict:
        """Deep merge two dictionaries, values from override winning."""
        result = base.copy()

        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
