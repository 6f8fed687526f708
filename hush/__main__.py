"""Entry point for hush CLI."""

import json
from datetime import datetime, timezone
from pathlib import Path

import rich_click as click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from hush.core.config import OUTPUT_FORMATS, Config, ConfigLoader
from hush.core.diagnostics import load_diagnostics
from hush.core.plugin import PluginError, PluginManager
from hush.core.registry import SuppressionRegistry
from hush.errors import HushError
from hush.models.diagnostic import Diagnostic
from hush.models.rule import SuppressionRule
from hush.utils.logging import configure_logging

click.rich_click.TEXT_MARKUP = "rich"
click.rich_click.SHOW_ARGUMENTS = True


def _get_plugin_manager() -> PluginManager:
    """Create a plugin manager with built-in and entry point plugins."""
    manager = PluginManager()
    manager.register_builtins()
    manager.discover()
    return manager


def _fail(ctx: click.Context, console: Console, message: str) -> None:
    console.print(f"[red]Error:[/red] {escape(message)}", highlight=False, soft_wrap=True)
    ctx.exit(1)


def _load_config(ctx: click.Context, console: Console, config_path: str | None) -> Config:
    """Load the explicit config file, or merge the discovered ones."""
    loader = ConfigLoader()
    try:
        if config_path:
            return loader.load(Path(config_path))
        return loader.load_merged()
    except (FileNotFoundError, HushError) as e:
        _fail(ctx, console, str(e))
    return Config()


def _build_registry(
    ctx: click.Context,
    console: Console,
    rule_files: list[Path],
    rule_lines: list[str],
    plugin: str | None,
) -> SuppressionRegistry:
    """Load every rule source into a new registry.

    Files are loaded before inline rules, each in the given order. The
    first failure ends the command with exit code 1.
    """
    registry = SuppressionRegistry()
    manager = _get_plugin_manager()

    if plugin and manager.get_plugin(plugin) is None:
        console.print(f"[red]Error:[/red] Plugin '{escape(plugin)}' not found.")
        console.print("\nAvailable plugins:")
        for name in manager.list_plugins():
            console.print(f"  - {name}")
        ctx.exit(1)

    try:
        for rule_file in rule_files:
            registry.add_rules(manager.load_rules(rule_file, plugin))
        for line in rule_lines:
            registry.add_rule_line(line)
    except (FileNotFoundError, PluginError, HushError) as e:
        _fail(ctx, console, str(e))

    return registry


def _apply_rules(
    diagnostics: list[Diagnostic],
    registry: SuppressionRegistry,
) -> tuple[list[Diagnostic], list[tuple[Diagnostic, SuppressionRule]]]:
    """Separate diagnostics into reported and suppressed lists.

    Returns:
        A tuple of (reported, suppressed) where suppressed holds
        (diagnostic, matching rule) pairs.
    """
    reported: list[Diagnostic] = []
    suppressed: list[tuple[Diagnostic, SuppressionRule]] = []

    for diagnostic in diagnostics:
        rule = registry.find_match(diagnostic)
        if rule is None:
            reported.append(diagnostic)
        else:
            suppressed.append((diagnostic, rule))

    return reported, suppressed


def _diagnostic_to_dict(diagnostic: Diagnostic) -> dict:
    return {
        "error_id": diagnostic.error_id,
        "file_name": diagnostic.file_name,
        "line_number": diagnostic.line_number,
        "symbol_names": diagnostic.symbols,
    }


def _rule_to_dict(rule: SuppressionRule) -> dict:
    return {
        "rule": rule.to_line(),
        "error_id": rule.error_id,
        "file_name": rule.file_name,
        "line_number": rule.line_number,
        "symbol_name": rule.symbol_name,
        "scope": rule.scope,
    }


def _output_diagnostics(
    console: Console,
    reported: list[Diagnostic],
    suppressed_count: int,
    output_format: str,
) -> None:
    """Print the reported diagnostics in the requested format."""
    if output_format == "json":
        # JSONL format: one JSON object per line
        for diagnostic in reported:
            click.echo(json.dumps(_diagnostic_to_dict(diagnostic)))

    elif output_format == "count":
        total = len(reported) + suppressed_count
        click.echo(f"total={total} reported={len(reported)} suppressed={suppressed_count}")

    else:
        for diagnostic in reported:
            console.print(
                f"{diagnostic.location()}: {diagnostic.error_id}",
                markup=False,
                highlight=False,
                soft_wrap=True,
            )


def _print_rules(console: Console, registry: SuppressionRegistry) -> None:
    """Print the loaded rules as a table."""
    if not len(registry):
        console.print("[yellow]No suppression rules loaded.[/yellow]")
        return

    table = Table(title="Suppression Rules")
    table.add_column("Id", style="cyan", no_wrap=True)
    table.add_column("File")
    table.add_column("Line", justify="right")
    table.add_column("Symbol")
    table.add_column("Scope", style="green")

    for rule in registry:
        table.add_row(
            rule.error_id,
            rule.file_name,
            str(rule.line_number) if rule.line_number else "",
            rule.symbol_name,
            rule.scope,
        )

    console.print(table)


def _generate_report(
    reported: list[Diagnostic],
    suppressed: list[tuple[Diagnostic, SuppressionRule]],
    unmatched: list[SuppressionRule],
    diagnostics_file: str,
    rule_count: int,
) -> dict:
    """Build the JSON summary report."""
    return {
        "metadata": {
            "diagnostics_file": diagnostics_file,
            "rules": rule_count,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
        "exit_code": 1 if reported else 0,
        "summary": {
            "total": len(reported) + len(suppressed),
            "reported": len(reported),
            "suppressed": len(suppressed),
            "unmatched_rules": len(unmatched),
        },
        "reported": [_diagnostic_to_dict(d) for d in reported],
        "suppressed": [
            {**_diagnostic_to_dict(d), "rule": rule.to_line()} for d, rule in suppressed
        ],
        "unmatched_rules": [_rule_to_dict(rule) for rule in unmatched],
    }


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("diagnostics", required=False, type=click.Path(exists=True, dir_okay=False))
@click.option("--version", is_flag=True, help="Show version and exit.")
@click.option(
    "--list-plugins",
    is_flag=True,
    help="List all available rule file plugins and exit."
)
@click.option(
    "--rules",
    "rule_files",
    type=click.Path(dir_okay=False),
    multiple=True,
    help="Suppression rule file (text, XML or TOML). Can be repeated."
)
@click.option(
    "--rule",
    "rule_lines",
    type=str,
    multiple=True,
    help="Inline rule as errorId[:file[:line]]. Can be repeated."
)
@click.option(
    "--plugin",
    type=str,
    help="Force a rule file plugin (bypasses format auto-detection)."
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    help="Use this config file instead of discovering hush.toml files."
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(list(OUTPUT_FORMATS), case_sensitive=False),
    default=None,
    help="Output format: text, json (JSONL), or count (summary). Default from config."
)
@click.option(
    "--show-suppressed",
    is_flag=True,
    help="Display suppressed diagnostics with the rule that matched."
)
@click.option(
    "--report-unused",
    is_flag=True,
    help="Report rules that didn't match any diagnostic (stale suppressions)."
)
@click.option(
    "--unused-function",
    is_flag=True,
    help="Include unusedFunction rules in the unused rule report."
)
@click.option(
    "--check",
    is_flag=True,
    help="Check mode: exit 1 if any diagnostic is left unsuppressed."
)
@click.option(
    "--report",
    "report_file",
    type=click.Path(),
    help="Write JSON summary report to this file."
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug events to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    diagnostics: str | None,
    version: bool,
    list_plugins: bool,
    rule_files: tuple[str, ...],
    rule_lines: tuple[str, ...],
    plugin: str | None,
    config_path: str | None,
    output_format: str | None,
    show_suppressed: bool,
    report_unused: bool,
    unused_function: bool,
    check: bool,
    report_file: str | None,
    verbose: bool,
) -> None:
    """hush - suppression rules for static-analysis findings.

    Filter a JSON Lines diagnostics file through suppression rules and
    print what is left. Without a diagnostics file, validate and list
    the rules.
    """
    if version:
        from hush import __version__
        click.echo(f"hush {__version__}")
        return

    console = Console()

    if list_plugins:
        manager = _get_plugin_manager()

        table = Table(title="Available Plugins")
        table.add_column("Name", style="cyan", no_wrap=True)
        table.add_column("Version", style="green")
        table.add_column("Description")

        for name in sorted(manager.list_plugins()):
            info = manager.get_plugin_info(name)
            if info:
                table.add_row(
                    info["name"],
                    info.get("version", "unknown"),
                    info.get("description", ""),
                )

        console.print(table)
        return

    configure_logging(verbose)

    config = _load_config(ctx, console, config_path)
    if not config.output.color:
        console = Console(no_color=True)

    if diagnostics is None and not (rule_files or rule_lines or config.rules.files or config.rules.lines):
        click.echo(ctx.get_help())
        return

    registry = _build_registry(
        ctx,
        console,
        [*config.rules.files, *(Path(f) for f in rule_files)],
        [*config.rules.lines, *rule_lines],
        plugin,
    )

    if diagnostics is None:
        _print_rules(console, registry)
        return

    try:
        all_diagnostics = load_diagnostics(Path(diagnostics))
    except (FileNotFoundError, HushError) as e:
        _fail(ctx, console, str(e))
        return

    reported, suppressed = _apply_rules(all_diagnostics, registry)

    _output_diagnostics(
        console,
        reported,
        len(suppressed),
        (output_format or config.output.format).lower(),
    )

    if show_suppressed and suppressed:
        console.print("\n[bold cyan]Suppressed Diagnostics:[/bold cyan]")
        for diagnostic, rule in suppressed:
            console.print(
                f"  {diagnostic.location()}: {diagnostic.error_id}",
                markup=False,
                highlight=False,
                soft_wrap=True,
            )
            console.print(f"    [dim]Suppressed by:[/dim] {rule.to_line()}", highlight=False)

    include_unused_function = unused_function or config.report.unused_function
    unmatched = registry.unmatched_rules(include_unused_function=include_unused_function)

    if report_unused and unmatched:
        console.print("\n[bold yellow]Unused Suppressions:[/bold yellow]")
        for rule in unmatched:
            console.print(f"  - {rule.to_line()} ({rule.scope})", markup=False, highlight=False)

    if report_file:
        report = _generate_report(
            reported=reported,
            suppressed=suppressed,
            unmatched=unmatched,
            diagnostics_file=diagnostics,
            rule_count=len(registry),
        )
        report_path = Path(report_file)
        report_path.parent.mkdir(parents=True, exist_ok=True)
        report_path.write_text(json.dumps(report, indent=2))

    if check and reported:
        ctx.exit(1)


if __name__ == "__main__":
    cli()
