from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from ...config import ConfigLoader
from ...constants import SESSION_LEVEL_BASE, Severity
from ...domain.services.levels import is_enabled, is_suppressed, level_label

console = Console()

_SEVERITIES = (
    Severity.EMERGENCY,
    Severity.ALERT,
    Severity.CRITICAL,
    Severity.ERROR,
    Severity.WARNING,
    Severity.NOTICE,
    Severity.INFO,
    Severity.DEBUG,
)


@click.command()
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, path_type=Path),
    help="Path to an ipmilog.toml config file (default: ./ipmilog.toml)",
)
def levels_command(config_file: Path | None) -> None:
    """Show the severity scale and which levels each logger lets through."""
    config = ConfigLoader.load(config_file=config_file)
    session_threshold = SESSION_LEVEL_BASE + config.verbosity
    table = Table(title="Severity Levels")
    table.add_column("Level", justify="right", style="cyan")
    table.add_column("Name")
    table.add_column("Label")
    table.add_column(f"Session (<= {session_threshold})")
    table.add_column(f"Diagnostic (<= {config.diagnostic_level})")
    for severity in _SEVERITIES:
        table.add_row(
            str(int(severity)),
            severity.name,
            level_label(severity),
            _mark(not is_suppressed(session_threshold, severity)),
            _mark(is_enabled(config.diagnostic_level, severity)),
        )
    console.print(table)


def _mark(passes: bool) -> str:
    return "[green]yes[/green]" if passes else "[dim]no[/dim]"
