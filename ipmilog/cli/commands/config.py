from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from ...config import ConfigLoader
from ...constants import SESSION_LEVEL_BASE, Defaults, EnvVars

console = Console()


@click.command()
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, path_type=Path),
    help="Path to an ipmilog.toml config file (default: ./ipmilog.toml)",
)
def config_command(config_file: Path | None) -> None:
    """Show the effective logging configuration."""
    config = ConfigLoader.load(config_file=config_file)
    table = Table(title="Logging Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_column("Source", style="dim")
    table.add_row("session.name", config.session_name or Defaults.LOGGER_NAME, "config")
    table.add_row("session.daemon", str(config.daemon).lower(), "config")
    table.add_row("session.verbosity", str(config.verbosity), "config")
    table.add_row(
        "session.threshold", str(SESSION_LEVEL_BASE + config.verbosity), "derived"
    )
    table.add_row(
        "diagnostic.level", str(config.diagnostic_level), EnvVars.DIAGNOSTIC_LEVEL
    )
    table.add_row(
        "diagnostic.file",
        str(config.diagnostic_file) if config.diagnostic_file else "<stderr>",
        EnvVars.DIAGNOSTIC_FILE,
    )
    console.print(table)
