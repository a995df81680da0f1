"""Log command - send one message through the session logger.

Useful for checking what a given verbosity lets through and for confirming
that daemon mode reaches the system log.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import cast

import click
from click.core import ParameterSource
from rich.console import Console

from ...config import ConfigLoader
from ...constants import Severity
from ...infrastructure.container import DependencyContainer
from ..helpers import SEVERITY

console = Console(stderr=True)


@dataclass(frozen=True)
class LogCommandOptions:
    level: int
    name: str | None
    daemon: bool | None
    verbose: int
    config_file: Path | None
    errno: int | None
    source_file: str
    source_line: int

    @classmethod
    def from_kwargs(cls, options: dict[str, object]) -> LogCommandOptions:
        return cls(
            level=cast("int", options["level"]),
            name=cast("str | None", options.get("name")),
            daemon=cast("bool | None", options.get("daemon")),
            verbose=cast("int", options["verbose"]),
            config_file=cast("Path | None", options.get("config_file")),
            errno=cast("int | None", options.get("errno")),
            source_file=cast("str", options["source_file"]),
            source_line=cast("int", options["source_line"]),
        )


@click.command()
@click.argument("message")
@click.option(
    "--level",
    type=SEVERITY,
    default=int(Severity.NOTICE),
    show_default=True,
    help="Severity number (0-7) or name (err, warning, debug, ...)",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, path_type=Path),
    help="Path to an ipmilog.toml config file (default: ./ipmilog.toml)",
)
@click.option("--name", help="Logger name used as the syslog ident")
@click.option(
    "--daemon/--no-daemon",
    default=False,
    help="Send the message to syslog instead of stderr (default: session.daemon)",
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity above session.verbosity (e.g., -v, -vv)",
)
@click.option(
    "--errno",
    type=int,
    help="Append the description of this error code to the message",
)
@click.option(
    "--file",
    "source_file",
    default="ipmilog",
    show_default=True,
    help="Source file reported in the record prefix",
)
@click.option(
    "--line",
    "source_line",
    type=int,
    default=0,
    show_default=True,
    help="Source line reported in the record prefix",
)
def log_command(message: str, **options: object) -> None:
    """Write MESSAGE through the session logger.

    The message passes when its level is at most NOTICE plus the configured
    verbosity plus the number of -v flags. The [session] table of the config
    file supplies the name, daemon mode and verbosity when no flag does.

    Examples:

    \b
        # Shown: NOTICE passes at the default verbosity
        ipmilog log "chassis power on" --level notice

    \b
        # Shown only with -v
        ipmilog log "sending request" --level info -v

    \b
        # Annotate with an error description
        ipmilog log "open /dev/ipmi0" --level err --errno 2
    """
    ctx = click.get_current_context()
    if ctx.get_parameter_source("daemon") is ParameterSource.DEFAULT:
        options["daemon"] = None
    command_options = LogCommandOptions.from_kwargs(dict(options))
    config = ConfigLoader.load(config_file=command_options.config_file)
    container = DependencyContainer(config=config, console=console)
    logger = container.create_session_logger()
    logger.init(
        command_options.name,
        command_options.daemon,
        config.verbosity + command_options.verbose,
    )
    try:
        if command_options.errno is not None:
            logger.log_errno(
                command_options.level, message, errno=command_options.errno
            )
        else:
            logger.log(
                command_options.level,
                message,
                file=command_options.source_file,
                line=command_options.source_line,
            )
    finally:
        logger.halt()
