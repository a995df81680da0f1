"""Hexdump command - dump a binary file the way the diagnostic logger does."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import cast

import click
from rich.console import Console

from ...config import ConfigLoader
from ...constants import Severity
from ...domain.services.hexdump import render_hexdump
from ...domain.services.levels import severity_name
from ...infrastructure.container import DependencyContainer
from ..helpers import SEVERITY

console = Console(stderr=True)


@dataclass(frozen=True)
class HexdumpCommandOptions:
    config_file: Path | None
    offset: int
    length: int | None
    level: int
    message: str | None
    to_stdout: bool
    threshold: int | None

    @classmethod
    def from_kwargs(cls, options: dict[str, object]) -> HexdumpCommandOptions:
        return cls(
            config_file=cast("Path | None", options.get("config_file")),
            offset=cast("int", options["offset"]),
            length=cast("int | None", options.get("length")),
            level=cast("int", options["level"]),
            message=cast("str | None", options.get("message")),
            to_stdout=cast("bool", options["to_stdout"]),
            threshold=cast("int | None", options.get("threshold")),
        )


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, path_type=Path),
    help="Path to an ipmilog.toml config file (default: ./ipmilog.toml)",
)
@click.option(
    "--offset",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="Byte offset to start reading from",
)
@click.option(
    "--length",
    type=click.IntRange(min=0),
    help="Number of bytes to dump (default: to end of file)",
)
@click.option(
    "--level",
    type=SEVERITY,
    default=int(Severity.DEBUG),
    show_default=True,
    help="Severity of the dump record",
)
@click.option("--message", help="Text placed after the size field of the record")
@click.option(
    "--threshold",
    type=int,
    help="Diagnostic threshold to use instead of IPMI_LOGLEVEL",
)
@click.option(
    "--stdout",
    "to_stdout",
    is_flag=True,
    help="Print only the dump rows to stdout, bypassing the diagnostic logger",
)
def hexdump_command(path: Path, **options: object) -> None:
    """Dump the bytes of PATH as a diagnostic buffer record.

    The record goes wherever IPMI_LOGFILE points (stderr by default) and is
    only written when the diagnostic threshold admits --level.

    Examples:

    \b
        # Dump a captured response at debug level
        IPMI_LOGLEVEL=7 ipmilog hexdump response.bin

    \b
        # Dump 32 bytes starting at offset 16 to stdout
        ipmilog hexdump response.bin --offset 16 --length 32 --stdout
    """
    command_options = HexdumpCommandOptions.from_kwargs(dict(options))
    with path.open("rb") as handle:
        handle.seek(command_options.offset)
        if command_options.length is None:
            data = handle.read()
        else:
            data = handle.read(command_options.length)

    if command_options.to_stdout:
        click.echo(render_hexdump(data).lstrip("\n"))
        return

    config = ConfigLoader.load(config_file=command_options.config_file)
    if command_options.threshold is not None:
        config = replace(config, diagnostic_level=command_options.threshold)
    container = DependencyContainer(config=config, console=console)
    logger = container.create_diagnostic_logger()
    if not logger.is_enabled(command_options.level):
        console.print(
            f"[yellow]⚠[/yellow] {severity_name(command_options.level)} dump "
            f"suppressed: diagnostic threshold is {logger.get_threshold()}"
        )
        return
    try:
        logger.buffer_log(
            command_options.level,
            data,
            len(data),
            command_options.message,
            file=path.name,
            line=command_options.offset,
        )
    finally:
        container.create_context().close()
