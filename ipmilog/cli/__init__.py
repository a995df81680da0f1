import click

from .commands.config import config_command
from .commands.hexdump import hexdump_command
from .commands.levels import levels_command
from .commands.log import log_command


@click.group()
def app() -> None:
    pass


app.add_command(levels_command, name="levels")
app.add_command(log_command, name="log")
app.add_command(hexdump_command, name="hexdump")
app.add_command(config_command, name="config")
__all__ = ["app"]
