"""ipmilog package.

Leveled logging for the ipmitool command line utility:

- Session logger: explicit init, stderr or syslog output, errno annotation
- Diagnostic logger: configured from IPMI_LOGLEVEL / IPMI_LOGFILE on first
  use, file or stderr output, hex dumps of raw buffers

The module-level functions below log through the process-wide
:class:`~ipmilog.context.LoggingContext`.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from typing import TYPE_CHECKING

try:  # pragma: no cover
    __version__ = version("ipmilog")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

from ipmilog.constants import Severity
from ipmilog.context import LoggingContext, get_context, reset_context, set_context
from ipmilog.domain.services.hexdump import render_hexdump
from ipmilog.domain.services.levels import level_label

if TYPE_CHECKING:
    from ipmilog.domain.entities.log_record import BytesLike


def log_init(
    name: str | bytes | None = None,
    is_daemon: bool | None = None,
    verbosity: int | None = None,
) -> None:
    get_context().session.init(name, is_daemon, verbosity)


def log_halt() -> None:
    get_context().session.halt()


def get_log_level() -> int:
    return get_context().session.get_level()


def set_log_level(level: int) -> None:
    get_context().session.set_level(level)


def lprintf(level: int, fmt: str, *args: object) -> None:
    get_context().session.log(level, fmt, *args)


def lperror(level: int, fmt: str, *args: object, errno: int | None = None) -> None:
    get_context().session.log_errno(level, fmt, *args, errno=errno)


def diag_level() -> int:
    return get_context().diagnostic.get_threshold()


def diag_log(level: int, fmt: str, *args: object) -> None:
    get_context().diagnostic.log(level, fmt, *args)


def diag_buffer_log(
    level: int,
    buffer: BytesLike | None,
    size: int | None = None,
    fmt: str | None = None,
    *args: object,
) -> None:
    get_context().diagnostic.buffer_log(level, buffer, size, fmt, *args)


def diag_debug(fmt: str, *args: object) -> None:
    diag_log(Severity.DEBUG, fmt, *args)


def diag_info(fmt: str, *args: object) -> None:
    diag_log(Severity.INFO, fmt, *args)


def diag_error(fmt: str, *args: object) -> None:
    diag_log(Severity.ERROR, fmt, *args)


def diag_emergency(fmt: str, *args: object) -> None:
    diag_log(Severity.EMERGENCY, fmt, *args)


def buffer_debug(
    buffer: BytesLike | None,
    size: int | None = None,
    fmt: str | None = None,
    *args: object,
) -> None:
    diag_buffer_log(Severity.DEBUG, buffer, size, fmt, *args)


def buffer_error(
    buffer: BytesLike | None,
    size: int | None = None,
    fmt: str | None = None,
    *args: object,
) -> None:
    diag_buffer_log(Severity.ERROR, buffer, size, fmt, *args)


def buffer_emergency(
    buffer: BytesLike | None,
    size: int | None = None,
    fmt: str | None = None,
    *args: object,
) -> None:
    diag_buffer_log(Severity.EMERGENCY, buffer, size, fmt, *args)


__all__ = [
    "__version__",
    "LoggingContext",
    "Severity",
    # Context
    "get_context",
    "reset_context",
    "set_context",
    # Session logger
    "get_log_level",
    "log_halt",
    "log_init",
    "lperror",
    "lprintf",
    "set_log_level",
    # Diagnostic logger
    "buffer_debug",
    "buffer_emergency",
    "buffer_error",
    "diag_buffer_log",
    "diag_debug",
    "diag_emergency",
    "diag_error",
    "diag_info",
    "diag_level",
    "diag_log",
    # Formatting
    "level_label",
    "render_hexdump",
]
