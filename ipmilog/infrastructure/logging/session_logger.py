from __future__ import annotations

from dataclasses import dataclass, replace
import os
import sys
from typing import TYPE_CHECKING, override

from ...application.ports.services import SessionLoggerPort
from ...config import LoggingConfig
from ...constants import SESSION_LEVEL_BASE, Defaults, Limits, Severity
from ...domain.entities.log_record import LogRecord
from ...domain.services.levels import is_suppressed
from ...domain.services.record_format import (
    errno_suffix,
    format_errno_message,
    format_session_message,
)
from ..syslog.system_syslog import SYSLOG_FACILITY, SYSLOG_OPTION, SystemSyslog
from .caller import resolve_location
from .console_sink import ConsoleSink

if TYPE_CHECKING:
    from ...application.ports.services import SyslogPort


@dataclass(frozen=True, slots=True)
class SessionState:
    name: str | None
    is_daemon: bool
    level: int


def _own_name(name: str | bytes | None) -> str:
    if name is None:
        return Defaults.LOGGER_NAME
    if isinstance(name, bytes):
        return name.decode("utf-8")
    return str(name)


def _current_errno(explicit: int | None) -> int:
    if explicit is not None:
        return explicit
    exc = sys.exception()
    if isinstance(exc, OSError) and exc.errno is not None:
        return exc.errno
    return 0


def _syslog_priority(level: int) -> int:
    return max(Severity.EMERGENCY, min(level, Severity.DEBUG))


class SessionLogger(SessionLoggerPort):
    """User-facing logger writing to stderr, or to syslog in daemon mode.

    State is absent until :meth:`init` runs and returns to absent after
    :meth:`halt`. Every entry point falls back to ``init()`` when it finds no
    state, so a halted or never-initialized logger still works. Arguments left
    as ``None`` take the ``[session]`` settings of ``config``; without a config
    that is a non-daemon logger named ``ipmitool`` at ``NOTICE``.
    """

    def __init__(
        self,
        sink: ConsoleSink | None = None,
        syslog: SyslogPort | None = None,
        capacity: int = Limits.MESSAGE_LENGTH,
        config: LoggingConfig | None = None,
    ) -> None:
        super().__init__()
        self.sink = sink or ConsoleSink()
        self.config = config or LoggingConfig()
        self._syslog = syslog
        self.capacity = capacity
        self._state: SessionState | None = None
        self._stats: dict[str, int] = {
            "written": 0,
            "suppressed": 0,
            "truncated": 0,
        }

    @property
    @override
    def initialized(self) -> bool:
        return self._state is not None

    @property
    def state(self) -> SessionState | None:
        return self._state

    @property
    def syslog(self) -> SyslogPort:
        if self._syslog is None:
            self._syslog = SystemSyslog()
        return self._syslog

    @override
    def init(
        self,
        name: str | bytes | None = None,
        is_daemon: bool | None = None,
        verbosity: int | None = None,
    ) -> None:
        if self._state is not None:
            return
        if name is None:
            name = self.config.session_name
        if is_daemon is None:
            is_daemon = self.config.daemon
        if verbosity is None:
            verbosity = self.config.verbosity
        owned: str | None
        try:
            owned = _own_name(name)
        except (UnicodeDecodeError, MemoryError):
            self.sink.warning(f"{Defaults.LOGGER_NAME}: unable to store logger name")
            owned = None
        state = SessionState(
            name=owned,
            is_daemon=bool(is_daemon),
            level=SESSION_LEVEL_BASE + verbosity,
        )
        if state.is_daemon:
            self.syslog.open(state.name, SYSLOG_OPTION, SYSLOG_FACILITY)
        self._state = state

    @override
    def halt(self) -> None:
        state = self._state
        if state is None:
            return
        self._state = None
        if state.is_daemon:
            self.syslog.close()

    def _ensure_state(self) -> SessionState:
        if self._state is None:
            self.init()
        assert self._state is not None
        return self._state

    @override
    def get_level(self) -> int:
        return self._ensure_state().level

    @override
    def set_level(self, level: int) -> None:
        self._state = replace(self._ensure_state(), level=level)

    def is_suppressed(self, level: int) -> bool:
        return is_suppressed(self._ensure_state().level, level)

    @override
    def log(
        self,
        level: int,
        fmt: str,
        *args: object,
        file: str | None = None,
        line: int | None = None,
    ) -> None:
        if self.is_suppressed(level):
            self._stats["suppressed"] += 1
            return
        record = LogRecord(
            level=level, location=resolve_location(file, line), fmt=fmt, args=args
        )
        message = format_session_message(record, self.capacity)
        if message.truncated:
            self._stats["truncated"] += 1
        self._emit(level, message.getvalue())

    @override
    def log_errno(
        self, level: int, fmt: str, *args: object, errno: int | None = None
    ) -> None:
        code = _current_errno(errno)
        if self.is_suppressed(level):
            self._stats["suppressed"] += 1
            return
        record = LogRecord(
            level=level, location=resolve_location(None, None), fmt=fmt, args=args
        )
        message = format_errno_message(record, self.capacity)
        if message.truncated:
            self._stats["truncated"] += 1
        self._emit(level, message.getvalue() + errno_suffix(os.strerror(code)))

    def _emit(self, level: int, text: str) -> None:
        state = self._ensure_state()
        if state.is_daemon:
            try:
                self.syslog.write(_syslog_priority(level), text)
            except (OSError, ValueError):
                return
        elif not self.sink.write(f"{text}\n"):
            return
        self._stats["written"] += 1

    def get_stats(self) -> dict[str, int]:
        return self._stats.copy()

    def reset_stats(self) -> None:
        self._stats = {
            "written": 0,
            "suppressed": 0,
            "truncated": 0,
        }
