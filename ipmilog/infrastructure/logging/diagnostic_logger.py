from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, override

from ...application.ports.services import DiagnosticLoggerPort
from ...config import LoggingConfig
from ...constants import Severity
from ...domain.entities.log_record import LogRecord
from ...domain.services.hexdump import clamp_size
from ...domain.services.levels import is_enabled
from ...domain.services.record_format import (
    format_buffer_record,
    format_diagnostic_line,
)
from .caller import resolve_location
from .console_sink import ConsoleSink

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from ...domain.entities.log_record import BytesLike


@dataclass(frozen=True, slots=True)
class DiagnosticState:
    threshold: int
    sink: ConsoleSink
    path: Path | None

    @property
    def owns_stream(self) -> bool:
        return self.path is not None


class DiagnosticLogger(DiagnosticLoggerPort):
    """Trace logger configured from ``IPMI_LOGLEVEL`` and ``IPMI_LOGFILE``.

    Configuration is read on first use and cached for the lifetime of the
    logger, so later changes to the environment have no effect. Records go to
    the configured file, or to stderr when no file is set or it cannot be
    opened, and every record is flushed as soon as it is written.
    """

    def __init__(
        self,
        config: LoggingConfig | None = None,
        environ: Mapping[str, str] | None = None,
        stderr_sink: ConsoleSink | None = None,
    ) -> None:
        super().__init__()
        self._config = config
        self._environ = environ
        self._stderr_sink = stderr_sink
        self._state: DiagnosticState | None = None

    @property
    def initialized(self) -> bool:
        return self._state is not None

    @property
    def destination(self) -> Path | None:
        return self._ensure_state().path

    @property
    def sink(self) -> ConsoleSink:
        return self._ensure_state().sink

    def _ensure_state(self) -> DiagnosticState:
        if self._state is None:
            config = self._config or LoggingConfig.from_env(self._environ)
            sink, path = self._open_destination(config.diagnostic_file)
            self._state = DiagnosticState(
                threshold=config.diagnostic_level, sink=sink, path=path
            )
        return self._state

    def _open_destination(self, path: Path | None) -> tuple[ConsoleSink, Path | None]:
        if path is not None:
            try:
                handle = path.open("w+", encoding="utf-8")
            except OSError:
                pass
            else:
                return ConsoleSink.for_stream(handle), path
        return self._stderr_sink or ConsoleSink(), None

    @override
    def get_threshold(self) -> int:
        return self._ensure_state().threshold

    @override
    def is_enabled(self, level: int) -> bool:
        return is_enabled(self.get_threshold(), level)

    @override
    def log(
        self,
        level: int,
        fmt: str,
        *args: object,
        file: str | None = None,
        line: int | None = None,
    ) -> None:
        if not self.is_enabled(level):
            return
        record = LogRecord(
            level=level, location=resolve_location(file, line), fmt=fmt, args=args
        )
        self.sink.write(format_diagnostic_line(record))

    @override
    def buffer_log(
        self,
        level: int,
        buffer: BytesLike | None,
        size: int | None = None,
        fmt: str | None = None,
        *args: object,
        file: str | None = None,
        line: int | None = None,
    ) -> None:
        if not self.is_enabled(level):
            return
        record = LogRecord(
            level=level,
            location=resolve_location(file, line),
            fmt=fmt,
            args=args,
            buffer=buffer,
            size=clamp_size(buffer, size),
        )
        identity = 0 if buffer is None else id(buffer)
        self.sink.write(format_buffer_record(record, identity))

    def debug(
        self, fmt: str, *args: object, file: str | None = None, line: int | None = None
    ) -> None:
        self.log(Severity.DEBUG, fmt, *args, file=file, line=line)

    def info(
        self, fmt: str, *args: object, file: str | None = None, line: int | None = None
    ) -> None:
        self.log(Severity.INFO, fmt, *args, file=file, line=line)

    def error(
        self, fmt: str, *args: object, file: str | None = None, line: int | None = None
    ) -> None:
        self.log(Severity.ERROR, fmt, *args, file=file, line=line)

    def emergency(
        self, fmt: str, *args: object, file: str | None = None, line: int | None = None
    ) -> None:
        self.log(Severity.EMERGENCY, fmt, *args, file=file, line=line)

    def buffer_debug(
        self,
        buffer: BytesLike | None,
        size: int | None = None,
        fmt: str | None = None,
        *args: object,
    ) -> None:
        self.buffer_log(Severity.DEBUG, buffer, size, fmt, *args)

    def buffer_error(
        self,
        buffer: BytesLike | None,
        size: int | None = None,
        fmt: str | None = None,
        *args: object,
    ) -> None:
        self.buffer_log(Severity.ERROR, buffer, size, fmt, *args)

    def buffer_emergency(
        self,
        buffer: BytesLike | None,
        size: int | None = None,
        fmt: str | None = None,
        *args: object,
    ) -> None:
        self.buffer_log(Severity.EMERGENCY, buffer, size, fmt, *args)

    def close(self) -> None:
        state = self._state
        if state is not None and state.owns_stream:
            state.sink.close()
