from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ...domain.entities.log_record import BytesLike


@runtime_checkable
class SyslogPort(Protocol):
    pass

    def open(self, ident: str | None, option: int, facility: int) -> None: ...

    def write(self, priority: int, message: str) -> None: ...

    def close(self) -> None: ...


@runtime_checkable
class SessionLoggerPort(Protocol):
    pass

    @property
    def initialized(self) -> bool: ...

    def init(
        self,
        name: str | bytes | None = None,
        is_daemon: bool | None = None,
        verbosity: int | None = None,
    ) -> None: ...

    def halt(self) -> None: ...

    def get_level(self) -> int: ...

    def set_level(self, level: int) -> None: ...

    def log(
        self,
        level: int,
        fmt: str,
        *args: object,
        file: str | None = None,
        line: int | None = None,
    ) -> None: ...

    def log_errno(
        self, level: int, fmt: str, *args: object, errno: int | None = None
    ) -> None: ...


@runtime_checkable
class DiagnosticLoggerPort(Protocol):
    pass

    def get_threshold(self) -> int: ...

    def is_enabled(self, level: int) -> bool: ...

    def log(
        self,
        level: int,
        fmt: str,
        *args: object,
        file: str | None = None,
        line: int | None = None,
    ) -> None: ...

    def buffer_log(
        self,
        level: int,
        buffer: BytesLike | None,
        size: int | None = None,
        fmt: str | None = None,
        *args: object,
        file: str | None = None,
        line: int | None = None,
    ) -> None: ...
