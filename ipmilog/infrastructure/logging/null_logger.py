from typing import override

from ...application.ports.services import DiagnosticLoggerPort, SessionLoggerPort
from ...constants import SESSION_LEVEL_BASE
from ...domain.entities.log_record import BytesLike


class NullSessionLogger(SessionLoggerPort):
    pass

    def __init__(self) -> None:
        super().__init__()
        self._level = SESSION_LEVEL_BASE

    @property
    @override
    def initialized(self) -> bool:
        return True

    @override
    def init(
        self,
        name: str | bytes | None = None,
        is_daemon: bool | None = None,
        verbosity: int | None = None,
    ) -> None:
        return

    @override
    def halt(self) -> None:
        return

    @override
    def get_level(self) -> int:
        return self._level

    @override
    def set_level(self, level: int) -> None:
        self._level = level

    @override
    def log(
        self,
        level: int,
        fmt: str,
        *args: object,
        file: str | None = None,
        line: int | None = None,
    ) -> None:
        return

    @override
    def log_errno(
        self, level: int, fmt: str, *args: object, errno: int | None = None
    ) -> None:
        return


class NullDiagnosticLogger(DiagnosticLoggerPort):
    pass

    @override
    def get_threshold(self) -> int:
        return -1

    @override
    def is_enabled(self, level: int) -> bool:
        return False

    @override
    def log(
        self,
        level: int,
        fmt: str,
        *args: object,
        file: str | None = None,
        line: int | None = None,
    ) -> None:
        return

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
        return None
