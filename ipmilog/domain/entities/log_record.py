from __future__ import annotations

from dataclasses import dataclass, field
import os

BytesLike = bytes | bytearray | memoryview


def _empty_args() -> tuple[object, ...]:
    return ()


@dataclass(frozen=True, slots=True)
class SourceLocation:
    file: str
    line: int

    @property
    def basename(self) -> str:
        return os.path.basename(self.file) or self.file

    def prefix(self) -> str:
        return f"[{self.basename}:{self.line}]"


@dataclass(frozen=True, slots=True)
class LogRecord:
    level: int
    location: SourceLocation
    fmt: str | None
    args: tuple[object, ...] = field(default_factory=_empty_args)
    buffer: BytesLike | None = None
    size: int = 0

    @property
    def has_buffer(self) -> bool:
        return self.buffer is not None
