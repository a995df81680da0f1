from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    from typing import TextIO


class ConsoleSink:
    """Line sink over a rich console.

    Records are written verbatim to the console's underlying stream; rich's
    renderer would wrap and strip long hex-dump rows. Write failures are
    counted and dropped so a broken destination never reaches the caller.
    """

    def __init__(self, console: Console | None = None) -> None:
        super().__init__()
        self.console = console or Console(stderr=True)
        self.dropped = 0

    @classmethod
    def for_stream(cls, stream: TextIO) -> ConsoleSink:
        return cls(Console(file=stream))

    @property
    def stream(self) -> TextIO:
        return self.console.file

    def write(self, text: str, *, flush: bool = True) -> bool:
        stream = self.stream
        try:
            stream.write(text)
            if flush:
                stream.flush()
        except (OSError, ValueError):
            self.dropped += 1
            return False
        return True

    def warning(self, message: str) -> None:
        try:
            self.console.print(f"[yellow]⚠[/yellow] {escape(message)}")
        except (OSError, ValueError):
            self.dropped += 1

    def close(self) -> None:
        stream = self.stream
        if stream.closed:
            return
        stream.close()
