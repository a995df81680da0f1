import io

import pytest
from rich.console import Console

from ipmilog.constants import EnvVars
from ipmilog.context import reset_context
from ipmilog.infrastructure.logging.console_sink import ConsoleSink


class RecordingSyslog:
    """In-memory stand-in for the system log service."""

    def __init__(self) -> None:
        self.opened: list[tuple[str | None, int, int]] = []
        self.messages: list[tuple[int, str]] = []
        self.closed = 0

    def open(self, ident: str | None, option: int, facility: int) -> None:
        self.opened.append((ident, option, facility))

    def write(self, priority: int, message: str) -> None:
        self.messages.append((priority, message))

    def close(self) -> None:
        self.closed += 1


@pytest.fixture(autouse=True)
def _isolated_logging_env(monkeypatch: pytest.MonkeyPatch):
    """Keep the diagnostic env vars and the process-wide context per test.

    The diagnostic logger reads IPMI_LOGLEVEL / IPMI_LOGFILE once and caches
    them, so every test starts from a clean environment and a fresh context.
    """
    for name in EnvVars.ALL:
        monkeypatch.delenv(name, raising=False)
    reset_context()
    yield
    reset_context()


@pytest.fixture
def buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def sink(buffer: io.StringIO) -> ConsoleSink:
    return ConsoleSink(Console(file=buffer, width=80))


@pytest.fixture
def recording_syslog() -> RecordingSyslog:
    return RecordingSyslog()
