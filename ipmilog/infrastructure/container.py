from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from ..config import ConfigLoader, LoggingConfig
from ..context import LoggingContext
from .logging.console_sink import ConsoleSink
from .logging.diagnostic_logger import DiagnosticLogger
from .logging.null_logger import NullDiagnosticLogger, NullSessionLogger
from .logging.session_logger import SessionLogger
from .syslog.system_syslog import SystemSyslog

if TYPE_CHECKING:
    from ..application.ports.services import (
        DiagnosticLoggerPort,
        SessionLoggerPort,
        SyslogPort,
    )


class DependencyContainer:
    pass

    def __init__(
        self,
        config: LoggingConfig | None = None,
        console: Console | None = None,
        use_null_logger: bool = False,
    ) -> None:
        super().__init__()
        self.config = config
        self.console = console or Console(stderr=True)
        self.use_null_logger = use_null_logger
        self._syslog_instance: SyslogPort | None = None
        self._session_logger_instance: SessionLoggerPort | None = None
        self._diagnostic_logger_instance: DiagnosticLoggerPort | None = None

    def create_syslog(self) -> SyslogPort:
        if self._syslog_instance is None:
            self._syslog_instance = SystemSyslog()
        return self._syslog_instance

    def create_session_logger(self) -> SessionLoggerPort:
        if self._session_logger_instance is None:
            if self.use_null_logger:
                self._session_logger_instance = NullSessionLogger()
            else:
                self._session_logger_instance = SessionLogger(
                    sink=ConsoleSink(self.console),
                    syslog=self.create_syslog(),
                    config=self.config,
                )
        return self._session_logger_instance

    def create_diagnostic_logger(self) -> DiagnosticLoggerPort:
        if self._diagnostic_logger_instance is None:
            if self.use_null_logger:
                self._diagnostic_logger_instance = NullDiagnosticLogger()
            else:
                self._diagnostic_logger_instance = DiagnosticLogger(
                    config=self.config, stderr_sink=ConsoleSink(self.console)
                )
        return self._diagnostic_logger_instance

    def create_context(self) -> LoggingContext:
        return LoggingContext(
            session=self.create_session_logger(),
            diagnostic=self.create_diagnostic_logger(),
        )

    def reset_singletons(self) -> None:
        self._syslog_instance = None
        self._session_logger_instance = None
        self._diagnostic_logger_instance = None

    def override_syslog(self, syslog: SyslogPort) -> None:
        self._syslog_instance = syslog

    def override_session_logger(self, logger: SessionLoggerPort) -> None:
        self._session_logger_instance = logger

    def override_diagnostic_logger(self, logger: DiagnosticLoggerPort) -> None:
        self._diagnostic_logger_instance = logger


def create_default_container(config: LoggingConfig | None = None) -> DependencyContainer:
    if config is None:
        config = ConfigLoader.load()
    return DependencyContainer(config=config)
