from typing import override
import syslog

from ...application.ports.services import SyslogPort

SYSLOG_OPTION = syslog.LOG_CONS
SYSLOG_FACILITY = syslog.LOG_LOCAL4


class SystemSyslog(SyslogPort):
    """Bridge to the host's syslog service through the stdlib module."""

    def __init__(self) -> None:
        super().__init__()
        self.is_open = False

    @override
    def open(self, ident: str | None, option: int, facility: int) -> None:
        if ident is None:
            syslog.openlog(logoption=option, facility=facility)
        else:
            syslog.openlog(ident, option, facility)
        self.is_open = True

    @override
    def write(self, priority: int, message: str) -> None:
        syslog.syslog(priority, message)

    @override
    def close(self) -> None:
        syslog.closelog()
        self.is_open = False
