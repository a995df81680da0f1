from .system_syslog import SYSLOG_FACILITY, SYSLOG_OPTION, SystemSyslog

__all__ = [
    "SYSLOG_FACILITY",
    "SYSLOG_OPTION",
    "SystemSyslog",
]
