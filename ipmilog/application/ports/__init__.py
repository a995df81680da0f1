"""Port interfaces.

Protocols for the two logger subsystems and the system log service.
"""

from .services import DiagnosticLoggerPort, SessionLoggerPort, SyslogPort

__all__ = [
    "DiagnosticLoggerPort",
    "SessionLoggerPort",
    "SyslogPort",
]
