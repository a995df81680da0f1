"""Logging infrastructure.

This module provides the session and diagnostic logger implementations.
"""

from .console_sink import ConsoleSink
from .diagnostic_logger import DiagnosticLogger
from .null_logger import NullDiagnosticLogger, NullSessionLogger
from .session_logger import SessionLogger

__all__ = [
    "ConsoleSink",
    "DiagnosticLogger",
    "NullDiagnosticLogger",
    "NullSessionLogger",
    "SessionLogger",
]
