"""Process-wide logging context.

A :class:`LoggingContext` bundles the session and diagnostic loggers. Code
that wants explicit wiring builds one through the dependency container and
passes it around; everything else goes through :func:`get_context`, which
creates the process default on first use.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .application.ports.services import DiagnosticLoggerPort, SessionLoggerPort


@dataclass(slots=True)
class LoggingContext:
    session: SessionLoggerPort
    diagnostic: DiagnosticLoggerPort

    def close(self) -> None:
        """Halt the session logger and release the diagnostic log file."""
        self.session.halt()
        close = getattr(self.diagnostic, "close", None)
        if close is not None:
            close()


# Global context instance (can be replaced by the host tool or tests)
_context: LoggingContext | None = None


def get_context() -> LoggingContext:
    """Get the process-wide logging context, creating it on first use.

    Returns:
        The current LoggingContext
    """
    global _context
    if _context is None:
        from .infrastructure.container import create_default_container

        _context = create_default_container().create_context()
    return _context


def set_context(context: LoggingContext) -> None:
    """Replace the process-wide logging context.

    Args:
        context: Context to use for all module-level logging calls
    """
    global _context
    _context = context


def reset_context() -> None:
    """Close and drop the current context; the next call builds a fresh one."""
    global _context
    if _context is not None:
        _context.close()
    _context = None
