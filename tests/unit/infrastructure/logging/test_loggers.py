"""Unit tests for logger implementations.

Tests verify that:
1. The logger ports are properly implemented by every adapter
2. The null loggers provide silent testing capability
3. ConsoleSink writes records verbatim and absorbs stream failures
"""

from io import StringIO
import unittest

from rich.console import Console

from ipmilog.application.ports.services import (
    DiagnosticLoggerPort,
    SessionLoggerPort,
    SyslogPort,
)
from ipmilog.constants import Severity
from ipmilog.infrastructure.logging import (
    ConsoleSink,
    DiagnosticLogger,
    NullDiagnosticLogger,
    NullSessionLogger,
    SessionLogger,
)
from ipmilog.infrastructure.syslog import SystemSyslog


class TestLoggerPorts(unittest.TestCase):
    """Test that logger implementations comply with the port protocols."""

    def test_session_logger_implements_port(self):
        """SessionLogger should implement SessionLoggerPort."""
        self.assertIsInstance(SessionLogger(), SessionLoggerPort)

    def test_null_session_logger_implements_port(self):
        """NullSessionLogger should implement SessionLoggerPort."""
        self.assertIsInstance(NullSessionLogger(), SessionLoggerPort)

    def test_diagnostic_logger_implements_port(self):
        """DiagnosticLogger should implement DiagnosticLoggerPort."""
        self.assertIsInstance(DiagnosticLogger(environ={}), DiagnosticLoggerPort)

    def test_null_diagnostic_logger_implements_port(self):
        """NullDiagnosticLogger should implement DiagnosticLoggerPort."""
        self.assertIsInstance(NullDiagnosticLogger(), DiagnosticLoggerPort)

    def test_system_syslog_implements_port(self):
        """SystemSyslog should implement SyslogPort."""
        self.assertIsInstance(SystemSyslog(), SyslogPort)

    def test_session_port_has_required_methods(self):
        """SessionLoggerPort should define the session entry points."""
        required_methods = {"init", "halt", "get_level", "set_level", "log", "log_errno"}
        protocol_methods = {
            name for name in dir(SessionLoggerPort) if not name.startswith("_")
        }
        self.assertTrue(required_methods.issubset(protocol_methods))


class TestNullLoggers(unittest.TestCase):
    """Test the null loggers used to silence logging."""

    def test_null_session_logger_produces_no_output(self):
        """NullSessionLogger should accept every call without side effects."""
        logger = NullSessionLogger()

        logger.init("ipmitool", True, 3)
        logger.log(Severity.EMERGENCY, "Emergency %s", "message")
        logger.log_errno(Severity.ERROR, "Error message", errno=5)
        logger.halt()

        self.assertTrue(logger.initialized)

    def test_null_session_logger_tracks_level(self):
        """NullSessionLogger should still honour get/set level."""
        logger = NullSessionLogger()
        self.assertEqual(logger.get_level(), Severity.NOTICE)

        logger.set_level(Severity.DEBUG)
        self.assertEqual(logger.get_level(), Severity.DEBUG)

    def test_null_diagnostic_logger_is_never_enabled(self):
        """NullDiagnosticLogger should reject every level."""
        logger = NullDiagnosticLogger()

        logger.log(Severity.EMERGENCY, "ignored")
        logger.buffer_log(Severity.EMERGENCY, b"\x00\x01")

        self.assertFalse(logger.is_enabled(Severity.EMERGENCY))
        self.assertEqual(logger.get_threshold(), -1)


class TestConsoleSink(unittest.TestCase):
    """Test ConsoleSink output handling."""

    def setUp(self):
        """Set up test fixtures."""
        self.buffer = StringIO()
        self.sink = ConsoleSink(Console(file=self.buffer, width=40))

    def test_write_is_verbatim(self):
        """Long lines with trailing spaces and brackets must not be rewrapped."""
        text = "[a.c:1] " + "x" * 100 + " [bold]    \n"

        self.assertTrue(self.sink.write(text))
        self.assertEqual(self.buffer.getvalue(), text)

    def test_warning_renders_message(self):
        """warning() should output the message with a warning indicator."""
        self.sink.warning("logger name [unset]")

        output = self.buffer.getvalue()
        self.assertIn("logger name [unset]", output)
        self.assertIn("⚠", output)

    def test_closed_stream_is_counted(self):
        """Writes to a closed stream should be dropped, not raised."""
        self.buffer.close()

        self.assertFalse(self.sink.write("lost\n"))
        self.assertEqual(self.sink.dropped, 1)

    def test_for_stream_wraps_stream(self):
        """for_stream() should write to the given stream."""
        stream = StringIO()
        sink = ConsoleSink.for_stream(stream)

        sink.write("record\n")

        self.assertIs(sink.stream, stream)
        self.assertEqual(stream.getvalue(), "record\n")

    def test_close_closes_underlying_stream(self):
        """close() should close the stream once and tolerate repeats."""
        self.sink.close()
        self.sink.close()

        self.assertTrue(self.buffer.closed)


if __name__ == "__main__":
    unittest.main()
