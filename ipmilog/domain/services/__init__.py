"""Domain services.

Pure functions and value objects used by both logger subsystems.
"""

from .hexdump import HexRow, iter_hexdump_rows, render_gutter, render_hexdump
from .levels import is_enabled, is_suppressed, level_label, severity_name
from .message_buffer import MessageBuffer
from .printf import format_message

__all__ = [
    "HexRow",
    "MessageBuffer",
    "format_message",
    "is_enabled",
    "is_suppressed",
    "iter_hexdump_rows",
    "level_label",
    "render_gutter",
    "render_hexdump",
    "severity_name",
]
