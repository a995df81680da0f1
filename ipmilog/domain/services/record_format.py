from __future__ import annotations

from typing import TYPE_CHECKING

from .hexdump import render_hexdump
from .levels import level_label
from .message_buffer import MessageBuffer
from .printf import format_message

if TYPE_CHECKING:
    from ..entities.log_record import LogRecord


def format_session_message(record: LogRecord, capacity: int) -> MessageBuffer:
    buffer = MessageBuffer(capacity)
    if buffer.append(f"{record.location.prefix()} "):
        buffer.append(format_message(record.fmt, record.args))
    return buffer


def format_errno_message(record: LogRecord, capacity: int) -> MessageBuffer:
    buffer = MessageBuffer(capacity)
    buffer.append(format_message(record.fmt, record.args))
    return buffer


def errno_suffix(description: str) -> str:
    return f": {description}"


def diagnostic_prefix(record: LogRecord) -> str:
    return f"{record.location.prefix()}<{level_label(record.level)}> "


def format_diagnostic_line(record: LogRecord) -> str:
    return f"{diagnostic_prefix(record)}{format_message(record.fmt, record.args)}\n"


def format_buffer_record(record: LogRecord, identity: int) -> str:
    """Render a buffer dump record including its trailing newline.

    ``identity`` stands in for the buffer address and is printed in hex; a
    record without a buffer prints only its header line.
    """
    data = record.buffer if record.has_buffer else b""
    size = record.size
    parts = [
        diagnostic_prefix(record),
        f"[0x{identity:x}] size[0x{size:x}:{size}]",
        format_message(record.fmt, record.args),
        render_hexdump(data, size),
        "\n",
    ]
    return "".join(parts)
