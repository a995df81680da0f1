"""Hex-dump rendering for raw wire buffers.

Each row is an 8-digit offset label followed by up to 16 ``0xNN`` cells and an
ASCII gutter::

    0x00000000 0x41 0x42 0x00 ...    AB.

A short final row is padded with blank cells so its gutter lines up with the
rows above it.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from ...constants import Limits
from ..entities.log_record import BytesLike

PRINTABLE_FIRST = 0x20
PRINTABLE_LAST = 0x7E
NON_PRINTABLE = "."
GUTTER_SEPARATOR = "    "
BLANK_CELL = "     "


@dataclass(frozen=True, slots=True)
class HexRow:
    offset: int
    data: bytes

    @property
    def is_partial(self) -> bool:
        return len(self.data) < Limits.HEXDUMP_ROW_WIDTH

    def offset_label(self) -> str:
        return f"0x{self.offset:08x}"

    def cells(self) -> str:
        return "".join(f" 0x{byte:02x}" for byte in self.data)

    def padding(self) -> str:
        return BLANK_CELL * (Limits.HEXDUMP_ROW_WIDTH - len(self.data))

    def gutter(self) -> str:
        return render_gutter(self.data)

    def render(self) -> str:
        return (
            f"\n{self.offset_label()}{self.cells()}{self.padding()}"
            f"{GUTTER_SEPARATOR}{self.gutter()}"
        )


def render_gutter(data: bytes) -> str:
    return "".join(
        chr(byte) if PRINTABLE_FIRST <= byte <= PRINTABLE_LAST else NON_PRINTABLE
        for byte in data
    )


def as_bytes(data: BytesLike | None) -> bytes:
    if data is None:
        return b""
    return bytes(memoryview(data))


def clamp_size(data: BytesLike | None, size: int | None) -> int:
    available = 0 if data is None else memoryview(data).nbytes
    if size is None:
        return available
    return max(0, min(size, available))


def iter_hexdump_rows(
    data: BytesLike | None, size: int | None = None
) -> Iterator[HexRow]:
    raw = as_bytes(data)
    count = clamp_size(raw, size)
    width = Limits.HEXDUMP_ROW_WIDTH
    for offset in range(0, count, width):
        yield HexRow(offset=offset, data=raw[offset : min(offset + width, count)])


def render_hexdump(data: BytesLike | None, size: int | None = None) -> str:
    """Render the dump body for the first ``size`` bytes of ``data``.

    Every row starts with a newline and no trailing newline is added, so the
    result can follow a header on the same line. An empty or missing buffer
    renders as an empty string: no offset label and no gutter. Views of any
    layout are copied to contiguous bytes first.
    """
    return "".join(row.render() for row in iter_hexdump_rows(data, size))
