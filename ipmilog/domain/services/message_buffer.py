from ...constants import Limits

_ENCODING = "utf-8"


class MessageBuffer:
    """Fixed-capacity text buffer with bounds-checked appends.

    Capacity is measured in UTF-8 bytes and, as with the C record buffer of
    ipmitool, one byte is reserved for the string terminator, so at most
    ``capacity - 1`` bytes of text are kept. Appends that do not fit are
    cut at a character boundary and flag the buffer as truncated.
    """

    def __init__(self, capacity: int = Limits.MESSAGE_LENGTH) -> None:
        super().__init__()
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._parts: list[str] = []
        self._used = 0
        self._truncated = False

    @property
    def remaining(self) -> int:
        return self.capacity - 1 - self._used

    @property
    def truncated(self) -> bool:
        return self._truncated

    def append(self, text: str) -> bool:
        """Append ``text``; return False when it had to be cut short."""
        if not text:
            return True
        encoded = text.encode(_ENCODING, errors="replace")
        if len(encoded) <= self.remaining:
            self._parts.append(text)
            self._used += len(encoded)
            return True
        kept = encoded[: max(self.remaining, 0)].decode(_ENCODING, errors="ignore")
        if kept:
            self._parts.append(kept)
            self._used += len(kept.encode(_ENCODING, errors="replace"))
        self._truncated = True
        return False

    def getvalue(self) -> str:
        return "".join(self._parts)

    def __len__(self) -> int:
        return self._used

    def __str__(self) -> str:
        return self.getvalue()
