"""Domain entities.

Log records and the source locations they are stamped with.
"""

from .log_record import BytesLike, LogRecord, SourceLocation

__all__ = [
    "BytesLike",
    "LogRecord",
    "SourceLocation",
]
