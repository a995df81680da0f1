import inspect
import os

from ...domain.entities.log_record import SourceLocation

_PACKAGE_DIR = os.path.dirname(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
)
UNKNOWN_LOCATION = SourceLocation("(unknown file)", 0)


def _is_internal(filename: str) -> bool:
    return os.path.abspath(filename).startswith(_PACKAGE_DIR + os.sep)


def resolve_location(file: str | None, line: int | None) -> SourceLocation:
    """Return the explicit location, or the first frame outside this package."""
    if file is not None:
        return SourceLocation(file, line or 0)
    frame = inspect.currentframe()
    try:
        while frame is not None:
            code = frame.f_code
            if not _is_internal(code.co_filename):
                lineno = frame.f_lineno if line is None else line
                return SourceLocation(code.co_filename, lineno)
            frame = frame.f_back
    finally:
        del frame
    return UNKNOWN_LOCATION
