from collections.abc import Mapping, Sequence


def format_message(fmt: str | None, args: Sequence[object] = ()) -> str:
    """Render ``fmt`` with printf-style ``%`` substitution.

    A single mapping argument is used for ``%(name)s`` placeholders. Arguments
    that do not match the placeholders never raise; the raw format is returned
    followed by the argument reprs instead.
    """
    if fmt is None:
        return ""
    if not args:
        return fmt
    values: object
    if len(args) == 1 and isinstance(args[0], Mapping):
        values = args[0]
    else:
        values = tuple(args)
    try:
        return fmt % values
    except (TypeError, ValueError, KeyError):
        rendered = ", ".join(repr(arg) for arg in args)
        return f"{fmt} [{rendered}]"
