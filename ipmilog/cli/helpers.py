from typing import override

import click

from ..constants import Severity


class SeverityParam(click.ParamType):
    """Accept a syslog severity as a number or a name such as ``err``."""

    name = "severity"

    @override
    def convert(
        self, value: object, param: click.Parameter | None, ctx: click.Context | None
    ) -> int:
        if isinstance(value, int):
            return value
        text = str(value).strip()
        try:
            return int(text)
        except ValueError:
            pass
        member = Severity.__members__.get(text.upper())
        if member is None:
            self.fail(f"{value!r} is not a severity number or name", param, ctx)
        return int(member)


SEVERITY = SeverityParam()
