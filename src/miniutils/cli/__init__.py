"""
Typer front ends for the utilities, plus shared CLI setup.
"""

import logging

from typer.core import TyperCommand

from miniutils.core.config import settings

# Stands in for "--" while Click parses; argv can never contain a NUL byte.
_DOUBLE_DASH = "\0--"


def configure_logging(level=None):
    """
    Configure root logging once per process. Logs go to stderr so they never
    mix with a utility's output.
    """
    logging.basicConfig(
        level=level if level is not None else settings.numeric_log_level(),
        format=settings.log_format
    )


def _restore_double_dash(value):
    if value == _DOUBLE_DASH:
        return "--"
    if isinstance(value, (list, tuple)):
        return type(value)(_restore_double_dash(item) for item in value)
    return value


class LiteralArgsCommand(TyperCommand):
    """
    Command that takes its arguments literally: ``--`` is passed through as
    an ordinary argument instead of ending option parsing.
    """

    def parse_args(self, ctx, args):
        args = [_DOUBLE_DASH if arg == "--" else arg for arg in args]
        rest = super().parse_args(ctx, args)
        for name, value in ctx.params.items():
            ctx.params[name] = _restore_double_dash(value)
        ctx.args = [_restore_double_dash(arg) for arg in rest]
        return ctx.args
