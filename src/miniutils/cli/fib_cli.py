"""
``fib``: print the N-th Fibonacci number.
"""

import logging
import sys
from typing import Optional

import typer

from miniutils.cli import LiteralArgsCommand, configure_logging
from miniutils.core.errors import MiniutilsError
from miniutils.tools.fib import fibonacci, parse_index

logger = logging.getLogger(__name__)

# Let "-5" reach the validator instead of failing as an unknown option.
CONTEXT_SETTINGS = {"ignore_unknown_options": True}

app = typer.Typer(add_completion=False)


@app.command(cls=LiteralArgsCommand, context_settings=CONTEXT_SETTINGS)
def fib(index: Optional[str] = typer.Argument(None, metavar="N", help="1-based index into 1, 1, 2, 3, 5, ...")):
    """
    Print the Fibonacci number at index N, which may be arbitrarily large.
    """
    try:
        value = fibonacci(parse_index(index))
    except MiniutilsError as e:
        logger.debug("fib rejected %r: %s", index, e)
        typer.echo(f"fib: {e.message}", err=True)
        raise typer.Exit(code=e.exit_code)

    typer.echo(str(value))


def allow_long_int_output():
    """Lift the int -> str digit limit (3.11+) so large results can be printed."""
    if hasattr(sys, "set_int_max_str_digits"):
        sys.set_int_max_str_digits(0)


def main():
    configure_logging()
    allow_long_int_output()
    app()

if __name__ == "__main__":
    main()
