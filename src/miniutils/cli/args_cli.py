"""
``args``: echo the argument vector back.
"""

from typing import List, Optional

import typer

from miniutils.cli import LiteralArgsCommand, configure_logging
from miniutils.tools.args import format_args

# Every token is an argument to echo, including "--" and ones that look like options.
CONTEXT_SETTINGS = {"ignore_unknown_options": True, "help_option_names": []}

app = typer.Typer(add_completion=False)


@app.command(cls=LiteralArgsCommand, context_settings=CONTEXT_SETTINGS)
def echo_args(values: Optional[List[str]] = typer.Argument(None)):
    """
    Print the number of arguments and each argument in angle brackets.
    """
    typer.echo(format_args(values or []))


def main():
    configure_logging()
    app()

if __name__ == "__main__":
    main()
