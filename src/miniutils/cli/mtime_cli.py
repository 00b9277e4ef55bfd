"""
``getmtime``: print file modification times with a strftime format.
"""

import logging
from typing import List, Optional

import typer

from miniutils.cli import LiteralArgsCommand, configure_logging
from miniutils.core.settings import EXIT_FAILURE, GETMTIME_USAGE
from miniutils.tools.mtime import iter_mtimes

logger = logging.getLogger(__name__)

# Formats and file names may start with "-".
CONTEXT_SETTINGS = {"ignore_unknown_options": True}

app = typer.Typer(add_completion=False)


@app.command(cls=LiteralArgsCommand, context_settings=CONTEXT_SETTINGS)
def getmtime(
    fmt: Optional[str] = typer.Argument(None, metavar="FORMAT", help="strftime(3) format; %N is the filename"),
    files: Optional[List[str]] = typer.Argument(None, metavar="FILE...", help="Files to report on")
):
    """
    Print the mtime of each FILE according to FORMAT, one line per file.

    Stops at the first file that cannot be read; lines already printed stay.
    """
    if fmt is None or not files:
        typer.echo(GETMTIME_USAGE, err=True)
        raise typer.Exit(code=EXIT_FAILURE)

    try:
        for path, formatted in iter_mtimes(fmt, files):
            logger.debug("%s -> %s", path, formatted)
            typer.echo(formatted)
    except OSError as e:
        logger.debug("stat failed: %r", e)
        typer.echo(f"getmtime: {e.filename}: {e.strerror}", err=True)
        raise typer.Exit(code=EXIT_FAILURE)
    except ValueError as e:
        typer.echo(f"getmtime: cannot format mtime: {e}", err=True)
        raise typer.Exit(code=EXIT_FAILURE)


def main():
    configure_logging()
    app()

if __name__ == "__main__":
    main()
