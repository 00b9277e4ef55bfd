"""
``myunlink``: remove files, reporting each failure and carrying on.
"""

import logging
from typing import List, Optional

import typer

from miniutils.cli import LiteralArgsCommand, configure_logging
from miniutils.core.settings import EXIT_FAILURE, EXIT_NO_ARGS, NO_FILENAMES_MESSAGE
from miniutils.tools.unlink import unlink_files

logger = logging.getLogger(__name__)

# File names may start with "-".
CONTEXT_SETTINGS = {"ignore_unknown_options": True}

app = typer.Typer(add_completion=False)


@app.command(cls=LiteralArgsCommand, context_settings=CONTEXT_SETTINGS)
def myunlink(files: Optional[List[str]] = typer.Argument(None, metavar="FILE...")):
    """
    Unlink every FILE. Exit 1 if any could not be removed, 2 if none were given.
    """
    if not files:
        typer.echo(NO_FILENAMES_MESSAGE, err=True)
        raise typer.Exit(code=EXIT_NO_ARGS)

    report = unlink_files(files)
    for failure in report.failures:
        typer.echo(f"{failure.path}: {failure.error}", err=True)

    logger.info("Removed %d of %d files", len(report.removed), len(files))
    if not report.ok:
        raise typer.Exit(code=EXIT_FAILURE)


def main():
    configure_logging()
    app()

if __name__ == "__main__":
    main()
