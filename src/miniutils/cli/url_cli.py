"""
``url_encode`` and ``url_decode``.
"""

from typing import Optional

import typer

from miniutils.cli import LiteralArgsCommand, configure_logging
from miniutils.core.config import settings
from miniutils.core.settings import EXIT_FAILURE, NO_URL_MESSAGE
from miniutils.tools.url import decode_url, encode_url_path

CONTEXT_SETTINGS = {"ignore_unknown_options": True}

encode_app = typer.Typer(add_completion=False)
decode_app = typer.Typer(add_completion=False)


def _require_url(url: Optional[str]) -> str:
    if url is None:
        typer.echo(NO_URL_MESSAGE, err=True)
        raise typer.Exit(code=EXIT_FAILURE)
    return url


@encode_app.command(cls=LiteralArgsCommand, context_settings=CONTEXT_SETTINGS)
def url_encode(
    url: Optional[str] = typer.Argument(None, metavar="URL"),
    preserve: Optional[str] = typer.Option(
        None,
        "--preserve",
        "-p",
        help="Extra characters to leave unencoded (default: MINIUTILS_URL_SAFE_CHARS)."
    )
):
    """
    Percent-encode the path and query of URL, keeping any scheme:// intact.
    """
    url = _require_url(url)
    safe = preserve if preserve is not None else settings.url_safe_chars
    typer.echo(encode_url_path(url, safe=safe))


@decode_app.command(cls=LiteralArgsCommand, context_settings=CONTEXT_SETTINGS)
def url_decode(url: Optional[str] = typer.Argument(None, metavar="URL")):
    """
    Decode the %XX escapes in URL.
    """
    typer.echo(decode_url(_require_url(url)))


def encode_main():
    configure_logging()
    encode_app()


def decode_main():
    configure_logging()
    decode_app()
