"""
Top-level CLI that exposes every utility as a subcommand.
"""

import typer
from rich.console import Console
from rich.table import Table

from miniutils import __version__
from miniutils.cli import LiteralArgsCommand, args_cli, configure_logging, fib_cli, mtime_cli, unlink_cli, url_cli
from miniutils.schemas.results import ToolInfo

console = Console()

TOOLS = [
    ToolInfo(name="args", usage="args [ARG...]", summary="Echo the argument count and each argument"),
    ToolInfo(name="fib", usage="fib N", summary="Print the N-th Fibonacci number"),
    ToolInfo(name="getmtime", usage="getmtime FORMAT FILE...", summary="Print file mtimes using a strftime format"),
    ToolInfo(name="myunlink", usage="myunlink FILE...", summary="Unlink files, continuing past failures"),
    ToolInfo(name="url_encode", usage="url_encode URL", summary="Percent-encode a URL, keeping its scheme"),
    ToolInfo(name="url_decode", usage="url_decode URL", summary="Decode percent-escapes"),
]

main_app = typer.Typer(help="miniutils CLI", add_completion=False)

# Same commands as the standalone scripts:
main_app.command("args", cls=LiteralArgsCommand, context_settings=args_cli.CONTEXT_SETTINGS)(args_cli.echo_args)
main_app.command("fib", cls=LiteralArgsCommand, context_settings=fib_cli.CONTEXT_SETTINGS)(fib_cli.fib)
main_app.command("getmtime", cls=LiteralArgsCommand, context_settings=mtime_cli.CONTEXT_SETTINGS)(mtime_cli.getmtime)
main_app.command("myunlink", cls=LiteralArgsCommand, context_settings=unlink_cli.CONTEXT_SETTINGS)(unlink_cli.myunlink)
main_app.command("url-encode", cls=LiteralArgsCommand, context_settings=url_cli.CONTEXT_SETTINGS)(url_cli.url_encode)
main_app.command("url-decode", cls=LiteralArgsCommand, context_settings=url_cli.CONTEXT_SETTINGS)(url_cli.url_decode)


@main_app.command()
def tools():
    """
    List the available utilities.
    """
    table = Table(title=f"miniutils {__version__}")
    table.add_column("Command", style="cyan", no_wrap=True)
    table.add_column("Usage", style="green")
    table.add_column("Summary")

    for tool in TOOLS:
        table.add_row(tool.name, tool.usage, tool.summary)

    console.print(table)


def main():
    configure_logging()
    fib_cli.allow_long_int_output()
    main_app()

if __name__ == "__main__":
    main()
