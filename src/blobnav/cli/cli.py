"""CLI application for browsing public Azure Blob Storage containers."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from blobnav.cli.commands.browse import browse, ls, resolve

app = typer.Typer(
    help="blobnav - browse a blob container as folders and files",
    no_args_is_help=True,
)


def _configure_logging(verbose: bool) -> None:
    """Route diagnostic logging to stderr through Rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    # The SDK logs every HTTP request and header at DEBUG.
    logging.getLogger("azure").setLevel(logging.INFO if verbose else logging.WARNING)


@app.callback()
def _init(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show debug logging on stderr"
    ),
):
    """Configure logging for all commands."""
    _configure_logging(verbose)


app.command("resolve")(resolve)
app.command("ls")(ls)
app.command("browse")(browse)


if __name__ == "__main__":
    app()
