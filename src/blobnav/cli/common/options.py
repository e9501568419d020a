"""Common CLI options for the CLI."""

import typer

from blobnav.core.client import DEFAULT_TIMEOUT_SECONDS

UrlArg = typer.Argument(
    ...,
    envvar="BLOBNAV_URL",
    help="Container URL: https://<account>.blob.core.windows.net/<container>[/<path>]",
    show_default=False,
)

PathOpt = typer.Option(
    None,
    "--path",
    help="Folder to open instead of the path given in the URL",
)

TimeoutOpt = typer.Option(
    DEFAULT_TIMEOUT_SECONDS,
    "--timeout",
    "-t",
    envvar="BLOBNAV_TIMEOUT",
    min=1,
    help="Connection/read timeout in seconds",
)

SinglePageOpt = typer.Option(
    False,
    "--single-page",
    envvar="BLOBNAV_SINGLE_PAGE",
    help="Only read the first page of the listing (large containers are truncated)",
)
