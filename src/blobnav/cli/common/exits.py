"""Exit handling utilities for the CLI."""

from typing import NoReturn

import typer

from blobnav.cli.common.output import out


def exit_from_exc(exc: Exception, *, message: str, code: int = 1) -> NoReturn:
    """
    Print an error message and exit with a given code, chaining the cause.
    """
    out.error(message)
    raise typer.Exit(code) from exc
