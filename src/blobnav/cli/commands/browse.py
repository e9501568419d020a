"""Commands that resolve, list and interactively browse a container."""

from __future__ import annotations

import logging
from typing import Callable

import typer

from blobnav.cli.common.context import build_browse_context
from blobnav.cli.common.exits import exit_from_exc
from blobnav.cli.common.options import PathOpt, SinglePageOpt, TimeoutOpt, UrlArg
from blobnav.cli.common.output import out
from blobnav.cli.render import ConsoleRenderer
from blobnav.cli.tui import BrowseAction, choose_action
from blobnav.core.address import file_url, resolve as resolve_url
from blobnav.core.errors import ResolutionError
from blobnav.core.navigation import Navigator

logger = logging.getLogger(__name__)


def run_browser(
    navigator: Navigator,
    *,
    choose: Callable[..., BrowseAction | None] = choose_action,
    launch: Callable[[str], object] = typer.launch,
) -> None:
    """
    Drive a navigator from user choices until the user quits.

    A failed initial load ends the session with exit code 1. Later failures
    keep the previous folder on screen and prompt again.
    """
    if navigator.load() is None:
        raise typer.Exit(1)

    while True:
        action = choose(navigator.view)
        if action is None or action.kind == "quit":
            return

        if action.kind == "open" and action.node is not None:
            if action.node.is_folder:
                navigator.descend_into(action.node.full_path)
                continue
            url = file_url(navigator.address, action.node)
            out.info(url)
            launch(url)
        elif action.kind == "up":
            navigator.go_up()
        elif action.kind == "jump":
            navigator.jump_to(action.path)
        elif action.kind == "refresh":
            navigator.refresh()
        else:
            logger.debug("ignoring unknown action %r", action)


def resolve(url: str = UrlArg):
    """Show how a container URL is interpreted, without contacting it."""
    try:
        resolved = resolve_url(url)
    except ResolutionError as exc:
        exit_from_exc(exc, message=exc.message, code=2)

    address = resolved.address
    out.header("Container")
    out.kv(
        {
            "Account": address.account_name,
            "Container": address.container_name,
            "Base URL": address.base_url,
            "Initial path": resolved.initial_path or "/",
        }
    )


def ls(
    url: str = UrlArg,
    path: str | None = PathOpt,
    timeout: int = TimeoutOpt,
    single_page: bool = SinglePageOpt,
):
    """List the files and folders directly under one path of a container."""
    appctx = build_browse_context(url, timeout=timeout, single_page=single_page)
    navigator = Navigator(
        appctx.address,
        appctx.adapter,
        ConsoleRenderer(),
        initial_path=path if path is not None else appctx.initial_path,
    )
    if navigator.load() is None:
        raise typer.Exit(1)


def browse(
    url: str = UrlArg,
    timeout: int = TimeoutOpt,
    single_page: bool = SinglePageOpt,
):
    """Browse a public container interactively, folder by folder."""
    appctx = build_browse_context(url, timeout=timeout, single_page=single_page)
    navigator = Navigator(
        appctx.address,
        appctx.adapter,
        ConsoleRenderer(),
        initial_path=appctx.initial_path,
    )
    run_browser(navigator)
