"""Console renderer for navigation results."""

from __future__ import annotations

from rich.status import Status

from blobnav.cli.common.output import console, out
from blobnav.core.models import FolderView


class ConsoleRenderer:
    """Renders folders, errors and a loading spinner on the shared console."""

    def __init__(self, loading_message: str = "Loading container...") -> None:
        self.loading_message = loading_message
        self._status: Status | None = None

    def show_loading(self, loading: bool) -> None:
        if loading and self._status is None:
            self._status = console.status(self.loading_message, spinner="dots")
            self._status.start()
        elif not loading and self._status is not None:
            self._status.stop()
            self._status = None

    def show_error(self, message: str | None) -> None:
        if message:
            out.error(message)

    def show_folder(self, view: FolderView) -> None:
        out.trail(view.trail)
        if view.is_empty:
            out.empty_folder()
            return
        out.nodes_table(view.nodes)
