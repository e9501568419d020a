"""Navigation state and the fetch-project-render cycle.

A `Navigator` owns the current browse path of one container and the nodes
last shown for it. Every navigation (initial load, folder descent,
breadcrumb jump, refresh) runs one cycle: fetch the listing for the new
path through a `ListingSource`, project it, build the trail and hand both
to a `Renderer`.

Navigations are not cancelled. If a navigation is started while another is
still outstanding (for example from inside a renderer or fetch callback),
both complete and the one that finishes last overwrites the displayed
state. With `discard_stale=True` completions of superseded requests are
dropped instead.
"""

from __future__ import annotations

import itertools
import logging
from typing import Protocol

from blobnav.core.address import normalize_path
from blobnav.core.breadcrumbs import build_trail
from blobnav.core.errors import ListingError
from blobnav.core.listing import listing_prefix, project
from blobnav.core.models import ContainerAddress, FolderView, ListingEntry, Node

logger = logging.getLogger(__name__)


class ListingSource(Protocol):
    """Interface for fetching the flat listing under a key prefix."""

    def list_entries(self, prefix: str) -> list[ListingEntry]:
        """Return all entries whose key starts with `prefix`."""
        ...


class Renderer(Protocol):
    """Interface for displaying navigation results."""

    def show_loading(self, loading: bool) -> None:
        """Show or hide the loading indicator."""
        ...

    def show_error(self, message: str | None) -> None:
        """Show an error banner, or hide it when `message` is empty."""
        ...

    def show_folder(self, view: FolderView) -> None:
        """Display the children and breadcrumb trail of a folder."""
        ...


class Navigator:
    """Single-owner browse state for one container."""

    def __init__(
        self,
        address: ContainerAddress,
        source: ListingSource,
        renderer: Renderer,
        *,
        initial_path: str = "",
        discard_stale: bool = False,
    ) -> None:
        self.address = address
        self.source = source
        self.renderer = renderer
        self.discard_stale = discard_stale
        self.current_path = normalize_path(initial_path)
        self.nodes: list[Node] = []
        self.view: FolderView | None = None
        self.last_error: ListingError | None = None
        self._seq = itertools.count(1)
        self._latest = 0

    def load(self) -> FolderView | None:
        """Load the current path (initial connect)."""
        return self._navigate(self.current_path)

    def descend_into(self, folder_full_path: str) -> FolderView | None:
        """Navigate into a folder node by its full path."""
        return self._navigate(folder_full_path)

    def jump_to(self, path: str) -> FolderView | None:
        """Navigate to any path, typically a breadcrumb."""
        return self._navigate(path)

    def refresh(self) -> FolderView | None:
        """Re-fetch the current path."""
        return self._navigate(self.current_path)

    def go_up(self) -> FolderView | None:
        """Navigate to the parent of the current path (root stays root)."""
        parent, _, _ = self.current_path.rpartition("/")
        return self._navigate(parent)

    def _is_stale(self, seq: int) -> bool:
        return self.discard_stale and seq != self._latest

    def _navigate(self, path: str) -> FolderView | None:
        path = normalize_path(path)
        seq = next(self._seq)
        self._latest = seq
        previous = self.current_path
        self.current_path = path

        self.renderer.show_error(None)
        self.renderer.show_loading(True)
        logger.debug("navigate #%d to '%s'", seq, path)

        # Superseded requests leave the spinner to the newer one.
        clear_loading = True
        try:
            try:
                entries = self.source.list_entries(listing_prefix(path))
            except ListingError as exc:
                if self._is_stale(seq):
                    logger.debug("discarding failure of stale request #%d", seq)
                    clear_loading = False
                    return None
                if self.current_path == path:
                    self.current_path = previous
                self.last_error = exc
                clear_loading = False
                self.renderer.show_loading(False)
                self.renderer.show_error(f"Error loading container: {exc.message}")
                return None

            if self._is_stale(seq):
                logger.debug("discarding stale request #%d for '%s'", seq, path)
                clear_loading = False
                return None

            nodes = project(entries, path)
            view = FolderView(
                path=path,
                nodes=tuple(nodes),
                trail=tuple(build_trail(self.address.container_name, path)),
            )
            logger.debug(
                "request #%d: %d entries -> %d nodes", seq, len(entries), len(nodes)
            )

            self.current_path = path
            self.nodes = nodes
            self.view = view
            self.last_error = None
            self.renderer.show_folder(view)
            return view
        finally:
            if clear_loading:
                self.renderer.show_loading(False)
