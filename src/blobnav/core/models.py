"""Core data structures for browsing a blob container as a folder tree.

Nothing in this module talks to the network or the terminal. Listing
entries come from a fetch adapter, nodes and breadcrumbs are derived from
them by the projector and the breadcrumb builder.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ContainerAddress:
    """
    A resolved blob container.

    Attributes:
        account_name: Storage account (first label of the endpoint host).
        container_name: Container name (first URL path segment).
        base_url: `<scheme>://<host>/<container>`, without trailing slash.
    """

    account_name: str
    container_name: str
    base_url: str


@dataclass(frozen=True)
class ResolvedUrl:
    """A container address plus the browse path encoded in the same URL."""

    address: ContainerAddress
    initial_path: str = ""


@dataclass(frozen=True)
class ListingEntry:
    """One physical object in the container, as returned by a listing."""

    key: str
    size_bytes: int = 0
    last_modified: datetime | None = None


@dataclass(frozen=True)
class Node:
    """
    A direct child of the current path: a file or a synthetic folder.

    Folders have no size and no modification time.
    """

    name: str
    full_path: str
    is_folder: bool
    size_bytes: int | None = None
    last_modified: datetime | None = None


@dataclass(frozen=True)
class Breadcrumb:
    """One navigable step of the trail (label shown, path to jump to)."""

    label: str
    path: str


@dataclass(frozen=True)
class FolderView:
    """The rendered state of one folder: its children and its trail."""

    path: str
    nodes: tuple[Node, ...] = ()
    trail: tuple[Breadcrumb, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.nodes

    @property
    def files(self) -> list[Node]:
        return [n for n in self.nodes if not n.is_folder]
