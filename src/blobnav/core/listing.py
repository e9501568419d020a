"""Projection of a flat blob listing onto a single folder level.

Blob containers only store keys; folders are inferred from the `/`
separators in those keys. `project` turns the listing for a path into the
immediate children of that path: synthetic folders first, in the order they
were first seen, then files in listing order.
"""

from __future__ import annotations

from typing import Iterable

from blobnav.core.address import normalize_path
from blobnav.core.models import ListingEntry, Node


def listing_prefix(current_path: str | None) -> str:
    """Return the key prefix for a browse path ("" for root, else `path/`)."""
    path = normalize_path(current_path)
    return f"{path}/" if path else ""


def _join(parent: str, name: str) -> str:
    return f"{parent}/{name}" if parent else name


def project(entries: Iterable[ListingEntry], current_path: str | None) -> list[Node]:
    """
    Compute the direct children of `current_path` from a flat listing.

    Entries outside the prefix are ignored, as is the placeholder entry for
    the path itself. A key with more than one remaining segment contributes
    a folder named after its first segment; many keys collapse into one
    folder. A file whose name equals a folder name at the same level is
    dropped, the folder wins.

    Returns:
        Folder nodes followed by file nodes. An empty list means the path
        holds nothing, which is not an error.
    """
    parent = normalize_path(current_path)
    prefix = listing_prefix(parent)

    folders: dict[str, Node] = {}
    files: list[Node] = []

    for entry in entries:
        if not entry.key.startswith(prefix):
            continue
        relative = entry.key[len(prefix) :]
        if not relative:
            continue

        head, sep, _ = relative.partition("/")
        if not sep:
            files.append(
                Node(
                    name=head,
                    full_path=entry.key,
                    is_folder=False,
                    size_bytes=entry.size_bytes,
                    last_modified=entry.last_modified,
                )
            )
        elif head and head not in folders:
            folders[head] = Node(
                name=head, full_path=_join(parent, head), is_folder=True
            )

    return list(folders.values()) + [f for f in files if f.name not in folders]
