"""Interactive folder prompt for the `browse` command."""

from __future__ import annotations

from dataclasses import dataclass

import questionary

from blobnav.cli.common.output import format_size, node_icon, out
from blobnav.core.models import FolderView, Node

_MAX_NAME_WIDTH = 64


@dataclass(frozen=True)
class BrowseAction:
    """What the user picked: open a node, go up, jump, refresh or quit."""

    kind: str
    node: Node | None = None
    path: str = ""


def _truncate(text: str, max_len: int) -> str:
    """Return text capped at max_len characters using an ASCII ellipsis."""
    if max_len <= 3 or len(text) <= max_len:
        return text[:max_len]
    return f"{text[: max_len - 3]}..."


def _node_title(node: Node, *, name_width: int) -> str:
    """Format a node as `<icon> <name>  <size>`, folders with a trailing slash."""
    name = _truncate(node.name, _MAX_NAME_WIDTH)
    if node.is_folder:
        return f"{node_icon(node)} {name}/"
    return f"{node_icon(node)} {name.ljust(name_width)}  {format_size(node.size_bytes)}"


def browse_choices(view: FolderView) -> list[questionary.Choice | questionary.Separator]:
    """Build the prompt choices for one folder view."""
    shown = [_truncate(n.name, _MAX_NAME_WIDTH) for n in view.files]
    name_width = max((len(name) for name in shown), default=0)

    choices: list[questionary.Choice | questionary.Separator] = []
    if view.path:
        choices.append(questionary.Choice(title="⤴ ..", value=BrowseAction("up")))
    for node in view.nodes:
        choices.append(
            questionary.Choice(
                title=_node_title(node, name_width=name_width),
                value=BrowseAction("open", node=node),
            )
        )
    if view.is_empty:
        choices.append(questionary.Separator("  (no files found)"))

    ancestors = list(view.trail[:-1])
    if ancestors:
        choices.append(questionary.Separator())
        for crumb in ancestors:
            choices.append(
                questionary.Choice(
                    title=f"↩ {crumb.label}",
                    value=BrowseAction("jump", path=crumb.path),
                )
            )

    choices.append(questionary.Separator())
    choices.append(questionary.Choice(title="↻ Refresh", value=BrowseAction("refresh")))
    choices.append(questionary.Choice(title="✗ Quit", value=BrowseAction("quit")))
    return choices


def choose_action(view: FolderView) -> BrowseAction | None:
    """Ask the user what to do next in the given folder."""
    location = "/".join(c.label for c in view.trail)
    return out.select_one(f"{location}:", browse_choices(view))
