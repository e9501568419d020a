"""Output formatting utilities for the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, Mapping

import questionary
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

from blobnav.cli.common.tui_style import QUESTIONARY_STYLE_BROWSE
from blobnav.core.models import Breadcrumb, Node

_THEME = Theme(
    {
        "ok": "bold green",
        "warn": "yellow",
        "err": "bold red",
        "title": "bold cyan",
        "meta": "dim",
        "folder": "bold blue",
    }
)

console = Console(theme=_THEME)

_SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")

FOLDER_ICON = "📁"
DEFAULT_FILE_ICON = "📄"
_ICONS_BY_EXTENSION = {
    "txt": "📄",
    "pdf": "📕",
    "doc": "📘",
    "docx": "📘",
    "xls": "📗",
    "xlsx": "📗",
    "png": "🖼️",
    "jpg": "🖼️",
    "jpeg": "🖼️",
    "gif": "🖼️",
    "mp4": "🎬",
    "avi": "🎬",
    "mov": "🎬",
    "mp3": "🎵",
    "wav": "🎵",
    "zip": "📦",
    "rar": "📦",
    "json": "📋",
    "xml": "📋",
    "csv": "📊",
}


def format_size(size_bytes: int | None) -> str:
    """Return a short human size label (`0 B`, `1.5 KB`, `3 MB`)."""
    if size_bytes is None:
        return ""
    size = float(size_bytes)
    unit = 0
    while size >= 1024 and unit < len(_SIZE_UNITS) - 1:
        size /= 1024
        unit += 1
    label = f"{size:.1f}".removesuffix(".0")
    return f"{label} {_SIZE_UNITS[unit]}"


def format_date(value: datetime | None) -> str:
    """Return `YYYY-MM-DD` or an empty string."""
    return value.strftime("%Y-%m-%d") if value else ""


def node_icon(node: Node) -> str:
    """Pick an icon for a node based on its kind and file extension."""
    if node.is_folder:
        return FOLDER_ICON
    _, dot, ext = node.name.rpartition(".")
    if not dot:
        return DEFAULT_FILE_ICON
    return _ICONS_BY_EXTENSION.get(ext.lower(), DEFAULT_FILE_ICON)


@dataclass(frozen=True)
class Out:
    """Output formatter for CLI messages and tables."""

    def _q_try(self, fn, *args, **kwargs):
        """Call questionary prompts and drop unsupported kwargs on older versions."""
        try:
            return fn(*args, **kwargs)
        except TypeError:
            for k in ("pointer", "use_search_filter", "use_jk_keys"):
                kwargs.pop(k, None)
            return fn(*args, **kwargs)

    def _q(self, message: str) -> str:
        """Prefix Questionary prompts to be consistent."""
        return f"[blobnav] {message}"

    def info(self, msg: str) -> None:
        """Print an info message."""
        console.print(f"[title]›[/] {msg}")

    def error(self, msg: str) -> None:
        """Print an error message."""
        console.print(f"[err]✗[/] {escape(msg)}")

    def header(self, title: str) -> None:
        """Print a header message."""
        console.print(f"[title]{title}[/]")

    def kv(self, items: Mapping[str, Any]) -> None:
        """Print key-value pairs."""
        for k, v in items.items():
            console.print(f"[meta]{k}[/]: {escape(str(v))}")

    def select_one(self, message: str, choices: list[Any]) -> Any | None:
        """
        Prompt the user to select a single item from a list.

        Choices may be plain strings or `questionary.Choice` objects.

        Returns:
            The selected value, or None if cancelled.
        """
        if not choices:
            return None

        prompt = self._q_try(
            questionary.select,
            self._q(message),
            choices=choices,
            style=QUESTIONARY_STYLE_BROWSE,
            qmark="✦",
            instruction="Use ↑/↓ then Enter",
            pointer="❯",
            use_search_filter=True,
            use_jk_keys=False,
        )
        return prompt.ask()

    def trail(self, crumbs: Iterable[Breadcrumb]) -> None:
        """Print the breadcrumb trail as `container › a › b`."""
        labels = [f"[title]{escape(c.label)}[/]" for c in crumbs]
        console.print(" [meta]›[/] ".join(labels))

    def nodes_table(self, nodes: Iterable[Node], title: str | None = None) -> None:
        """
        Render the children of a folder.

        Folders come with an icon and a trailing slash and carry no size
        or date columns.
        """
        t = Table(title=title, show_lines=False)
        t.add_column("", no_wrap=True)
        t.add_column("Name")
        t.add_column("Size", style="meta", justify="right")
        t.add_column("Modified", style="meta")

        for n in nodes:
            if n.is_folder:
                t.add_row(node_icon(n), f"[folder]{escape(n.name)}/[/]", "", "")
            else:
                t.add_row(
                    node_icon(n),
                    escape(n.name),
                    format_size(n.size_bytes),
                    format_date(n.last_modified),
                )

        console.print(t)

    def empty_folder(self) -> None:
        """Print the notice shown for a folder without children."""
        console.print("[title]No files found[/]")
        console.print(
            "[meta]This container appears to be empty or the path doesn't exist.[/]"
        )


out = Out()
