"""Breadcrumb trail for a browse path."""

from __future__ import annotations

from blobnav.core.models import Breadcrumb


def build_trail(container_label: str, current_path: str | None) -> list[Breadcrumb]:
    """Return the container root followed by one crumb per path segment."""
    trail = [Breadcrumb(label=container_label, path="")]
    running = ""
    for segment in (p for p in (current_path or "").split("/") if p):
        running = f"{running}/{segment}" if running else segment
        trail.append(Breadcrumb(label=segment, path=running))
    return trail
