from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure tests always import the local src tree, not an older installed wheel.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))


class RecordingRenderer:
    """Renderer stub that records every call in order."""

    def __init__(self):
        self.calls: list[tuple[str, object]] = []
        self.views = []
        self.errors: list[str] = []
        self.loading = False

    def show_loading(self, loading: bool) -> None:
        self.loading = loading
        self.calls.append(("loading", loading))

    def show_error(self, message: str | None) -> None:
        self.calls.append(("error", message))
        if message:
            self.errors.append(message)

    def show_folder(self, view) -> None:
        self.calls.append(("folder", view.path))
        self.views.append(view)


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()
