from blobnav.core.breadcrumbs import build_trail
from blobnav.core.models import Breadcrumb


def test_build_trail_root_only():
    assert build_trail("mycontainer", "") == [Breadcrumb("mycontainer", "")]
    assert build_trail("mycontainer", None) == [Breadcrumb("mycontainer", "")]


def test_build_trail_accumulates_paths():
    assert build_trail("mycontainer", "docs/ch1") == [
        Breadcrumb("mycontainer", ""),
        Breadcrumb("docs", "docs"),
        Breadcrumb("ch1", "docs/ch1"),
    ]


def test_build_trail_ignores_empty_segments():
    trail = build_trail("c", "/docs//ch1/")

    assert [(b.label, b.path) for b in trail] == [
        ("c", ""),
        ("docs", "docs"),
        ("ch1", "docs/ch1"),
    ]
