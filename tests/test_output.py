from datetime import datetime

import pytest

from blobnav.cli.common.output import (
    DEFAULT_FILE_ICON,
    FOLDER_ICON,
    format_date,
    format_size,
    node_icon,
)
from blobnav.core.models import Node


@pytest.mark.parametrize(
    ("size", "label"),
    [
        (None, ""),
        (0, "0 B"),
        (512, "512 B"),
        (1024, "1 KB"),
        (1536, "1.5 KB"),
        (5 * 1024 * 1024, "5 MB"),
        (3 * 1024**3 + 1024**3 // 10, "3.1 GB"),
    ],
)
def test_format_size(size, label):
    assert format_size(size) == label


def test_format_date():
    assert format_date(None) == ""
    assert format_date(datetime(2024, 2, 29, 23, 59)) == "2024-02-29"


def test_node_icon_by_kind_and_extension():
    folder = Node(name="photos", full_path="photos", is_folder=True)
    image = Node(name="CAT.JPG", full_path="CAT.JPG", is_folder=False, size_bytes=1)
    unknown = Node(name="data.bin", full_path="data.bin", is_folder=False, size_bytes=1)
    bare = Node(name="Makefile", full_path="Makefile", is_folder=False, size_bytes=1)

    assert node_icon(folder) == FOLDER_ICON
    assert node_icon(image) == "🖼️"
    assert node_icon(unknown) == DEFAULT_FILE_ICON
    assert node_icon(bare) == DEFAULT_FILE_ICON
