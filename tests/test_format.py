"""Tests for terminal formatting."""

from diskmgr.utils.format import TermColors, colorize, format_table, render_device_table
from diskmgr.utils.types import AliasEntry, DeviceNode


def test_colorize():
    assert colorize("x", TermColors.ERROR) == f"{TermColors.ERROR}x{TermColors.ENDC}"
    assert colorize("x", TermColors.ERROR, enabled=False) == "x"


def test_format_table_pads_columns():
    table = format_table(["A", "BB"], [["long", "x"], ["s", "yy"]])

    assert table.splitlines() == [
        "A     BB",
        "long  x",
        "s     yy",
    ]


def test_render_device_table(devices):
    aliases = [AliasEntry(alias="data", uuid="abc-123")]

    lines = render_device_table(devices, aliases).splitlines()

    assert lines[0].split() == ["NAME", "LABEL", "MOUNTPOINT", "ALIAS"]
    assert lines[1] == "sda"
    assert lines[2].split() == ["├─sda1", "DATA", "data"]
    assert lines[3].split() == ["└─sda2", "root", "/"]
    assert lines[4] == "sdb"
    assert lines[5].split() == ["└─sdb1", "BACKUP", "/mnt/backup"]
    assert len(lines) == 8


def test_render_columns_align(devices):
    lines = render_device_table(devices, []).splitlines()

    label_column = lines[0].index("LABEL")
    assert lines[2][label_column:].startswith("DATA")
    assert lines[5][label_column:].startswith("BACKUP")


def test_render_first_alias_wins():
    tree = [DeviceNode(name="sda", children=[DeviceNode(name="sda1", uuid="u1")])]
    aliases = [AliasEntry(alias="first", uuid="u1"), AliasEntry(alias="second", uuid="u1")]

    lines = render_device_table(tree, aliases).splitlines()

    assert lines[2].split() == ["└─sda1", "first"]


def test_render_nested_children():
    tree = [
        DeviceNode(name="nvme0n1", children=[
            DeviceNode(name="nvme0n1p1", children=[DeviceNode(name="cryptroot")]),
            DeviceNode(name="nvme0n1p2"),
        ])
    ]

    rows = render_device_table(tree, []).splitlines()[1:]

    assert rows == ["nvme0n1", "├─nvme0n1p1", "│ └─cryptroot", "└─nvme0n1p2"]
