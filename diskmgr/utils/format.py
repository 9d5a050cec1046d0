"""
Formatting utilities.

This module provides consistent terminal output formatting, including the
device table printed by the `ls` command.
"""
from typing import List, Sequence

from diskmgr.utils.types import AliasEntry, DeviceNode, alias_for_uuid


# ANSI Terminal Colors
class TermColors:
    """ANSI color codes for terminal output"""
    INFO = '\033[94m'     # Blue for informational messages
    SUCCESS = '\033[92m'  # Green for success messages
    WARNING = '\033[93m'  # Yellow for warnings
    ERROR = '\033[91m'    # Red for errors
    SIM = '\033[96m'      # Cyan for simulation messages
    HEADER = '\033[95m'   # Purple for headers
    BOLD = '\033[1m'      # Bold text
    ENDC = '\033[0m'      # End color


TABLE_COLUMNS = ["NAME", "LABEL", "MOUNTPOINT", "ALIAS"]
COLUMN_PADDING = 2


def colorize(message: str, color: str, enabled: bool = True) -> str:
    """
    Add color to a message if color output is enabled.

    Args:
        message: The message to colorize
        color: The color to use (from TermColors)
        enabled: Whether colorization is enabled

    Returns:
        Colorized message or original message if colors disabled
    """
    if not enabled:
        return message
    return f"{color}{message}{TermColors.ENDC}"


def _alias_name(alias_list: Sequence[AliasEntry], device: DeviceNode) -> str:
    entry = alias_for_uuid(alias_list, device.uuid)
    return entry.alias if entry else ""


def _device_rows(devices: Sequence[DeviceNode], alias_list: Sequence[AliasEntry]) -> List[List[str]]:
    """
    Flatten the device tree into table rows.

    Top-level disks get no prefix; children are drawn with tree glyphs and
    nested levels are indented under their parent.
    """
    rows = []
    for device in devices:
        rows.append([
            device.name,
            device.label or "",
            device.mountpoint or "",
            _alias_name(alias_list, device),
        ])
        rows.extend(_child_rows(device.children, alias_list, ""))
    return rows


def _child_rows(children: Sequence[DeviceNode], alias_list: Sequence[AliasEntry], indent: str) -> List[List[str]]:
    rows = []
    for i, child in enumerate(children):
        last = i == len(children) - 1
        branch = "└─" if last else "├─"
        rows.append([
            f"{indent}{branch}{child.name}",
            child.label or "",
            child.mountpoint or "",
            _alias_name(alias_list, child),
        ])
        nested_indent = indent + ("  " if last else "│ ")
        rows.extend(_child_rows(child.children, alias_list, nested_indent))
    return rows


def format_table(columns: Sequence[str], rows: Sequence[Sequence[str]], colored: bool = False) -> str:
    """
    Lay out rows in left-aligned columns.

    Each column is as wide as its longest cell plus padding.

    Args:
        columns: Header cells
        rows: Table rows, each with one cell per column
        colored: Whether to highlight the header

    Returns:
        The table as a single string, one line per row
    """
    widths = [len(c) for c in columns]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))
    widths = [w + COLUMN_PADDING for w in widths]

    def fill_line(cells: Sequence[str]) -> str:
        return "".join(cell.ljust(width) for cell, width in zip(cells, widths)).rstrip()

    lines = [colorize(fill_line(columns), TermColors.HEADER + TermColors.BOLD, colored)]
    lines.extend(fill_line(row) for row in rows)
    return "\n".join(lines)


def render_device_table(devices: Sequence[DeviceNode], alias_list: Sequence[AliasEntry], colored: bool = False) -> str:
    """
    Render the device tree with alias annotations.

    When several aliases point at the same UUID the first one in file order
    is shown.

    Args:
        devices: Top-level devices as returned by the inventory
        alias_list: Aliases from the configuration
        colored: Whether to highlight the header

    Returns:
        The rendered table
    """
    return format_table(TABLE_COLUMNS, _device_rows(devices, alias_list), colored)
