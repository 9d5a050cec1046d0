"""
Device inventory module.

This module lists block devices with lsblk and parses them into a tree of
DeviceNode objects.
"""
import json
import logging
from typing import Iterator, List, Sequence

from diskmgr.core.exceptions import CommandFailedError, DeviceListError
from diskmgr.utils.command import CommandRunner
from diskmgr.utils.types import DeviceNode

logger = logging.getLogger('disk-mgr')

LSBLK_COMMAND = ["lsblk", "-J", "-o", "NAME,MOUNTPOINT,LABEL,UUID"]


def list_devices(cmd_runner: CommandRunner) -> List[DeviceNode]:
    """
    Enumerate block devices as a disk/partition tree.

    The listing is read-only, so it runs for real even in simulation mode.

    Args:
        cmd_runner: CommandRunner instance for executing commands

    Returns:
        Top-level devices in the order lsblk reports them

    Raises:
        CommandFailedError: If lsblk fails or writes to its error stream
        DeviceListError: If the output is not the expected JSON document
    """
    result = cmd_runner.run_real(LSBLK_COMMAND)
    if result.returncode != 0 or result.stderr:
        raise CommandFailedError(LSBLK_COMMAND, result.stderr or "", result.returncode)

    try:
        info = json.loads(result.stdout)
    except ValueError as e:
        logger.debug(f"Invalid lsblk output: {result.stdout!r}")
        raise DeviceListError(f"read device info failed: {e}")

    if not isinstance(info, dict) or not isinstance(info.get("blockdevices"), list):
        raise DeviceListError("read device info failed: no 'blockdevices' in lsblk output")

    try:
        devices = [DeviceNode.from_lsblk(entry) for entry in info["blockdevices"]]
    except TypeError as e:
        raise DeviceListError(f"read device info failed: {e}")

    logger.debug(f"Found {len(devices)} top-level block devices")
    return devices


def walk_devices(devices: Sequence[DeviceNode]) -> Iterator[DeviceNode]:
    """Yield every device and descendant, depth-first in inventory order."""
    for device in devices:
        yield device
        yield from walk_devices(device.children)
