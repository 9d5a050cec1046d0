"""
Filesystem mounting module.

This module mounts and unmounts a single resolved device.
"""
import logging
from typing import List, Optional, Sequence

from diskmgr.core.exceptions import (
    AlreadyMountedError, CommandFailedError, InvalidArgumentsError, NotMountedError
)
from diskmgr.utils.command import CommandRunner
from diskmgr.utils.format import TermColors, colorize
from diskmgr.utils.types import DeviceNode

logger = logging.getLogger('disk-mgr')

FORCE_UNMOUNT_FLAG = "-f"


def _run_device_command(cmd: List[str], cmd_runner: CommandRunner) -> None:
    """
    Run mount or umount and fail on any error output.

    Raises:
        CommandFailedError: If the command exits non-zero or writes to stderr
    """
    result = cmd_runner.run(cmd)
    if result.returncode != 0 or result.stderr:
        raise CommandFailedError(cmd, result.stderr or "", result.returncode)


def mount_device(device: DeviceNode, mountpoint: str, extra_args: Optional[Sequence[str]], cmd_runner: CommandRunner) -> None:
    """
    Mount a device at the given mountpoint.

    The mount state is checked against the device snapshot; the command can
    still fail if something else mounted the device in the meantime.

    Args:
        device: Device to mount
        mountpoint: Target directory
        extra_args: Additional mount flags, passed verbatim
        cmd_runner: CommandRunner instance for executing commands

    Raises:
        InvalidArgumentsError: If mountpoint is empty
        AlreadyMountedError: If the device is already mounted
        CommandFailedError: If the mount command fails
    """
    if not mountpoint:
        raise InvalidArgumentsError("A mountpoint is required")
    if device.is_mounted:
        raise AlreadyMountedError(device.name, device.mountpoint)

    cmd = ["mount", *(extra_args or []), device.path, mountpoint]
    _run_device_command(cmd, cmd_runner)

    logger.info(colorize(f"Mounted {device.path} to {mountpoint}",
                         TermColors.SUCCESS, cmd_runner.colored_output))


def unmount_device(device: DeviceNode, extra_args: Optional[Sequence[str]], cmd_runner: CommandRunner) -> None:
    """
    Unmount a device.

    Args:
        device: Device to unmount
        extra_args: Additional umount flags (e.g. -f), passed verbatim
        cmd_runner: CommandRunner instance for executing commands

    Raises:
        NotMountedError: If the device is not mounted
        CommandFailedError: If the umount command fails
    """
    if not device.is_mounted:
        raise NotMountedError(device.name)

    cmd = ["umount", *(extra_args or []), device.path]
    _run_device_command(cmd, cmd_runner)

    logger.info(colorize(f"Unmounted {device.path} from {device.mountpoint}",
                         TermColors.SUCCESS, cmd_runner.colored_output))
