"""
Validation utilities.

This module provides functions for validating prerequisites.
"""
import logging
import shutil
from typing import Iterable

from diskmgr.core.exceptions import PrerequisiteError
from diskmgr.utils.command import CommandRunner

logger = logging.getLogger('disk-mgr')

COMMAND_TOOLS = {
    "ls": ["lsblk"],
    "mount": ["lsblk", "mount"],
    "umount": ["lsblk", "umount"],
    "add": ["lsblk"],
    "remove": [],
}


def check_prerequisites(tools: Iterable[str], cmd_runner: CommandRunner) -> None:
    """
    Check that the system tools a command needs are installed.

    lsblk is always needed since devices are listed for real, but mount and
    umount are only logged in simulation mode.

    Args:
        tools: Names of executables to look up on PATH
        cmd_runner: CommandRunner instance for executing commands

    Raises:
        PrerequisiteError: If required tools are missing
    """
    missing_tools = []
    for tool in tools:
        if cmd_runner.simulating and tool != "lsblk":
            logger.debug(f"Tool '{tool}' would be checked")
            continue
        if not shutil.which(tool):
            missing_tools.append(tool)

    if missing_tools:
        raise PrerequisiteError(missing_tools)
