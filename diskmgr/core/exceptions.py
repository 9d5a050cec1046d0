"""
Base exceptions for disk-mgr.

This module defines the hierarchy of exceptions used by disk-mgr.
"""
from typing import List, Optional, Sequence


class DiskMgrError(Exception):
    """Base exception for disk-mgr errors"""
    pass


class InvalidArgumentsError(DiskMgrError):
    """Exception raised when a required argument is missing or empty"""
    pass


class NotFoundError(DiskMgrError):
    """Exception raised when no device matches a search string"""

    def __init__(self, search: str):
        self.search = search
        super().__init__(f"Could not find device '{search}'")


class AmbiguousLabelError(DiskMgrError):
    """Exception raised when several devices share the searched label"""

    def __init__(self, label: str, candidates: List[str]):
        self.label = label
        self.candidates = list(candidates)
        super().__init__(
            f"More than one device [{','.join(self.candidates)}] with label '{label}', "
            "specify one by device name"
        )


class AlreadyMountedError(DiskMgrError):
    """Exception raised when mounting a device that is already mounted"""

    def __init__(self, device: str, mountpoint: str):
        self.device = device
        self.mountpoint = mountpoint
        super().__init__(f"Device '{device}' is already mounted to '{mountpoint}'")


class NotMountedError(DiskMgrError):
    """Exception raised when unmounting a device that is not mounted"""

    def __init__(self, device: str):
        self.device = device
        super().__init__(f"Device '{device}' is not mounted")


class CommandFailedError(DiskMgrError):
    """Exception raised when an OS command reports an error"""

    def __init__(self, command: Sequence[str], message: str, returncode: Optional[int] = None):
        self.command = list(command)
        self.message = message.strip()
        self.returncode = returncode
        super().__init__(self.message or f"Command failed with exit code {returncode}: {' '.join(self.command)}")


class DeviceListError(DiskMgrError):
    """Exception raised when the device listing cannot be parsed"""
    pass


class AliasExistsError(DiskMgrError):
    """Exception raised when adding an alias name that is already taken"""

    def __init__(self, entry):
        self.entry = entry
        super().__init__(f"Alias already exists [{entry.alias} -> {entry.uuid}]")


class AliasNotFoundError(DiskMgrError):
    """Exception raised when removing an alias that does not exist"""

    def __init__(self, alias: str):
        self.alias = alias
        super().__init__(f"Could not find alias '{alias}'")


class MissingUUIDError(DiskMgrError):
    """Exception raised when an alias target has no filesystem UUID"""

    def __init__(self, device: str):
        self.device = device
        super().__init__(f"Device '{device}' has no filesystem UUID, an alias cannot be bound to it")


class PrerequisiteError(DiskMgrError):
    """Exception raised when required system tools are missing"""

    def __init__(self, tools: List[str]):
        self.tools = list(tools)
        super().__init__(
            f"Missing required tools: {', '.join(self.tools)}\n"
            "Please install the necessary packages for your distribution and try again"
        )
