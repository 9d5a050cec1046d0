"""
Type definitions for disk-mgr.

This module provides the data classes shared across the codebase: block
devices as reported by lsblk, alias entries and the persisted configuration.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

logger = logging.getLogger('disk-mgr')

DEVICE_PATH_PREFIX = "/dev/"


def _optional_str(value: Any) -> Optional[str]:
    """Normalize lsblk values: null and empty strings both mean unset."""
    if value is None or value == "":
        return None
    return str(value)


@dataclass
class DeviceNode:
    """A block device or partition, with its child devices"""
    name: str
    mountpoint: Optional[str] = None
    label: Optional[str] = None
    uuid: Optional[str] = None
    children: List["DeviceNode"] = field(default_factory=list)

    @property
    def path(self) -> str:
        """Device path, e.g. /dev/sda1"""
        return f"{DEVICE_PATH_PREFIX}{self.name}"

    @property
    def is_mounted(self) -> bool:
        return bool(self.mountpoint)

    @classmethod
    def from_lsblk(cls, entry: Dict[str, Any]) -> "DeviceNode":
        """
        Build a device node (and its children) from one lsblk JSON entry.

        Args:
            entry: Dict from the "blockdevices" list of `lsblk --json`

        Returns:
            DeviceNode with children populated recursively

        Raises:
            TypeError: If the entry or its children do not have the lsblk shape
        """
        if not isinstance(entry, dict):
            raise TypeError(f"device entry is not an object: {entry!r}")

        mountpoint = entry.get("mountpoint")
        if mountpoint is None and "mountpoints" in entry:
            # util-linux >= 2.37 reports a list of mountpoints
            mountpoint = next((m for m in entry.get("mountpoints") or [] if m), None)

        raw_children = entry.get("children") or []
        if not isinstance(raw_children, list):
            raise TypeError(f"children of {entry.get('name')!r} is not a list: {raw_children!r}")
        children = [cls.from_lsblk(child) for child in raw_children]

        return cls(
            name=str(entry.get("name", "")),
            mountpoint=_optional_str(mountpoint),
            label=_optional_str(entry.get("label")),
            uuid=_optional_str(entry.get("uuid")),
            children=children,
        )


@dataclass
class AliasEntry:
    """A user-defined name bound to a filesystem UUID"""
    alias: str
    uuid: str

    def to_dict(self) -> Dict[str, str]:
        return {"uuid": self.uuid, "alias": self.alias}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AliasEntry":
        return cls(alias=data["alias"], uuid=data["uuid"])


@dataclass
class Configuration:
    """Persisted state of disk-mgr: the list of aliases in file order"""
    alias_list: List[AliasEntry] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"aliasList": [entry.to_dict() for entry in self.alias_list]}

    @classmethod
    def from_dict(cls, data: Any) -> "Configuration":
        """
        Build a configuration from its JSON form.

        Malformed alias entries are skipped with a warning instead of
        failing the whole load.
        """
        configuration = cls()
        if not isinstance(data, dict):
            logger.warning("Ignoring configuration that is not a JSON object")
            return configuration

        alias_list = data.get("aliasList") or []
        if not isinstance(alias_list, list):
            logger.warning(f"Ignoring aliasList that is not a list: {alias_list!r}")
            return configuration

        for item in alias_list:
            if (isinstance(item, dict)
                    and isinstance(item.get("alias"), str)
                    and isinstance(item.get("uuid"), str)):
                configuration.alias_list.append(AliasEntry.from_dict(item))
            else:
                logger.warning(f"Ignoring malformed alias entry: {item!r}")

        return configuration


def alias_for_uuid(alias_list: Sequence[AliasEntry], uuid: Optional[str]) -> Optional[AliasEntry]:
    """Return the first entry in file order bound to uuid, if any."""
    if not uuid:
        return None
    for entry in alias_list:
        if entry.uuid == uuid:
            return entry
    return None
