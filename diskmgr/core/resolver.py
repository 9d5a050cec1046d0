"""
Device resolution module.

This module maps a user-supplied string (alias, filesystem UUID, label,
device name or /dev path) to exactly one block device.
"""
import logging
from typing import List, Sequence

from diskmgr.core.alias import find_alias
from diskmgr.core.exceptions import AmbiguousLabelError, InvalidArgumentsError, NotFoundError
from diskmgr.core.inventory import walk_devices
from diskmgr.utils.types import DEVICE_PATH_PREFIX, AliasEntry, DeviceNode

logger = logging.getLogger('disk-mgr')


def strip_device_prefix(search: str) -> str:
    """Turn '/dev/sda1' into 'sda1'; a bare '/dev/' is left untouched."""
    if search.startswith(DEVICE_PATH_PREFIX) and len(search) > len(DEVICE_PATH_PREFIX):
        return search[len(DEVICE_PATH_PREFIX):]
    return search


def search_devices(devices: Sequence[DeviceNode], attribute: str, value: str) -> List[DeviceNode]:
    """
    Collect every device in the tree whose attribute equals value.

    Args:
        devices: Top-level devices
        attribute: One of "uuid", "label" or "name"
        value: Exact value to match

    Returns:
        Matching devices in depth-first order
    """
    return [device for device in walk_devices(devices) if getattr(device, attribute) == value]


def resolve_device(search: str, alias_list: Sequence[AliasEntry], devices: Sequence[DeviceNode]) -> DeviceNode:
    """
    Resolve a search string to a single device.

    Aliases are tried first but only as a hint: an alias whose UUID matches
    no device, or several, falls through to matching the literal string by
    UUID, then label, then device name. Several devices sharing the label is
    only an error when no device is named after the search string.

    Args:
        search: Alias, UUID, label, device name or /dev path
        alias_list: Aliases from the configuration
        devices: Current device tree

    Returns:
        The matching DeviceNode

    Raises:
        InvalidArgumentsError: If search is empty
        AmbiguousLabelError: If several devices share the label
        NotFoundError: If nothing matches
    """
    if not search:
        raise InvalidArgumentsError("A device is required")

    search = strip_device_prefix(search)

    alias = find_alias(alias_list, search)
    if alias:
        matches = search_devices(devices, "uuid", alias.uuid)
        if len(matches) == 1:
            logger.debug(f"Resolved '{search}' by alias to {matches[0].name}")
            return matches[0]
        logger.debug(f"Alias '{search}' -> {alias.uuid} matched {len(matches)} devices, ignoring it")

    matches = search_devices(devices, "uuid", search)
    if len(matches) == 1:
        logger.debug(f"Resolved '{search}' by UUID to {matches[0].name}")
        return matches[0]

    label_matches = search_devices(devices, "label", search)
    if len(label_matches) == 1:
        logger.debug(f"Resolved '{search}' by label to {label_matches[0].name}")
        return label_matches[0]

    matches = search_devices(devices, "name", search)
    if len(matches) == 1:
        logger.debug(f"Resolved '{search}' by name")
        return matches[0]

    if len(label_matches) > 1:
        raise AmbiguousLabelError(search, [device.name for device in label_matches])

    raise NotFoundError(search)
