"""
Alias management module.

This module adds and removes alias entries in the configuration and provides
the lookup used by resolution.
"""
import logging
from typing import Optional, Sequence

from diskmgr.core.exceptions import AliasExistsError, AliasNotFoundError, InvalidArgumentsError
from diskmgr.utils.types import AliasEntry

logger = logging.getLogger('disk-mgr')


def find_alias(alias_list: Sequence[AliasEntry], alias_name: str) -> Optional[AliasEntry]:
    """Return the entry named alias_name (exact, case-sensitive match), if any."""
    for entry in alias_list:
        if entry.alias == alias_name:
            return entry
    return None


def add_alias(store, alias_name: str, uuid: str) -> AliasEntry:
    """
    Bind a new alias name to a filesystem UUID and persist it.

    The UUID is not checked against the devices currently present; an alias
    to a missing device is simply never matched during resolution.

    Args:
        store: AliasStore holding the configuration
        alias_name: Name of the new alias
        uuid: Filesystem UUID the alias points to

    Returns:
        The new AliasEntry

    Raises:
        InvalidArgumentsError: If the alias name or UUID is empty
        AliasExistsError: If an alias with the same name already exists
    """
    if not alias_name:
        raise InvalidArgumentsError("Alias name is required")
    if not uuid:
        raise InvalidArgumentsError("UUID is required")

    configuration = store.load()

    existing = find_alias(configuration.alias_list, alias_name)
    if existing:
        raise AliasExistsError(existing)

    entry = AliasEntry(alias=alias_name, uuid=uuid)
    configuration.alias_list.append(entry)
    store.save(configuration)

    logger.info(f"Added alias {entry.alias} -> {entry.uuid}")
    return entry


def remove_alias(store, alias_name: str) -> AliasEntry:
    """
    Delete an alias by name and persist the configuration.

    Args:
        store: AliasStore holding the configuration
        alias_name: Name of the alias to remove

    Returns:
        The removed AliasEntry

    Raises:
        AliasNotFoundError: If no alias has that name
    """
    configuration = store.load()

    entry = find_alias(configuration.alias_list, alias_name)
    if entry is None:
        raise AliasNotFoundError(alias_name)

    configuration.alias_list.remove(entry)
    store.save(configuration)

    logger.info(f"Removed alias {entry.alias} -> {entry.uuid}")
    return entry
