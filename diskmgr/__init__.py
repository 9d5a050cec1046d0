"""
disk-mgr - Mount block devices by name, UUID, label or alias

This package lists block devices, mounts and unmounts them from a flexible
identifier and keeps user-defined aliases for filesystem UUIDs.
"""

__version__ = "0.1.0"
