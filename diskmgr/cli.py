"""
Command-line interface for disk-mgr.

This module handles argument parsing and dispatches each subcommand to the
inventory, resolution, mount and alias modules.
"""
import argparse
import logging
import os
import sys
from typing import List, Optional

from diskmgr import __version__
from diskmgr.config import AliasStore
from diskmgr.core.alias import add_alias, remove_alias
from diskmgr.core.exceptions import DiskMgrError, MissingUUIDError
from diskmgr.core.inventory import list_devices
from diskmgr.core.mount import FORCE_UNMOUNT_FLAG, mount_device, unmount_device
from diskmgr.core.resolver import resolve_device
from diskmgr.utils.command import CommandRunner, SimulationMode
from diskmgr.utils.format import TermColors, colorize, render_device_table
from diskmgr.utils.logging import setup_logging
from diskmgr.utils.validation import COMMAND_TOOLS, check_prerequisites

logger = logging.getLogger('disk-mgr')


def cmd_ls(args: argparse.Namespace, cmd_runner: CommandRunner, store: AliasStore) -> None:
    """List devices with their aliases."""
    devices = list_devices(cmd_runner)
    alias_list = store.load().alias_list

    print("")
    print(render_device_table(devices, alias_list, cmd_runner.colored_output))
    print("")


def cmd_mount(args: argparse.Namespace, cmd_runner: CommandRunner, store: AliasStore) -> None:
    """Resolve a device and mount it."""
    alias_list = store.load().alias_list
    device = resolve_device(args.device, alias_list, list_devices(cmd_runner))
    mount_device(device, args.mountpoint, [], cmd_runner)


def cmd_umount(args: argparse.Namespace, cmd_runner: CommandRunner, store: AliasStore) -> None:
    """Resolve a device and unmount it."""
    extra_args = [FORCE_UNMOUNT_FLAG] if args.force else []

    alias_list = store.load().alias_list
    device = resolve_device(args.device, alias_list, list_devices(cmd_runner))
    unmount_device(device, extra_args, cmd_runner)


def cmd_add(args: argparse.Namespace, cmd_runner: CommandRunner, store: AliasStore) -> None:
    """Bind an alias to the UUID of a device."""
    # Existing aliases are not consulted: the target is named by what it is now
    device = resolve_device(args.device, [], list_devices(cmd_runner))
    if not device.uuid:
        raise MissingUUIDError(device.name)

    add_alias(store, args.alias_name, device.uuid)


def cmd_remove(args: argparse.Namespace, cmd_runner: CommandRunner, store: AliasStore) -> None:
    """Delete an alias."""
    remove_alias(store, args.alias_name)


def build_parser() -> argparse.ArgumentParser:
    """
    Build the command-line parser.

    Returns:
        ArgumentParser with one subparser per command
    """
    parser = argparse.ArgumentParser(
        prog="disk-mgr",
        description="Mount block devices by name, UUID, label or alias"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    parser.add_argument(
        "--config",
        metavar="PATH",
        help="Alias configuration file (default: ~/.config/disk-mgr/config.json)"
    )

    parser.add_argument(
        "-s", "--simulate",
        action="store_true",
        help="Show the mount/umount commands and alias changes without performing them"
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    device_help = "device name, /dev path, filesystem UUID, label or alias"

    ls_parser = subparsers.add_parser("ls", help="list devices")
    ls_parser.set_defaults(handler=cmd_ls, command_name="ls")

    mount_parser = subparsers.add_parser(
        "mount", aliases=["m"],
        help="mount device, <device> could be dev|uuid|label|alias"
    )
    mount_parser.add_argument("device", help=device_help)
    mount_parser.add_argument("mountpoint", help="directory to mount the device on")
    mount_parser.set_defaults(handler=cmd_mount, command_name="mount")

    umount_parser = subparsers.add_parser(
        "umount", aliases=["u"],
        help="unmount device, <device> could be dev|uuid|label|alias"
    )
    umount_parser.add_argument("device", help=device_help)
    umount_parser.add_argument(
        "-f", "--force",
        action="store_true",
        help="force unmount (in case of an unreachable NFS system)"
    )
    umount_parser.set_defaults(handler=cmd_umount, command_name="umount")

    add_parser = subparsers.add_parser("add", aliases=["a"], help="add alias name to a device")
    add_parser.add_argument("device", help="device name, /dev path, filesystem UUID or label")
    add_parser.add_argument("alias_name", metavar="aliasName", help="alias to bind to the device UUID")
    add_parser.set_defaults(handler=cmd_add, command_name="add")

    remove_parser = subparsers.add_parser("remove", aliases=["r"], help="remove alias name of a device")
    remove_parser.add_argument("alias_name", metavar="aliasName", help="alias to delete")
    remove_parser.set_defaults(handler=cmd_remove, command_name="remove")

    return parser


def display_simulation_summary(cmd_runner: CommandRunner) -> None:
    """
    Display the commands a simulated run would have executed.

    Args:
        cmd_runner: CommandRunner instance used for the run
    """
    try:
        terminal_width = os.get_terminal_size().columns
    except (AttributeError, OSError):
        terminal_width = 80

    stars = "*" * terminal_width

    print(f"\n{colorize(stars, TermColors.SIM, cmd_runner.colored_output)}")
    print(colorize("SIMULATION COMPLETE - NO CHANGES WERE MADE",
                   TermColors.SIM + TermColors.BOLD, cmd_runner.colored_output))
    print(f"{colorize(stars, TermColors.SIM, cmd_runner.colored_output)}\n")
    print(cmd_runner.get_simulation_report())


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function.

    Args:
        argv: Command-line arguments, defaults to sys.argv[1:]

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    args = None
    try:
        parser = build_parser()
        args = parser.parse_args(argv)

        setup_logging(args.debug)

        if not args.command:
            parser.print_help()
            return 0

        cmd_runner = CommandRunner(
            SimulationMode.SIMULATE if args.simulate else SimulationMode.DISABLED,
            not args.no_color and sys.stdout.isatty()
        )
        if args.simulate:
            logger.info("Running in simulation mode - NO CHANGES WILL BE MADE")

        check_prerequisites(COMMAND_TOOLS[args.command_name], cmd_runner)

        store = AliasStore(args.config, cmd_runner)
        args.handler(args, cmd_runner, store)

        if args.simulate:
            display_simulation_summary(cmd_runner)

        return 0

    except DiskMgrError as e:
        logger.error(str(e))
        return 1

    except KeyboardInterrupt:
        logger.error("Operation cancelled by user")
        return 130

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        if args is not None and args.debug:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
