"""
Alias configuration storage.

This module locates the per-user configuration directory and reads and writes
the JSON alias file.

There is no locking around the file: two invocations modifying aliases at the
same time race, and the last writer wins.
"""
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from diskmgr.utils.command import CommandRunner
from diskmgr.utils.types import Configuration

logger = logging.getLogger('disk-mgr')

CONFIG_DIR_NAME = "disk-mgr"
CONFIG_FILE_NAME = "config.json"
CONFIG_DIR_ENV = "DISK_MGR_CONFIG_DIR"


def get_config_dir() -> Path:
    """
    Get the configuration directory.

    Returns:
        $DISK_MGR_CONFIG_DIR if set, else $XDG_CONFIG_HOME/disk-mgr or
        ~/.config/disk-mgr
    """
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override)
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / CONFIG_DIR_NAME
    return Path.home() / ".config" / CONFIG_DIR_NAME


def get_config_file() -> Path:
    return get_config_dir() / CONFIG_FILE_NAME


class AliasStore:
    """
    Persistent home of the alias configuration.

    Loaded once at the start of an invocation and saved after a change.
    """
    def __init__(self, path: Optional[Union[str, Path]], cmd_runner: CommandRunner):
        """
        Initialize the store.

        Args:
            path: Configuration file, or None for the default location
            cmd_runner: CommandRunner, used for its simulation mode
        """
        self.path = Path(path) if path else get_config_file()
        self.cmd_runner = cmd_runner

    def load(self) -> Configuration:
        """
        Read the configuration.

        A missing, unreadable or corrupt file yields an empty configuration.

        Returns:
            Configuration read from disk
        """
        try:
            content = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug(f"No configuration at {self.path}, using defaults")
            return Configuration()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read {self.path}: {e}")
            return Configuration()

        if not content.strip():
            return Configuration()

        try:
            data = json.loads(content)
        except ValueError as e:
            logger.warning(f"Ignoring corrupt configuration {self.path}: {e}")
            return Configuration()

        configuration = Configuration.from_dict(data)
        logger.debug(f"Read {len(configuration.alias_list)} aliases from {self.path}")
        return configuration

    def save(self, configuration: Configuration) -> None:
        """
        Write the configuration, replacing the file atomically.

        Args:
            configuration: Configuration to persist
        """
        content = json.dumps(configuration.to_dict(), indent=2)

        if self.cmd_runner.simulating:
            logger.info(f"Would write {len(configuration.alias_list)} aliases to {self.path}")
            return

        directory = self.path.parent
        directory.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(dir=directory, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
                f.write("\n")
            os.replace(tmp_name, self.path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

        logger.debug(f"Wrote configuration to {self.path}")
