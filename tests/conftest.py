"""Shared fixtures for disk-mgr tests."""

import json
import subprocess
from pathlib import Path

import pytest

from diskmgr.config import AliasStore
from diskmgr.utils.command import CommandRunner, SimulationMode
from diskmgr.utils.types import DeviceNode


class FakeCommandRunner(CommandRunner):
    """CommandRunner that records commands and returns canned results."""

    def __init__(self, lsblk_output=None, simulation_mode=SimulationMode.DISABLED):
        super().__init__(simulation_mode, colored_output=False)
        self.lsblk_output = lsblk_output if lsblk_output is not None else {"blockdevices": []}
        self.results = {}
        self.executed = []

    def set_result(self, program, returncode=0, stdout="", stderr=""):
        self.results[program] = (returncode, stdout, stderr)

    def _execute(self, cmd, **kwargs):
        self.executed.append(list(cmd))
        if cmd[0] == "lsblk" and "lsblk" not in self.results:
            stdout = self.lsblk_output if isinstance(self.lsblk_output, str) else json.dumps(self.lsblk_output)
            return subprocess.CompletedProcess(cmd, 0, stdout=stdout, stderr="")
        returncode, stdout, stderr = self.results.get(cmd[0], (0, "", ""))
        return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr=stderr)


LSBLK_OUTPUT = {
    "blockdevices": [
        {
            "name": "sda", "mountpoint": None, "label": None, "uuid": None,
            "children": [
                {"name": "sda1", "mountpoint": None, "label": "DATA", "uuid": "abc-123"},
                {"name": "sda2", "mountpoint": "/", "label": "root", "uuid": "def-456"},
            ],
        },
        {
            "name": "sdb", "mountpoint": None, "label": None, "uuid": None,
            "children": [
                {"name": "sdb1", "mountpoint": "/mnt/backup", "label": "BACKUP", "uuid": "111-aaa"},
            ],
        },
        {
            "name": "sdc", "mountpoint": None, "label": None, "uuid": None,
            "children": [
                {"name": "sdc1", "mountpoint": None, "label": "BACKUP", "uuid": "222-bbb"},
            ],
        },
    ]
}


@pytest.fixture
def lsblk_output():
    return json.loads(json.dumps(LSBLK_OUTPUT))


@pytest.fixture
def devices(lsblk_output):
    return [DeviceNode.from_lsblk(entry) for entry in lsblk_output["blockdevices"]]


@pytest.fixture
def cmd_runner(lsblk_output):
    return FakeCommandRunner(lsblk_output)


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    return tmp_path / "disk-mgr" / "config.json"


@pytest.fixture
def store(config_path, cmd_runner):
    return AliasStore(config_path, cmd_runner)


@pytest.fixture
def runner_factory():
    return FakeCommandRunner
