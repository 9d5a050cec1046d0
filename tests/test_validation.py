"""Tests for prerequisite checks."""

import pytest

from diskmgr.core.exceptions import PrerequisiteError
from diskmgr.utils.command import SimulationMode
from diskmgr.utils.validation import COMMAND_TOOLS, check_prerequisites


def test_missing_tools_reported(monkeypatch, cmd_runner):
    monkeypatch.setattr("diskmgr.utils.validation.shutil.which", lambda tool: None)

    with pytest.raises(PrerequisiteError) as exc_info:
        check_prerequisites(COMMAND_TOOLS["mount"], cmd_runner)

    assert exc_info.value.tools == ["lsblk", "mount"]


def test_all_tools_present(monkeypatch, cmd_runner):
    monkeypatch.setattr("diskmgr.utils.validation.shutil.which", lambda tool: f"/usr/bin/{tool}")
    check_prerequisites(COMMAND_TOOLS["umount"], cmd_runner)


def test_simulation_only_needs_lsblk(monkeypatch, runner_factory):
    monkeypatch.setattr(
        "diskmgr.utils.validation.shutil.which",
        lambda tool: "/usr/bin/lsblk" if tool == "lsblk" else None,
    )
    check_prerequisites(COMMAND_TOOLS["mount"], runner_factory(simulation_mode=SimulationMode.SIMULATE))
