"""
Command execution utilities.

This module provides tools for executing system commands with simulation support.
"""
import logging
import os
import subprocess
import uuid
from enum import Enum
from typing import Any, Dict, List

from diskmgr.utils.format import TermColors, colorize

logger = logging.getLogger('disk-mgr')


class SimulationMode(Enum):
    """Enumeration for simulation modes"""
    DISABLED = 0  # Normal operation
    SIMULATE = 1  # Simulate operations


class CommandRunner:
    """
    Class responsible for command execution with simulation support.
    Acts as a wrapper around subprocess.run with additional functionality.
    """
    def __init__(self, simulation_mode: SimulationMode = SimulationMode.DISABLED, colored_output: bool = True):
        """
        Initialize the command runner.

        Args:
            simulation_mode: Simulation mode to operate in
            colored_output: Whether to use colored output in terminal
        """
        self.simulation_mode = simulation_mode
        self.colored_output = colored_output
        self.commands_run: List[Dict[str, Any]] = []

        # Short ID to tell simulated runs apart in logs
        self.simulation_id = str(uuid.uuid4())[:8]

    @property
    def simulating(self) -> bool:
        return self.simulation_mode == SimulationMode.SIMULATE

    def run(self, cmd: List[str], **kwargs) -> subprocess.CompletedProcess:
        """
        Run a system command or simulate running it.

        The command is never checked here: callers inspect the return code
        and error stream themselves.

        Args:
            cmd: Command to run as list of strings
            **kwargs: Additional arguments to pass to subprocess.run

        Returns:
            CompletedProcess instance from subprocess.run
        """
        cmd_str = ' '.join(cmd)
        logger.debug(f"Command requested: {cmd_str}")

        self.commands_run.append({
            "command": list(cmd),
            "simulated": self.simulating
        })

        if self.simulating:
            sim_prefix = colorize(f"[SIM:{self.simulation_id}]", TermColors.SIM, self.colored_output)
            logger.info(f"{sim_prefix} Would execute: {cmd_str}")
            return subprocess.CompletedProcess(args=cmd, returncode=0, stdout="", stderr="")

        return self._execute(cmd, **kwargs)

    def run_real(self, cmd: List[str], **kwargs) -> subprocess.CompletedProcess:
        """
        Run a command for real, even in simulation mode.
        Used for read-only queries such as listing devices.

        Args:
            cmd: Command to run as list of strings
            **kwargs: Additional arguments to pass to subprocess.run

        Returns:
            CompletedProcess instance from subprocess.run
        """
        logger.debug(f"Running real command: {' '.join(cmd)}")
        return self._execute(cmd, **kwargs)

    def _execute(self, cmd: List[str], **kwargs) -> subprocess.CompletedProcess:
        result = subprocess.run(
            cmd,
            check=False,
            text=True,
            capture_output=True,
            **kwargs
        )
        if result.returncode != 0:
            logger.debug(f"Return code: {result.returncode}")
            logger.debug(f"Stderr: {result.stderr}")
        return result

    def get_simulation_report(self) -> str:
        """
        Generate a report of all simulated commands.

        Returns:
            Formatted string with report of simulated commands
        """
        if not self.simulating:
            return "Simulation mode is not active."

        simulated = [record for record in self.commands_run if record["simulated"]]

        report = []
        report.append("=" * 60)
        report.append(f"SIMULATION REPORT [ID: {self.simulation_id}]")
        report.append("=" * 60)

        for i, record in enumerate(simulated, 1):
            cmd = record["command"]
            cmd_type = os.path.basename(cmd[0]) if cmd else "unknown"
            report.append(f"{i}. [{cmd_type}] {' '.join(cmd)}")

        report.append("-" * 60)
        report.append(f"Total commands simulated: {len(simulated)}")

        return "\n".join(report)
