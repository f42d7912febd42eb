"""Start Blender under a native debugger."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from blendlaunch.errors import DebuggerError
from blendlaunch.launch.tasks import ProcessExecution, TaskRunner

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorkspaceFolder:
    path: Path

    @property
    def name(self) -> str:
        return self.path.name


@dataclass
class DebugConfiguration:
    """Launch configuration in the shape editors use for cppdbg sessions."""

    program: str
    args: list[str]
    env: dict[str, str]
    cwd: str
    name: str = "Debug Blender"
    type: str = "cppdbg"
    request: str = "launch"
    stop_at_entry: bool = False
    mi_mode: str = "gdb"

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "name": self.name,
            "type": self.type,
            "request": self.request,
            "program": self.program,
            "args": list(self.args),
            "env": dict(self.env),
            "stopAtEntry": self.stop_at_entry,
            "MIMode": self.mi_mode,
            "cwd": self.cwd,
        }
        return payload


class GdbDebugger:
    """Runs cppdbg/gdb configurations in an interactive gdb session."""

    def __init__(self, runner: TaskRunner | None = None, gdb: str = "gdb") -> None:
        self.runner = runner or TaskRunner()
        self.gdb = gdb

    def build_command(self, configuration: DebugConfiguration) -> list[str]:
        if configuration.type != "cppdbg" or configuration.request != "launch":
            raise DebuggerError(
                f"Unsupported debug configuration: {configuration.type}/{configuration.request}"
            )
        if configuration.mi_mode != "gdb":
            raise DebuggerError(f"Unsupported MIMode: {configuration.mi_mode}")
        gdb = shutil.which(self.gdb)
        if gdb is None:
            raise DebuggerError(f"Debugger not found on PATH: {self.gdb}")

        cmd = [gdb, "-q"]
        for key, value in configuration.env.items():
            cmd += ["-ex", f"set environment {key}={value}"]
        cmd += ["-ex", "start" if configuration.stop_at_entry else "run"]
        cmd += ["--args", configuration.program, *configuration.args]
        return cmd

    def start_debugging(self, folder: WorkspaceFolder, configuration: DebugConfiguration) -> bool:
        cmd = self.build_command(configuration)
        logger.info("Starting '%s' in %s", configuration.name, folder.path)
        execution = ProcessExecution(
            program=cmd[0],
            args=cmd[1:],
            cwd=Path(configuration.cwd),
        )
        task = self.runner.run_task(configuration.name, execution, wait=True)
        return task.process.returncode == 0
