"""Tests for blendlaunch.launch coordinator, tasks and debugger."""

from __future__ import annotations

import json
import os
from pathlib import Path
from unittest import mock

import pytest

from blendlaunch.config.settings import Settings
from blendlaunch.errors import DebuggerError
from blendlaunch.executable.models import BlenderPathData
from blendlaunch.launch import tasks as tasks_module
from blendlaunch.launch.coordinator import BlenderExecutable
from blendlaunch.launch.debugger import DebugConfiguration, GdbDebugger, WorkspaceFolder
from blendlaunch.launch.environment import LaunchContext
from blendlaunch.launch.tasks import ProcessExecution, TaskRunner
from fakes import FakePort


class RecordingRunner:
    def __init__(self) -> None:
        self.calls: list[tuple[str, ProcessExecution, bool]] = []

    def run_task(self, name: str, execution: ProcessExecution, wait: bool = False):
        self.calls.append((name, execution, wait))
        return mock.Mock(pid=4321)


class RecordingDebugger:
    def __init__(self) -> None:
        self.calls: list[tuple[WorkspaceFolder, DebugConfiguration]] = []

    def start_debugging(self, folder: WorkspaceFolder, configuration: DebugConfiguration) -> bool:
        self.calls.append((folder, configuration))
        return True


@pytest.fixture
def context(settings: Settings) -> LaunchContext:
    return LaunchContext(settings=settings, port_source=FakePort(6010))


@pytest.fixture
def blender() -> BlenderExecutable:
    return BlenderExecutable(BlenderPathData("/opt/blender/blender", "blender", is_debug=True))


class TestLaunch:
    def test_runs_named_task(self, blender: BlenderExecutable, context: LaunchContext) -> None:
        runner = RecordingRunner()
        blender.launch(context, runner)

        name, execution, wait = runner.calls[0]
        assert name == "blender"
        assert execution.program == "/opt/blender/blender"
        assert execution.args == ["--python", context.launch_path]
        assert execution.env["EDITOR_PORT"] == "6010"
        assert wait is False


class TestLaunchDebug:
    def test_configuration(self, blender: BlenderExecutable, context: LaunchContext, workspace: Path) -> None:
        debugger = RecordingDebugger()
        folder = WorkspaceFolder(workspace)

        assert blender.launch_debug(folder, context, debugger) is True

        used_folder, configuration = debugger.calls[0]
        assert used_folder == folder
        payload = configuration.to_payload()
        assert payload == {
            "name": "Debug Blender",
            "type": "cppdbg",
            "request": "launch",
            "program": "/opt/blender/blender",
            "args": ["--debug", "--python", context.launch_path],
            "env": payload["env"],
            "stopAtEntry": False,
            "MIMode": "gdb",
            "cwd": str(workspace),
        }
        assert json.loads(payload["env"]["ADDON_DIRECTORIES_TO_LOAD"]) == []


class TestTaskRunner:
    def test_env_layered_over_os_environ(self, monkeypatch) -> None:
        monkeypatch.setenv("INHERITED_VAR", "kept")
        monkeypatch.setenv("EDITOR_PORT", "overridden")
        popen = mock.Mock(return_value=mock.Mock(pid=99))
        monkeypatch.setattr(tasks_module.subprocess, "Popen", popen)

        runner = TaskRunner()
        task = runner.run_task("blender", ProcessExecution("/opt/blender", ["--python", "x.py"], {"EDITOR_PORT": "1"}))

        cmd = popen.call_args.args[0]
        env = popen.call_args.kwargs["env"]
        assert cmd == ["/opt/blender", "--python", "x.py"]
        assert env["INHERITED_VAR"] == "kept"
        assert env["EDITOR_PORT"] == "1"
        assert task.pid == 99
        assert runner.tasks["blender"] is task

    def test_wait_blocks_until_exit(self, monkeypatch) -> None:
        process = mock.Mock(pid=5)
        process.wait.return_value = 0
        monkeypatch.setattr(tasks_module.subprocess, "Popen", mock.Mock(return_value=process))

        TaskRunner().run_task("blender", ProcessExecution("/opt/blender"), wait=True)

        process.wait.assert_called_once()

    @pytest.mark.skipif(os.name == "nt", reason="uses /bin/sh")
    def test_real_process(self, tmp_path: Path) -> None:
        out = tmp_path / "out.txt"
        execution = ProcessExecution("/bin/sh", ["-c", f'echo "$EDITOR_PORT" > "{out}"'], {"EDITOR_PORT": "6111"})
        task = TaskRunner().run_task("sh", execution, wait=True)
        assert task.process.returncode == 0
        assert out.read_text().strip() == "6111"
        assert not task.is_running()


class TestGdbDebugger:
    def _config(self, **overrides) -> DebugConfiguration:
        values = {
            "program": "/opt/blender",
            "args": ["--debug", "--python", "launch.py"],
            "env": {"EDITOR_PORT": "6000"},
            "cwd": "/work",
        }
        values.update(overrides)
        return DebugConfiguration(**values)

    def test_build_command(self, monkeypatch) -> None:
        monkeypatch.setattr("blendlaunch.launch.debugger.shutil.which", lambda name: "/usr/bin/gdb")
        cmd = GdbDebugger().build_command(self._config())
        assert cmd == [
            "/usr/bin/gdb",
            "-q",
            "-ex",
            "set environment EDITOR_PORT=6000",
            "-ex",
            "run",
            "--args",
            "/opt/blender",
            "--debug",
            "--python",
            "launch.py",
        ]

    def test_stop_at_entry_uses_start(self, monkeypatch) -> None:
        monkeypatch.setattr("blendlaunch.launch.debugger.shutil.which", lambda name: "/usr/bin/gdb")
        cmd = GdbDebugger().build_command(self._config(stop_at_entry=True))
        assert "start" in cmd and "run" not in cmd

    def test_missing_gdb(self, monkeypatch) -> None:
        monkeypatch.setattr("blendlaunch.launch.debugger.shutil.which", lambda name: None)
        with pytest.raises(DebuggerError, match="not found"):
            GdbDebugger().build_command(self._config())

    def test_unsupported_mode(self) -> None:
        with pytest.raises(DebuggerError, match="MIMode"):
            GdbDebugger().build_command(self._config(mi_mode="lldb"))

    def test_start_debugging_runs_in_cwd(self, monkeypatch) -> None:
        monkeypatch.setattr("blendlaunch.launch.debugger.shutil.which", lambda name: "/usr/bin/gdb")
        runner = mock.Mock()
        runner.run_task.return_value = mock.Mock(process=mock.Mock(returncode=0))

        ok = GdbDebugger(runner=runner).start_debugging(WorkspaceFolder(Path("/work")), self._config())

        assert ok is True
        name, execution = runner.run_task.call_args.args
        assert name == "Debug Blender"
        assert execution.program == "/usr/bin/gdb"
        assert execution.cwd == Path("/work")
        assert runner.run_task.call_args.kwargs["wait"] is True
