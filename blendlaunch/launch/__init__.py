"""Launch coordination: arguments, environment, tasks and debugging."""

from __future__ import annotations

from blendlaunch.launch.coordinator import BlenderExecutable
from blendlaunch.launch.debugger import DebugConfiguration, GdbDebugger, WorkspaceFolder
from blendlaunch.launch.environment import LaunchContext, build_launch_env
from blendlaunch.launch.tasks import ProcessExecution, RunningTask, TaskRunner

__all__ = [
    "BlenderExecutable",
    "DebugConfiguration",
    "GdbDebugger",
    "LaunchContext",
    "ProcessExecution",
    "RunningTask",
    "TaskRunner",
    "WorkspaceFolder",
    "build_launch_env",
]
