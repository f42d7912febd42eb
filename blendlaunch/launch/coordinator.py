"""Launch a resolved Blender executable, normally or under a debugger."""

from __future__ import annotations

from typing import Protocol

from blendlaunch.executable.models import BlenderPathData, DiscoveryMode
from blendlaunch.executable.resolver import ExecutableResolver
from blendlaunch.launch.debugger import DebugConfiguration, WorkspaceFolder
from blendlaunch.launch.environment import LaunchContext
from blendlaunch.launch.tasks import ProcessExecution, RunningTask, TaskRunner

TASK_NAME = "blender"
DEBUG_FLAG = "--debug"


class Debugger(Protocol):
    def start_debugging(self, folder: WorkspaceFolder, configuration: DebugConfiguration) -> bool: ...


class BlenderExecutable:
    def __init__(self, data: BlenderPathData) -> None:
        self.data = data

    @classmethod
    def get_any(cls, resolver: ExecutableResolver) -> BlenderExecutable:
        mode = DiscoveryMode.ANY
        return cls(resolver.resolve(mode.label, mode))

    @classmethod
    def get_debug(cls, resolver: ExecutableResolver) -> BlenderExecutable:
        mode = DiscoveryMode.DEBUG_ONLY
        return cls(resolver.resolve(mode.label, mode))

    @property
    def path(self) -> str:
        return self.data.path

    def launch_execution(self, context: LaunchContext) -> ProcessExecution:
        return ProcessExecution(
            program=self.path,
            args=context.launch_args(),
            env=context.build_env(),
        )

    def launch(self, context: LaunchContext, runner: TaskRunner, wait: bool = False) -> RunningTask:
        return runner.run_task(TASK_NAME, self.launch_execution(context), wait=wait)

    def debug_configuration(self, folder: WorkspaceFolder, context: LaunchContext) -> DebugConfiguration:
        return DebugConfiguration(
            program=self.path,
            args=[DEBUG_FLAG, *context.launch_args()],
            env=context.build_env(),
            cwd=str(folder.path),
        )

    def launch_debug(
        self,
        folder: WorkspaceFolder,
        context: LaunchContext,
        debugger: Debugger,
    ) -> bool:
        return debugger.start_debugging(folder, self.debug_configuration(folder, context))
