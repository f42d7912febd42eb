"""Spawn named background processes."""

from __future__ import annotations

import logging
import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class ProcessExecution:
    program: str
    args: list[str] = field(default_factory=list)
    env: dict[str, str] = field(default_factory=dict)
    cwd: Path | None = None

    @property
    def command(self) -> list[str]:
        return [self.program, *self.args]


@dataclass
class RunningTask:
    name: str
    process: subprocess.Popen

    @property
    def pid(self) -> int:
        return self.process.pid

    def is_running(self) -> bool:
        return self.process.poll() is None

    def wait(self, timeout: float | None = None) -> int:
        return self.process.wait(timeout=timeout)


class TaskRunner:
    """Starts executions and keeps the latest task per name.

    The child inherits the current environment with the execution's
    variables layered on top.
    """

    def __init__(self) -> None:
        self.tasks: dict[str, RunningTask] = {}

    def run_task(self, name: str, execution: ProcessExecution, wait: bool = False) -> RunningTask:
        env = {**os.environ, **execution.env}
        logger.info("Starting task '%s': %s", name, " ".join(execution.command))
        process = subprocess.Popen(  # noqa: S603
            execution.command,
            cwd=str(execution.cwd) if execution.cwd else None,
            env=env,
        )
        task = RunningTask(name=name, process=process)
        self.tasks[name] = task
        if wait:
            code = task.wait()
            logger.info("Task '%s' exited with %d", name, code)
        return task
