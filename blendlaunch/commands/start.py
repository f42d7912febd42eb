"""Start command handler."""

from __future__ import annotations

import argparse
import sys

from blendlaunch.commands.common import build_context, build_resolver, handle_failure, load_settings
from blendlaunch.errors import BlendLaunchError
from blendlaunch.exit_codes import EXIT_FAILURE, EXIT_SUCCESS
from blendlaunch.launch.coordinator import BlenderExecutable
from blendlaunch.launch.tasks import TaskRunner
from blendlaunch.types import CommandResult


def cmd_start(args: argparse.Namespace) -> int | CommandResult:
    json_mode = getattr(args, "json", False)
    wait = getattr(args, "wait", False)
    try:
        settings = load_settings(args)
        blender = BlenderExecutable.get_any(build_resolver(settings))
        task = blender.launch(build_context(settings, args), TaskRunner(), wait=wait)
    except (BlendLaunchError, ValueError) as exc:
        return handle_failure(exc, json_mode)
    except OSError as exc:
        return handle_failure(BlendLaunchError(f"Failed to start Blender: {exc}"), json_mode)

    exit_code = EXIT_SUCCESS
    if wait and task.process.returncode:
        exit_code = EXIT_FAILURE
    summary = f"Started {blender.path} (pid {task.pid})"
    if json_mode:
        return CommandResult(
            exit_code=exit_code,
            summary=summary,
            data={"path": blender.path, "pid": task.pid, "name": blender.data.name},
        )
    print(f"[OK] {summary}", file=sys.stderr)
    return exit_code
