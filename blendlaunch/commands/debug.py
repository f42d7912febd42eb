"""Debug command handler."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from blendlaunch.commands.common import build_context, build_resolver, handle_failure, load_settings
from blendlaunch.errors import BlendLaunchError
from blendlaunch.exit_codes import EXIT_FAILURE, EXIT_SUCCESS
from blendlaunch.launch.coordinator import BlenderExecutable
from blendlaunch.launch.debugger import GdbDebugger, WorkspaceFolder
from blendlaunch.types import CommandResult


def cmd_debug(args: argparse.Namespace) -> int | CommandResult:
    json_mode = getattr(args, "json", False)
    try:
        settings = load_settings(args)
        folder = WorkspaceFolder(settings.paths.workspace or Path.cwd())
        blender = BlenderExecutable.get_debug(build_resolver(settings))
        context = build_context(settings, args)
        if args.dry_run:
            configuration = blender.debug_configuration(folder, context).to_payload()
            if json_mode:
                return CommandResult(
                    exit_code=EXIT_SUCCESS,
                    summary="Debug configuration",
                    data={"configuration": configuration},
                )
            print(json.dumps(configuration, indent=2))
            return EXIT_SUCCESS
        ok = blender.launch_debug(folder, context, GdbDebugger())
    except (BlendLaunchError, ValueError) as exc:
        return handle_failure(exc, json_mode)
    except OSError as exc:
        return handle_failure(BlendLaunchError(f"Failed to start debugger: {exc}"), json_mode)

    exit_code = EXIT_SUCCESS if ok else EXIT_FAILURE
    summary = "Debug session finished" if ok else "Debug session failed"
    if json_mode:
        return CommandResult(exit_code=exit_code, summary=summary, data={"path": blender.path})
    print(f"[{'OK' if ok else 'ERROR'}] {summary}", file=sys.stderr)
    return exit_code
