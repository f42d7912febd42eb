"""Validate a candidate Blender executable."""

from __future__ import annotations

import argparse
import os
import sys

from blendlaunch.commands.common import handle_failure, load_settings
from blendlaunch.errors import BlendLaunchError
from blendlaunch.executable.validation import verify_blender_executable
from blendlaunch.exit_codes import EXIT_SUCCESS
from blendlaunch.types import CommandResult


def cmd_check(args: argparse.Namespace) -> int | CommandResult:
    json_mode = getattr(args, "json", False)
    filepath = os.path.abspath(os.path.expanduser(args.path))
    try:
        timeout = float(load_settings(args).get("validationTimeout"))
        verify_blender_executable(filepath, timeout=timeout)
    except (BlendLaunchError, ValueError) as exc:
        return handle_failure(exc, json_mode)

    summary = f"{filepath} is a Blender executable"
    if json_mode:
        return CommandResult(exit_code=EXIT_SUCCESS, summary=summary, data={"path": filepath})
    print(f"[OK] {summary}", file=sys.stderr)
    return EXIT_SUCCESS
