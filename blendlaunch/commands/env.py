"""Show the environment a launch would receive."""

from __future__ import annotations

import argparse

from blendlaunch.commands.common import build_context, handle_failure, load_settings
from blendlaunch.errors import BlendLaunchError
from blendlaunch.exit_codes import EXIT_SUCCESS
from blendlaunch.types import CommandResult


def cmd_env(args: argparse.Namespace) -> int | CommandResult:
    json_mode = getattr(args, "json", False)
    try:
        context = build_context(load_settings(args), args)
        env = context.build_env()
    except (BlendLaunchError, ValueError) as exc:
        return handle_failure(exc, json_mode)

    if json_mode:
        return CommandResult(
            exit_code=EXIT_SUCCESS,
            summary="Launch environment",
            data={"env": env, "args": context.launch_args()},
        )
    for key, value in env.items():
        print(f"{key}={value}")
    return EXIT_SUCCESS
