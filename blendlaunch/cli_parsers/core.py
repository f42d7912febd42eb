"""Parser setup for blendlaunch commands."""

from __future__ import annotations

import argparse
from typing import Callable

from blendlaunch.cli_parsers.types import CommandHandlers


def _add_launch_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--workspace",
        help="Workspace root (reads .blendlaunch.yml, debug cwd)",
    )
    parser.add_argument(
        "--addon",
        action="append",
        metavar="PATH",
        help="Addon folder to load (repeatable)",
    )


def add_core_commands(
    subparsers,
    add_json_flag: Callable[[argparse.ArgumentParser], None],
    handlers: CommandHandlers,
) -> None:
    start = subparsers.add_parser("start", help="Launch Blender with the editor bootstrap")
    add_json_flag(start)
    _add_launch_options(start)
    start.add_argument("--wait", action="store_true", help="Wait for Blender to exit")
    start.set_defaults(func=handlers.cmd_start)

    debug = subparsers.add_parser("debug", help="Launch a debug build under gdb")
    add_json_flag(debug)
    _add_launch_options(debug)
    debug.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the debug configuration instead of starting gdb",
    )
    debug.set_defaults(func=handlers.cmd_debug)

    paths = subparsers.add_parser("paths", help="Manage known Blender executables")
    paths_sub = paths.add_subparsers(dest="subcommand", required=True)
    paths_list = paths_sub.add_parser("list", help="List registered executables")
    add_json_flag(paths_list)
    paths_list.set_defaults(func=handlers.cmd_paths)

    check = subparsers.add_parser("check", help="Verify that a file is a Blender executable")
    add_json_flag(check)
    check.add_argument("path", help="Path to the candidate executable")
    check.set_defaults(func=handlers.cmd_check)

    env = subparsers.add_parser("env", help="Show the launch environment")
    add_json_flag(env)
    _add_launch_options(env)
    env.set_defaults(func=handlers.cmd_env)
