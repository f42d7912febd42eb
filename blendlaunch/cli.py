"""blendlaunch command line entry point."""

from __future__ import annotations

import argparse
import json
import logging
import time

from blendlaunch import __version__
from blendlaunch.cli_parsers.core import add_core_commands
from blendlaunch.cli_parsers.types import CommandHandlers
from blendlaunch.commands.check import cmd_check
from blendlaunch.commands.debug import cmd_debug
from blendlaunch.commands.env import cmd_env
from blendlaunch.commands.paths import cmd_paths
from blendlaunch.commands.start import cmd_start
from blendlaunch.exit_codes import EXIT_INTERNAL_ERROR, EXIT_SUCCESS
from blendlaunch.types import CommandResult


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blendlaunch",
        description="Locate, verify and launch Blender for editor sessions",
    )
    parser.add_argument("--version", action="version", version=f"blendlaunch {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_json_flag(target: argparse.ArgumentParser) -> None:
        target.add_argument(
            "--json",
            action="store_true",
            help="Output machine-readable JSON",
        )

    handlers = CommandHandlers(
        cmd_start=cmd_start,
        cmd_debug=cmd_debug,
        cmd_paths=cmd_paths,
        cmd_check=cmd_check,
        cmd_env=cmd_env,
    )
    add_core_commands(subparsers, add_json_flag, handlers)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    start = time.perf_counter()
    command = args.command
    subcommand = getattr(args, "subcommand", None)
    if subcommand:
        command = f"{command} {subcommand}"

    try:
        result = args.func(args)
    except Exception as exc:  # noqa: BLE001 - surface in JSON mode
        if getattr(args, "json", False):
            problems = [
                {
                    "severity": "error",
                    "message": str(exc),
                    "code": "BLENDLAUNCH-UNHANDLED",
                }
            ]
            payload = CommandResult(
                exit_code=EXIT_INTERNAL_ERROR,
                summary=str(exc),
                problems=problems,
            ).to_payload(
                command,
                "error",
                int((time.perf_counter() - start) * 1000),
            )
            print(json.dumps(payload, indent=2))
            return EXIT_INTERNAL_ERROR
        raise

    if isinstance(result, CommandResult):
        exit_code = result.exit_code
        command_result = result
    else:
        exit_code = int(result)
        command_result = CommandResult(exit_code=exit_code)

    if not command_result.summary:
        command_result.summary = "OK" if exit_code == EXIT_SUCCESS else "Command failed"

    if getattr(args, "json", False):
        status = "success" if exit_code == EXIT_SUCCESS else "failure"
        payload = command_result.to_payload(
            command,
            status,
            int((time.perf_counter() - start) * 1000),
        )
        print(json.dumps(payload, indent=2))
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
