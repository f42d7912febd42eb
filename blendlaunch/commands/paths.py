"""Registry listing command handler."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.table import Table

from blendlaunch.commands.common import handle_failure, load_settings
from blendlaunch.errors import BlendLaunchError
from blendlaunch.executable.models import BlenderPathData
from blendlaunch.executable.registry import SettingsRegistryStore
from blendlaunch.exit_codes import EXIT_SUCCESS
from blendlaunch.types import CommandResult


def _render_table(entries: list[BlenderPathData], console: Console) -> None:
    table = Table(title="Blender executables")
    table.add_column("#", justify="right")
    table.add_column("Name")
    table.add_column("Debug")
    table.add_column("Path")
    for index, entry in enumerate(entries, start=1):
        table.add_row(str(index), entry.name, "yes" if entry.is_debug else "no", entry.path)
    console.print(table)


def cmd_paths(args: argparse.Namespace) -> int | CommandResult:
    json_mode = getattr(args, "json", False)
    try:
        entries = SettingsRegistryStore(load_settings(args)).load()
    except (BlendLaunchError, ValueError) as exc:
        return handle_failure(exc, json_mode)

    if json_mode:
        return CommandResult(
            exit_code=EXIT_SUCCESS,
            summary=f"{len(entries)} Blender path(s)",
            data={"blenderPaths": [entry.to_payload() for entry in entries]},
        )
    console = Console()
    if not entries:
        console.print("No Blender executables registered yet.")
        return EXIT_SUCCESS
    _render_table(entries, console)
    return EXIT_SUCCESS
