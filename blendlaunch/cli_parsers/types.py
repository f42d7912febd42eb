"""Shared types for CLI parser builders."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Callable

from blendlaunch.types import CommandResult

CommandHandler = Callable[[argparse.Namespace], int | CommandResult]


@dataclass(frozen=True)
class CommandHandlers:
    cmd_start: CommandHandler
    cmd_debug: CommandHandler
    cmd_paths: CommandHandler
    cmd_check: CommandHandler
    cmd_env: CommandHandler
