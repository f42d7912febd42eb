"""Wiring shared by command handlers."""

from __future__ import annotations

import argparse
import sys
from functools import partial
from pathlib import Path

from blendlaunch.config.paths import PathConfig
from blendlaunch.config.settings import Settings
from blendlaunch.errors import BlendLaunchError, ConfigValidationError, UserCancelled
from blendlaunch.executable.registry import SettingsRegistryStore
from blendlaunch.executable.resolver import ExecutableResolver
from blendlaunch.executable.validation import verify_blender_executable
from blendlaunch.exit_codes import EXIT_FAILURE, EXIT_INTERRUPTED
from blendlaunch.launch.environment import LaunchContext
from blendlaunch.prompts import Prompter, QuestionaryPrompter
from blendlaunch.types import CommandResult


def workspace_from_args(args: argparse.Namespace) -> Path | None:
    workspace = getattr(args, "workspace", None)
    if not workspace:
        return None
    path = Path(workspace).expanduser().resolve()
    if not path.is_dir():
        raise ValueError(f"Workspace is not a directory: {workspace}")
    return path


def load_settings(args: argparse.Namespace) -> Settings:
    return Settings(PathConfig.from_env(workspace_from_args(args)))


def build_resolver(settings: Settings, prompter: Prompter | None = None) -> ExecutableResolver:
    timeout = float(settings.get("validationTimeout"))
    return ExecutableResolver(
        SettingsRegistryStore(settings),
        prompter or QuestionaryPrompter(),
        validator=partial(verify_blender_executable, timeout=timeout),
    )


def build_context(settings: Settings, args: argparse.Namespace) -> LaunchContext:
    return LaunchContext(settings=settings, extra_addons=list(getattr(args, "addon", None) or []))


def cancelled_result(json_mode: bool) -> int | CommandResult:
    if json_mode:
        return CommandResult(exit_code=EXIT_INTERRUPTED, summary="Cancelled")
    print("Cancelled.", file=sys.stderr)
    return EXIT_INTERRUPTED


def error_result(exc: Exception, json_mode: bool) -> int | CommandResult:
    problems = [{"severity": "error", "message": str(exc)}]
    if isinstance(exc, ConfigValidationError):
        problems += [{"severity": "error", "message": err} for err in exc.errors]
    if json_mode:
        return CommandResult(exit_code=EXIT_FAILURE, summary=str(exc), problems=problems)
    for problem in problems:
        print(f"[ERROR] {problem['message']}", file=sys.stderr)
    return EXIT_FAILURE


def handle_failure(exc: Exception, json_mode: bool) -> int | CommandResult:
    if isinstance(exc, UserCancelled):
        return cancelled_result(json_mode)
    if isinstance(exc, (BlendLaunchError, ValueError)):
        return error_result(exc, json_mode)
    raise exc
