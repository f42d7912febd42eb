"""Startup script executed inside Blender via ``--python``.

Reads the variables set by blendlaunch, makes each addon importable and
enables it. Blender modules are imported lazily so the environment parsing
can run under a plain interpreter.
"""

from __future__ import annotations

import json
import os
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class LaunchEnvironment:
    addon_directories: list[str]
    editor_port: int
    pip_path: str
    allow_modify_external_python: bool


def read_launch_environment(environ: dict[str, str] | None = None) -> LaunchEnvironment:
    env = os.environ if environ is None else environ
    directories = json.loads(env.get("ADDON_DIRECTORIES_TO_LOAD", "[]"))
    if not isinstance(directories, list) or not all(isinstance(d, str) for d in directories):
        raise ValueError("ADDON_DIRECTORIES_TO_LOAD must be a JSON list of strings")
    return LaunchEnvironment(
        addon_directories=directories,
        editor_port=int(env.get("EDITOR_PORT", "0")),
        pip_path=env.get("PIP_PATH", ""),
        allow_modify_external_python=env.get("ALLOW_MODIFY_EXTERNAL_PYTHON") == "yes",
    )


def addon_module_names(directories: list[str]) -> list[tuple[str, str]]:
    """Pairs of (sys.path entry, module name) for each addon directory."""
    return [(str(Path(d).parent), Path(d).name) for d in directories]


def ensure_pip(launch_env: LaunchEnvironment) -> None:
    try:
        import pip  # noqa: F401
    except ImportError:
        if not launch_env.allow_modify_external_python:
            print("pip is missing and modifying this Python is not allowed", file=sys.stderr)
            return
        if launch_env.pip_path and Path(launch_env.pip_path).is_file():
            subprocess.run([sys.executable, launch_env.pip_path], check=True)  # noqa: S603


def main() -> None:
    import addon_utils  # type: ignore[import-not-found]

    launch_env = read_launch_environment()
    ensure_pip(launch_env)
    for search_path, module_name in addon_module_names(launch_env.addon_directories):
        if search_path not in sys.path:
            sys.path.append(search_path)
        addon_utils.enable(module_name, default_set=True, persistent=False)
    print(f"Editor server port: {launch_env.editor_port}")


if __name__ == "__main__":
    main()
