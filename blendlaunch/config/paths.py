"""Filesystem locations used by blendlaunch."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

CONFIG_HOME_ENV = "BLENDLAUNCH_CONFIG_HOME"
GLOBAL_SETTINGS_NAME = "settings.yaml"
WORKSPACE_SETTINGS_NAME = ".blendlaunch.yml"


def package_root() -> Path:
    return Path(__file__).resolve().parents[1]


def default_config_home() -> Path:
    configured = os.environ.get(CONFIG_HOME_ENV)
    if configured:
        return Path(configured).expanduser()
    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg).expanduser() if xdg else Path.home() / ".config"
    return base / "blendlaunch"


@dataclass(frozen=True)
class PathConfig:
    """Resolved locations for settings files and bundled scripts.

    Args:
        config_home: Directory holding the global settings file.
        workspace: Workspace root, or None outside a workspace.
    """

    config_home: Path
    workspace: Path | None = None

    @classmethod
    def from_env(cls, workspace: Path | None = None) -> PathConfig:
        return cls(config_home=default_config_home(), workspace=workspace)

    @property
    def global_settings_file(self) -> Path:
        return self.config_home / GLOBAL_SETTINGS_NAME

    @property
    def workspace_settings_file(self) -> Path | None:
        if self.workspace is None:
            return None
        return self.workspace / WORKSPACE_SETTINGS_NAME

    @property
    def schema_dir(self) -> Path:
        return package_root() / "schema"

    @property
    def python_files_dir(self) -> Path:
        return package_root() / "python_files"

    @property
    def launch_path(self) -> Path:
        """Bootstrap script Blender runs through --python."""
        return self.python_files_dir / "launch.py"

    @property
    def bundled_pip_path(self) -> Path:
        return self.python_files_dir / "get-pip.py"
