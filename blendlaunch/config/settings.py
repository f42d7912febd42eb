"""Key/value settings store backed by global and workspace YAML files.

Values resolve with this precedence:
  1. Workspace .blendlaunch.yml (highest priority)
  2. Global settings.yaml
  3. Built-in defaults (lowest priority)
"""

from __future__ import annotations

import logging
from copy import deepcopy
from enum import Enum
from pathlib import Path
from typing import Any

from blendlaunch.config.io import deep_merge, load_yaml_file, save_yaml_file
from blendlaunch.config.paths import PathConfig
from blendlaunch.config.schema import validate_settings
from blendlaunch.errors import ConfigValidationError

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS: dict[str, Any] = {
    "blenderPaths": [],
    "allowModifyExternalPython": False,
    "addonFolders": [],
    "editorPort": 0,
    "pipPath": None,
    "validationTimeout": 60,
}


class ConfigurationTarget(str, Enum):
    GLOBAL = "global"
    WORKSPACE = "workspace"


class Settings:
    """Read and update blendlaunch settings."""

    def __init__(self, paths: PathConfig) -> None:
        self.paths = paths

    def _scope_file(self, scope: ConfigurationTarget) -> Path:
        if scope is ConfigurationTarget.GLOBAL:
            return self.paths.global_settings_file
        workspace_file = self.paths.workspace_settings_file
        if workspace_file is None:
            raise ConfigValidationError("No workspace is open; cannot write workspace settings")
        return workspace_file

    def _validate(self, data: dict[str, Any], scope: ConfigurationTarget, path: Path) -> None:
        errors = validate_settings(data, self.paths, scope.value)
        if errors:
            raise ConfigValidationError(f"Invalid {scope.value} settings in {path}", errors=errors)

    def load_scope(self, scope: ConfigurationTarget) -> dict[str, Any]:
        """Load the raw mapping stored for one scope."""
        if scope is ConfigurationTarget.WORKSPACE and self.paths.workspace_settings_file is None:
            return {}
        path = self._scope_file(scope)
        try:
            data = load_yaml_file(path)
        except ValueError as exc:
            raise ConfigValidationError(str(exc)) from exc
        self._validate(data, scope, path)
        return data

    def effective(self) -> dict[str, Any]:
        merged = deep_merge(DEFAULT_SETTINGS, self.load_scope(ConfigurationTarget.GLOBAL))
        return deep_merge(merged, self.load_scope(ConfigurationTarget.WORKSPACE))

    def get(self, key: str) -> Any:
        if key not in DEFAULT_SETTINGS:
            raise KeyError(f"Unknown setting: {key}")
        return deepcopy(self.effective().get(key))

    def update(self, key: str, value: Any, scope: ConfigurationTarget) -> Path:
        """Rewrite one key in the file for ``scope`` and return that file."""
        if key not in DEFAULT_SETTINGS:
            raise KeyError(f"Unknown setting: {key}")
        path = self._scope_file(scope)
        data = self.load_scope(scope)
        data[key] = value
        self._validate(data, scope, path)
        save_yaml_file(path, data)
        logger.info("Updated %s in %s settings", key, scope.value)
        return path
