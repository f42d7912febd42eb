"""Settings management for blendlaunch."""

from __future__ import annotations

from blendlaunch.config.io import deep_merge, load_yaml_file, save_yaml_file
from blendlaunch.config.paths import PathConfig
from blendlaunch.config.schema import get_schema, validate_settings
from blendlaunch.config.settings import DEFAULT_SETTINGS, ConfigurationTarget, Settings

__all__ = [
    "DEFAULT_SETTINGS",
    "ConfigurationTarget",
    "PathConfig",
    "Settings",
    "deep_merge",
    "get_schema",
    "load_yaml_file",
    "save_yaml_file",
    "validate_settings",
]
