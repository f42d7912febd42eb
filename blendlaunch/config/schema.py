"""JSON schema checks for the settings files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from jsonschema import Draft7Validator

from blendlaunch.config.paths import PathConfig

SCHEMA_FILE_NAME = "settings.schema.json"


def get_schema(paths: PathConfig) -> dict[str, Any]:
    schema_path = Path(paths.schema_dir) / SCHEMA_FILE_NAME
    data = json.loads(schema_path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Schema at {schema_path} is not a JSON object")
    return data


def _error_location(path: Any) -> str:
    # blenderPaths.0.path -> blenderPaths[0].path
    location = ""
    for part in path:
        if isinstance(part, int):
            location += f"[{part}]"
        elif location:
            location += f".{part}"
        else:
            location = str(part)
    return location


def validate_settings(
    settings: dict[str, Any], paths: PathConfig, scope: str | None = None
) -> list[str]:
    """Validate one settings mapping against the schema.

    Args:
        settings: Settings data read from a single scope.
        paths: PathConfig instance.
        scope: Label of the scope the data came from ("global", "workspace").
            When given, each message names the key as it appears in that scope.

    Returns:
        Sorted list of error strings, empty when the data is valid.
    """
    validator = Draft7Validator(get_schema(paths))
    errors: list[str] = []
    for err in validator.iter_errors(settings):
        location = _error_location(err.path)
        if scope:
            location = f"{scope} {location}" if location else f"{scope} settings"
        errors.append(f"{location or 'settings'}: {err.message}")
    return sorted(errors)
