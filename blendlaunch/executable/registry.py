"""Persistence of the list of known Blender executables."""

from __future__ import annotations

import logging
from typing import Protocol

from blendlaunch.config.settings import ConfigurationTarget, Settings
from blendlaunch.executable.models import BlenderPathData

logger = logging.getLogger(__name__)

REGISTRY_KEY = "blenderPaths"


class RegistryStore(Protocol):
    def load(self) -> list[BlenderPathData]: ...

    def save(self, entries: list[BlenderPathData]) -> None: ...


class SettingsRegistryStore:
    """Registry kept under ``blenderPaths``.

    Entries are read from the effective settings, so a workspace list takes
    precedence. Saves always go to the global settings file.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def load(self) -> list[BlenderPathData]:
        raw = self.settings.get(REGISTRY_KEY) or []
        return [BlenderPathData.from_payload(item) for item in raw]

    def save(self, entries: list[BlenderPathData]) -> None:
        payload = [entry.to_payload() for entry in entries]
        self.settings.update(REGISTRY_KEY, payload, ConfigurationTarget.GLOBAL)
        logger.debug("Saved %d Blender path(s)", len(payload))
