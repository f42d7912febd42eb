"""Data types for known Blender executables."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


@dataclass
class BlenderPathData:
    """A registered Blender executable.

    ``name`` is the parent directory name at discovery time. It labels the
    entry when the user has to choose between builds and is not unique.
    """

    path: str
    name: str
    is_debug: bool = False

    def to_payload(self) -> dict[str, Any]:
        return {"path": self.path, "name": self.name, "isDebug": self.is_debug}

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> BlenderPathData:
        return cls(
            path=str(data.get("path", "")),
            name=str(data.get("name", "")),
            is_debug=bool(data.get("isDebug", False)),
        )


class DiscoveryMode(Enum):
    """Which registry entries a lookup accepts, and how new ones are marked."""

    ANY = "Blender Executable"
    DEBUG_ONLY = "Debug Build"

    @property
    def label(self) -> str:
        return self.value

    def matches(self, entry: BlenderPathData) -> bool:
        if self is DiscoveryMode.DEBUG_ONLY:
            return entry.is_debug
        return True

    def prepare(self, entry: BlenderPathData) -> None:
        """Set flags on a newly discovered entry."""
        if self is DiscoveryMode.DEBUG_ONLY:
            entry.is_debug = True
