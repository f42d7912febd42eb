"""Environment block handed to every Blender launch."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Protocol, Sequence

from blendlaunch.addons import AddonFolder
from blendlaunch.communication import ServerPort
from blendlaunch.config.settings import Settings


class LoadableAddon(Protocol):
    def get_load_directory(self) -> str: ...


class PortSource(Protocol):
    def current_server_port(self) -> int: ...


def build_launch_env(
    addons: Sequence[LoadableAddon],
    port_source: PortSource,
    pip_path: str,
    allow_modify_external_python: bool,
) -> dict[str, str]:
    load_dirs = [addon.get_load_directory() for addon in addons]
    return {
        "ADDON_DIRECTORIES_TO_LOAD": json.dumps(load_dirs),
        "EDITOR_PORT": str(port_source.current_server_port()),
        "PIP_PATH": pip_path,
        "ALLOW_MODIFY_EXTERNAL_PYTHON": "yes" if allow_modify_external_python else "no",
    }


@dataclass
class LaunchContext:
    """Collaborators needed to assemble a launch."""

    settings: Settings
    extra_addons: list[str] = field(default_factory=list)
    port_source: PortSource | None = None

    def __post_init__(self) -> None:
        self._ports: PortSource = self.port_source or ServerPort(self.settings)

    @property
    def launch_path(self) -> str:
        return str(self.settings.paths.launch_path)

    @property
    def pip_path(self) -> str:
        configured = self.settings.get("pipPath")
        return str(configured) if configured else str(self.settings.paths.bundled_pip_path)

    def launch_args(self) -> list[str]:
        return ["--python", self.launch_path]

    def build_env(self) -> dict[str, str]:
        return build_launch_env(
            AddonFolder.all(self.settings, self.extra_addons),
            self._ports,
            self.pip_path,
            bool(self.settings.get("allowModifyExternalPython")),
        )
