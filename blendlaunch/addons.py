"""Addon folders whose code Blender should load at startup."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable

from blendlaunch.config.settings import Settings
from blendlaunch.errors import AddonFolderError

logger = logging.getLogger(__name__)

AUTO_LOAD_DIRECTORY = "auto"


@dataclass(frozen=True)
class AddonFolder:
    path: Path
    load_directory: str = AUTO_LOAD_DIRECTORY

    def get_load_directory(self) -> str:
        """Directory Blender imports the addon from."""
        if self.load_directory in ("", AUTO_LOAD_DIRECTORY):
            return str(self.path)
        return str((self.path / self.load_directory).resolve())

    def validate(self) -> None:
        if not self.path.is_dir():
            raise AddonFolderError(f"Addon folder does not exist: {self.path}")
        load_dir = Path(self.get_load_directory())
        if not (load_dir / "__init__.py").is_file():
            raise AddonFolderError(f"No __init__.py in addon load directory: {load_dir}")

    @classmethod
    def from_setting(cls, item: Any, base: Path | None = None) -> AddonFolder:
        if isinstance(item, str):
            raw_path, load_directory = item, AUTO_LOAD_DIRECTORY
        else:
            raw_path = item["path"]
            load_directory = item.get("loadDirectory", AUTO_LOAD_DIRECTORY)
        path = Path(raw_path).expanduser()
        if not path.is_absolute() and base is not None:
            path = base / path
        return cls(path=path.resolve(), load_directory=load_directory)

    @classmethod
    def all(cls, settings: Settings, extra_paths: Iterable[str] = ()) -> list[AddonFolder]:
        """Addon folders from the ``addonFolders`` setting plus ``extra_paths``.

        Relative setting paths are taken against the workspace root. Every
        folder is checked; one bad folder fails the whole lookup.
        """
        base = settings.paths.workspace
        folders: list[AddonFolder] = []
        seen: set[Path] = set()
        for item in [*(settings.get("addonFolders") or []), *extra_paths]:
            folder = cls.from_setting(item, base)
            if folder.path in seen:
                continue
            folder.validate()
            seen.add(folder.path)
            folders.append(folder)
        logger.debug("Found %d addon folder(s)", len(folders))
        return folders
