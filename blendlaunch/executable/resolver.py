"""Find a usable Blender executable, asking the user when needed."""

from __future__ import annotations

import logging
import os
from typing import Callable

from blendlaunch.executable.models import BlenderPathData, DiscoveryMode
from blendlaunch.executable.registry import RegistryStore
from blendlaunch.executable.validation import verify_blender_executable
from blendlaunch.prompts import Prompter, check_cancelled

logger = logging.getLogger(__name__)

Validator = Callable[[str], None]


class ExecutableResolver:
    """Resolve registry entries for a discovery mode.

    Args:
        store: Registry persistence.
        prompter: File picker and quick-pick prompts.
        validator: Raises if a picked file is not Blender.
    """

    def __init__(
        self,
        store: RegistryStore,
        prompter: Prompter,
        validator: Validator = verify_blender_executable,
    ) -> None:
        self.store = store
        self.prompter = prompter
        self.validator = validator

    def resolve(self, label: str, mode: DiscoveryMode) -> BlenderPathData:
        all_paths = self.store.load()
        usable = [item for item in all_paths if mode.matches(item)]

        if not usable:
            item = self._discover(label, mode)
            all_paths.append(item)
            self.store.save(all_paths)
            logger.info("Registered Blender executable %s (%s)", item.path, item.name)
            return item
        if len(usable) == 1:
            return usable[0]

        names = [item.name for item in usable]
        selected = check_cancelled(self.prompter.ask_pick(names, label), label)
        # duplicate names resolve to the first entry in registry order
        for item in usable:
            if item.name == selected:
                return item
        raise ValueError(f"Unknown selection: {selected}")

    def _discover(self, label: str, mode: DiscoveryMode) -> BlenderPathData:
        filepath = check_cancelled(self.prompter.ask_open_file(label), label)
        self.validator(filepath)
        item = BlenderPathData(
            path=filepath,
            name=os.path.basename(os.path.dirname(filepath)),
            is_debug=False,
        )
        mode.prepare(item)
        return item
