"""Blender executable registry, discovery and validation."""

from __future__ import annotations

from blendlaunch.executable.models import BlenderPathData, DiscoveryMode
from blendlaunch.executable.registry import RegistryStore, SettingsRegistryStore
from blendlaunch.executable.resolver import ExecutableResolver
from blendlaunch.executable.validation import TEST_STRING, verify_blender_executable

__all__ = [
    "TEST_STRING",
    "BlenderPathData",
    "DiscoveryMode",
    "ExecutableResolver",
    "RegistryStore",
    "SettingsRegistryStore",
    "verify_blender_executable",
]
