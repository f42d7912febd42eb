from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from blendlaunch.config.paths import CONFIG_HOME_ENV, PathConfig  # noqa: E402
from blendlaunch.config.settings import Settings  # noqa: E402


@pytest.fixture(autouse=True)
def config_home(tmp_path: Path, monkeypatch) -> Path:
    home = tmp_path / "config-home"
    monkeypatch.setenv(CONFIG_HOME_ENV, str(home))
    return home


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    path = tmp_path / "workspace"
    path.mkdir()
    return path


@pytest.fixture
def settings(config_home: Path, workspace: Path) -> Settings:
    return Settings(PathConfig(config_home=config_home, workspace=workspace))
