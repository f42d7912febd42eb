"""Test doubles shared across test modules."""

from __future__ import annotations

from pathlib import Path

from blendlaunch.executable.models import BlenderPathData


class FakePrompter:
    """Records prompts and replays canned answers (None = dismissed)."""

    def __init__(self, open_file: str | None = None, pick: str | None = None) -> None:
        self.open_file = open_file
        self.pick = pick
        self.open_calls: list[str] = []
        self.pick_calls: list[tuple[list[str], str]] = []

    def ask_open_file(self, open_label: str) -> str | None:
        self.open_calls.append(open_label)
        return self.open_file

    def ask_pick(self, items: list[str], title: str) -> str | None:
        self.pick_calls.append((list(items), title))
        return self.pick

    @property
    def prompt_count(self) -> int:
        return len(self.open_calls) + len(self.pick_calls)


class MemoryStore:
    def __init__(self, entries: list[BlenderPathData] | None = None) -> None:
        self.entries = list(entries or [])
        self.saves: list[list[BlenderPathData]] = []

    def load(self) -> list[BlenderPathData]:
        return list(self.entries)

    def save(self, entries: list[BlenderPathData]) -> None:
        self.entries = list(entries)
        self.saves.append(list(entries))


class FakePort:
    def __init__(self, port: int = 6000) -> None:
        self.port = port

    def current_server_port(self) -> int:
        return self.port


class FakeAddon:
    def __init__(self, load_directory: str) -> None:
        self.load_directory = load_directory

    def get_load_directory(self) -> str:
        return self.load_directory


class FakeProc:
    def __init__(self, returncode: int = 0, stdout: str = "", stderr: str = "") -> None:
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


def make_addon(root: Path, name: str) -> Path:
    folder = root / name
    folder.mkdir(parents=True)
    (folder / "__init__.py").write_text("bl_info = {'name': 'x'}\n", encoding="utf-8")
    return folder
