"""Interactive prompts used while resolving executables."""

from __future__ import annotations

import os
from typing import Protocol, TypeVar

import questionary  # type: ignore[import-untyped]
from questionary import Style

from blendlaunch.errors import UserCancelled

T = TypeVar("T")


def check_cancelled(value: T | None, ctx: str) -> T:
    if value is None:
        raise UserCancelled(f"{ctx} cancelled")
    return value


def get_style() -> Style:
    return Style(
        [
            ("qmark", "fg:#e87d0d bold"),
            ("question", "bold"),
            ("pointer", "fg:#e87d0d bold"),
            ("highlighted", "fg:#e87d0d bold"),
            ("answer", "fg:#265787 bold"),
        ]
    )


class Prompter(Protocol):
    def ask_open_file(self, open_label: str) -> str | None: ...

    def ask_pick(self, items: list[str], title: str) -> str | None: ...


def _validate_file(text: str) -> bool | str:
    if not text:
        return "Select a file"
    if not os.path.isfile(os.path.expanduser(text)):
        return "Not a file"
    return True


class QuestionaryPrompter:
    """Terminal prompts. Both methods return None when dismissed."""

    def ask_open_file(self, open_label: str) -> str | None:
        answer = questionary.path(
            f"{open_label}:",
            only_directories=False,
            validate=_validate_file,
            style=get_style(),
        ).ask()
        if not answer:
            return None
        return os.path.abspath(os.path.expanduser(answer))

    def ask_pick(self, items: list[str], title: str) -> str | None:
        return questionary.select(
            f"{title}:",
            choices=items,
            style=get_style(),
        ).ask()
