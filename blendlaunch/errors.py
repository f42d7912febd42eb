"""Exception types raised by blendlaunch."""

from __future__ import annotations


class BlendLaunchError(Exception):
    """Base class for blendlaunch errors."""


class UserCancelled(BlendLaunchError):
    """Raised when an interactive prompt is dismissed without a value.

    This is expected control flow, not a defect. Callers report it quietly.
    """


class ExecutableValidationError(BlendLaunchError):
    """Raised when a candidate file is not a usable Blender executable."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path


class UnexpectedExecutableName(ExecutableValidationError):
    """The file name does not begin with 'blender'."""


class NotBlenderExecutable(ExecutableValidationError):
    """The file ran but did not echo the test sentinel."""


class ConfigValidationError(BlendLaunchError):
    """Raised when settings fail schema validation."""

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class AddonFolderError(BlendLaunchError):
    """Raised when a configured addon folder cannot be used."""


class DebuggerError(BlendLaunchError):
    """Raised when a debug session cannot be started."""
