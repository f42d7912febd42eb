"""Checks that a file really is a Blender executable."""

from __future__ import annotations

import logging
import os
import subprocess

from blendlaunch.errors import NotBlenderExecutable, UnexpectedExecutableName

logger = logging.getLogger(__name__)

EXPECTED_NAME_PREFIX = "blender"
TEST_STRING = "###TEST_BLENDER###"
DEFAULT_TIMEOUT = 60.0


def build_test_command(filepath: str) -> list[str]:
    script = f"import sys;print('{TEST_STRING}');sys.stdout.flush();sys.exit()"
    return [filepath, "--factory-startup", "-b", "--python-expr", script]


def verify_blender_executable(filepath: str, timeout: float | None = DEFAULT_TIMEOUT) -> None:
    """Raise unless ``filepath`` is a Blender executable.

    The name check runs first so arbitrary binaries are never started. The
    functional check runs the file headless with factory settings and looks
    for the sentinel on stdout; exit code and stderr are ignored.

    Raises:
        UnexpectedExecutableName: The base name does not start with 'blender'.
        NotBlenderExecutable: The sentinel was not printed, the file could not
            be started, or it did not finish within ``timeout`` seconds.
    """
    name = os.path.basename(filepath)
    if not name.lower().startswith(EXPECTED_NAME_PREFIX):
        raise UnexpectedExecutableName(
            f"Expected executable name to begin with '{EXPECTED_NAME_PREFIX}'", filepath
        )

    logger.debug("Running Blender check on %s", filepath)
    try:
        proc = subprocess.run(  # noqa: S603
            build_test_command(filepath),
            text=True,
            errors="replace",
            capture_output=True,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as exc:
        raise NotBlenderExecutable(
            f"Path is not Blender (no response within {timeout}s).", filepath
        ) from exc
    except OSError as exc:
        raise NotBlenderExecutable(f"Path is not Blender ({exc}).", filepath) from exc

    if TEST_STRING not in (proc.stdout or ""):
        raise NotBlenderExecutable("Path is not Blender.", filepath)
    logger.info("Verified Blender executable %s", filepath)
