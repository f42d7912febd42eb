"""Port of the editor-side server Blender connects back to."""

from __future__ import annotations

import socket

from blendlaunch.config.settings import Settings


def find_free_port(host: str = "127.0.0.1") -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind((host, 0))
        return int(sock.getsockname()[1])


class ServerPort:
    """Reports the port configured in ``editorPort``.

    When the setting is 0 a free localhost port is picked once and reused for
    the rest of the process.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self._allocated: int | None = None

    def current_server_port(self) -> int:
        configured = int(self.settings.get("editorPort") or 0)
        if configured > 0:
            return configured
        if self._allocated is None:
            self._allocated = find_free_port()
        return self._allocated
