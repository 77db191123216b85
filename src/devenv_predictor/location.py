"""Single-slot working directory shared with the location tracker."""

from __future__ import annotations

import threading


class WorkingDirectory:
    """Latest observed location, replaced wholesale by the tracker.

    Readers take one `snapshot()` per request and use it throughout.
    """

    def __init__(self, path: str | None = None) -> None:
        self._lock = threading.Lock()
        self._path = path

    def set(self, path: str) -> None:
        with self._lock:
            self._path = path

    def clear(self) -> None:
        with self._lock:
            self._path = None

    def snapshot(self) -> str | None:
        with self._lock:
            return self._path
