"""Identifiers and a thread-safe boolean flag."""

from __future__ import annotations

import threading
import uuid


def new_id() -> str:
    """Return a new random identifier."""
    return str(uuid.uuid4())


class SharedFlag:
    """A boolean that can be read and written safely from several threads."""

    def __init__(self, value: bool = False) -> None:
        self._value = value
        self._lock = threading.Lock()

    def get(self) -> bool:
        with self._lock:
            return self._value

    def set(self, value: bool) -> None:
        with self._lock:
            self._value = value