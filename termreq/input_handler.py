"""Reading keys from the terminal and turning them into edits and actions."""

from __future__ import annotations

import copy
import os
import queue
import select
import sys
import threading
from collections.abc import Callable

from termreq.actions import Actions
from termreq.buffer import InputBuffer
from termreq.ids import SharedFlag
from termreq.keymaps import Key, KeyboardListener, KeyCode

KeyReader = Callable[[], "KeyCode | None"]

_ESCAPE_SEQUENCES = {
    "[A": Key.UP,
    "[B": Key.DOWN,
    "[C": Key.RIGHT,
    "[D": Key.LEFT,
    "OA": Key.UP,
    "OB": Key.DOWN,
    "OC": Key.RIGHT,
    "OD": Key.LEFT,
}

_CONTROL_KEYS = {
    "\r": Key.ENTER,
    "\n": Key.ENTER,
    "\x7f": Key.BACKSPACE,
    "\x08": Key.BACKSPACE,
    "\t": Key.TAB,
}


def _utf8_extra_bytes(lead: int) -> int:
    if 0xC0 <= lead < 0xE0:
        return 1
    if 0xE0 <= lead < 0xF0:
        return 2
    if 0xF0 <= lead < 0xF8:
        return 3
    return 0


def _read_terminal_key() -> KeyCode | None:
    """Read one key press from standard input, which should be in raw mode.

    Returns None for input that is not a known key.
    """
    fd = sys.stdin.fileno()
    first = os.read(fd, 1)
    if not first:
        raise EOFError("standard input closed")
    if first == b"\x1b":
        ready, _, _ = select.select([fd], [], [], 0.05)
        if not ready:
            return Key.ESC
        sequence = os.read(fd, 2).decode("utf-8", errors="replace")
        return _ESCAPE_SEQUENCES.get(sequence)
    data = first
    extra = _utf8_extra_bytes(first[0])
    if extra:
        data += os.read(fd, extra)
    text = data.decode("utf-8", errors="replace")
    if text in _CONTROL_KEYS:
        return _CONTROL_KEYS[text]
    if len(text) == 1 and ord(text) < 0x20:
        return None
    return text


def doc_reading_step(key: KeyCode | None, position: int) -> tuple[int, bool]:
    """New scroll position for a key, and whether reading is finished.

    Up and ``k`` scroll up, down and ``j`` scroll down, any other key closes
    the document; None (no key) leaves the position as it is.
    """
    if key is None:
        new_position = position
    elif key in ("k", Key.UP):
        new_position = position - 1
    elif key in ("j", Key.DOWN):
        new_position = position + 1
    else:
        return 0, True
    return max(0, new_position), False


def typing_step(key: KeyCode | None, buffer: InputBuffer) -> tuple[str, bool]:
    """New buffer text for a key, and whether typing is finished.

    The buffer itself is left unchanged.
    """
    edited = copy.copy(buffer)
    finished = False
    if key is Key.ENTER:
        finished = True
    elif key is Key.BACKSPACE:
        edited.value = edited.value[:-1]
    elif key is Key.ESC:
        edited.reset_to_backup()
        finished = True
    elif isinstance(key, str):
        edited.value = edited.value + key
    return edited.value, finished


class InputHandler:
    """Reads keys and applies them to the listener, the help reader or the input buffer."""

    def __init__(
        self,
        listener: KeyboardListener | None = None,
        key_reader: KeyReader | None = None,
    ) -> None:
        self.listener = listener if listener is not None else KeyboardListener()
        self._read_key = key_reader if key_reader is not None else _read_terminal_key
        self._lock = threading.Lock()

    def async_handler(self, queue: queue.Queue, when_finish: SharedFlag) -> threading.Thread:
        """Wait for one key in the background and put its action on the queue.

        The flag is set once the key has been read; an unbound key gives ``Actions.NULL``.
        """
        def work() -> None:
            with self._lock:
                key = self._read_key()
                action = Actions.NULL
                if key is not None:
                    action = self.listener.get_command(key) or Actions.NULL
            when_finish.set(True)
            queue.put(action)

        thread = threading.Thread(target=work, daemon=True)
        thread.start()
        return thread

    def handle_doc_reading(self, position: int) -> tuple[int, bool]:
        """Read a key while the help document is open."""
        return doc_reading_step(self._read_key(), position)

    def handle_typing(self, buffer: InputBuffer) -> tuple[str, bool]:
        """Read a key while text is being typed."""
        return typing_step(self._read_key(), buffer)