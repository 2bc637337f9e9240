"""Text buffer filled while the user types or edits."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from termreq.commands import do_nothing


@dataclass
class InputBuffer:
    """Text being edited, its original value and the command run when done."""

    value: str = ""
    command: Callable[[Any], None] = do_nothing
    value_backup: str | None = None

    def set_backup(self, value: str) -> None:
        """Remember the value to restore when editing is cancelled."""
        self.value_backup = value

    def reset_to_backup(self) -> None:
        """Restore the remembered value, or empty text if there is none."""
        self.value = self.value_backup if self.value_backup is not None else ""