"""Key bindings and the listener that turns key presses into actions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Optional, Union

from termreq.actions import Actions


class Key(Enum):
    """Keys that do not produce a character; characters are plain strings."""

    ENTER = auto()
    BACKSPACE = auto()
    TAB = auto()
    ESC = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


KeyCode = Union[Key, str]


@dataclass
class Actionable:
    """What a key does: an action, or a nested map of follow-up keys.

    When ``sub_action`` is set, ``action`` is ignored.
    """

    action: Actions
    sub_action: Optional[Dict[KeyCode, "Actionable"]] = None


KeyMap = Dict[KeyCode, Actionable]


def default_keymap() -> KeyMap:
    """The standard key bindings."""
    go_map: KeyMap = {
        "g": Actionable(Actions.GO_TO_TAB_LIST),
        "t": Actionable(Actions.GO_TO_NEXT_TAB),
        "T": Actionable(Actions.GO_TO_PREVIOUS_TAB),
        "l": Actionable(Actions.GROW_HORIZONTAL_UI_RIGHT),
        "h": Actionable(Actions.GROW_HORIZONTAL_UI_LEFT),
    }
    return {
        "?": Actionable(Actions.ASK_FOR_HELP),
        Key.ENTER: Actionable(Actions.SUBMIT),
        "q": Actionable(Actions.QUIT),
        "e": Actionable(Actions.EDIT),
        "d": Actionable(Actions.DELETE),
        Key.TAB: Actionable(Actions.SWITCH),
        "j": Actionable(Actions.DOWN),
        Key.DOWN: Actionable(Actions.DOWN),
        "k": Actionable(Actions.UP),
        Key.UP: Actionable(Actions.UP),
        "l": Actionable(Actions.RIGHT),
        Key.RIGHT: Actionable(Actions.RIGHT),
        "h": Actionable(Actions.LEFT),
        Key.LEFT: Actionable(Actions.LEFT),
        "g": Actionable(Actions.NULL, sub_action=go_map),
        "G": Actionable(Actions.GO_TO_LOGS),
        "n": Actionable(Actions.NEW),
        "s": Actionable(Actions.SAVE),
        "r": Actionable(Actions.RELOAD_BODY),
    }


class KeyboardListener:
    """Resolves key presses against a key map, following nested maps."""

    def __init__(self, default_map: KeyMap | None = None) -> None:
        self.default: KeyMap = default_map if default_map is not None else default_keymap()
        self.current: KeyMap = self.default

    def get_command(self, key: KeyCode) -> Actions | None:
        """Action for the key, SUB_COMMAND when it opens a nested map, else None."""
        binding = self.current.get(key)
        if binding is None:
            self.current = self.default
            return None
        if binding.sub_action is not None:
            self.current = binding.sub_action
            return Actions.SUB_COMMAND
        self.current = self.default
        return binding.action