"""Focus states, each with the commands its actions run."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from termreq import commands
from termreq.actions import Actions, StatesNames

Command = Callable[[Any], None]
CommandsMap = dict[Actions, Command]


@dataclass(frozen=True)
class State:
    """A named state and the commands bound to actions while it is active."""

    name: StatesNames
    commands: CommandsMap = field(default_factory=dict)


def _commands_for(name: StatesNames) -> CommandsMap:
    if name is StatesNames.LOG:
        return {
            Actions.EDIT: commands.do_nothing,
            Actions.SWITCH: commands.do_nothing,
            Actions.UP: commands.go_to_request_body_section,
            Actions.DOWN: commands.do_nothing,
        }
    if name is StatesNames.REQUEST_BODY:
        return {
            Actions.EDIT: commands.edit_request_body,
            Actions.SWITCH: commands.go_to_request_header_section,
            Actions.UP: commands.go_to_url_section,
            Actions.DOWN: commands.go_to_log_section,
            Actions.RIGHT: commands.go_to_response_body_section,
        }
    if name is StatesNames.REQUEST_HEADERS:
        return {
            Actions.EDIT: commands.edit_request_headers,
            Actions.SWITCH: commands.go_to_request_body_section,
            Actions.UP: commands.go_to_url_section,
            Actions.DOWN: commands.go_to_log_section,
        }
    if name is StatesNames.URL:
        return {
            Actions.UP: commands.go_to_tab_section,
            Actions.DOWN: commands.go_to_request_body_section,
            Actions.RIGHT: commands.go_to_response_body_section,
            Actions.EDIT: commands.edit_request_url,
            Actions.NEW: commands.add_new_tab,
            Actions.SWITCH: commands.switch_request_method,
        }
    if name is StatesNames.RESPONSE_BODY:
        return {
            Actions.EDIT: commands.edit_response,
            Actions.SWITCH: commands.go_to_response_headers_section,
            Actions.LEFT: commands.go_to_request_body_section,
            Actions.UP: commands.go_to_tab_section,
            Actions.DOWN: commands.go_to_log_section,
        }
    if name is StatesNames.RESPONSE_HEADER:
        return {
            Actions.EDIT: commands.do_nothing,
            Actions.SWITCH: commands.go_to_response_body_section,
            Actions.LEFT: commands.go_to_request_body_section,
            Actions.UP: commands.go_to_tab_section,
            Actions.DOWN: commands.go_to_log_section,
        }
    if name is StatesNames.TAB_LIST:
        return {
            Actions.EDIT: commands.rename_tab,
            Actions.SWITCH: commands.go_to_next_tab,
            Actions.NEW: commands.add_new_tab,
            Actions.UP: commands.do_nothing,
            Actions.DOWN: commands.go_to_url_section,
            Actions.DELETE: commands.delete_tab,
        }
    if name is StatesNames.DEFAULT:
        return {
            Actions.UP: commands.go_to_tab_section,
            Actions.DOWN: commands.go_to_log_section,
            Actions.RIGHT: commands.go_to_response_body_section,
            Actions.LEFT: commands.go_to_request_body_section,
            Actions.GO_TO_NEXT_TAB: commands.go_to_next_tab,
            Actions.GO_TO_PREVIOUS_TAB: commands.go_to_previous_tab,
            Actions.GO_TO_TAB_LIST: commands.go_to_tab_section,
            Actions.GO_TO_REQUEST_BODY: commands.go_to_request_body_section,
            Actions.GO_TO_RESPONSE_BODY: commands.go_to_response_body_section,
            Actions.GO_TO_LOGS: commands.go_to_log_section,
            Actions.RENAME_TAB: commands.rename_tab,
            Actions.DELETE_TAB: commands.delete_tab,
            Actions.SUBMIT: commands.submit,
            Actions.QUIT: commands.quit,
            Actions.ASK_FOR_HELP: commands.open_help_screen,
            Actions.SAVE: commands.save_request,
            Actions.GROW_HORIZONTAL_UI_LEFT: commands.grow_left_ui,
            Actions.GROW_HORIZONTAL_UI_RIGHT: commands.grow_right_ui,
            Actions.RELOAD_BODY: commands.restart_body_of_file,
        }
    return {}


def build_state(name: StatesNames) -> State:
    """The state with the given name and its command bindings."""
    return State(name, _commands_for(name))


class StateManager:
    """The active state, a default one and a global state that is always on."""

    def __init__(self, default_state: State | None = None, global_state: State | None = None) -> None:
        self.default_state = default_state if default_state is not None else build_state(StatesNames.DEFAULT)
        self.global_state = global_state if global_state is not None else build_state(StatesNames.DEFAULT)
        self._current: State | None = None

    @property
    def state(self) -> State:
        """The active state, or the default one when none is set."""
        return self._current if self._current is not None else self.default_state

    def set_state(self, state: State) -> None:
        self._current = state

    def set_state_default(self) -> None:
        self._current = None

    def command_map(self) -> CommandsMap:
        """Global bindings overlaid by the active state's, which win on conflicts."""
        merged = dict(self.global_state.commands)
        merged.update(self.state.commands)
        return merged

    def command_for(self, action: Actions) -> Command | None:
        """Command bound to the action, or None."""
        return self.command_map().get(action)