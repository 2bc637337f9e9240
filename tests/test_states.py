import pytest

from termreq import commands
from termreq.actions import Actions, StatesNames
from termreq.states import State, StateManager, build_state


@pytest.mark.parametrize("name", list(StatesNames))
def test_build_state_keeps_name(name):
    assert build_state(name).name is name


def test_empty_state_has_no_commands():
    assert build_state(StatesNames.EMPTY).commands == {}


def test_default_state_bindings():
    bindings = build_state(StatesNames.DEFAULT).commands
    assert bindings[Actions.QUIT] is commands.quit
    assert bindings[Actions.SUBMIT] is commands.submit
    assert bindings[Actions.ASK_FOR_HELP] is commands.open_help_screen


def test_url_state_bindings():
    bindings = build_state(StatesNames.URL).commands
    assert bindings[Actions.SWITCH] is commands.switch_request_method
    assert bindings[Actions.EDIT] is commands.edit_request_url


def test_manager_starts_in_default_state():
    manager = StateManager()
    assert manager.state.name is StatesNames.DEFAULT
    assert manager.command_for(Actions.DOWN) is commands.go_to_log_section


def test_active_state_wins_over_global():
    manager = StateManager()
    manager.set_state(build_state(StatesNames.URL))
    assert manager.state.name is StatesNames.URL
    assert manager.command_for(Actions.DOWN) is commands.go_to_request_body_section
    assert manager.command_for(Actions.QUIT) is commands.quit


def test_set_state_default_restores_default():
    manager = StateManager()
    manager.set_state(build_state(StatesNames.LOG))
    manager.set_state_default()
    assert manager.state.name is StatesNames.DEFAULT


def test_unbound_action_returns_none():
    manager = StateManager()
    manager.set_state(build_state(StatesNames.EMPTY))
    assert manager.command_for(Actions.UNDO) is None


def test_command_map_merges_both_maps():
    global_state = State(StatesNames.DEFAULT, {Actions.QUIT: commands.quit, Actions.UP: commands.do_nothing})
    manager = StateManager(global_state=global_state)
    manager.set_state(State(StatesNames.LOG, {Actions.UP: commands.go_to_tab_section}))
    merged = manager.command_map()
    assert merged == {Actions.QUIT: commands.quit, Actions.UP: commands.go_to_tab_section}