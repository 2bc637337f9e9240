from termreq.actions import Actions
from termreq.keymaps import Actionable, Key, KeyboardListener, default_keymap


def test_should_init_and_be_defined():
    keymap = default_keymap()
    assert keymap.get("k") == Actionable(action=Actions.UP, sub_action=None)


def test_should_get_command_of_single_keymaps():
    keymap = KeyboardListener(default_keymap())
    assert keymap.get_command("k") == Actions.UP


def test_should_get_command_of_compound_keymaps():
    keymap = KeyboardListener(default_keymap())

    assert keymap.get_command("g") == Actions.SUB_COMMAND
    assert keymap.get_command("g") == Actions.GO_TO_TAB_LIST

    assert keymap.get_command("g") == Actions.SUB_COMMAND
    assert keymap.get_command("t") == Actions.GO_TO_NEXT_TAB


def test_should_reset_keymap_when_a_undefined_key_is_pressed():
    keymap = KeyboardListener(default_keymap())

    assert keymap.get_command("g") == Actions.SUB_COMMAND
    assert keymap.get_command("_") is None
    assert keymap.get_command("k") == Actions.UP


def test_nested_map_overrides_top_level_binding():
    keymap = KeyboardListener()
    assert keymap.get_command("g") == Actions.SUB_COMMAND
    assert keymap.get_command("l") == Actions.GROW_HORIZONTAL_UI_RIGHT
    assert keymap.get_command("l") == Actions.RIGHT


def test_previous_tab_binding():
    keymap = KeyboardListener()
    keymap.get_command("g")
    assert keymap.get_command("T") == Actions.GO_TO_PREVIOUS_TAB


def test_special_keys():
    keymap = KeyboardListener()
    assert keymap.get_command(Key.ENTER) == Actions.SUBMIT
    assert keymap.get_command(Key.TAB) == Actions.SWITCH
    assert keymap.get_command(Key.DOWN) == Actions.DOWN
    assert keymap.get_command(Key.ESC) is None


def test_listener_returns_to_default_after_action():
    keymap = KeyboardListener()
    keymap.get_command("g")
    keymap.get_command("g")
    assert keymap.current is keymap.default