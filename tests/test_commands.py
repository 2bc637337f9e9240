import json

import pytest

from termreq import commands
from termreq.actions import InputMode, StatesNames
from termreq.config import ConfigManager, ExternalEditor
from termreq.files import FileEditionHandler
from termreq.logs import LogType
from termreq.save_files import SaveFiles
from termreq.stores import MainStore
from termreq.web import Method, Response


class FakeApp:
    def __init__(self, store, help_path=None):
        self.data_store = store
        self.is_finished = False
        self.help_path = help_path
        self.states = []
        self.submitted = 0

    def set_new_state(self, name):
        self.data_store.current_state = name
        self.states.append(name)

    def set_input_mode_with_command(self, callback, initial_buffer):
        store = self.data_store
        store.mode = InputMode.INSERT
        store.input_buffer.command = callback
        store.set_log_input_mode()
        store.input_buffer.set_backup(initial_buffer)
        store.input_buffer.value = initial_buffer

    def set_vim_mode_with_command(self, callback, initial_buffer):
        store = self.data_store
        store.mode = InputMode.VIM
        store.input_buffer.command = callback
        store.input_buffer.set_backup(initial_buffer)
        store.input_buffer.value = initial_buffer

    def dispatch_submit(self):
        self.submitted += 1

    def clear_log(self):
        self.data_store.clear_log()


@pytest.fixture
def store(tmp_path):
    config = ConfigManager(
        saved_requests=SaveFiles.load(tmp_path / "requests"),
        editor=ExternalEditor("vi"),
        edition_files_handler=FileEditionHandler(tmp_path),
    )
    return MainStore(config)


@pytest.fixture
def app(store):
    return FakeApp(store)


def finish_editing(app, value):
    app.data_store.input_buffer.value = value
    app.data_store.input_buffer.command(app)


def test_quit_marks_finished(app):
    commands.execute(app, commands.quit)
    assert app.is_finished is True


def test_err_raises():
    with pytest.raises(commands.CommandError, match="Ai"):
        commands.err(None)


def test_do_nothing_leaves_request(app):
    before = app.data_store.get_request()
    commands.execute(app, commands.do_nothing)
    assert app.data_store.get_request() == before


def test_show_help_clears_log(app):
    app.data_store.set_log_error("COMMAND ERROR", "x")
    commands.show_help(app)
    assert app.data_store.mode is InputMode.HELP
    assert app.data_store.log.log_type is LogType.EMPTY


def test_open_help_screen_loads_document(store, tmp_path):
    help_file = tmp_path / "help.json"
    help_file.write_text('{"content": [[["Text1", "ColorRed"], ["Text2", null]]]}')
    app = FakeApp(store, help_path=help_file)
    commands.open_help_screen(app)
    assert store.mode is InputMode.HELP
    assert [span.text for span in store.doc_reader.visible_lines()[0]] == ["Text1", "Text2"]


def test_open_help_screen_missing_file(store, tmp_path):
    app = FakeApp(store, help_path=tmp_path / "absent.json")
    with pytest.raises(commands.CommandError):
        commands.open_help_screen(app)
    assert store.mode is InputMode.NORMAL


@pytest.mark.parametrize(
    "command, name",
    [
        (commands.go_to_tab_section, StatesNames.TAB_LIST),
        (commands.go_to_url_section, StatesNames.URL),
        (commands.go_to_request_body_section, StatesNames.REQUEST_BODY),
        (commands.go_to_request_header_section, StatesNames.REQUEST_HEADERS),
        (commands.go_to_response_body_section, StatesNames.RESPONSE_BODY),
        (commands.go_to_response_headers_section, StatesNames.RESPONSE_HEADER),
        (commands.go_to_log_section, StatesNames.LOG),
    ],
)
def test_jumps_set_state(app, command, name):
    command(app)
    assert app.states == [name]


def test_save_request_writes_and_marks_saved(app):
    store = app.data_store
    request = store.get_request()
    request.name = "saved one"
    store.update_request(request)
    assert store.get_requests()[0].has_changed is True

    commands.save_request(app)

    assert store.get_requests()[0].has_changed is False
    assert store.log.log_type is LogType.HELP
    assert store.log.title == "SAVED"
    saved = store.config.saved_requests.get_request(store.request_uuid)
    assert saved.name == "saved one"


def test_switch_request_options_keeps_request(app):
    before = app.data_store.get_request()
    commands.switch_request_options(app)
    assert app.data_store.get_request() == before


def test_switch_request_method_cycles(app):
    seen = []
    for _ in range(6):
        commands.switch_request_method(app)
        seen.append(app.data_store.get_request().method)
    assert seen == [Method.POST, Method.PUT, Method.PATCH, Method.DELETE, Method.HEAD, Method.GET]


def test_edit_request_url(app):
    commands.edit_request_url(app)
    store = app.data_store
    assert store.mode is InputMode.INSERT
    assert store.log.log_type is LogType.INPUT_MODE
    assert store.input_buffer.value == store.get_request().url
    finish_editing(app, "url.com")
    assert store.get_request().url == "url.com"
    assert store.get_request().has_changed is True


def test_rename_tab(app):
    commands.rename_tab(app)
    store = app.data_store
    assert store.input_buffer.value == "New Request"
    finish_editing(app, "Renamed")
    assert store.get_request().name == "Renamed"


def test_edit_request_body(app):
    commands.edit_request_body(app)
    store = app.data_store
    assert store.mode is InputMode.VIM
    assert store.input_buffer.value == "{}"
    finish_editing(app, '{"a": 1}')
    assert store.get_request().body == '{"a": 1}'


def test_edit_request_headers_valid(app):
    commands.edit_request_headers(app)
    store = app.data_store
    assert json.loads(store.input_buffer.value) == {"Content-Type": "application/json"}
    finish_editing(app, '{"Accept": "text/plain"}')
    assert store.get_request().headers == {"Accept": "text/plain"}


def test_edit_request_headers_invalid_rolls_back(app):
    commands.edit_request_headers(app)
    store = app.data_store
    finish_editing(app, "not json")
    assert store.log.log_type is LogType.ERROR
    assert store.log.title == "ERROR HEADERS"
    assert store.get_request().headers == {"Content-Type": "application/json"}


def test_restart_body_of_file(app):
    store = app.data_store
    store.config.edition_files_handler.save_content(store.request_uuid, "from file")
    commands.restart_body_of_file(app)
    assert store.get_request().body == "from file"


def test_restart_body_without_file_fails(app):
    with pytest.raises(commands.CommandError):
        commands.restart_body_of_file(app)


def test_edit_response_discards_changes(app):
    store = app.data_store
    store.set_response(Response(status=200, body="hello"))
    commands.edit_response(app)
    assert store.mode is InputMode.VIM
    assert store.input_buffer.value == "hello"
    finish_editing(app, "changed")
    assert store.response.body == "hello"


def test_submit_dispatches(app):
    commands.submit(app)
    assert app.submitted == 1


def test_tabs_add_move_delete(app):
    store = app.data_store
    assert store.total_requests == 1
    commands.add_new_tab(app)
    assert store.total_requests == 2
    assert store.request_ind == 1
    commands.go_to_next_tab(app)
    assert store.request_ind == 0
    commands.go_to_previous_tab(app)
    assert store.request_ind == 1
    commands.delete_tab(app)
    assert store.total_requests == 1


def test_grow_ui(app):
    view = app.data_store.config.view
    commands.grow_right_ui(app)
    assert view.dimension_horizontal_blocks == (1, 2)
    commands.grow_left_ui(app)
    assert view.dimension_horizontal_blocks == (1, 1)