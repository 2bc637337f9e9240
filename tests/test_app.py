import json
import queue

import pytest

from termreq import commands
from termreq.actions import Actions, InputMode, StatesNames
from termreq.app import App
from termreq.client import HttpClientRepository, RequestError, WebClient
from termreq.config import ConfigManager, ExternalEditor
from termreq.files import FileEditionHandler
from termreq.logs import LogType
from termreq.save_files import SaveFiles
from termreq.stores import MainStore
from termreq.web import INTERNAL_ERROR_STATUS, Response


class _FixedRepository(HttpClientRepository):
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    async def _reply(self, method, url):
        self.calls.append((method, url))
        if self.error is not None:
            raise self.error
        return self.response

    async def call_get(self, url, headers):
        return await self._reply("GET", url)

    async def call_post(self, url, headers, body):
        return await self._reply("POST", url)

    async def call_put(self, url, headers, body):
        return await self._reply("PUT", url)

    async def call_patch(self, url, headers, body):
        return await self._reply("PATCH", url)

    async def call_delete(self, url, headers, body):
        return await self._reply("DELETE", url)

    async def call_head(self, url, headers, body):
        return await self._reply("HEAD", url)


@pytest.fixture
def store(tmp_path):
    handler = FileEditionHandler(tmp_path)
    config = ConfigManager(
        saved_requests=SaveFiles.load(tmp_path / "requests"),
        editor=ExternalEditor("editor"),
        edition_files_handler=handler,
    )
    yield MainStore(config)
    handler.close()


@pytest.fixture
def renderer():
    return queue.Queue()


def test_mode_reads_and_writes_the_store(store):
    app = App(store)
    assert app.mode is InputMode.NORMAL
    app.mode = InputMode.HELP
    assert store.mode is InputMode.HELP


def test_input_mode_sets_buffer_log_and_backup(store):
    app = App(store)
    app.set_input_mode_with_command(commands.do_nothing, "initial")
    assert app.mode is InputMode.INSERT
    assert store.log.log_type is LogType.INPUT_MODE
    assert store.log.title == "INSERT"
    assert app.input_buffer_value == "initial"
    app.input_buffer_value = "changed"
    store.input_buffer.reset_to_backup()
    assert store.input_buffer.value == "initial"


def test_vim_mode_keeps_log(store):
    app = App(store)
    app.set_vim_mode_with_command(commands.do_nothing, "body")
    assert app.mode is InputMode.VIM
    assert store.log.log_type is LogType.EMPTY
    assert app.input_buffer_value == "body"


def test_exec_input_buffer_command_runs_callback(store):
    app = App(store)
    commands.execute(app, commands.rename_tab)
    assert app.input_buffer_value == store.get_request().name
    app.input_buffer_value = "Users"
    app.exec_input_buffer_command()
    request = store.get_request()
    assert request.name == "Users"
    assert request.has_changed is True


def test_set_new_state_changes_bindings(store):
    app = App(store)
    app.set_new_state(StatesNames.URL)
    assert store.current_state is StatesNames.URL
    assert app.state.name is StatesNames.URL
    assert app.command_of_action(Actions.EDIT) is commands.edit_request_url
    assert app.command_of_action(Actions.QUIT) is commands.quit


def test_command_of_unbound_action_is_none(store):
    app = App(store)
    assert app.command_of_action(Actions.UNDO) is None
    assert app.command_of_action(Actions.UP) is commands.go_to_tab_section


def test_dispatch_submit_stores_response(store, renderer):
    repository = _FixedRepository(Response(status=200, response_time=1, headers={}, body='{"a": 1}'))
    app = App(store, web_client=WebClient(repository), renderer=renderer)
    request = store.get_request()
    request.url = "example.com"
    store.update_request(request)

    app.dispatch_submit().join(timeout=5)

    assert repository.calls == [("GET", "http://example.com")]
    assert store.response.status == 200
    assert json.loads(store.response.body) == {"a": 1}
    assert renderer.get_nowait() is Actions.NULL


def test_dispatch_submit_failure_gives_internal_error(store, renderer):
    repository = _FixedRepository(error=RequestError("boom"))
    app = App(store, web_client=WebClient(repository), renderer=renderer)

    app.dispatch_submit().join(timeout=5)

    assert store.response.status == INTERNAL_ERROR_STATUS
    assert store.response.body == "boom"
    assert renderer.get_nowait() is Actions.NULL


def test_rerender_requests_a_draw(store, renderer):
    app = App(store, renderer=renderer)
    app.rerender()
    assert renderer.get_nowait() is Actions.NULL


def test_rerender_without_renderer_fails(store):
    with pytest.raises(RuntimeError):
        App(store).rerender()


def test_clear_log_empties_log(store):
    app = App(store)
    store.set_log_error("COMMAND ERROR", "detail")
    app.clear_log()
    assert store.log.log_type is LogType.EMPTY
    assert store.log.title == ""