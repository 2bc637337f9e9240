"""Commands run in response to user actions.

A command is a callable taking the application.  It changes the application's
state and raises CommandError when it cannot do its job.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

from termreq.actions import InputMode, StatesNames
from termreq.docview import help_reader
from termreq.web import Method

Command = Callable[[Any], None]

_METHOD_CYCLE = (
    Method.GET,
    Method.POST,
    Method.PUT,
    Method.PATCH,
    Method.DELETE,
    Method.HEAD,
)


class CommandError(Exception):
    """Raised by a command that fails."""


def execute(app: Any, command: Command) -> None:
    """Run a command against the application."""
    command(app)


# General -----------------------------------------------------------------


def do_nothing(app: Any) -> None:
    """Leave everything as it is."""
    del app  # deliberately changes nothing


def err(app: Any) -> None:
    """Always fail."""
    message = "Ai"
    raise CommandError(message)


def show_help(app: Any) -> None:
    """Clear the log and switch to help mode."""
    app.clear_log()
    app.data_store.mode = InputMode.HELP


def quit(app: Any) -> None:  # noqa: A001 - the command's name in the key map
    """Ask the application to finish."""
    app.is_finished = True


# Docs --------------------------------------------------------------------


def open_help_screen(app: Any) -> None:
    """Load the help document and show it."""
    try:
        reader = help_reader(app.help_path)
    except (OSError, ValueError) as exc:
        raise CommandError(str(exc)) from exc
    app.data_store.doc_reader = reader
    app.data_store.mode = InputMode.HELP


# Jumps -------------------------------------------------------------------


def go_to_tab_section(app: Any) -> None:
    app.set_new_state(StatesNames.TAB_LIST)


def go_to_url_section(app: Any) -> None:
    app.set_new_state(StatesNames.URL)


def go_to_request_body_section(app: Any) -> None:
    app.set_new_state(StatesNames.REQUEST_BODY)


def go_to_request_header_section(app: Any) -> None:
    app.set_new_state(StatesNames.REQUEST_HEADERS)


def go_to_response_body_section(app: Any) -> None:
    app.set_new_state(StatesNames.RESPONSE_BODY)


def go_to_response_headers_section(app: Any) -> None:
    app.set_new_state(StatesNames.RESPONSE_HEADER)


def go_to_log_section(app: Any) -> None:
    app.set_new_state(StatesNames.LOG)


# Request -----------------------------------------------------------------


def save_request(app: Any) -> None:
    """Save the selected request; the outcome is reported in the log."""
    store = app.data_store
    try:
        store.save_request()
    except OSError as exc:
        store.set_log_error("ERROR SAVE REQUEST", str(exc))
    else:
        store.set_log_helping("SAVED", "")


def switch_request_options(app: Any) -> None:
    """Reserved for switching request options; behaves like do_nothing."""
    do_nothing(app)


def _apply_body(app: Any) -> None:
    store = app.data_store
    request = store.get_request()
    request.body = store.input_buffer.value
    store.update_request(request)


def edit_request_body(app: Any) -> None:
    """Edit the request body in the external editor."""
    app.set_vim_mode_with_command(_apply_body, app.data_store.get_request().body)


def _parse_headers(text: str) -> dict[str, str]:
    data = json.loads(text)
    if not isinstance(data, dict) or not all(
        isinstance(key, str) and isinstance(value, str) for key, value in data.items()
    ):
        raise ValueError("headers must be a JSON object of strings")
    return data


def _apply_headers(app: Any) -> None:
    store = app.data_store
    try:
        headers = _parse_headers(store.input_buffer.value)
    except ValueError as exc:
        store.set_log_error("ERROR HEADERS", str(exc))
        # Roll back to the headers from before the failed edit, if readable.
        store.input_buffer.reset_to_backup()
        try:
            headers = _parse_headers(store.input_buffer.value)
        except ValueError:
            headers = {}
    request = store.get_request()
    request.headers = headers
    store.update_request(request)


def edit_request_headers(app: Any) -> None:
    """Edit the request headers, as pretty JSON, in the external editor."""
    headers = app.data_store.get_request().headers
    app.set_vim_mode_with_command(_apply_headers, json.dumps(headers, indent=2, ensure_ascii=False))


def switch_request_method(app: Any) -> None:
    """Move the request to the next HTTP method in the cycle."""
    store = app.data_store
    request = store.get_request()
    current = _METHOD_CYCLE.index(request.method) if request.method in _METHOD_CYCLE else 0
    request.method = _METHOD_CYCLE[(current + 1) % len(_METHOD_CYCLE)]
    store.update_request(request)


def _apply_url(app: Any) -> None:
    store = app.data_store
    request = store.get_request()
    request.url = store.input_buffer.value
    store.update_request(request)


def edit_request_url(app: Any) -> None:
    """Type a new URL for the request."""
    app.set_input_mode_with_command(_apply_url, app.data_store.get_request().url)


def restart_body_of_file(app: Any) -> None:
    """Reload the request body from its edition file."""
    store = app.data_store
    try:
        content = store.config.edition_files_handler.get_content(store.request_uuid)
    except OSError as exc:
        raise CommandError(str(exc)) from exc
    request = store.get_request()
    request.body = content
    store.update_request(request)


# Response ----------------------------------------------------------------


def edit_response(app: Any) -> None:
    """Open the response body in the external editor; edits are discarded."""
    app.set_vim_mode_with_command(do_nothing, app.data_store.response.body)


# Submit ------------------------------------------------------------------


def submit(app: Any) -> None:
    """Send the selected request."""
    app.dispatch_submit()


# Tabs --------------------------------------------------------------------


def go_to_next_tab(app: Any) -> None:
    app.data_store.goto_next_request()


def go_to_previous_tab(app: Any) -> None:
    app.data_store.goto_prev_request()


def add_new_tab(app: Any) -> None:
    app.data_store.add_request()


def _apply_name(app: Any) -> None:
    store = app.data_store
    request = store.get_request()
    request.name = store.input_buffer.value
    store.update_request(request)


def rename_tab(app: Any) -> None:
    """Type a new name for the selected request."""
    app.set_input_mode_with_command(_apply_name, app.data_store.get_request().name)


def delete_tab(app: Any) -> None:
    app.data_store.delete_current_request()


# UI ----------------------------------------------------------------------


def grow_right_ui(app: Any) -> None:
    app.data_store.config.view.grow_right_block()


def grow_left_ui(app: Any) -> None:
    app.data_store.config.view.grow_left_block()