"""Command-line entry point running the interactive client."""

from __future__ import annotations

import argparse
import queue
import sys
from pathlib import Path

from termreq.actions import Actions, InputMode
from termreq.app import App
from termreq.client import HttpxRepository, WebClient
from termreq.commands import CommandError, do_nothing, execute
from termreq.config import ConfigManager
from termreq.files import data_dir, requests_dir
from termreq.ids import SharedFlag
from termreq.input_handler import InputHandler
from termreq.keymaps import KeyboardListener, default_keymap
from termreq.states import StateManager
from termreq.stores import MainStore
from termreq.view import UI


def _run(app: App, handler: InputHandler, ui: UI, actions: queue.Queue) -> None:
    """Draw the screen and process input until the application is finished."""
    store = app.data_store
    listener_done = SharedFlag(True)

    while not app.is_finished:
        ui.render(store)
        mode = store.mode

        if mode is InputMode.HELP:
            reader = store.doc_reader
            if reader is None:
                store.mode = InputMode.NORMAL
                continue
            position, finished = handler.handle_doc_reading(reader.position)
            reader.goto(position)
            if finished:
                store.mode = InputMode.NORMAL

        elif mode is InputMode.VIM:
            # The text is kept in its edition file and edited in the input popup.
            store.config.edition_files_handler.save_content(store.request_uuid, store.input_buffer.value)
            store.set_log_input_mode()
            store.mode = InputMode.INSERT

        elif mode is InputMode.INSERT:
            value, finished = handler.handle_typing(store.input_buffer)
            store.input_buffer.value = value
            if finished:
                app.clear_log()
                app.exec_input_buffer_command()
                store.mode = InputMode.NORMAL

        else:
            if listener_done.get():
                listener_done.set(False)
                handler.async_handler(actions, listener_done)
            action: Actions = actions.get()
            command = app.command_of_action(action) or do_nothing
            try:
                execute(app, command)
            except CommandError as exc:
                store.set_log_error("COMMAND ERROR", str(exc))


def main(argv: list[str] | None = None) -> int:
    """Run the client; returns the process exit status."""
    parser = argparse.ArgumentParser(
        prog="termreq",
        description="A client to make HTTP requests from the terminal.",
    )
    parser.add_argument("--data-dir", type=Path, default=None, help="where saved requests are kept")
    parser.add_argument("--help-file", type=Path, default=None, help="JSON document shown by [?]")
    args = parser.parse_args(argv)

    root = args.data_dir
    try:
        ConfigManager.setup_env(root)
    except OSError as exc:
        print(
            f"termreq: error creating folders {requests_dir(root).parent}: {exc}. "
            "If the error persists, create them by hand.",
            file=sys.stderr,
        )
        return 1
    try:
        config = ConfigManager.load(root)
    except LookupError as exc:
        print(f"termreq: {exc}", file=sys.stderr)
        return 1

    store = MainStore(config)
    store.set_log_warning("NEEDING HELP,", "press [?]")

    help_path = args.help_file
    if help_path is None:
        help_path = (root if root is not None else data_dir()) / "help.json"

    actions: queue.Queue = queue.Queue()
    app = App(
        store,
        state_manager=StateManager(),
        web_client=WebClient(HttpxRepository()),
        renderer=actions,
        help_path=help_path,
    )
    handler = InputHandler(KeyboardListener(default_keymap()))

    ui = UI()
    try:
        _run(app, handler, ui, actions)
    finally:
        ui.close()
        config.edition_files_handler.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())