"""The application object that commands act upon."""

from __future__ import annotations

import asyncio
import queue
import threading
from pathlib import Path

from termreq.actions import Actions, InputMode, StatesNames
from termreq.commands import Command, do_nothing
from termreq.files import data_dir
from termreq.states import StateManager, build_state
from termreq.stores import MainStore
from termreq.web import Response


class App:
    """Ties together the data store, the focus states, the web client and the renderer.

    ``renderer`` is a queue of actions; putting ``Actions.NULL`` on it asks the
    main loop to draw the screen again.
    """

    def __init__(
        self,
        data_store: MainStore,
        state_manager: StateManager | None = None,
        web_client=None,
        renderer: queue.Queue | None = None,
        help_path: str | Path | None = None,
    ) -> None:
        self.is_finished = False
        self.data_store = data_store
        self.state_manager = state_manager if state_manager is not None else StateManager()
        self.web_client = web_client
        self.renderer = renderer
        self.help_path = Path(help_path) if help_path is not None else data_dir() / "help.json"
        self.input_command: Command = do_nothing

    # Modes and input ---------------------------------------------------

    @property
    def mode(self) -> InputMode:
        return self.data_store.mode

    @mode.setter
    def mode(self, mode: InputMode) -> None:
        self.data_store.mode = mode

    @property
    def input_buffer_value(self) -> str:
        return self.data_store.input_buffer.value

    @input_buffer_value.setter
    def input_buffer_value(self, value: str) -> None:
        self.data_store.input_buffer.value = value

    def set_input_mode_with_command(self, callback: Command, initial_buffer: str) -> None:
        """Start typing in the popup; callback runs when typing is finished."""
        self.mode = InputMode.INSERT
        self.input_command = callback
        self.data_store.set_log_input_mode()
        self.data_store.input_buffer.set_backup(initial_buffer)
        self.input_buffer_value = initial_buffer

    def set_vim_mode_with_command(self, callback: Command, initial_buffer: str) -> None:
        """Start editing the text as a file; callback runs when editing is finished."""
        self.mode = InputMode.VIM
        self.input_command = callback
        self.data_store.input_buffer.set_backup(initial_buffer)
        self.input_buffer_value = initial_buffer

    def exec_input_buffer_command(self) -> None:
        """Run the command waiting for the end of the input."""
        self.input_command(self)

    # States and commands -----------------------------------------------

    @property
    def state(self):
        return self.state_manager.state

    def set_new_state(self, name: StatesNames) -> None:
        """Move the focus to the named state."""
        self.data_store.current_state = name
        self.state_manager.set_state(build_state(name))

    def command_of_action(self, action: Actions) -> Command | None:
        """Command bound to the action in the current state, or None."""
        return self.state_manager.command_for(action)

    # Web client --------------------------------------------------------

    def dispatch_submit(self) -> threading.Thread:
        """Send the selected request in the background.

        The response, or an internal error response, replaces the last one and
        a redraw is requested. The returned thread finishes once that is done.
        """
        if self.web_client is None:
            raise RuntimeError("no web client attached")
        if self.renderer is None:
            raise RuntimeError("no renderer attached")
        client = self.web_client
        request = self.data_store.get_request()
        store = self.data_store
        renderer = self.renderer

        def work() -> None:
            try:
                response = asyncio.run(client.submit(request))
            except Exception as exc:  # any failure is shown as the response
                response = Response.internal_error(str(exc))
            store.set_response(response)
            renderer.put(Actions.NULL)

        thread = threading.Thread(target=work, daemon=True)
        thread.start()
        return thread

    # Data store --------------------------------------------------------

    def clear_log(self) -> None:
        self.data_store.clear_log()

    def rerender(self) -> None:
        """Ask the main loop to draw the screen again."""
        if self.renderer is None:
            raise RuntimeError("no renderer attached")
        self.renderer.put(Actions.NULL)