"""In-memory state of the application: open requests, logs, modes and the last response."""

from __future__ import annotations

import copy
import threading

from termreq.actions import InputMode, StatesNames
from termreq.buffer import InputBuffer
from termreq.config import ConfigManager
from termreq.docview import DocReader
from termreq.ids import new_id
from termreq.logs import Log, LogType
from termreq.save_files import SaveFiles
from termreq.web import Request, Response


class RequestStore:
    """The open requests, in tab order, and which one is selected."""

    def __init__(self, save_files: SaveFiles) -> None:
        self.save_files = save_files
        if len(save_files) == 0:
            save_files.set(new_id(), Request())
        self._in_memory: dict[str, Request] = {
            key: save_files.get_request(key) for key in save_files
        }
        self._order: list[str] = list(self._in_memory)
        self.current_uuid: str = self._order[0]
        self.current_ind: int = 0

    @property
    def total_requests(self) -> int:
        return len(self._in_memory)

    def add_request(self) -> int:
        """Open a new default request, select it and return its index."""
        key = new_id()
        self._in_memory[key] = Request()
        self._order.append(key)
        index = len(self._order) - 1
        self.goto_request(index)
        return index

    def delete_current_request(self) -> None:
        """Close the selected request, select the next one and delete its saved file."""
        key = self.current_uuid
        if key not in self._in_memory:
            return
        self.goto_next_request()
        del self._in_memory[key]
        self._order.remove(key)
        if self.current_uuid in self._order:
            self.current_ind = self._order.index(self.current_uuid)
        else:
            self.current_ind = 0
        if key in self.save_files:
            self.save_files.remove(key)

    def goto_request(self, index: int) -> bool:
        """Select the request at index; False if there is none."""
        if not 0 <= index < len(self._order):
            return False
        self.current_uuid = self._order[index]
        self.current_ind = index
        return True

    def goto_next_request(self) -> None:
        """Select the next request, wrapping to the first."""
        if not self.goto_request(self.current_ind + 1):
            self.goto_request(0)

    def goto_prev_request(self) -> None:
        """Select the previous request, wrapping to the last."""
        if not self.goto_request(self.current_ind - 1):
            self.goto_request(self.total_requests - 1)

    def get_request(self) -> Request:
        """A copy of the selected request."""
        return copy.deepcopy(self._in_memory[self._order[self.current_ind]])

    def get_requests(self) -> list[Request]:
        """All open requests in tab order."""
        return [self._in_memory[key] for key in self._order]

    def update_request(self, request: Request) -> None:
        """Replace the selected request, marking it as changed."""
        updated = copy.deepcopy(request)
        updated.has_changed = True
        self._in_memory[self._order[self.current_ind]] = updated

    def save_current_request(self) -> None:
        """Write the selected request to its file and mark it as saved."""
        request = self.get_request()
        self.save_files.set(self.current_uuid, request)
        self._in_memory[self._order[self.current_ind]].has_changed = False


class MainStore:
    """Everything the interface shows and the commands change."""

    def __init__(self, config: ConfigManager) -> None:
        self.config = config
        self.requests = RequestStore(config.saved_requests)
        self._response = Response()
        self._response_lock = threading.Lock()
        self.current_state = StatesNames.DEFAULT
        self.mode = InputMode.NORMAL
        self.input_buffer = InputBuffer()
        self.log = Log()
        self.doc_reader: DocReader | None = None
        self.keys_queue = ""

    def set_log(self, log_type: LogType, title: str, detail: str) -> None:
        self.log = Log(log_type=log_type, title=title, detail=detail)

    def set_log_error(self, title: str, detail: str) -> None:
        self.set_log(LogType.ERROR, title, detail)

    def set_log_warning(self, title: str, detail: str) -> None:
        self.set_log(LogType.WARNING, title, detail)

    def set_log_helping(self, title: str, detail: str) -> None:
        self.set_log(LogType.HELP, title, detail)

    def set_log_input_mode(self) -> None:
        self.set_log(LogType.INPUT_MODE, "INSERT", "")

    def clear_log(self) -> None:
        self.set_log(LogType.EMPTY, "", "")

    @property
    def request_uuid(self) -> str:
        return self.requests.current_uuid

    @property
    def request_ind(self) -> int:
        return self.requests.current_ind

    @property
    def total_requests(self) -> int:
        return self.requests.total_requests

    def get_request(self) -> Request:
        return self.requests.get_request()

    def get_requests(self) -> list[Request]:
        return self.requests.get_requests()

    def update_request(self, request: Request) -> None:
        self.requests.update_request(request)

    def save_request(self) -> None:
        self.requests.save_current_request()

    def goto_request(self, index: int) -> bool:
        return self.requests.goto_request(index)

    def goto_next_request(self) -> None:
        self.requests.goto_next_request()

    def goto_prev_request(self) -> None:
        self.requests.goto_prev_request()

    def add_request(self) -> int:
        return self.requests.add_request()

    def delete_current_request(self) -> None:
        """Close the selected request; a failure to delete its file is logged."""
        try:
            self.requests.delete_current_request()
        except OSError as exc:
            self.log = self.log.with_type(LogType.ERROR).with_detail(str(exc))

    @property
    def response(self) -> Response:
        """The last response received."""
        with self._response_lock:
            return self._response

    def set_response(self, response: Response) -> None:
        """Replace the last response; safe to call from another thread."""
        with self._response_lock:
            self._response = response