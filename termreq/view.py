"""Terminal drawing of the application screen.

The screen is composed on an in-memory grid of cells and then written to the
terminal with ANSI escape sequences.
"""

from __future__ import annotations

import json
import shutil
import sys
from dataclasses import dataclass
from itertools import groupby
from typing import IO, Any, Iterable, Sequence

from termreq.actions import InputMode, StatesNames
from termreq.docview import Span
from termreq.logs import LogType
from termreq.web import INTERNAL_ERROR_STATUS, Method

try:
    import termios as _termios
    import tty as _tty
except ImportError:  # not a POSIX terminal
    _termios = None  # type: ignore[assignment]
    _tty = None  # type: ignore[assignment]

Line = Sequence[Span]

_ENTER_SCREEN = "\x1b[?1049h"
_LEAVE_SCREEN = "\x1b[?1049l"
_DISABLE_MOUSE = "\x1b[?1006l\x1b[?1015l\x1b[?1003l\x1b[?1002l\x1b[?1000l"
_HIDE_CURSOR = "\x1b[?25l"
_SHOW_CURSOR = "\x1b[?25h"
_RESET = "\x1b[0m"

_FG_CODES = {
    "black": 30,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
    "magenta": 35,
    "cyan": 36,
    "gray": 37,
    "dark_gray": 90,
    "light_red": 91,
    "light_green": 92,
    "light_yellow": 93,
    "light_blue": 94,
    "light_magenta": 95,
    "light_cyan": 96,
    "white": 97,
}

_FOCUS_COLOR = "light_yellow"

_METHOD_COLORS = {
    Method.GET: "blue",
    Method.POST: "green",
    Method.PUT: "white",
    Method.PATCH: "magenta",
    Method.DELETE: "red",
    Method.HEAD: "yellow",
}

_LOG_COLORS = {
    LogType.ERROR: "red",
    LogType.HELP: "blue",
    LogType.EMPTY: "black",
    LogType.WARNING: "yellow",
    LogType.INPUT_MODE: "cyan",
}

_PLAIN_BORDER = "┌┐└┘│─"
_ROUNDED_BORDER = "╭╮╰╯│─"

_INPUT_POPUP_TITLE = "[ESC] - QUIT     [ENTER] - FINISH"
_HELP_POPUP_TITLE = "Navigate -> [UP] and [DOWN] / Press any other key to close"


def status_label(status: int) -> str:
    """Text shown in place of the response status."""
    if status == 0:
        return "Hit ENTER to submit"
    if status == INTERNAL_ERROR_STATUS:
        return "Error"
    return str(status)


def status_color(status: int) -> str:
    """Background colour of the response status."""
    if status == 0:
        return "gray"
    if status == INTERNAL_ERROR_STATUS:
        return "red"
    if 100 <= status <= 199:
        return "gray"
    if 200 <= status <= 299:
        return "green"
    if 300 <= status <= 399:
        return "yellow"
    if 400 <= status <= 499:
        return "magenta"
    if 500 <= status <= 599:
        return "light_red"
    return "cyan"


def method_color(method: Method) -> str:
    """Background colour of the method label."""
    return _METHOD_COLORS[method]


@dataclass(frozen=True)
class Rect:
    """A rectangle of terminal cells."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def inner(self, margin: int = 1) -> Rect:
        """The rectangle shrunk by margin on every side."""
        return Rect(
            self.x + margin,
            self.y + margin,
            max(0, self.width - 2 * margin),
            max(0, self.height - 2 * margin),
        )

    def intersection(self, other: Rect) -> Rect:
        """The part of this rectangle that lies inside other."""
        x = max(self.x, other.x)
        y = max(self.y, other.y)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        return Rect(x, y, max(0, right - x), max(0, bottom - y))


def centered_rect(percent_x: int, percent_y: int, area: Rect) -> Rect:
    """A rectangle taking the given percentages of area, centred in it."""
    if not (0 <= percent_x <= 100 and 0 <= percent_y <= 100):
        raise ValueError("percentages must lie between 0 and 100")
    width = area.width * percent_x // 100
    height = area.height * percent_y // 100
    left = area.width * ((100 - percent_x) // 2) // 100
    top = area.height * ((100 - percent_y) // 2) // 100
    return Rect(area.x + left, area.y + top, width, height)


def split_horizontal(area: Rect, left_percent: int, right_percent: int) -> tuple[Rect, Rect]:
    """Split area into a left and a right part.

    The left part takes its percentage of the width; the right part fills the rest.
    """
    if left_percent < 0 or right_percent < 0 or left_percent + right_percent <= 0:
        raise ValueError("percentages must be non-negative and not both zero")
    left_width = min(area.width, area.width * left_percent // 100)
    left = Rect(area.x, area.y, left_width, area.height)
    right = Rect(area.x + left_width, area.y, area.width - left_width, area.height)
    return left, right


@dataclass(frozen=True)
class _Style:
    fg: str | None = None
    bg: str | None = None
    bold: bool = False

    def patch(self, other: _Style) -> _Style:
        return _Style(
            fg=other.fg if other.fg is not None else self.fg,
            bg=other.bg if other.bg is not None else self.bg,
            bold=self.bold or other.bold,
        )

    def sgr(self) -> str:
        codes = ["0"]
        if self.bold:
            codes.append("1")
        if self.fg is not None:
            codes.append(str(_FG_CODES[self.fg]))
        if self.bg is not None:
            codes.append(str(_FG_CODES[self.bg] + 10))
        return f"\x1b[{';'.join(codes)}m"


_NO_STYLE = _Style()
_FOCUSED = _Style(fg=_FOCUS_COLOR)


class _Canvas:
    """A grid of characters, each with its own style."""

    def __init__(self, width: int, height: int) -> None:
        self.area = Rect(0, 0, width, height)
        self.chars = [[" "] * width for _ in range(height)]
        self.styles = [[_NO_STYLE] * width for _ in range(height)]

    def clip(self, area: Rect) -> Rect:
        return area.intersection(self.area)

    def set_style(self, area: Rect, style: _Style) -> None:
        area = self.clip(area)
        for y in range(area.y, area.bottom):
            row = self.styles[y]
            for x in range(area.x, area.right):
                row[x] = row[x].patch(style)

    def clear(self, area: Rect) -> None:
        area = self.clip(area)
        for y in range(area.y, area.bottom):
            for x in range(area.x, area.right):
                self.chars[y][x] = " "
                self.styles[y][x] = _NO_STYLE

    def put(self, x: int, y: int, text: str, style: _Style = _NO_STYLE, limit: int | None = None) -> None:
        if not 0 <= y < self.area.height:
            return
        end = self.area.width if limit is None else min(limit, self.area.width)
        for cx, char in enumerate(text, start=x):
            if cx >= end:
                break
            if cx < 0:
                continue
            self.chars[y][cx] = char
            self.styles[y][cx] = self.styles[y][cx].patch(style)

    def lines(self) -> list[str]:
        return ["".join(row) for row in self.chars]

    def ansi_rows(self) -> Iterable[str]:
        for chars, styles in zip(self.chars, self.styles):
            parts: list[str] = []
            current: _Style | None = None
            for char, style in zip(chars, styles):
                if style != current:
                    parts.append(style.sgr())
                    current = style
                parts.append(char)
            parts.append(_RESET)
            yield "".join(parts)


def _text_lines(text: str) -> list[list[Span]]:
    return [[Span(line.replace("\t", "    "))] for line in text.split("\n")]


def _cells_to_spans(cells: Sequence[tuple[str, str | None]]) -> list[Span]:
    return [
        Span("".join(char for char, _ in group), color)
        for color, group in groupby(cells, key=lambda cell: cell[1])
    ]


def _wrap(lines: Iterable[Line], width: int) -> list[list[Span]]:
    """Word-wrap lines to width, trimming spaces at the start of wrapped rows."""
    if width <= 0:
        return []
    wrapped: list[list[Span]] = []
    for line in lines:
        cells = [(char, span.color) for span in line for char in span.text]
        if not cells:
            wrapped.append([])
            continue
        while cells:
            cut = min(width, len(cells))
            if cut < len(cells) and cells[cut][0] != " ":
                spaces = [i for i, (char, _) in enumerate(cells[:cut]) if char == " "]
                if spaces:
                    cut = spaces[-1] + 1
            chunk, cells = cells[:cut], cells[cut:]
            while cells and cells[0][0] == " ":
                cells = cells[1:]
            wrapped.append(_cells_to_spans(chunk))
    return wrapped


def _draw_block(
    canvas: _Canvas,
    area: Rect,
    *,
    title: Sequence[Span] = (),
    all_borders: bool = True,
    rounded: bool = False,
    style: _Style = _NO_STYLE,
    border_style: _Style = _NO_STYLE,
    title_alignment: str = "left",
) -> Rect:
    """Draw a bordered block and return the area inside its borders."""
    area = canvas.clip(area)
    if area.width == 0 or area.height == 0:
        return Rect(area.x, area.y, 0, 0)
    canvas.set_style(area, style)
    top_left, top_right, bottom_left, bottom_right, vertical, horizontal = (
        _ROUNDED_BORDER if rounded else _PLAIN_BORDER
    )
    canvas.put(area.x, area.y, horizontal * area.width, border_style, area.right)
    if all_borders:
        last_row = area.bottom - 1
        canvas.put(area.x, last_row, horizontal * area.width, border_style, area.right)
        for y in range(area.y, area.bottom):
            canvas.put(area.x, y, vertical, border_style)
            canvas.put(area.right - 1, y, vertical, border_style)
        canvas.put(area.x, area.y, top_left, border_style)
        canvas.put(area.right - 1, area.y, top_right, border_style)
        canvas.put(area.x, last_row, bottom_left, border_style)
        canvas.put(area.right - 1, last_row, bottom_right, border_style)

    title_left = area.x + 1 if all_borders else area.x
    title_right = area.right - 1 if all_borders else area.right
    available = max(0, title_right - title_left)
    title_width = sum(len(span.text) for span in title)
    if title_alignment == "center":
        x = title_left + max(0, (available - title_width) // 2)
    elif title_alignment == "right":
        x = title_left + max(0, available - title_width)
    else:
        x = title_left
    for span in title:
        canvas.put(x, area.y, span.text, _Style(fg=span.color), title_right)
        x += len(span.text)

    if all_borders:
        return area.inner(1)
    return Rect(area.x, area.y + 1, area.width, max(0, area.height - 1))


def _draw_paragraph(
    canvas: _Canvas,
    area: Rect,
    lines: Iterable[Line],
    *,
    alignment: str = "left",
    style: _Style = _NO_STYLE,
    wrap: bool = False,
) -> None:
    area = canvas.clip(area)
    if area.width == 0 or area.height == 0:
        return
    canvas.set_style(area, style)
    rows = _wrap(lines, area.width) if wrap else list(lines)
    for y, line in zip(range(area.y, area.bottom), rows):
        width = sum(len(span.text) for span in line)
        if alignment == "center":
            x = area.x + max(0, (area.width - width) // 2)
        elif alignment == "right":
            x = area.x + max(0, area.width - width)
        else:
            x = area.x
        for span in line:
            canvas.put(x, y, span.text, _Style(fg=span.color), area.right)
            x += len(span.text)


def _section_title(headers_active: bool) -> list[Span]:
    if headers_active:
        return [Span("Body / "), Span("HEADERS", _FOCUS_COLOR)]
    return [Span("BODY", _FOCUS_COLOR), Span(" / Headers")]


def _draw_tablist(canvas: _Canvas, area: Rect, store: Any) -> None:
    style = _FOCUSED if store.current_state is StatesNames.TAB_LIST else _NO_STYLE
    inner = _draw_block(canvas, area, title=[Span("Tabs")], rounded=True, style=style)
    if inner.height == 0:
        return
    highlight = _Style(fg=_FOCUS_COLOR, bg="black", bold=True)
    x, y = inner.x, inner.y
    for index, request in enumerate(store.get_requests()):
        if index:
            canvas.put(x, y, "│", limit=inner.right)
            x += 1
        label = request.name + ("*" if request.has_changed else "")
        canvas.put(x, y, " ", limit=inner.right)
        x += 1
        label_style = highlight if index == store.request_ind else _NO_STYLE
        canvas.put(x, y, label, label_style, inner.right)
        x += len(label)
        canvas.put(x, y, " ", limit=inner.right)
        x += 1


def _draw_logs(canvas: _Canvas, area: Rect, store: Any) -> None:
    style = _FOCUSED if store.current_state is StatesNames.LOG else _NO_STYLE
    inner = _draw_block(canvas, area, title=[Span("Logs")], all_borders=False, style=style)
    log = store.log
    line = [Span(log.title, _LOG_COLORS[log.log_type]), Span(" "), Span(log.detail or "")]
    _draw_paragraph(canvas, inner, [line])
    _draw_paragraph(canvas, inner, _text_lines(store.keys_queue), alignment="right")


def _draw_request_body(canvas: _Canvas, area: Rect, store: Any) -> None:
    state = store.current_state
    headers_active = state is StatesNames.REQUEST_HEADERS
    focused = state in (StatesNames.REQUEST_HEADERS, StatesNames.REQUEST_BODY)
    inner = _draw_block(
        canvas,
        area,
        title=_section_title(headers_active),
        rounded=True,
        style=_FOCUSED if focused else _NO_STYLE,
    )
    request = store.get_request()
    content = json.dumps(request.headers, indent=2, ensure_ascii=False) if headers_active else request.body
    _draw_paragraph(canvas, inner, _text_lines(content))


def _draw_method_and_url(canvas: _Canvas, area: Rect, store: Any) -> None:
    request = store.get_request()
    method_width = min(7, area.width)
    method_area = Rect(area.x, area.y, method_width, area.height)
    url_area = Rect(area.x + method_width, area.y, area.width - method_width, area.height)
    _draw_paragraph(
        canvas,
        method_area,
        [[Span(str(request.method))]],
        alignment="center",
        style=_Style(fg="black", bg=method_color(request.method)),
    )
    focused = store.current_state is StatesNames.URL
    inner = _draw_block(
        canvas, url_area, title=[Span("URL")], rounded=True, style=_FOCUSED if focused else _NO_STYLE
    )
    _draw_paragraph(canvas, inner, _text_lines(request.url))


def _draw_response(canvas: _Canvas, area: Rect, store: Any) -> None:
    response = store.response
    state = store.current_state
    headers_active = state is StatesNames.RESPONSE_HEADER
    focused = state in (StatesNames.RESPONSE_HEADER, StatesNames.RESPONSE_BODY)

    _draw_block(canvas, area, title=[Span("Response")], rounded=True, title_alignment="center")
    layout = area.inner(1)
    status_area = Rect(layout.x, layout.y, layout.width, min(1, layout.height))
    text_area = Rect(layout.x, layout.y + 1, layout.width, max(0, layout.height - 1))

    _draw_paragraph(
        canvas,
        status_area,
        [[Span(status_label(response.status))]],
        alignment="center",
        style=_Style(fg="black", bg=status_color(response.status)),
    )
    content = json.dumps(response.headers, indent=2, ensure_ascii=False) if headers_active else response.body
    inner = _draw_block(
        canvas,
        text_area,
        title=_section_title(headers_active),
        rounded=True,
        style=_FOCUSED if focused else _NO_STYLE,
    )
    _draw_paragraph(canvas, inner, _text_lines(content))


def _draw_input_popup(canvas: _Canvas, area: Rect, store: Any) -> None:
    popup = centered_rect(60, 10, area)
    canvas.clear(popup)
    inner = _draw_block(canvas, popup, title=[Span(_INPUT_POPUP_TITLE)])
    _draw_paragraph(canvas, inner, _text_lines(store.input_buffer.value))


def _draw_help_popup(canvas: _Canvas, area: Rect, store: Any) -> None:
    reader = store.doc_reader
    lines: list[list[Span]] = []
    if reader is not None:
        lines = reader.visible_lines()
        if reader.position >= len(lines):
            lines = []
    popup = centered_rect(60, 75, area)
    canvas.clear(popup)
    inner = _draw_block(
        canvas,
        popup,
        title=[Span(_HELP_POPUP_TITLE)],
        border_style=_FOCUSED,
        title_alignment="center",
    )
    _draw_paragraph(canvas, inner, lines, wrap=True)


class UI:
    """The full-screen terminal interface."""

    def __init__(self, stream: IO[str] | None = None, size: tuple[int, int] | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self._size = size
        self._saved_tty: Any = None
        self._closed = False
        self.last_frame: list[str] = []
        if _termios is not None and self.stream.isatty() and sys.stdin.isatty():
            fd = sys.stdin.fileno()
            self._saved_tty = _termios.tcgetattr(fd)
            _tty.setraw(fd)
        self.stream.write(_ENTER_SCREEN)
        self.stream.flush()

    def __enter__(self) -> UI:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _current_size(self) -> tuple[int, int]:
        if self._size is not None:
            return self._size
        columns, lines = shutil.get_terminal_size()
        return columns, lines

    def render(self, store: Any) -> list[str]:
        """Draw the whole screen for the store and return its text rows."""
        width, height = self._current_size()
        canvas = _Canvas(width, height)
        full = canvas.area

        top_height = min(3, height)
        bottom_height = min(2, height - top_height)
        middle_height = height - top_height - bottom_height
        tabs_area = Rect(0, 0, width, top_height)
        content_area = Rect(0, top_height, width, middle_height)
        logs_area = Rect(0, top_height + middle_height, width, bottom_height)

        left_percent, right_percent = store.config.view.dimension_percentage()
        request_area, response_area = split_horizontal(content_area, left_percent, right_percent)

        _draw_block(canvas, request_area, title=[Span("Request")], rounded=True, title_alignment="center")
        request_layout = request_area.inner(1)
        url_area = Rect(request_layout.x, request_layout.y, request_layout.width, min(3, request_layout.height))
        body_area = Rect(
            request_layout.x,
            request_layout.y + url_area.height,
            request_layout.width,
            request_layout.height - url_area.height,
        )

        _draw_tablist(canvas, tabs_area, store)
        _draw_method_and_url(canvas, url_area, store)
        _draw_request_body(canvas, body_area, store)
        _draw_response(canvas, response_area, store)
        _draw_logs(canvas, logs_area, store)

        if store.mode is InputMode.INSERT:
            _draw_input_popup(canvas, full, store)
        elif store.mode is InputMode.HELP:
            _draw_help_popup(canvas, full, store)

        output = [_HIDE_CURSOR]
        output.extend(f"\x1b[{row + 1};1H{line}" for row, line in enumerate(canvas.ansi_rows()))
        output.append(_RESET)
        self.stream.write("".join(output))
        self.stream.flush()

        self.last_frame = canvas.lines()
        return self.last_frame

    def close(self) -> None:
        """Restore the terminal: leave the alternate screen and show the cursor."""
        if self._closed:
            return
        self._closed = True
        if self._saved_tty is not None and _termios is not None:
            _termios.tcsetattr(sys.stdin.fileno(), _termios.TCSADRAIN, self._saved_tty)
            self._saved_tty = None
        self.stream.write(_RESET + _LEAVE_SCREEN + _DISABLE_MOUSE + _SHOW_CURSOR)
        self.stream.flush()