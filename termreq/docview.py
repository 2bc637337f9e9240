"""Help documents: their JSON form, styled spans and a scrolling reader."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Union


class StyleOption(Enum):
    """Named styles a piece of document text can carry."""

    COLOR_CYAN = "ColorCyan"
    COLOR_RED = "ColorRed"
    COLOR_BLUE = "ColorBlue"
    COLOR_YELLOW = "ColorYellow"

    @property
    def color(self) -> str:
        """Foreground colour this style is drawn with."""
        return _COLORS[self]


_COLORS = {
    StyleOption.COLOR_RED: "light_red",
    StyleOption.COLOR_CYAN: "cyan",
    StyleOption.COLOR_BLUE: "blue",
    StyleOption.COLOR_YELLOW: "light_yellow",
}


@dataclass(frozen=True)
class Span:
    """A run of text drawn with one foreground colour, or the default one."""

    text: str
    color: str | None = None


DocLine = list[tuple[str, Union[StyleOption, None]]]


def _parse_style(value: Any) -> StyleOption | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError("a style must be a string or null")
    try:
        return StyleOption(value)
    except ValueError:
        raise ValueError(f"unknown style `{value}`") from None


def _parse_line(line: Any) -> DocLine:
    if not isinstance(line, list):
        raise ValueError("a document line must be a list")
    parsed: DocLine = []
    for item in line:
        if not isinstance(item, list) or len(item) != 2:
            raise ValueError("a document item must be a [text, style] pair")
        text, style = item
        if not isinstance(text, str):
            raise ValueError("document text must be a string")
        parsed.append((text, _parse_style(style)))
    return parsed


@dataclass
class DocView:
    """A document made of lines of optionally styled text."""

    content: list[DocLine] = field(default_factory=list)

    @classmethod
    def from_json(cls, text: str) -> DocView:
        """Parse a document, raising ValueError if it is not well formed."""
        data = json.loads(text)
        if not isinstance(data, dict) or "content" not in data:
            raise ValueError("missing field `content`")
        lines = data["content"]
        if not isinstance(lines, list):
            raise ValueError("field `content` must be a list")
        return cls(content=[_parse_line(line) for line in lines])

    def lines(self) -> list[list[Span]]:
        """The document as lines of spans."""
        return [
            [Span(text, style.color if style is not None else None) for text, style in line]
            for line in self.content
        ]


@dataclass
class DocReader:
    """A document together with the line the reader is scrolled to."""

    doc: DocView
    position: int = 0

    def visible_lines(self) -> list[list[Span]]:
        """Lines from the current position to the end."""
        return self.doc.lines()[self.position:]

    def goto(self, position: int) -> None:
        """Scroll to another line."""
        self.position = position


def help_reader(path: str | Path) -> DocReader:
    """Open the help document stored at path, scrolled to its start."""
    content = Path(path).read_text(encoding="utf-8")
    return DocReader(DocView.from_json(content))