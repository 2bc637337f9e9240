"""Log messages shown in the status line."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum, auto


class LogType(Enum):
    """Kind of a log message, which decides how it is displayed."""

    ERROR = auto()
    WARNING = auto()
    HELP = auto()
    EMPTY = auto()
    INPUT_MODE = auto()


@dataclass(frozen=True)
class Log:
    """A single message for the log line."""

    log_type: LogType = LogType.EMPTY
    title: str = ""
    detail: str | None = None

    def with_type(self, log_type: LogType) -> Log:
        """Return a copy with another log type."""
        return dataclasses.replace(self, log_type=log_type)

    def with_title(self, title: str) -> Log:
        """Return a copy with another title."""
        return dataclasses.replace(self, title=title)

    def with_detail(self, detail: str) -> Log:
        """Return a copy with another detail text."""
        return dataclasses.replace(self, detail=detail)