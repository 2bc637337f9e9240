"""HTTP request and response models."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

INTERNAL_ERROR_STATUS = 77


class Method(Enum):
    """HTTP methods a request can use."""

    DELETE = "DELETE"
    GET = "GET"
    HEAD = "HEAD"
    PATCH = "PATCH"
    POST = "POST"
    PUT = "PUT"

    def __str__(self) -> str:
        return self.value


def default_headers() -> dict[str, str]:
    """Headers a new request starts with."""
    return {"Content-Type": "application/json"}


def _require_str(data: dict[str, Any], key: str) -> str:
    if key not in data:
        raise ValueError(f"missing field `{key}`")
    value = data[key]
    if not isinstance(value, str):
        raise ValueError(f"field `{key}` must be a string")
    return value


@dataclass
class Request:
    """An editable HTTP request."""

    name: str = "New Request"
    url: str = ""
    method: Method = Method.GET
    headers: dict[str, str] = field(default_factory=default_headers)
    body: str = "{}"
    has_changed: bool = field(default=False, compare=False)

    def to_dict(self) -> dict[str, Any]:
        """Serializable form; the change marker is not stored."""
        return {
            "name": self.name,
            "url": self.url,
            "method": self.method.value,
            "headers": dict(self.headers),
            "body": self.body,
        }

    @classmethod
    def from_dict(cls, data: Any) -> Request:
        """Build a request from its serialized form, raising ValueError if invalid."""
        if not isinstance(data, dict):
            raise ValueError("a request must be a JSON object")
        name = _require_str(data, "name")
        url = _require_str(data, "url")
        method_name = _require_str(data, "method")
        try:
            method = Method(method_name)
        except ValueError:
            raise ValueError(f"unknown method `{method_name}`") from None
        if "headers" not in data:
            raise ValueError("missing field `headers`")
        headers = data["headers"]
        if not isinstance(headers, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in headers.items()
        ):
            raise ValueError("field `headers` must map strings to strings")
        body = _require_str(data, "body")
        return cls(name=name, url=url, method=method, headers=dict(headers), body=body)

    def to_json(self) -> str:
        """Compact JSON text of the request."""
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str) -> Request:
        """Parse a request from JSON text, raising ValueError if invalid."""
        return cls.from_dict(json.loads(text))


@dataclass
class Response:
    """The result of a submitted request."""

    status: int = 0
    response_time: int = 0
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""

    @classmethod
    def internal_error(cls, message: str) -> Response:
        """A response that reports a failure inside the client itself."""
        return cls(status=INTERNAL_ERROR_STATUS, response_time=0, headers={}, body=message)