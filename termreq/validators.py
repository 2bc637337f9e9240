"""Validators that normalise requests and responses before use."""

from __future__ import annotations

import dataclasses
import json
import re
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from termreq.web import Request, Response

T = TypeVar("T")
Validator = Callable[[T], T]

_HAS_PROTOCOL = re.compile(r"(?:http|https)://.+")


class ValidationError(Exception):
    """Raised by a validator that cannot accept its value."""


def run_validators(value: T, validators: Iterable[Validator[T]]) -> T:
    """Apply validators in order; the first failure is raised."""
    result = value
    for validator in validators:
        result = validator(result)
    return result


def run_validators_ignoring_errors(value: T, validators: Iterable[Validator[T]]) -> T:
    """Apply validators in order, skipping any that fail."""
    result = value
    for validator in validators:
        try:
            result = validator(result)
        except ValidationError:
            continue
    return result


def url_protocol(request: Request) -> Request:
    """Prefix the URL with http:// when it has no http or https protocol."""
    if _HAS_PROTOCOL.fullmatch(request.url):
        return dataclasses.replace(request)
    return dataclasses.replace(request, url="http://" + request.url)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name}")


def pretty_json_body(response: Response) -> Response:
    """Reformat a JSON body with sorted keys and two-space indentation."""
    try:
        parsed = json.loads(response.body, parse_constant=_reject_constant)
    except ValueError as exc:
        raise ValidationError(str(exc)) from exc
    pretty = json.dumps(parsed, indent=2, sort_keys=True, ensure_ascii=False)
    return dataclasses.replace(response, body=pretty)