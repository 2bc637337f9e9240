"""Sending requests over HTTP."""

from __future__ import annotations

from abc import ABC, abstractmethod

import httpx

from termreq.validators import pretty_json_body, run_validators, run_validators_ignoring_errors, url_protocol
from termreq.web import Method, Request, Response


class RequestError(Exception):
    """Raised when a request cannot be sent or its reply cannot be read."""


class HttpClientRepository(ABC):
    """Something that can perform HTTP calls and return responses."""

    @abstractmethod
    async def call_get(self, url: str, headers: dict[str, str]) -> Response:
        """Send a GET request."""

    @abstractmethod
    async def call_post(self, url: str, headers: dict[str, str], body: str) -> Response:
        """Send a POST request."""

    @abstractmethod
    async def call_put(self, url: str, headers: dict[str, str], body: str) -> Response:
        """Send a PUT request."""

    @abstractmethod
    async def call_patch(self, url: str, headers: dict[str, str], body: str) -> Response:
        """Send a PATCH request."""

    @abstractmethod
    async def call_delete(self, url: str, headers: dict[str, str], body: str) -> Response:
        """Send a DELETE request."""

    @abstractmethod
    async def call_head(self, url: str, headers: dict[str, str], body: str) -> Response:
        """Send a HEAD request."""


class HttpxRepository(HttpClientRepository):
    """Performs calls with a fresh httpx client each time."""

    async def _send(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        body: str | None = None,
    ) -> Response:
        try:
            async with httpx.AsyncClient(follow_redirects=True, timeout=None) as client:
                reply = await client.request(method, url, headers=headers, content=body)
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
            raise RequestError(str(exc)) from exc
        return Response(
            status=reply.status_code,
            response_time=1,
            headers=dict(reply.headers.multi_items()),
            body=reply.text,
        )

    async def call_get(self, url: str, headers: dict[str, str]) -> Response:
        # GET requests are sent without the request's headers.
        return await self._send("GET", url)

    async def call_post(self, url: str, headers: dict[str, str], body: str) -> Response:
        return await self._send("POST", url, headers, body)

    async def call_put(self, url: str, headers: dict[str, str], body: str) -> Response:
        return await self._send("PUT", url, headers, body)

    async def call_patch(self, url: str, headers: dict[str, str], body: str) -> Response:
        return await self._send("PATCH", url, headers, body)

    async def call_delete(self, url: str, headers: dict[str, str], body: str) -> Response:
        return await self._send("DELETE", url, headers, body)

    async def call_head(self, url: str, headers: dict[str, str], body: str) -> Response:
        return await self._send("HEAD", url, headers, body)


class WebClient:
    """Validates requests, sends them through a repository and tidies the response."""

    def __init__(self, repository: HttpClientRepository) -> None:
        self.repository = repository

    async def submit(self, request: Request) -> Response:
        """Send the request; a JSON response body comes back pretty-printed."""
        prepared = run_validators(request, [url_protocol])
        repository = self.repository
        url = prepared.url
        headers = dict(prepared.headers)
        if prepared.method is Method.GET:
            response = await repository.call_get(url, headers)
        else:
            call = {
                Method.POST: repository.call_post,
                Method.PUT: repository.call_put,
                Method.PATCH: repository.call_patch,
                Method.HEAD: repository.call_head,
                Method.DELETE: repository.call_delete,
            }[prepared.method]
            response = await call(url, headers, prepared.body)
        return run_validators_ignoring_errors(response, [pretty_json_body])