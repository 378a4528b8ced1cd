# tests/fakes.py

from __future__ import annotations

import json
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

import httpx

from taskdesk.core.ports import Notifier

Reply = httpx.Response | Exception | Callable[[httpx.Request], Any]


@dataclass(slots=True)
class FakeNotifier(Notifier):
    """Collects user-facing notifications for assertions."""

    messages: list[str] = field(default_factory=list)

    def notify(self, message: str) -> None:
        self.messages.append(message)


class ScriptedBackend:
    """
    Fake task service for httpx.MockTransport.

    - Captures every request for assertions
    - Replies from a per-route script: "METHOD /path" -> Response | Exception | callable
    - Unscripted routes answer 404
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[str, Reply] = {}

    def on(self, method: str, path: str, reply: Reply) -> None:
        self._routes[f"{method.upper()} {path}"] = reply

    def calls(self, method: str | None = None) -> list[httpx.Request]:
        if method is None:
            return list(self.requests)
        return [r for r in self.requests if r.method == method.upper()]

    def body(self, request: httpx.Request) -> Any:
        return json.loads(request.content)

    async def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        reply = self._routes.get(f"{request.method} {request.url.path}")
        if reply is None:
            return httpx.Response(404, text="404 page not found")
        if isinstance(reply, Exception):
            raise reply
        if callable(reply):
            result = reply(request)
            if isinstance(result, Awaitable):
                result = await result
            if isinstance(result, Exception):
                raise result
            return result
        return reply

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)
