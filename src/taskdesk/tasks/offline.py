# src/taskdesk/tasks/offline.py

from __future__ import annotations

import json
import logging
import re
from datetime import UTC, datetime
from typing import Any

import httpx

from .task_models import DRAFT_FIELDS

logger = logging.getLogger(__name__)

_ITEM_PATH = re.compile(r"^/tasks/(?P<id>[^/]+)/?$")


class OfflineTaskService:
    """
    In-memory task service used for demos when no backend is configured.

    Speaks the same REST dialect as the real backend and is mounted with
    httpx.MockTransport, so the client code path is identical:
    - ids are decimal strings from an auto-increment counter
    - POST /tasks -> 201 with the stored task (created_at stamped)
    - PUT /tasks/{id} -> 200, id always taken from the path
    - DELETE /tasks/{id} -> 204
    - undecodable body -> 400 "Invalid input"; unknown id -> 404 "Task not found"
    """

    def __init__(self, seed: list[dict[str, Any]] | None = None) -> None:
        self._tasks: dict[str, dict[str, Any]] = {}
        self._next_id = 1
        for item in seed or []:
            self._insert(item)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def snapshot(self) -> list[dict[str, Any]]:
        return [dict(t) for t in self._tasks.values()]

    # ---- storage ----

    def _insert(self, fields: dict[str, Any]) -> dict[str, Any]:
        task_id = str(self._next_id)
        self._next_id += 1
        task = {
            "id": task_id,
            **{name: str(fields.get(name) or "") for name in DRAFT_FIELDS},
            "created_at": datetime.now(UTC).isoformat(),
        }
        self._tasks[task_id] = task
        return task

    # ---- HTTP ----

    @staticmethod
    def _text(status_code: int, text: str) -> httpx.Response:
        return httpx.Response(status_code, text=text + "\n")

    @staticmethod
    def _decode(request: httpx.Request) -> dict[str, Any] | None:
        try:
            body = json.loads(request.content or b"")
        except ValueError:
            return None
        return body if isinstance(body, dict) else None

    def handle(self, request: httpx.Request) -> httpx.Response:
        method = request.method
        path = request.url.path
        logger.debug("offline %s %s", method, path)

        if path.rstrip("/") == "/tasks":
            if method == "GET":
                return httpx.Response(200, json=list(self._tasks.values()))
            if method == "POST":
                body = self._decode(request)
                if body is None:
                    return self._text(400, "Invalid input")
                return httpx.Response(201, json=self._insert(body))
            return self._text(405, "Method Not Allowed")

        m = _ITEM_PATH.match(path)
        if m is None:
            return self._text(404, "404 page not found")

        task_id = m.group("id")
        if method == "GET":
            task = self._tasks.get(task_id)
            if task is None:
                return self._text(404, "Task not found")
            return httpx.Response(200, json=task)

        if method == "PUT":
            body = self._decode(request)
            if body is None:
                return self._text(400, "Invalid input")
            task = self._tasks.get(task_id)
            if task is None:
                return self._text(404, "Task not found")
            for name in DRAFT_FIELDS:
                task[name] = str(body.get(name) or "")
            return httpx.Response(200, json={k: v for k, v in task.items() if k != "created_at"})

        if method == "DELETE":
            if self._tasks.pop(task_id, None) is None:
                return self._text(404, "Task not found")
            return httpx.Response(204)

        return self._text(405, "Method Not Allowed")
