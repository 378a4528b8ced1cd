# src/taskdesk/tasks/task_client.py

from __future__ import annotations

import logging
from typing import Any

import httpx

from .errors import RemoteOperationError
from .task_models import Task, TaskDraft, TaskId

logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "Error: Invalid response body"


def make_timeout(connect_s: float, read_s: float) -> httpx.Timeout:
    return httpx.Timeout(
        connect=connect_s,
        read=read_s,
        write=10.0,
        pool=connect_s,
    )


def build_http_client(
    base_url: str,
    *,
    connect_timeout_seconds: float = 5.0,
    read_timeout_seconds: float = 15.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    Create the AsyncClient used by TaskApiClient.

    `transport` is injectable (httpx.MockTransport for tests and offline mode).
    """
    return httpx.AsyncClient(
        base_url=base_url,
        timeout=make_timeout(connect_timeout_seconds, read_timeout_seconds),
        headers={"Accept": "application/json"},
        transport=transport,
    )


def _status_error(response: httpx.Response) -> RemoteOperationError:
    reason = response.reason_phrase or str(response.status_code)
    return RemoteOperationError(f"Error: {reason}", status_code=response.status_code)


def _transport_error_message(exc: httpx.HTTPError) -> str:
    msg = str(exc).strip()
    return msg or exc.__class__.__name__


class TaskApiClient:
    """
    REST client for the task service.

    Endpoints:
    - GET    /tasks        -> list of tasks
    - GET    /tasks/{id}   -> one task
    - POST   /tasks        -> created task (with id)
    - PUT    /tasks/{id}   -> updated task
    - DELETE /tasks/{id}   -> no body required

    Any transport failure or non-2xx status is raised as RemoteOperationError.
    No retries: a failed request is reported once and left to the user.
    """

    def __init__(self, http: httpx.AsyncClient) -> None:
        self._http = http

    @property
    def base_url(self) -> str:
        return str(self._http.base_url)

    async def aclose(self) -> None:
        await self._http.aclose()

    # ---- low-level helpers ----

    async def _request(self, method: str, path: str, *, json: Any = None) -> httpx.Response:
        try:
            response = await self._http.request(method, path, json=json)
        except httpx.HTTPError as e:
            logger.info("%s %s failed: %s", method, path, e.__class__.__name__)
            raise RemoteOperationError(_transport_error_message(e)) from e

        if not response.is_success:
            logger.info("%s %s -> %s %s", method, path, response.status_code, response.reason_phrase)
            raise _status_error(response)

        logger.debug("%s %s -> %s", method, path, response.status_code)
        return response

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise RemoteOperationError(INVALID_BODY_MESSAGE, status_code=response.status_code) from e

    def _task(self, response: httpx.Response) -> Task:
        data = self._json(response)
        if not isinstance(data, dict):
            raise RemoteOperationError(INVALID_BODY_MESSAGE, status_code=response.status_code)
        return Task.from_json(data)

    # ---- endpoints ----

    async def list_tasks(self) -> list[Task]:
        response = await self._request("GET", "/tasks")
        data = self._json(response)
        # A backend with an empty table may answer `null`.
        if data is None:
            return []
        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            raise RemoteOperationError(INVALID_BODY_MESSAGE, status_code=response.status_code)
        return [Task.from_json(item) for item in data]

    async def get_task(self, task_id: TaskId) -> Task:
        response = await self._request("GET", f"/tasks/{task_id}")
        return self._task(response)

    async def create_task(self, draft: TaskDraft) -> Task:
        response = await self._request("POST", "/tasks", json=draft.to_payload())
        return self._task(response)

    async def update_task(self, task_id: TaskId, draft: TaskDraft) -> Task:
        response = await self._request("PUT", f"/tasks/{task_id}", json=draft.to_payload())
        return self._task(response)

    async def delete_task(self, task_id: TaskId) -> None:
        await self._request("DELETE", f"/tasks/{task_id}")
