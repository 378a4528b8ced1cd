# src/taskdesk/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the controllers.

The controllers depend on Protocols instead of concrete implementations.
This keeps the remote service and the presentation swappable and makes testing easier.
"""

from typing import Protocol

from ..tasks.task_models import Task, TaskDraft, TaskId


class TaskService(Protocol):
    """
    Remote task collection (REST backend).

    Every method raises RemoteOperationError on transport failure or non-2xx status.
    """

    async def list_tasks(self) -> list[Task]: ...
    async def get_task(self, task_id: TaskId) -> Task: ...
    async def create_task(self, draft: TaskDraft) -> Task: ...
    async def update_task(self, task_id: TaskId, draft: TaskDraft) -> Task: ...
    async def delete_task(self, task_id: TaskId) -> None: ...


class Notifier(Protocol):
    """
    Presentation-side port: a blocking, user-facing notification.

    Used for remote failures. Validation messages are rendered inline by the form instead.
    """

    def notify(self, message: str) -> None: ...
