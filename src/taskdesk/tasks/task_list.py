# src/taskdesk/tasks/task_list.py

from __future__ import annotations

"""
Task list controller.

Owns the local copy of the task collection. The remote service is the only
source of truth: the list changes only after a successful read or write.

Concurrent delete/load calls are not serialized; whichever finishes last is
applied last.
"""

import logging

from ..core.ports import Notifier, TaskService
from .errors import RemoteOperationError
from .task_models import Task, TaskId

logger = logging.getLogger(__name__)


class TaskListController:
    def __init__(self, service: TaskService, notifier: Notifier) -> None:
        self._service = service
        self._notifier = notifier
        self._tasks: list[Task] = []
        self.loading = False
        self.loaded = False

    @property
    def tasks(self) -> list[Task]:
        """Snapshot of the collection, in server order."""
        return list(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def get(self, task_id: TaskId) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def _fail(self, action: str, err: RemoteOperationError) -> None:
        logger.warning("%s failed: %s", action, err.message)
        self._notifier.notify(err.message)

    async def load(self) -> bool:
        """
        Replace the collection with the server's list.

        On failure the collection is left as it was and the user is notified.
        """
        self.loading = True
        try:
            tasks = await self._service.list_tasks()
        except RemoteOperationError as e:
            self._fail("Load tasks", e)
            return False
        finally:
            self.loading = False

        self._tasks = list(tasks)
        self.loaded = True
        logger.info("Loaded %d tasks", len(self._tasks))
        return True

    def reconcile_updated(self, task: Task) -> None:
        """Merge a server-confirmed update into the entry with the same id (position kept)."""
        for i, current in enumerate(self._tasks):
            if current.id == task.id:
                self._tasks[i] = current.merged(task)
                logger.debug("Reconciled update id=%s", task.id)
                return
        logger.debug("Reconcile update: id=%s not in collection, ignored", task.id)

    def reconcile_created(self, task: Task) -> None:
        """Append a server-created task. The caller guarantees its id is new."""
        self._tasks.append(task)
        logger.debug("Reconciled create id=%s", task.id)

    async def delete_task(self, task_id: TaskId) -> bool:
        try:
            await self._service.delete_task(task_id)
        except RemoteOperationError as e:
            self._fail(f"Delete task id={task_id}", e)
            return False

        self._tasks = [t for t in self._tasks if t.id != task_id]
        logger.info("Deleted task id=%s", task_id)
        return True

    async def refresh_task(self, task_id: TaskId) -> Task | None:
        """Re-read one task from the server and reconcile it as an update."""
        try:
            task = await self._service.get_task(task_id)
        except RemoteOperationError as e:
            self._fail(f"Refresh task id={task_id}", e)
            return None

        if task.id != task_id:
            if task.id is not None:
                logger.warning("Refresh response changed id %s -> %s, keeping requested", task_id, task.id)
            task.id = task_id
        self.reconcile_updated(task)
        return self.get(task_id)
