# src/taskdesk/tasks/task_api.py

from __future__ import annotations

import logging

from ..core.state import AppState
from .task_form import SubmitResult
from .task_models import Task

logger = logging.getLogger(__name__)


def find_task(state: AppState, raw_id: str) -> Task | None:
    """
    Resolve a user-typed id against the local collection.

    Ids are opaque (the backend may send "1" or 1), so the match is on the text form.
    """
    raw_id = (raw_id or "").strip()
    if not raw_id:
        return None
    for task in state.task_list.tasks:
        if str(task.id) == raw_id:
            return task
    return None


def open_create_form(state: AppState) -> None:
    state.form.open(None)


def open_edit_form(state: AppState, task: Task) -> None:
    state.form.open(task)


async def submit_form(state: AppState) -> SubmitResult:
    """
    Submit the open form and reconcile the server's answer into the task list.

    The list changes only when the submission succeeded.
    """
    result = await state.form.submit()
    if not result.ok or result.task is None:
        return result

    if result.created:
        state.task_list.reconcile_created(result.task)
    else:
        state.task_list.reconcile_updated(result.task)
    return result
