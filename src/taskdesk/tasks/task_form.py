# src/taskdesk/tasks/task_form.py

from __future__ import annotations

"""
Create/edit form controller.

Holds the draft for one task and submits it. The form never touches the task
list itself: submit() returns a SubmitResult and the caller reconciles only
when it is ok.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum

from ..core.ports import Notifier, TaskService
from .errors import EMPTY_TITLE_MESSAGE, RemoteOperationError, TaskDeskError, ValidationError
from .task_models import DRAFT_FIELDS, Task, TaskDraft

logger = logging.getLogger(__name__)


class FormState(str, Enum):
    CLOSED = "closed"
    CREATE_DRAFT = "create_draft"
    EDIT_DRAFT = "edit_draft"


@dataclass(slots=True, frozen=True)
class SubmitResult:
    """
    Outcome of one submit() call.

    - ok: `task` is the server-returned task, `mode` tells create from edit
    - validation or remote failure: `error` is set, the form is still open
    - ignored: another submission was in flight, nothing happened
    """

    mode: FormState
    task: Task | None = None
    error: TaskDeskError | None = None
    ignored: bool = False

    @property
    def ok(self) -> bool:
        return self.task is not None and self.error is None

    @property
    def created(self) -> bool:
        return self.ok and self.mode is FormState.CREATE_DRAFT


class TaskFormController:
    def __init__(self, service: TaskService, notifier: Notifier) -> None:
        self._service = service
        self._notifier = notifier
        self._state = FormState.CLOSED
        self._editing: Task | None = None
        self._draft = TaskDraft()
        self.busy = False
        # Inline validation message (the "invalid" sub-state). Remote errors go to the notifier.
        self.error: str | None = None

    # ---- read-only views for presentation ----

    @property
    def state(self) -> FormState:
        return self._state

    @property
    def draft(self) -> TaskDraft:
        return replace(self._draft)

    @property
    def editing(self) -> Task | None:
        return self._editing

    @property
    def is_open(self) -> bool:
        return self._state is not FormState.CLOSED

    @property
    def invalid(self) -> bool:
        return self.error is not None

    @property
    def heading(self) -> str:
        if self._editing is not None:
            return f"Edit {self._editing.title}"
        return "Create Task"

    # ---- transitions ----

    def open(self, task: Task | None = None) -> None:
        """Start a create draft (task is None) or an edit draft initialized from `task`."""
        if self.busy:
            logger.info("Form open ignored: a submission is in flight")
            return

        self.error = None
        self._editing = task
        if task is None:
            self._draft = TaskDraft()
            self._state = FormState.CREATE_DRAFT
        else:
            self._draft = TaskDraft.from_task(task)
            self._state = FormState.EDIT_DRAFT
        logger.debug("Form opened state=%s", self._state.value)

    def set_field(self, name: str, value: str) -> None:
        if name not in DRAFT_FIELDS:
            raise ValueError(f"Unknown task field: {name!r} (expected one of {', '.join(DRAFT_FIELDS)})")
        if not self.is_open:
            raise RuntimeError("Form is closed")
        setattr(self._draft, name, value)

    def cancel(self) -> None:
        self._close()

    def _close(self) -> None:
        self._draft = TaskDraft()
        self._editing = None
        self.error = None
        self._state = FormState.CLOSED

    async def submit(self) -> SubmitResult:
        mode = self._state
        if mode is FormState.CLOSED:
            raise RuntimeError("Form is closed")

        if self.busy:
            logger.debug("Submit ignored: already in flight")
            return SubmitResult(mode=mode, ignored=True)

        if not self._draft.title:
            self.error = EMPTY_TITLE_MESSAGE
            return SubmitResult(mode=mode, error=ValidationError(EMPTY_TITLE_MESSAGE))

        self.error = None
        self.busy = True
        draft = replace(self._draft)
        editing = self._editing
        try:
            if mode is FormState.EDIT_DRAFT and editing is not None:
                task = await self._service.update_task(editing.id, draft)
                if task.id != editing.id:
                    if task.id is not None:
                        logger.warning(
                            "Update response changed id %s -> %s, keeping original", editing.id, task.id
                        )
                    task.id = editing.id
            else:
                task = await self._service.create_task(draft)
        except RemoteOperationError as e:
            logger.warning("Submit (%s) failed: %s", mode.value, e.message)
            self._notifier.notify(e.message)
            return SubmitResult(mode=mode, error=e)
        finally:
            self.busy = False

        logger.info("Submit (%s) ok id=%s", mode.value, task.id)
        self._close()
        return SubmitResult(mode=mode, task=task)
