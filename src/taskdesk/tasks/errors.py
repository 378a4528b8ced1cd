# src/taskdesk/tasks/errors.py

from __future__ import annotations

EMPTY_TITLE_MESSAGE = "Title cannot be empty"


class TaskDeskError(Exception):
    """Base class for errors shown to the user."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ValidationError(TaskDeskError):
    """Local input error. Raised before any request is sent."""


class RemoteOperationError(TaskDeskError):
    """
    A request to the task service failed.

    status_code is None for transport failures (connection refused, timeout, ...).
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
