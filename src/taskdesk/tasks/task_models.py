# src/taskdesk/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

TaskId = str | int

# Fields sent in create/update request bodies, in wire order.
DRAFT_FIELDS: tuple[str, ...] = ("title", "description", "status")


def _text(raw: Any) -> str:
    if raw is None:
        return ""
    return raw if isinstance(raw, str) else str(raw)


@dataclass(slots=True)
class Task:
    """
    A task as the remote service returns it.

    `id` is opaque and server-assigned. Keys other than the four known fields
    (e.g. created_at) are kept in `extra` so they survive reconciliation.
    `present` names the known fields the payload actually carried; merged()
    copies only those.
    """

    id: TaskId | None
    title: str
    description: str = ""
    status: str = ""
    extra: dict[str, Any] = field(default_factory=dict)
    present: frozenset[str] = field(default=frozenset(DRAFT_FIELDS), compare=False, repr=False)

    @classmethod
    def from_json(cls, payload: dict[str, Any]) -> Task:
        if not isinstance(payload, dict):
            raise TypeError(f"Task payload must be an object, got {type(payload).__name__}")
        extra = {k: v for k, v in payload.items() if k not in ("id", *DRAFT_FIELDS)}
        # null counts as absent: it must not blank a stored title.
        present = frozenset(name for name in DRAFT_FIELDS if payload.get(name) is not None)
        return cls(
            id=payload.get("id"),
            title=_text(payload.get("title")),
            description=_text(payload.get("description")),
            status=_text(payload.get("status")),
            extra=extra,
            present=present,
        )

    def merged(self, update: Task) -> Task:
        """Shallow merge: fields carried by `update` win, everything it lacks is kept."""
        values = {
            name: getattr(update, name) if name in update.present else getattr(self, name)
            for name in DRAFT_FIELDS
        }
        return Task(id=self.id, **values, extra={**self.extra, **update.extra})


@dataclass(slots=True)
class TaskDraft:
    """Editable, unsaved field set held by the form."""

    title: str = ""
    description: str = ""
    status: str = ""

    @classmethod
    def from_task(cls, task: Task) -> TaskDraft:
        return cls(title=task.title, description=task.description, status=task.status)

    def to_payload(self) -> dict[str, str]:
        return {"title": self.title, "description": self.description, "status": self.status}
