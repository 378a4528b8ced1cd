# tests/test_task_models.py

from __future__ import annotations

import pytest

from taskdesk.tasks.task_models import Task, TaskDraft


def test_from_json_splits_known_and_extra_fields() -> None:
    task = Task.from_json(
        {"id": "4", "title": "t", "description": None, "status": "Done", "created_at": "2024-01-01"}
    )

    assert task.id == "4"
    assert task.title == "t"
    assert task.description == ""
    assert task.status == "Done"
    assert task.extra == {"created_at": "2024-01-01"}
    assert task.present == {"title", "status"}


def test_from_json_rejects_non_object() -> None:
    with pytest.raises(TypeError):
        Task.from_json(["x"])  # type: ignore[arg-type]


def test_merged_keeps_id_and_missing_extra() -> None:
    current = Task(id=1, title="old", description="a", status="Pending", extra={"created_at": "t0"})
    update = Task(id=1, title="new", description="", status="Done", extra={"owner": "me"})

    merged = current.merged(update)

    assert merged.id == 1
    assert (merged.title, merged.description, merged.status) == ("new", "", "Done")
    assert merged.extra == {"created_at": "t0", "owner": "me"}


def test_draft_from_task_and_payload() -> None:
    task = Task(id=2, title="Title", description="Desc", status="Pending")
    draft = TaskDraft.from_task(task)

    assert draft.to_payload() == {"title": "Title", "description": "Desc", "status": "Pending"}


def test_merged_keeps_fields_the_update_lacks() -> None:
    current = Task(id=1, title="a", description="d", status="s")

    merged = current.merged(Task.from_json({"id": 1, "status": "Done"}))

    assert (merged.title, merged.description, merged.status) == ("a", "d", "Done")


def test_merged_null_title_does_not_blank_stored_title() -> None:
    current = Task(id=1, title="a", description="d", status="s")

    merged = current.merged(Task.from_json({"id": 1, "title": None, "description": ""}))

    assert merged.title == "a"
    assert merged.description == ""
    assert merged.status == "s"
