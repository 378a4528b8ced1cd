# tests/test_commands.py

from __future__ import annotations

import httpx
import pytest

from taskdesk.cli.bootstrap import create_initial_state
from taskdesk.cli.commands import (
    NO_TASKS_LABEL,
    NOT_LOADED_LABEL,
    CommandRegistry,
    registry,
    render_table,
)
from taskdesk.tasks.task_models import Task

from .fakes import FakeNotifier


@pytest.mark.asyncio
async def test_command_registry_routes_sync_and_async(state) -> None:
    reg = CommandRegistry()
    called = {"sync": 0, "async": 0}

    def h_sync(state, args):
        called["sync"] += 1
        return "sync:" + ",".join(args)

    async def h_async(state, args):
        called["async"] += 1
        return "async"

    reg.register("a", h_sync, "a", aliases=["aa"])
    reg.register("b", h_async, "b")

    assert await reg.handle(state, "/a x y") == "sync:x,y"
    assert await reg.handle(state, "/AA") == "sync:"
    assert await reg.handle(state, "/b") == "async"
    assert called == {"sync": 2, "async": 1}


@pytest.mark.asyncio
async def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert await reg.handle(state, "hello") is None
    assert "Unknown command" in (await reg.handle(state, "/nope") or "")
    assert "Empty command" in (await reg.handle(state, "/") or "")


def test_render_table_keys_rows_by_id() -> None:
    assert render_table([]) == NO_TASKS_LABEL

    out = render_table([Task(id="1", title="Same"), Task(id="2", title="Same", status="Done")])
    lines = out.splitlines()
    assert lines[0].split() == ["Id", "Title", "Description", "Status"]
    assert len(lines) == 4
    assert lines[2].startswith("1 ")
    assert lines[3].startswith("2 ")


@pytest.mark.asyncio
async def test_console_session_against_offline_service(settings) -> None:
    settings.offline = True
    notifier = FakeNotifier()
    state = create_initial_state(settings=settings, notifier=notifier)
    await state.task_list.load()

    assert await registry.handle(state, "/list") == NO_TASKS_LABEL

    await registry.handle(state, "/add")
    reply = await registry.handle(state, "/submit")
    assert "Title cannot be empty" in reply

    await registry.handle(state, "/set title Buy milk")
    await registry.handle(state, "/set status Pending")
    reply = await registry.handle(state, "/submit")
    assert reply.startswith("Created task 1.")
    assert "Buy milk" in reply

    await registry.handle(state, "/edit 1")
    await registry.handle(state, "/set status Done")
    reply = await registry.handle(state, "/save")
    assert reply.startswith("Updated task 1.")
    assert state.task_list.get("1").status == "Done"

    assert await registry.handle(state, "/delete 9") == "No task with id 9."
    reply = await registry.handle(state, "/delete 1")
    assert reply == NO_TASKS_LABEL
    assert notifier.messages == []

    await state.client.aclose()


@pytest.mark.asyncio
async def test_set_without_open_form(state) -> None:
    reply = await registry.handle(state, "/set title x")
    assert reply.startswith("No form is open")


@pytest.mark.asyncio
async def test_list_and_status_before_a_successful_load(state, backend) -> None:
    backend.on("GET", "/tasks", httpx.ConnectError("Failed to fetch tasks"))
    await state.task_list.load()

    assert await registry.handle(state, "/list") == NOT_LOADED_LABEL
    assert "(not loaded)" in await registry.handle(state, "/status")

    backend.on("GET", "/tasks", lambda _req: httpx.Response(200, json=[]))
    assert await registry.handle(state, "/reload") == NO_TASKS_LABEL
    assert "(not loaded)" not in await registry.handle(state, "/status")
