# src/taskdesk/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable

from ..core.state import AppState
from ..tasks.task_api import find_task, open_create_form, open_edit_form, submit_form
from ..tasks.task_models import DRAFT_FIELDS, Task

CommandResult = str | Awaitable[str]
CommandHandler = Callable[[AppState, list[str]], CommandResult]

logger = logging.getLogger(__name__)

NO_TASKS_LABEL = "No tasks to show, use /add to create a task."
NOT_LOADED_LABEL = "Tasks are not loaded. Use /reload to fetch them."


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    async def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        reply = handler(state, args)
        if inspect.isawaitable(reply):
            reply = await reply
        return reply

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- rendering ----

def render_table(tasks: list[Task]) -> str:
    """Plain-text task table. Rows are keyed by id."""
    if not tasks:
        return NO_TASKS_LABEL

    header = ("Id", "Title", "Description", "Status")
    rows = [(str(t.id), t.title, t.description, t.status) for t in tasks]
    widths = [max(len(r[i]) for r in [header, *rows]) for i in range(len(header))]

    def fmt(row: tuple[str, ...]) -> str:
        return "  ".join(cell.ljust(widths[i]) for i, cell in enumerate(row)).rstrip()

    lines = [fmt(header), "  ".join("-" * w for w in widths)]
    lines.extend(fmt(r) for r in rows)
    return "\n".join(lines)


def render_form(state: AppState) -> str:
    form = state.form
    if not form.is_open:
        return "No form is open. Use /add or /edit <id>."

    draft = form.draft
    lines = [
        f"{form.heading}{' (submitting...)' if form.busy else ''}",
        f"  title:       {draft.title}",
        f"  description: {draft.description}",
        f"  status:      {draft.status}",
    ]
    if form.error:
        lines.append(f"  ! {form.error}")
    return "\n".join(lines)


def _usage_id(cmd: str) -> str:
    return f"Usage: /{cmd} <id>"


def _lookup(state: AppState, args: list[str], cmd: str) -> Task | str:
    if not args:
        return _usage_id(cmd)
    task = find_task(state, args[0])
    if task is None:
        return f"No task with id {args[0]}."
    return task


# ---- handlers ----

def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    if state.task_list.loading:
        return "Loading..."
    if not state.task_list.loaded and len(state.task_list) == 0:
        return NOT_LOADED_LABEL
    return render_table(state.task_list.tasks)


async def cmd_reload(state: AppState, args: list[str]) -> str:
    await state.task_list.load()
    return cmd_list(state, args)


async def cmd_show(state: AppState, args: list[str]) -> str:
    """Re-read one task from the server."""
    found = _lookup(state, args, "show")
    if isinstance(found, str):
        return found
    task = await state.task_list.refresh_task(found.id)
    if task is None:
        return "Task was not refreshed."
    return render_table([task])


def cmd_add(state: AppState, args: list[str]) -> str:
    open_create_form(state)
    return render_form(state)


def cmd_edit(state: AppState, args: list[str]) -> str:
    found = _lookup(state, args, "edit")
    if isinstance(found, str):
        return found
    open_edit_form(state, found)
    return render_form(state)


def cmd_set(state: AppState, args: list[str]) -> str:
    """
    /set title Buy milk
    /set status        -> clears the field
    """
    if not state.form.is_open:
        return render_form(state)
    if not args:
        return f"Usage: /set <{'|'.join(DRAFT_FIELDS)}> <value>"

    name = args[0].lower()
    if name not in DRAFT_FIELDS:
        return f"Unknown field: {name}. Use one of: {', '.join(DRAFT_FIELDS)}."
    state.form.set_field(name, " ".join(args[1:]))
    return render_form(state)


def cmd_form(state: AppState, args: list[str]) -> str:
    return render_form(state)


async def cmd_submit(state: AppState, args: list[str]) -> str:
    if not state.form.is_open:
        return render_form(state)

    result = await submit_form(state)
    if result.ignored:
        return "A submission is already in progress."
    if not result.ok:
        # Validation shows inline; remote errors were already notified.
        return render_form(state)
    verb = "Created" if result.created else "Updated"
    return f"{verb} task {result.task.id}.\n{render_table(state.task_list.tasks)}"


def cmd_cancel(state: AppState, args: list[str]) -> str:
    if not state.form.is_open:
        return "No form is open."
    state.form.cancel()
    return "Form closed."


async def cmd_delete(state: AppState, args: list[str]) -> str:
    found = _lookup(state, args, "delete")
    if isinstance(found, str):
        return found
    if not await state.task_list.delete_task(found.id):
        return "Task was not deleted."
    return render_table(state.task_list.tasks)


def cmd_status(state: AppState, args: list[str]) -> str:
    offline = bool(getattr(state.settings, "offline", False))
    backend = "offline demo service" if offline else state.client.base_url
    return (
        "Status:\n"
        f"  Backend: {backend}\n"
        f"  Tasks: {len(state.task_list)}{'' if state.task_list.loaded else ' (not loaded)'}\n"
        f"  Form: {state.form.state.value}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the task table.", aliases=["ls"])
registry.register("reload", cmd_reload, help_text="Fetch all tasks from the server again.")
registry.register("show", cmd_show, help_text="Re-read one task from the server: /show <id>.")
registry.register("add", cmd_add, help_text="Open the form to create a task.", aliases=["new"])
registry.register("edit", cmd_edit, help_text="Open the form to edit a task: /edit <id>.")
registry.register("set", cmd_set, help_text="Set a form field: /set title|description|status <value>.")
registry.register("form", cmd_form, help_text="Show the open form.")
registry.register("submit", cmd_submit, help_text="Submit the open form.", aliases=["save"])
registry.register("cancel", cmd_cancel, help_text="Close the form without saving.")
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id>.", aliases=["rm"])
registry.register("status", cmd_status, help_text="Show backend and form status.")
