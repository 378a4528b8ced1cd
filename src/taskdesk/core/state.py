# src/taskdesk/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.task_client import TaskApiClient
from ..tasks.task_form import TaskFormController
from ..tasks.task_list import TaskListController
from .ports import Notifier


@dataclass
class AppState:
    """
    Runtime application state.

    Notes:
    - settings is typed as Any on purpose (tests can pass a SimpleNamespace).
    - task_list and form share the same client and notifier.
    """

    settings: Any
    client: TaskApiClient
    notifier: Notifier
    task_list: TaskListController
    form: TaskFormController

    @classmethod
    def wire(cls, *, settings: Any, client: TaskApiClient, notifier: Notifier) -> AppState:
        return cls(
            settings=settings,
            client=client,
            notifier=notifier,
            task_list=TaskListController(client, notifier),
            form=TaskFormController(client, notifier),
        )
