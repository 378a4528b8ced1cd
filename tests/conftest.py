# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskdesk.core.state import AppState
from taskdesk.tasks.task_client import TaskApiClient, build_http_client
from taskdesk.tasks.task_form import TaskFormController
from taskdesk.tasks.task_list import TaskListController

from .fakes import FakeNotifier, ScriptedBackend

BASE_URL = "http://tasks.test"


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and AppState.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="taskdesk-test",
        log_level="DEBUG",
        api_base_url=BASE_URL,
        connect_timeout_seconds=1.0,
        read_timeout_seconds=1.0,
        offline=False,
        data_dir=tmp_path / "data",
    )


@pytest.fixture()
def notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture()
def backend() -> ScriptedBackend:
    return ScriptedBackend()


@pytest.fixture()
def client(backend: ScriptedBackend) -> TaskApiClient:
    return TaskApiClient(build_http_client(BASE_URL, transport=backend.transport()))


@pytest.fixture()
def task_list(client: TaskApiClient, notifier: FakeNotifier) -> TaskListController:
    return TaskListController(client, notifier)


@pytest.fixture()
def form(client: TaskApiClient, notifier: FakeNotifier) -> TaskFormController:
    return TaskFormController(client, notifier)


@pytest.fixture()
def state(settings: SimpleNamespace, client: TaskApiClient, notifier: FakeNotifier) -> AppState:
    """AppState wired to the scripted backend."""
    return AppState.wire(settings=settings, client=client, notifier=notifier)
