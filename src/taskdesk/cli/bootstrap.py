# src/taskdesk/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- picks the transport (real backend or the in-memory demo service),
- wires the client, notifier and controllers into AppState.
"""

from __future__ import annotations

import logging

import httpx

from ..config import get_settings
from ..core.ports import Notifier
from ..core.state import AppState
from ..tasks.offline import OfflineTaskService
from ..tasks.task_client import TaskApiClient, build_http_client

logger = logging.getLogger(__name__)

OFFLINE_BASE_URL = "http://offline.taskdesk"


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)


def create_initial_state(
    *,
    notifier: Notifier,
    settings=None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings and transport injectable makes the app easier to test and avoids hidden
    global config reads. If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    base_url = settings.api_base_url
    if transport is None and settings.offline:
        transport = OfflineTaskService().transport()
        base_url = OFFLINE_BASE_URL
        logger.info("Using offline demo task service.")

    http = build_http_client(
        base_url,
        connect_timeout_seconds=settings.connect_timeout_seconds,
        read_timeout_seconds=settings.read_timeout_seconds,
        transport=transport,
    )
    logger.info("Task service base_url=%s", base_url)

    return AppState.wire(settings=settings, client=TaskApiClient(http), notifier=notifier)
