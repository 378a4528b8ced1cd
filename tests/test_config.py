# tests/test_config.py

from __future__ import annotations

from pathlib import Path

from taskdesk.config import DEFAULT_API_BASE_URL, Settings


def test_settings_defaults(monkeypatch) -> None:
    for name in (
        "TASKDESK_API_BASE_URL",
        "TASKDESK_OFFLINE",
        "TASKDESK_READ_TIMEOUT_SECONDS",
        "TASKDESK_DATA_DIR",
        "TASKDESK_APP_NAME",
    ):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()

    assert s.api_base_url == DEFAULT_API_BASE_URL
    assert s.offline is False
    assert s.read_timeout_seconds == 15.0
    assert s.data_dir == Path(".local/taskdesk")
    assert s.app_name == "taskdesk"


def test_settings_from_env_and_bad_values(monkeypatch) -> None:
    monkeypatch.setenv("TASKDESK_API_BASE_URL", "http://tasks.internal:9000")
    monkeypatch.setenv("TASKDESK_OFFLINE", "yes")
    monkeypatch.setenv("TASKDESK_CONNECT_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("TASKDESK_READ_TIMEOUT_SECONDS", "soon")

    s = Settings.from_env()

    assert s.api_base_url == "http://tasks.internal:9000"
    assert s.offline is True
    assert s.connect_timeout_seconds == 2.5
    assert s.read_timeout_seconds == 15.0
