"""Tests for infrastructure settings."""

from unittest.mock import MagicMock

import pytest

from src.infrastructure import settings as settings_module
from src.infrastructure.settings import DashboardSettings


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    """Ignore .env files and the real logger."""
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(
        settings_module,
        "get_app_logger",
        lambda: MagicMock(),
    )
    for name in (
        "DASHBOARD_REMOTE_URL",
        "DASHBOARD_PULL_TIMEOUT",
        "DASHBOARD_PUSH_TIMEOUT",
        "LOCAL_STORE_DB_URL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_from_env_reads_remote_and_timeouts(monkeypatch) -> None:
    """Configured values should be parsed from the environment."""
    monkeypatch.setenv("DASHBOARD_REMOTE_URL", " https://remote/exec ")
    monkeypatch.setenv("DASHBOARD_PULL_TIMEOUT", "3.5")
    monkeypatch.setenv("LOCAL_STORE_DB_URL", "sqlite://")

    settings = DashboardSettings.from_env()

    assert settings.remote_url == "https://remote/exec"
    assert settings.sync_enabled is True
    assert settings.pull_timeout == 3.5
    assert settings.push_timeout == 15.0
    assert settings.local_db_url == "sqlite://"


def test_from_env_defaults_to_local_only(monkeypatch, tmp_path) -> None:
    """Without a remote URL sync is disabled and SQLite lives in data/."""
    monkeypatch.setattr(
        settings_module,
        "get_project_root",
        lambda: tmp_path,
    )

    settings = DashboardSettings.from_env()

    assert settings.remote_url is None
    assert settings.sync_enabled is False
    assert settings.pull_timeout == 8.0
    assert settings.local_db_url == (
        f"sqlite:///{tmp_path / 'data' / 'dashboard.sqlite3'}"
    )
    assert (tmp_path / "data").is_dir()


@pytest.mark.parametrize("raw_value", ["soon", "-2", "0"])
def test_invalid_timeout_falls_back_to_default(raw_value) -> None:
    """Unparseable or non-positive timeouts should use the default."""
    logger = MagicMock()

    value = DashboardSettings._parse_seconds(
        raw_value,
        8.0,
        name="DASHBOARD_PULL_TIMEOUT",
        logger=logger,
    )

    assert value == 8.0
    logger.warning.assert_called_once()
