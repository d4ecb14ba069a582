"""Tests for infrastructure settings."""

from unittest.mock import MagicMock

import pytest

from networth_engine.infrastructure import settings as settings_module
from networth_engine.infrastructure.settings import EngineSettings


@pytest.fixture
def logger(monkeypatch):
    fake = MagicMock()
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: fake)
    for name in (
        "NETWORTH_MAX_WORKERS",
        "NETWORTH_HISTORY_MONTHS",
        "NETWORTH_SNAPSHOT_DELAY_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)
    return fake


def test_from_env_defaults(logger) -> None:
    """Unset variables should keep the defaults."""
    settings = EngineSettings.from_env()

    assert settings == EngineSettings()
    assert settings.max_workers == 5
    assert settings.history_months == 12
    assert settings.snapshot_delay_seconds == 0.1
    logger.warning.assert_not_called()


def test_from_env_reads_values(monkeypatch, logger) -> None:
    """Valid values should override the defaults."""
    monkeypatch.setenv("NETWORTH_MAX_WORKERS", "3")
    monkeypatch.setenv("NETWORTH_HISTORY_MONTHS", "-1")
    monkeypatch.setenv("NETWORTH_SNAPSHOT_DELAY_SECONDS", "0.5")

    settings = EngineSettings.from_env()

    assert settings.max_workers == 3
    assert settings.history_months == -1
    assert settings.snapshot_delay_seconds == 0.5


def test_from_env_ignores_invalid_values(monkeypatch, logger) -> None:
    """Unparseable values should warn and fall back."""
    monkeypatch.setenv("NETWORTH_MAX_WORKERS", "many")
    monkeypatch.setenv("NETWORTH_SNAPSHOT_DELAY_SECONDS", "soon")

    settings = EngineSettings.from_env()

    assert settings.max_workers == 5
    assert settings.snapshot_delay_seconds == 0.1
    assert logger.warning.call_count == 2


def test_from_env_rejects_non_positive_workers(monkeypatch, logger) -> None:
    """A zero-sized pool should fall back to the default."""
    monkeypatch.setenv("NETWORTH_MAX_WORKERS", "0")
    monkeypatch.setenv("NETWORTH_SNAPSHOT_DELAY_SECONDS", "-2")

    settings = EngineSettings.from_env()

    assert settings.max_workers == 5
    assert settings.snapshot_delay_seconds == 0.0
    logger.warning.assert_called_once()
