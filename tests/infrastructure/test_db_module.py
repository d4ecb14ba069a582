"""Tests for the finance database engine helpers."""

from unittest.mock import MagicMock

import pytest

from networth_engine.infrastructure import db as db_module


@pytest.fixture
def no_dotenv(monkeypatch):
    loader = MagicMock()
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", loader)
    return loader


@pytest.fixture
def fresh_engine(monkeypatch):
    monkeypatch.setattr(db_module, "_engine", None)


def test_database_url_is_read_after_loading_dotenv(monkeypatch, no_dotenv):
    """The .env file should be loaded before the URL is looked up."""
    monkeypatch.setenv(db_module.DB_URL_ENV, "sqlite:///finance.db")

    assert db_module._get_env_var(db_module.DB_URL_ENV) == (
        "sqlite:///finance.db"
    )
    no_dotenv.assert_called_once_with()


@pytest.mark.parametrize("value", [None, ""])
def test_missing_or_empty_database_url_is_an_error(
    monkeypatch,
    no_dotenv,
    value,
):
    """A missing or empty NETWORTH_DB_URL should name the variable."""
    if value is None:
        monkeypatch.delenv(db_module.DB_URL_ENV, raising=False)
    else:
        monkeypatch.setenv(db_module.DB_URL_ENV, value)

    with pytest.raises(RuntimeError, match=db_module.DB_URL_ENV):
        db_module._get_env_var(db_module.DB_URL_ENV)


def test_engine_uses_small_health_checked_pool(monkeypatch):
    """Engines should share a bounded QueuePool with pre-ping enabled."""
    factory = MagicMock(return_value="engine")
    monkeypatch.setattr(db_module, "create_engine", factory)

    assert db_module._create_engine("postgresql://finance") == "engine"

    factory.assert_called_once_with(
        "postgresql://finance",
        poolclass=db_module.QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


def test_engine_is_created_once(monkeypatch, no_dotenv, fresh_engine):
    """Repeated lookups should reuse the first engine."""
    factory = MagicMock(side_effect=lambda url: object())
    monkeypatch.setattr(db_module, "_create_engine", factory)
    monkeypatch.setenv(db_module.DB_URL_ENV, "postgresql://finance")

    first = db_module.get_engine()

    assert db_module.get_engine() is first
    factory.assert_called_once_with("postgresql://finance")


def test_engine_lookup_fails_without_url(monkeypatch, no_dotenv, fresh_engine):
    """No engine should be cached when the URL is missing."""
    monkeypatch.delenv(db_module.DB_URL_ENV, raising=False)

    with pytest.raises(RuntimeError):
        db_module.get_engine()
    assert db_module._engine is None


def test_adapter_delegates_to_module_engine(monkeypatch):
    """Repositories should reach the shared engine through the adapter."""
    engine = object()
    monkeypatch.setattr(db_module, "get_engine", lambda: engine)

    assert db_module.SqlAlchemyDatabaseEngineAdapter().get_engine() is engine
