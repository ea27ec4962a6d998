"""Tests for the infrastructure.db module."""

import pytest
from sqlalchemy import text
from sqlalchemy.pool import StaticPool

from src.infrastructure import db as db_module


def test_get_env_var_reads_environment(monkeypatch):
    """_get_env_var should load .env and return the requested value."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("LOCAL_STORE_DB_URL", "sqlite:///dashboard.db")

    assert (
        db_module._get_env_var("LOCAL_STORE_DB_URL")
        == "sqlite:///dashboard.db"
    )


def test_get_env_var_raises_when_missing(monkeypatch):
    """Missing env vars should raise a RuntimeError."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.delenv("LOCAL_STORE_DB_URL", raising=False)

    with pytest.raises(RuntimeError):
        db_module._get_env_var("LOCAL_STORE_DB_URL")


def test_in_memory_engine_shares_one_connection():
    """In-memory SQLite should keep data across connections."""
    engine = db_module._create_engine("sqlite://")

    with engine.begin() as conn:
        conn.exec_driver_sql("CREATE TABLE probe (value TEXT)")
        conn.exec_driver_sql("INSERT INTO probe VALUES ('kept')")
    with engine.connect() as conn:
        value = conn.execute(text("SELECT value FROM probe")).scalar_one()

    assert isinstance(engine.pool, StaticPool)
    assert value == "kept"


def test_get_local_engine_caches_engine(monkeypatch):
    """get_local_engine should memoize the created engine."""
    db_module._local_engine = None
    created = []

    def fake_create_engine(url):
        created.append(url)
        return f"engine:{url}"

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("LOCAL_STORE_DB_URL", "sqlite:///local.db")

    engine_one = db_module.get_local_engine()
    engine_two = db_module.get_local_engine()

    assert engine_one is engine_two
    assert engine_one == "engine:sqlite:///local.db"
    assert created == ["sqlite:///local.db"]
    db_module._local_engine = None


def test_adapter_proxies_singleton_without_url(monkeypatch):
    """Without a URL the adapter should use the module-level engine."""
    monkeypatch.setattr(db_module, "get_local_engine", lambda: "shared")

    adapter = db_module.SqlAlchemyDatabaseEngineAdapter()

    assert adapter.get_local_engine() == "shared"


def test_adapter_owns_engine_for_explicit_url(monkeypatch):
    """With a URL the adapter should build and reuse its own engine."""
    created = []

    def fake_create_engine(url):
        created.append(url)
        return object()

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)
    adapter = db_module.SqlAlchemyDatabaseEngineAdapter("sqlite:///own.db")

    assert adapter.get_local_engine() is adapter.get_local_engine()
    assert created == ["sqlite:///own.db"]
