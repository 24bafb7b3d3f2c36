"""Unit tests for arena_api/infrastructure/database.py.

Tests cover Settings defaults, env var override, logging setup and object
types.  No database connection is required.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from arena_api.infrastructure.database import (
    AsyncSessionLocal,
    Base,
    Settings,
    configure_logging,
    engine,
    get_session,
)


def test_settings_default_url_uses_asyncpg():
    assert "postgresql+asyncpg" in Settings().database_url


def test_settings_default_url_targets_localhost():
    assert "localhost" in Settings().database_url


def test_settings_reads_database_url_from_env(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@myhost/mydb")
    assert Settings().database_url == "postgresql+asyncpg://u:p@myhost/mydb"


def test_settings_max_page_size_default():
    assert Settings().max_page_size == 100


def test_settings_reads_max_page_size_from_env(monkeypatch):
    monkeypatch.setenv("MAX_PAGE_SIZE", "50")
    assert Settings().max_page_size == 50


def test_settings_echo_sql_off_by_default():
    assert Settings().echo_sql is False


def test_base_is_declarative_base():
    assert issubclass(Base, DeclarativeBase)


def test_engine_is_async():
    assert isinstance(engine, AsyncEngine)


def test_session_factory_produces_async_sessions():
    assert isinstance(AsyncSessionLocal, async_sessionmaker)
    assert AsyncSessionLocal.class_ is AsyncSession


def test_session_factory_keeps_objects_after_commit():
    assert AsyncSessionLocal.kw["expire_on_commit"] is False


def test_get_session_is_async_generator():
    assert hasattr(get_session(), "__anext__")


def test_configure_logging_explicit_level(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
    configure_logging("debug")
    assert calls["level"] == "DEBUG"


def test_configure_logging_defaults_to_settings_level(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
    configure_logging()
    assert calls["level"] == "INFO"
