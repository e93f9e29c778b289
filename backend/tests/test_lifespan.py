"""Application lifespan: pool setup, schema bootstrap, and fatal startup failures."""

import logging

import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import OperationalError

import movie_api.infrastructure.database as db_module
import movie_api.main as main_module
from movie_api.config import Settings


@pytest.fixture(autouse=True)
def restore_state():
    handlers, level = list(logging.root.handlers), logging.root.level
    original_manager = db_module.db_manager
    yield
    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)
    db_module.db_manager = original_manager


def _use_settings(monkeypatch, **overrides):
    settings = Settings(_env_file=None, log_format="text", **overrides)
    monkeypatch.setattr(main_module, "get_settings", lambda: settings)


async def _has_movies_table(engine) -> bool:
    async with engine.connect() as conn:
        return await conn.run_sync(
            lambda sync_conn: inspect(sync_conn).has_table("movies"),
        )


async def test_startup_bootstraps_schema(monkeypatch, tmp_path):
    _use_settings(monkeypatch, database_url=f"sqlite+aiosqlite:///{tmp_path / 'm.db'}")

    async with main_module.lifespan(main_module.app):
        assert db_module.db_manager is not None
        assert await _has_movies_table(db_module.db_manager.engine)

    assert db_module.db_manager is None


async def test_startup_skips_bootstrap_when_disabled(monkeypatch, tmp_path):
    _use_settings(
        monkeypatch,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'm.db'}",
        database_bootstrap_schema=False,
    )

    async with main_module.lifespan(main_module.app):
        assert not await _has_movies_table(db_module.db_manager.engine)


async def test_startup_fails_when_database_unreachable(monkeypatch, tmp_path):
    _use_settings(
        monkeypatch,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'm.db'}",
    )

    with pytest.raises(OperationalError):
        async with main_module.lifespan(main_module.app):
            pass
    assert db_module.db_manager is None
