"""Lifespan: startup creates the cache directory, blob store and pool; shutdown disposes the pool."""

import logging

from inventory_service import main
from inventory_service.config import Settings
from inventory_service.infrastructure import database


async def test_lifespan_initializes_and_releases_resources(tmp_path, monkeypatch):
    cache = tmp_path / "photos"
    settings = Settings(
        cache_dir=cache,
        database_url="sqlite+aiosqlite:///:memory:",
        log_format="text",
    )
    monkeypatch.setattr(main, "get_settings", lambda: settings)
    monkeypatch.setattr(database, "db_manager", None)
    root_handlers = list(logging.root.handlers)

    try:
        async with main.lifespan(main.app):
            assert cache.is_dir()
            assert main.app.state.blob_store.root == cache.resolve()
            assert database.db_manager is not None
        assert database.db_manager is None
    finally:
        for handler in list(logging.root.handlers):
            if handler not in root_handlers:
                logging.root.removeHandler(handler)
