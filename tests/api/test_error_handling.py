"""Error Handling: internal failures become generic 500s, details stay in logs."""

import logging

from sqlalchemy.exc import OperationalError

from inventory_service.infrastructure.database import map_db_error
from inventory_service.infrastructure.item_repository import SqlItemRepository


async def test_database_failure_returns_generic_500(client, monkeypatch, caplog):
    async def _boom(self):
        raise map_db_error(
            OperationalError("SELECT", {}, Exception("password for lab user rejected")),
            "list",
        )

    monkeypatch.setattr(SqlItemRepository, "list_all", _boom)
    with caplog.at_level(logging.INFO):
        res = await client.get("/inventory")

    assert res.status_code == 500
    body = res.json()
    assert body["error"]["code"] == "DATABASE_ERROR"
    assert body["error"]["message"] == "An unexpected error occurred"
    assert "password" not in res.text
    assert "password for lab user rejected" in caplog.text


async def test_health_liveness(client):
    res = await client.get("/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_without_database_is_503(client, monkeypatch):
    from inventory_service.infrastructure import database

    monkeypatch.setattr(database, "db_manager", None)
    res = await client.get("/health/ready")
    assert res.status_code == 503
