"""Item Repository: CRUD over the inventory table with affected-row counts."""

import pytest
from sqlalchemy.exc import OperationalError

from inventory_service.core.errors import DatabaseError
from inventory_service.infrastructure.item_repository import SqlItemRepository


@pytest.fixture
def repo(test_db):
    return SqlItemRepository(test_db)


async def test_insert_assigns_monotonic_ids(repo):
    first = await repo.insert("Drill", "Cordless", None)
    second = await repo.insert("Saw", "", "abc.jpg")
    assert first.id == 1
    assert second.id == 2
    assert second.photo_filename == "abc.jpg"


async def test_insert_does_not_reload_after_commit(repo, monkeypatch):
    async def _refresh(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("connection dropped"))

    monkeypatch.setattr(repo.db, "refresh", _refresh)
    item = await repo.insert("Drill", "Cordless", "abc.jpg")

    assert item.id == 1
    assert item.photo_filename == "abc.jpg"
    assert [i.id for i in await repo.list_all()] == [1]


async def test_list_all_orders_by_ascending_id(repo):
    for name in ("c", "a", "b"):
        await repo.insert(name, "", None)
    items = await repo.list_all()
    assert [i.id for i in items] == [1, 2, 3]
    assert [i.inventory_name for i in items] == ["c", "a", "b"]


async def test_get_by_id_missing_returns_none(repo):
    assert await repo.get_by_id(99) is None


async def test_update_partial_only_touches_provided_fields(repo):
    item = await repo.insert("Drill", "Cordless", None)

    assert await repo.update_partial(item.id, description="Corded") == 1
    refreshed = await repo.get_by_id(item.id)
    assert refreshed.inventory_name == "Drill"
    assert refreshed.description == "Corded"

    assert await repo.update_partial(item.id, name="Hammer") == 1
    refreshed = await repo.get_by_id(item.id)
    assert refreshed.inventory_name == "Hammer"
    assert refreshed.description == "Corded"


async def test_update_partial_without_fields_reports_existence(repo):
    item = await repo.insert("Drill", "", None)
    assert await repo.update_partial(item.id) == 1
    assert await repo.update_partial(404) == 0


async def test_update_partial_missing_row_affects_nothing(repo):
    assert await repo.update_partial(404, name="x") == 0


async def test_update_photo_sets_filename(repo):
    item = await repo.insert("Drill", "", None)
    assert await repo.update_photo(item.id, "new.png") == 1
    assert (await repo.get_by_id(item.id)).photo_filename == "new.png"
    assert await repo.update_photo(404, "new.png") == 0


async def test_delete_removes_row(repo):
    item = await repo.insert("Drill", "", None)
    assert await repo.delete(item.id) == 1
    assert await repo.get_by_id(item.id) is None
    assert await repo.delete(item.id) == 0


async def test_sqlalchemy_errors_map_to_database_error(repo, monkeypatch):
    async def _boom(*args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    monkeypatch.setattr(repo.db, "execute", _boom)
    with pytest.raises(DatabaseError) as exc_info:
        await repo.list_all()
    assert exc_info.value.http_status == 500
