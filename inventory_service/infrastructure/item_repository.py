"""Item Repository: SQL access for the inventory table.

Invariants:
    - list_all() orders by ascending id
    - Mutations are single conditional statements (WHERE id = :id) committed immediately
    - Mutations return the affected-row count; callers treat 0 as "row is gone"
    - SQLAlchemy failures are rolled back and re-raised as DatabaseError

Design Decisions:
    - Core UPDATE/DELETE statements instead of ORM load-modify-flush: the
      affected-row count closes the pre-check/mutate race without a transaction
"""

import logging
from typing import Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_service.core.domain_types import BlobName, ItemId
from inventory_service.infrastructure.database import map_db_error
from inventory_service.models.inventory_item import InventoryItem

logger = logging.getLogger(__name__)


class SqlItemRepository:
    """ItemRepository backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> Sequence[InventoryItem]:
        try:
            result = await self.db.execute(
                select(InventoryItem).order_by(InventoryItem.id.asc()),
            )
            return result.scalars().all()
        except SQLAlchemyError as e:
            raise await self._fail(e, "list")

    async def get_by_id(self, item_id: ItemId) -> InventoryItem | None:
        try:
            result = await self.db.execute(
                select(InventoryItem)
                .where(InventoryItem.id == item_id)
                .execution_options(populate_existing=True),
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise await self._fail(e, "select")

    async def insert(
        self, name: str, description: str, photo_filename: BlobName | None,
    ) -> InventoryItem:
        item = InventoryItem(
            inventory_name=name,
            description=description,
            photo_filename=photo_filename,
        )
        try:
            self.db.add(item)
            await self.db.commit()
        except SQLAlchemyError as e:
            raise await self._fail(e, "insert")
        logger.info("Inventory item inserted", extra={"item_id": item.id})
        return item

    async def update_partial(
        self,
        item_id: ItemId,
        name: str | None = None,
        description: str | None = None,
    ) -> int:
        """Overwrite only the provided fields.

        With nothing to change the statement degenerates to an existence check,
        so a no-op update still reports whether the row exists.
        """
        values: dict[str, str] = {}
        if name is not None:
            values["inventory_name"] = name
        if description is not None:
            values["description"] = description

        if not values:
            exists = await self.get_by_id(item_id)
            return 1 if exists is not None else 0

        return await self._execute_update(item_id, values, "update")

    async def update_photo(self, item_id: ItemId, filename: BlobName) -> int:
        return await self._execute_update(
            item_id, {"photo_filename": filename}, "update_photo",
        )

    async def delete(self, item_id: ItemId) -> int:
        try:
            result = await self.db.execute(
                delete(InventoryItem).where(InventoryItem.id == item_id),
            )
            await self.db.commit()
        except SQLAlchemyError as e:
            raise await self._fail(e, "delete")
        return result.rowcount

    async def _execute_update(
        self, item_id: ItemId, values: dict, operation: str,
    ) -> int:
        try:
            result = await self.db.execute(
                update(InventoryItem)
                .where(InventoryItem.id == item_id)
                .values(**values)
                .execution_options(synchronize_session=False),
            )
            await self.db.commit()
        except SQLAlchemyError as e:
            raise await self._fail(e, operation)
        return result.rowcount

    async def _fail(self, exc: SQLAlchemyError, operation: str):
        await self.db.rollback()
        return map_db_error(exc, operation)
