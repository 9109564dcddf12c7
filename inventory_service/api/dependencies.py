"""Request Dependencies: wire stores into an InventoryService per request.

Invariants:
    - One AsyncSession per request (get_db); the blob store is process-wide (app.state)
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_service.infrastructure.blob_store import FileBlobStore
from inventory_service.infrastructure.database import get_db
from inventory_service.infrastructure.item_repository import SqlItemRepository
from inventory_service.services.inventory_service import InventoryService


def get_blob_store(request: Request) -> FileBlobStore:
    store = getattr(request.app.state, "blob_store", None)
    if store is None:
        raise RuntimeError("Blob store not initialized")
    return store


async def get_inventory_service(
    db: AsyncSession = Depends(get_db),
    blobs: FileBlobStore = Depends(get_blob_store),
) -> InventoryService:
    return InventoryService(SqlItemRepository(db), blobs)
