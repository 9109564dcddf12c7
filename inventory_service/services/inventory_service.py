"""Inventory Service: domain operations over the record store and the blob store.

Invariants:
    - Every id operation reads the row first; a missing row is ResourceNotFoundError
    - A mutation affecting 0 rows (row deleted concurrently) is also ResourceNotFoundError
    - Failed requests leave no new blob in the cache directory
    - Blob cleanup is best-effort and never fails the primary operation
    - The record is authoritative: it never points at a blob that was already removed

Design Decisions:
    - register/replace_photo validate before writing any blob
    - replace_photo order: save new blob, repoint record, then remove old blob
    - delete order: remove row, then remove blob (an orphan file beats a zombie row)
"""

import logging
from dataclasses import dataclass
from typing import BinaryIO

from inventory_service.core.domain_types import BlobName, ItemId, photo_media_type
from inventory_service.core.errors import (
    ErrorContext, InputValidationError, PhotoNotFoundError, ResourceNotFoundError,
)
from inventory_service.core.item_view import render_search_page
from inventory_service.core.repository_protocols import (
    BlobStore, ItemLike, ItemRepository,
)
from inventory_service.schemas.inventory import InventoryItemDTO

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PhotoUpload:
    """An uploaded photo: readable binary stream plus the client's filename."""
    stream: BinaryIO
    filename: str | None = None


@dataclass(frozen=True)
class PhotoBlob:
    """An opened photo; the caller closes the stream."""
    stream: BinaryIO
    media_type: str


class InventoryService:
    """Register, read, update, re-photo, search and delete inventory items."""

    def __init__(self, items: ItemRepository, blobs: BlobStore):
        self.items = items
        self.blobs = blobs

    async def _require(self, item_id: ItemId) -> ItemLike:
        item = await self.items.get_by_id(item_id)
        if item is None:
            raise ResourceNotFoundError(
                "Inventory item", item_id, ErrorContext(item_id=item_id),
            )
        return item

    async def register(
        self,
        name: str | None,
        description: str | None = None,
        photo: PhotoUpload | None = None,
    ) -> InventoryItemDTO:
        clean_name = (name or "").strip()
        if not clean_name:
            raise InputValidationError(
                "inventory_name is required", "inventory_name",
            )

        photo_filename: BlobName | None = None
        if photo is not None:
            photo_filename = await self.blobs.save(photo.stream, photo.filename)

        try:
            item = await self.items.insert(
                clean_name, description or "", photo_filename,
            )
        except Exception:
            if photo_filename:
                await self.blobs.remove(photo_filename)
            raise

        logger.info(
            f"Registered inventory item '{clean_name}'",
            extra={"item_id": item.id, "photo_filename": photo_filename},
        )
        return InventoryItemDTO.from_item(item)

    async def list_items(self) -> list[InventoryItemDTO]:
        return [InventoryItemDTO.from_item(i) for i in await self.items.list_all()]

    async def get(self, item_id: ItemId) -> InventoryItemDTO:
        return InventoryItemDTO.from_item(await self._require(item_id))

    async def update_metadata(
        self,
        item_id: ItemId,
        name: str | None = None,
        description: str | None = None,
    ) -> InventoryItemDTO:
        await self._require(item_id)
        if name is not None:
            name = name.strip()
            if not name:
                raise InputValidationError(
                    "inventory_name cannot be empty or whitespace", "inventory_name",
                )

        affected = await self.items.update_partial(item_id, name, description)
        if not affected:
            raise ResourceNotFoundError(
                "Inventory item", item_id, ErrorContext(item_id=item_id),
            )
        return await self.get(item_id)

    async def get_photo(self, item_id: ItemId) -> PhotoBlob:
        """Resolve the stored photo of an item.

        A missing item, an item without photo and a missing blob all raise
        the same PhotoNotFoundError.
        """
        item = await self.items.get_by_id(item_id)
        if item is None or not item.photo_filename:
            raise PhotoNotFoundError(item_id)

        stream = await self.blobs.open(item.photo_filename)
        if stream is None:
            logger.warning(
                "Record references a missing blob",
                extra={"item_id": item_id, "photo_filename": item.photo_filename},
            )
            raise PhotoNotFoundError(item_id)
        return PhotoBlob(stream=stream, media_type=photo_media_type(item.photo_filename))

    async def replace_photo(
        self, item_id: ItemId, photo: PhotoUpload | None,
    ) -> InventoryItemDTO:
        if photo is None:
            raise InputValidationError("photo file is required", "photo")

        item = await self._require(item_id)
        old_filename = item.photo_filename

        new_filename = await self.blobs.save(photo.stream, photo.filename)
        try:
            affected = await self.items.update_photo(item_id, new_filename)
        except Exception:
            await self.blobs.remove(new_filename)
            raise
        if not affected:
            await self.blobs.remove(new_filename)
            raise ResourceNotFoundError(
                "Inventory item", item_id, ErrorContext(item_id=item_id),
            )

        if old_filename and old_filename != new_filename:
            await self.blobs.remove(old_filename)

        logger.info(
            "Replaced inventory photo",
            extra={"item_id": item_id, "photo_filename": new_filename},
        )
        return await self.get(item_id)

    async def delete(self, item_id: ItemId) -> InventoryItemDTO:
        item = await self._require(item_id)
        deleted = InventoryItemDTO.from_item(item)
        photo_filename = item.photo_filename

        affected = await self.items.delete(item_id)
        if not affected:
            raise ResourceNotFoundError(
                "Inventory item", item_id, ErrorContext(item_id=item_id),
            )

        if photo_filename:
            await self.blobs.remove(photo_filename)

        logger.info("Deleted inventory item", extra={"item_id": item_id})
        return deleted

    async def search_render(self, item_id: ItemId, include_photo: bool) -> str:
        item = await self._require(item_id)
        return render_search_page(item, include_photo)
