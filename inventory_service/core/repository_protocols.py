"""Boundary Protocols: contracts between the service layer and its stores.

Invariants:
    - Services depend on these Protocols, never on concrete store classes
    - Record mutations return affected-row counts; 0 means the row is gone
    - Blob removal never raises

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Blob store methods are async because implementations do filesystem IO
"""

from typing import BinaryIO, Protocol, Sequence

from inventory_service.core.domain_types import BlobName, ItemId


class ItemLike(Protocol):
    """Structural contract for persisted inventory rows.

    Lets the view helpers and services work with the ORM model or a test
    double without importing SQLAlchemy.
    """
    id: int
    inventory_name: str
    description: str
    photo_filename: str | None


class ItemRepository(Protocol):
    """Contract for inventory record persistence."""
    async def list_all(self) -> Sequence[ItemLike]: ...
    async def get_by_id(self, item_id: ItemId) -> ItemLike | None: ...
    async def insert(
        self, name: str, description: str, photo_filename: BlobName | None,
    ) -> ItemLike: ...
    async def update_partial(
        self, item_id: ItemId, name: str | None = None, description: str | None = None,
    ) -> int: ...
    async def update_photo(self, item_id: ItemId, filename: BlobName) -> int: ...
    async def delete(self, item_id: ItemId) -> int: ...


class BlobStore(Protocol):
    """Contract for photo blob storage."""
    async def save(
        self, stream: BinaryIO, original_filename: str | None = None,
    ) -> BlobName: ...
    async def open(self, filename: str) -> BinaryIO | None: ...
    async def remove(self, filename: str) -> None: ...
