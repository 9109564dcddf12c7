"""InventoryItem ORM: one row per registered inventory item.

Invariants:
    - id is an autoincrement integer primary key (store-assigned, monotonic)
    - inventory_name is non-nullable; description defaults to ""
    - photo_filename is nullable; NULL means the item has no photo
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from inventory_service.db.base import Base


class InventoryItem(Base):
    """Persisted inventory item."""
    __tablename__ = "inventory"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    inventory_name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(
        Text, nullable=False, default="", server_default="",
    )
    photo_filename: Mapped[str | None] = mapped_column(
        String(255), nullable=True,
    )

    def __repr__(self) -> str:
        return f"<InventoryItem id={self.id} name={self.inventory_name!r}>"
