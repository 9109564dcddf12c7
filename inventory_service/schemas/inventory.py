"""Inventory Schemas: Pydantic models for the inventory API boundary.

Invariants:
    - InventoryItemDTO never exposes photo_filename; photoUrl is derived from the id
    - InventoryItemUpdate fields are optional; omitted fields preserve stored values
    - A provided inventory_name is stripped and must not be blank
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from inventory_service.core.item_view import photo_url
from inventory_service.core.repository_protocols import ItemLike


class InventoryItemDTO(BaseModel):
    """Public-facing inventory item."""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    inventory_name: str
    description: str
    photo_url: str | None = Field(None, alias="photoUrl")

    @classmethod
    def from_item(cls, item: ItemLike) -> "InventoryItemDTO":
        return cls(
            id=item.id,
            inventory_name=item.inventory_name,
            description=item.description or "",
            photo_url=photo_url(item),
        )


class InventoryItemUpdate(BaseModel):
    """Partial metadata update (PUT /inventory/{id})."""
    inventory_name: str | None = Field(None, max_length=255)
    description: str | None = None

    @field_validator("inventory_name")
    @classmethod
    def strip_name(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip()
        if not v:
            raise ValueError("inventory_name cannot be empty or whitespace")
        return v
