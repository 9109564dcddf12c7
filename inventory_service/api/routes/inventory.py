"""Inventory Routes: register, list, fetch, update, re-photo, search and delete items.

Invariants:
    - Ids are parsed as int by FastAPI: a non-numeric id is a 400, never a 404
    - Unsupported methods on these paths get 405 from the router (partial match)
    - Handlers only translate HTTP shapes; all rules live in InventoryService
"""

import logging

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile, status
from fastapi.responses import HTMLResponse, StreamingResponse
from starlette.background import BackgroundTask

from inventory_service.api.dependencies import get_inventory_service
from inventory_service.core.domain_types import ItemId
from inventory_service.schemas.inventory import InventoryItemDTO, InventoryItemUpdate
from inventory_service.services.inventory_service import InventoryService, PhotoUpload

logger = logging.getLogger(__name__)
router = APIRouter(tags=["inventory"])

_CHUNK_SIZE = 64 * 1024


def _as_photo(upload: UploadFile | None) -> PhotoUpload | None:
    """Browsers submit an empty file part when no file was chosen."""
    if upload is None or not upload.filename:
        return None
    return PhotoUpload(stream=upload.file, filename=upload.filename)


@router.post(
    "/register",
    response_model=InventoryItemDTO,
    status_code=status.HTTP_201_CREATED,
)
async def register_item(
    inventory_name: str | None = Form(None, max_length=255),
    description: str | None = Form(None),
    photo: UploadFile | None = File(None),
    service: InventoryService = Depends(get_inventory_service),
):
    """Register a new inventory item with an optional photo."""
    return await service.register(inventory_name, description, _as_photo(photo))


@router.get("/inventory", response_model=list[InventoryItemDTO])
async def list_items(service: InventoryService = Depends(get_inventory_service)):
    """List all inventory items by ascending id."""
    return await service.list_items()


@router.get("/inventory/{item_id}", response_model=InventoryItemDTO)
async def get_item(
    item_id: int, service: InventoryService = Depends(get_inventory_service),
):
    return await service.get(ItemId(item_id))


@router.put("/inventory/{item_id}", response_model=InventoryItemDTO)
async def update_item(
    item_id: int,
    body: InventoryItemUpdate | None = None,
    service: InventoryService = Depends(get_inventory_service),
):
    """Update name and/or description; omitted fields keep their values."""
    body = body or InventoryItemUpdate()
    return await service.update_metadata(
        ItemId(item_id), body.inventory_name, body.description,
    )


@router.delete("/inventory/{item_id}", response_model=InventoryItemDTO)
async def delete_item(
    item_id: int, service: InventoryService = Depends(get_inventory_service),
):
    """Delete an item and its photo. Returns the deleted item."""
    return await service.delete(ItemId(item_id))


@router.get(
    "/inventory/{item_id}/photo",
    response_class=StreamingResponse,
    responses={200: {"content": {"image/jpeg": {}}}},
)
async def get_item_photo(
    item_id: int, service: InventoryService = Depends(get_inventory_service),
):
    """Stream the item's photo."""
    blob = await service.get_photo(ItemId(item_id))
    return StreamingResponse(
        iter(lambda: blob.stream.read(_CHUNK_SIZE), b""),
        media_type=blob.media_type,
        background=BackgroundTask(blob.stream.close),
    )


@router.put("/inventory/{item_id}/photo", response_model=InventoryItemDTO)
async def replace_item_photo(
    item_id: int,
    photo: UploadFile | None = File(None),
    service: InventoryService = Depends(get_inventory_service),
):
    """Replace the item's photo; the previous file is removed."""
    return await service.replace_photo(ItemId(item_id), _as_photo(photo))


@router.post("/search", response_class=HTMLResponse)
async def search_item(
    request: Request,
    item_id: int = Form(..., alias="id"),
    service: InventoryService = Depends(get_inventory_service),
):
    """Render an HTML page for one item; has_photo is a presence flag."""
    form = await request.form()
    include_photo = "has_photo" in form
    page = await service.search_render(ItemId(item_id), include_photo)
    return HTMLResponse(content=page)
