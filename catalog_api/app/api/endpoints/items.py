"""
Item endpoints.

These routes expose CRUD, category filtering and text search over
the catalog.  Every response carries items with ``imgUrl`` resolved
to an absolute URL.  Handlers are plain functions so FastAPI runs them
on its thread pool; the service serializes writes itself.

The ``/search`` and ``/category/{category}`` routes are declared
before ``/{item_id}`` so they are matched first.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from catalog_api.app.api.deps import get_base_url, get_item_service
from catalog_api.app.core.exceptions import ItemNotFoundError, ItemValidationError
from catalog_api.app.schemas.item import ItemCreate, ItemRead, ItemUpdate
from catalog_api.app.services.image_service import project_item, project_items
from catalog_api.app.services.item_service import ItemService

router = APIRouter()


@router.get("", response_model=List[ItemRead])
def list_items(
    service: ItemService = Depends(get_item_service),
    base_url: str = Depends(get_base_url),
) -> List[ItemRead]:
    """Return every item in the catalog."""
    return project_items(service.list_all(), base_url)


@router.get("/search", response_model=List[ItemRead])
def search_items(
    q: Optional[str] = Query(None, description="Text to look for in name or description"),
    service: ItemService = Depends(get_item_service),
    base_url: str = Depends(get_base_url),
) -> List[ItemRead]:
    """Case-insensitive search over item names and descriptions.

    Returns HTTP 400 when ``q`` is missing or empty.
    """
    try:
        items = service.search(q)
    except ItemValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return project_items(items, base_url)


@router.get("/category/{category}", response_model=List[ItemRead])
def list_items_by_category(
    category: str,
    service: ItemService = Depends(get_item_service),
    base_url: str = Depends(get_base_url),
) -> List[ItemRead]:
    """Return items in ``category`` (case-insensitive); may be empty."""
    return project_items(service.filter_by_category(category), base_url)


@router.get("/{item_id}", response_model=ItemRead)
def get_item(
    item_id: int,
    service: ItemService = Depends(get_item_service),
    base_url: str = Depends(get_base_url),
) -> ItemRead:
    """Retrieve a single item by ID.  Raises 404 if it does not exist."""
    try:
        item = service.get_by_id(item_id)
    except ItemNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found") from e
    return project_item(item, base_url)


@router.post("", response_model=ItemRead, status_code=status.HTTP_201_CREATED)
def create_item(
    item_in: ItemCreate,
    service: ItemService = Depends(get_item_service),
    base_url: str = Depends(get_base_url),
) -> ItemRead:
    """Create a new item.

    ``name``, ``brand``, ``description`` and ``price`` are required;
    a missing one results in HTTP 400.  ``sizes`` and ``imgUrl`` fall
    back to defaults and ``inStock`` is always true.
    """
    try:
        item = service.insert(item_in)
    except ItemValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return project_item(item, base_url)


@router.put("/{item_id}", response_model=ItemRead)
def update_item(
    item_id: int,
    item_in: ItemUpdate,
    service: ItemService = Depends(get_item_service),
    base_url: str = Depends(get_base_url),
) -> ItemRead:
    """Update an existing item.

    Partial updates are supported; unspecified fields remain unchanged
    and the ID can never be changed.
    """
    try:
        item = service.update(item_id, item_in)
    except ItemNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found") from e
    except ItemValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return project_item(item, base_url)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_item(
    item_id: int,
    service: ItemService = Depends(get_item_service),
) -> None:
    """Delete an item.  Raises 404 if it does not exist."""
    try:
        service.delete(item_id)
    except ItemNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found") from e
    return None
