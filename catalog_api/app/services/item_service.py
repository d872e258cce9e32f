"""
Service layer for catalog items.

``ItemService`` implements every catalog operation on top of a
``JsonFileStore``.  Each call loads the whole collection from disk;
mutating calls run inside ``JsonFileStore.mutate`` so the
load-modify-write cycle is serialized and the file is replaced
atomically.  Lookups, category filtering and search are linear scans
over the collection in file order.

Ids are assigned as the largest existing id plus one, so ids freed by
deletions are never handed out again while a higher id exists.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from catalog_api.app.core.exceptions import (
    ItemNotFoundError,
    ItemValidationError,
    StoreUnavailableError,
)
from catalog_api.app.core.storage import JsonFileStore
from catalog_api.app.schemas.item import (
    DEFAULT_IMAGE_URL,
    DEFAULT_SIZES,
    Item,
    ItemCreate,
    ItemUpdate,
)

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "brand", "description", "price")

# Fields a client may change with ``update``.  ``id`` and ``in_stock``
# are never patched.
PATCHABLE_FIELDS = (
    "name",
    "brand",
    "description",
    "price",
    "sizes",
    "color",
    "material",
    "category",
    "img_url",
)

# Written to the data file the first time the service starts.
SEED_ITEMS: List[Dict[str, Any]] = [
    {
        "id": 1,
        "name": "Classic Cotton Crew",
        "brand": "StyleSpot Basics",
        "description": "Premium cotton crew neck t-shirt with a relaxed fit",
        "price": 29.99,
        "sizes": ["S", "M", "L", "XL"],
        "color": "White",
        "material": "100% Organic Cotton",
        "inStock": True,
        "category": "Basic",
        "imgUrl": "/images/classic-cotton-crew.jpg",
    },
    {
        "id": 2,
        "name": "Urban Street Graphic",
        "brand": "UrbanEdge",
        "description": "Street-style graphic tee with custom artwork",
        "price": 34.99,
        "sizes": ["M", "L", "XL"],
        "color": "Black",
        "material": "95% Cotton, 5% Elastane",
        "inStock": True,
        "category": "Graphic",
        "imgUrl": "/images/urban-street-graphic.jpg",
    },
]


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    # A zero price counts as absent.
    return value == 0


def next_item_id(items: List[Item]) -> int:
    """Return the id for a new item: highest existing id plus one."""
    return max((item.id for item in items), default=0) + 1


def merge_item(item: Item, patch: ItemUpdate) -> Item:
    """Apply ``patch`` over ``item`` field by field.

    Only fields in ``PATCHABLE_FIELDS`` with a non-null value are
    copied; everything else, including ``id``, keeps its stored value.
    A blank ``img_url`` is ignored.  Blanking a required field raises
    ``ItemValidationError``.
    """
    changes: Dict[str, Any] = {}
    for field in PATCHABLE_FIELDS:
        value = getattr(patch, field)
        if value is None:
            continue
        if field == "img_url" and not value.strip():
            # A blank image path keeps the stored one.
            continue
        if field in REQUIRED_FIELDS and _is_missing(value):
            raise ItemValidationError(f"Field '{field}' cannot be empty")
        changes[field] = value
    return item.model_copy(update=changes)


class ItemService:
    """Catalog operations over a single JSON data file."""

    def __init__(self, store: JsonFileStore) -> None:
        self.store = store

    def ensure_seeded(self) -> None:
        """Create the data file with ``SEED_ITEMS`` if it does not exist yet."""
        self.store.initialize(SEED_ITEMS)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def list_all(self) -> List[Item]:
        """Return every item in file order."""
        return self._parse(self.store.load())

    def get_by_id(self, item_id: int) -> Item:
        """Return the first item with ``item_id`` or raise ``ItemNotFoundError``."""
        for item in self.list_all():
            if item.id == item_id:
                return item
        raise ItemNotFoundError(item_id)

    def filter_by_category(self, category: str) -> List[Item]:
        """Return items whose category equals ``category`` ignoring case.

        Items without a category never match.
        """
        wanted = category.lower()
        return [
            item
            for item in self.list_all()
            if item.category is not None and item.category.lower() == wanted
        ]

    def search(self, query: Optional[str]) -> List[Item]:
        """Return items whose name or description contains ``query`` ignoring case."""
        if query is None or not query.strip():
            raise ItemValidationError("Search query required")
        needle = query.lower()
        return [
            item
            for item in self.list_all()
            if needle in item.name.lower() or needle in item.description.lower()
        ]

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def insert(self, data: Union[ItemCreate, Dict[str, Any]]) -> Item:
        """Validate, assign an id, apply defaults and persist a new item."""
        if not isinstance(data, ItemCreate):
            try:
                data = ItemCreate.model_validate(data)
            except ValidationError as exc:
                raise ItemValidationError("Invalid item data") from exc
        missing = [field for field in REQUIRED_FIELDS if _is_missing(getattr(data, field))]
        if missing:
            raise ItemValidationError(f"Missing required fields: {', '.join(missing)}")

        def mutator(records: List[dict]) -> Item:
            items = self._parse(records)
            item = Item(
                id=next_item_id(items),
                name=data.name,
                brand=data.brand,
                description=data.description,
                price=data.price,
                sizes=data.sizes if data.sizes is not None else list(DEFAULT_SIZES),
                color=data.color,
                material=data.material,
                in_stock=True,
                category=data.category,
                img_url=DEFAULT_IMAGE_URL if _is_missing(data.img_url) else data.img_url,
            )
            records.append(self._dump(item))
            return item

        item = self.store.mutate(mutator)
        logger.info("Created item %s (%s)", item.id, item.name)
        return item

    def update(self, item_id: int, patch: Union[ItemUpdate, Dict[str, Any]]) -> Item:
        """Merge ``patch`` into the stored item and persist the result."""
        if not isinstance(patch, ItemUpdate):
            try:
                patch = ItemUpdate.model_validate(patch)
            except ValidationError as exc:
                raise ItemValidationError("Invalid item data") from exc

        def mutator(records: List[dict]) -> Item:
            items = self._parse(records)
            for index, item in enumerate(items):
                if item.id == item_id:
                    merged = merge_item(item, patch)
                    records[index] = self._dump(merged)
                    return merged
            raise ItemNotFoundError(item_id)

        item = self.store.mutate(mutator)
        logger.info("Updated item %s", item_id)
        return item

    def delete(self, item_id: int) -> None:
        """Remove the item with ``item_id`` and persist the remaining items."""

        def mutator(records: List[dict]) -> None:
            items = self._parse(records)
            for index, item in enumerate(items):
                if item.id == item_id:
                    del records[index]
                    return
            raise ItemNotFoundError(item_id)

        self.store.mutate(mutator)
        logger.info("Deleted item %s", item_id)

    # ------------------------------------------------------------------
    # Conversion helpers
    # ------------------------------------------------------------------
    def _parse(self, records: List[dict]) -> List[Item]:
        try:
            return [Item.model_validate(record) for record in records]
        except ValidationError as exc:
            logger.error("Catalog file %s contains an invalid record: %s", self.store.path, exc)
            raise StoreUnavailableError("Catalog data is malformed") from exc

    @staticmethod
    def _dump(item: Item) -> dict:
        return item.model_dump(by_alias=True, exclude_none=True)
