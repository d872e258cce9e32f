"""
Error types raised by the catalog store and services.

The transport layer maps them to HTTP status codes:
``ItemValidationError`` to 400, ``ItemNotFoundError`` to 404 and
``StoreUnavailableError`` to 500.
"""


class CatalogError(Exception):
    """Base class for catalog errors."""


class ItemValidationError(CatalogError):
    """Caller-supplied data is missing or invalid."""


class ItemNotFoundError(CatalogError):
    """No item exists with the requested id."""

    def __init__(self, item_id: int) -> None:
        super().__init__(f"Item {item_id} not found")
        self.item_id = item_id


class StoreUnavailableError(CatalogError):
    """The backing file could not be read, parsed or written."""
