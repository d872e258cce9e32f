"""
Pydantic models for catalog items.

``Item`` is the stored record.  Field names on disk and on the wire
are camelCase (``inStock``, ``imgUrl``); Python code uses snake_case
attributes with aliases.  ``ItemCreate`` and ``ItemUpdate`` describe
request bodies and leave every field optional: presence of the
required fields is checked by ``ItemService`` so that a missing field
is reported as a 400 rather than a schema error.  ``ItemRead`` is the
response shape, where ``imgUrl`` has been resolved to an absolute URL.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_SIZES = ("M", "L")
DEFAULT_IMAGE_URL = "/images/default.jpg"


class Item(BaseModel):
    """A catalog item as persisted in the data file."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., examples=[1])
    name: str = Field(..., examples=["Classic Cotton Crew"])
    brand: str = Field(..., examples=["StyleSpot Basics"])
    description: str = Field(..., examples=["Premium cotton crew neck t-shirt with a relaxed fit"])
    price: float = Field(..., allow_inf_nan=False, examples=[29.99])
    sizes: List[str] = Field(default_factory=lambda: list(DEFAULT_SIZES))
    color: Optional[str] = None
    material: Optional[str] = None
    in_stock: bool = Field(True, alias="inStock")
    category: Optional[str] = Field(None, examples=["Basic"])
    img_url: str = Field(DEFAULT_IMAGE_URL, alias="imgUrl")


class ItemRead(Item):
    """Schema for returning an item from the API.

    Identical to ``Item`` except that ``imgUrl`` holds an absolute URL.
    """
    pass


class ItemCreate(BaseModel):
    """Schema for creating an item.

    ``name``, ``brand``, ``description`` and ``price`` are required by
    the service.  ``id`` and ``inStock`` are assigned by the server.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(None, examples=["Tee"])
    brand: Optional[str] = Field(None, examples=["UrbanEdge"])
    description: Optional[str] = Field(None, examples=["Street-style graphic tee"])
    price: Optional[float] = Field(None, allow_inf_nan=False, examples=[34.99])
    sizes: Optional[List[str]] = None
    color: Optional[str] = None
    material: Optional[str] = None
    category: Optional[str] = None
    img_url: Optional[str] = Field(None, alias="imgUrl")


class ItemUpdate(BaseModel):
    """Schema for updating an item.

    All fields are optional; only provided, non-null values are
    applied.  ``id`` and ``inStock`` cannot be changed.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    brand: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = Field(None, allow_inf_nan=False)
    sizes: Optional[List[str]] = None
    color: Optional[str] = None
    material: Optional[str] = None
    category: Optional[str] = None
    img_url: Optional[str] = Field(None, alias="imgUrl")
