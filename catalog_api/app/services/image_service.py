"""
Image URL projection.

Stored items keep a relative ``imgUrl`` such as ``/images/tee.jpg``.
Clients need an absolute URL, which depends on where the service is
reachable.  These helpers build the absolute form at response time;
the stored item is never changed.
"""

from typing import Iterable, List
from urllib.parse import urlsplit

from catalog_api.app.schemas.item import Item, ItemRead


def resolve_image_url(img_url: str, base_url: str) -> str:
    """Join ``base_url`` and the stored image path with a single ``/``.

    Values that are already absolute ``http``/``https`` URLs are
    returned unchanged.
    """
    if urlsplit(img_url).scheme in ("http", "https"):
        return img_url
    path = img_url[1:] if img_url.startswith("/") else img_url
    base = base_url[:-1] if base_url.endswith("/") else base_url
    return f"{base}/{path}"


def project_item(item: Item, base_url: str) -> ItemRead:
    """Return a response copy of ``item`` with an absolute ``imgUrl``."""
    data = item.model_dump()
    data["img_url"] = resolve_image_url(item.img_url, base_url)
    return ItemRead(**data)


def project_items(items: Iterable[Item], base_url: str) -> List[ItemRead]:
    return [project_item(item, base_url) for item in items]
