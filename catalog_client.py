"""Apparel catalog API client.

A thin wrapper around the catalog REST API built on ``requests``.  It
exposes one method per endpoint:

* :meth:`list_items` – return every item.
* :meth:`get_item` – fetch a single item by its identifier.
* :meth:`create_item` – add an item to the catalog.
* :meth:`update_item` – change some fields of an item.
* :meth:`delete_item` – remove an item.
* :meth:`items_by_category` – items in a category (case-insensitive).
* :meth:`search_items` – items whose name or description contains a query.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty (``[]``, ``None`` or
``False``) and ``error`` is a dictionary with the keys
``status_code`` and ``message``.  Methods never raise for HTTP or
connection errors, which keeps calling code (scripts, bots) simple.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

ItemsResult = Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]
ItemResult = Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]


class CatalogClient:
    """Client for the apparel catalog API."""

    ITEMS_PATH = "/api/items"

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Send one request to the catalog and decode the reply.

        A 2xx reply yields its JSON body, or ``None`` when the body is
        empty (``DELETE`` answers 204).  Anything else, including a
        connection failure, yields an error dict.
        """
        url = f"{self.base_url}{path}"
        logger.debug("%s %s params=%s", method, url, params)
        try:
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("Catalog API unreachable at %s: %s", self.base_url, exc)
            return None, {"status_code": None, "message": str(exc)}
        if not response.ok:
            error = self._error_from(response)
            logger.warning(
                "Catalog API %s %s answered %s: %s",
                method, path, error["status_code"], error["message"],
            )
            return None, error
        if not response.content:
            return None, None
        return response.json(), None

    @staticmethod
    def _error_from(response: requests.Response) -> Dict[str, Any]:
        """Build an error dict from a non-2xx reply.

        The catalog reports problems as ``{"detail": "..."}``; proxies in
        front of it may answer with plain text instead.
        """
        try:
            message = response.json().get("detail")
        except (ValueError, AttributeError):
            message = None
        return {
            "status_code": response.status_code,
            "message": message or response.text or response.reason or "Catalog request failed",
        }

    def _item_path(self, item_id: Any) -> str:
        return f"{self.ITEMS_PATH}/{item_id}"

    @staticmethod
    def _as_list(data: Any) -> List[Dict[str, Any]]:
        return data if isinstance(data, list) else []

    # ------------------------------------------------------------------
    # Item operations
    # ------------------------------------------------------------------
    def list_items(self) -> ItemsResult:
        """Retrieve all items."""
        data, error = self._request("GET", self.ITEMS_PATH)
        if error:
            return [], error
        return self._as_list(data), None

    def get_item(self, item_id: int) -> ItemResult:
        """Retrieve a single item by ID."""
        return self._request("GET", self._item_path(item_id))

    def create_item(self, payload: Dict[str, Any]) -> ItemResult:
        """Create an item.

        Args:
            payload: Item fields; ``name``, ``brand``, ``description`` and
                ``price`` are required by the server.
        """
        return self._request("POST", self.ITEMS_PATH, json_body=payload)

    def update_item(self, item_id: int, changes: Dict[str, Any]) -> ItemResult:
        """Apply a partial update to an item."""
        return self._request("PUT", self._item_path(item_id), json_body=changes)

    def delete_item(self, item_id: int) -> Tuple[bool, Optional[Dict[str, Any]]]:
        """Delete an item.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", self._item_path(item_id))
        if error:
            return False, error
        return True, None

    def items_by_category(self, category: str) -> ItemsResult:
        """Retrieve items in ``category``."""
        path = f"{self.ITEMS_PATH}/category/{quote(category, safe='')}"
        data, error = self._request("GET", path)
        if error:
            return [], error
        return self._as_list(data), None

    def search_items(self, query: str) -> ItemsResult:
        """Search item names and descriptions for ``query``."""
        data, error = self._request("GET", f"{self.ITEMS_PATH}/search", params={"q": query})
        if error:
            return [], error
        return self._as_list(data), None
