"""
FastAPI dependencies shared by the endpoint modules.

The item service and settings are created once in ``create_app`` and
kept on ``app.state``; these helpers hand them to route functions.
"""

from fastapi import Request

from catalog_api.app.core.config import Settings
from catalog_api.app.services.item_service import ItemService


def get_item_service(request: Request) -> ItemService:
    return request.app.state.item_service


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_base_url(request: Request) -> str:
    """Base URL for image links.

    Uses the configured ``BASE_URL`` when set, otherwise the scheme and
    host the request arrived on.
    """
    configured = get_settings(request).base_url
    if configured:
        return configured
    return str(request.base_url)
