"""
Shared fixtures: a temporary catalog file, a service over it and a
FastAPI test client for an application pointed at it.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterator

import pytest
from fastapi.testclient import TestClient

from catalog_api.app.core.config import Settings
from catalog_api.app.core.storage import JsonFileStore
from catalog_api.app.main import create_app
from catalog_api.app.services.item_service import ItemService


SAMPLE_ITEMS: list[dict[str, Any]] = [
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
        "imgUrl": "/images/classic.jpg",
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
        "imgUrl": "images/urban.jpg",
    },
    {
        "id": 5,
        "name": "Linen Button Shirt",
        "brand": "Coastline",
        "description": "Breathable summer layer",
        "price": 49.0,
        "sizes": ["M"],
        "inStock": True,
        "imgUrl": "/images/linen.jpg",
    },
]


def write_items(path: Path, items: list[dict[str, Any]]) -> None:
    path.write_text(json.dumps(items, indent=2), encoding="utf-8")


def read_items(path: Path) -> list[dict[str, Any]]:
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    path = tmp_path / "items.json"
    write_items(path, SAMPLE_ITEMS)
    return path


@pytest.fixture
def empty_data_file(tmp_path: Path) -> Path:
    path = tmp_path / "items.json"
    write_items(path, [])
    return path


@pytest.fixture
def service(data_file: Path) -> ItemService:
    return ItemService(JsonFileStore(data_file))


def make_settings(data_file: Path, **overrides: Any) -> Settings:
    options: dict[str, Any] = {
        "data_file": str(data_file),
        "images_dir": str(data_file.parent / "images"),
        "base_url": "",
        "cors_origin": "http://shop.example.com",
    }
    options.update(overrides)
    return Settings(**options)


@pytest.fixture
def client(data_file: Path) -> Iterator[TestClient]:
    app = create_app(make_settings(data_file))
    with TestClient(app) as test_client:
        yield test_client
