"""Shared fixtures.

Every test gets its own SQLite file, so API tests never see each other's rows.
"""

import asyncio
from collections.abc import AsyncIterator, Iterator
from typing import Any

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from catalog_api.catalog.repository import ProductRepository
from catalog_api.infrastructure.config import Settings
from catalog_api.infrastructure.database import Database
from catalog_api.main import create_app

FIXTURE_PRODUCTS: list[dict[str, Any]] = [
    {
        "name": "Premium Laptop",
        "description": "High-performance laptop for professionals",
        "category": "Electronics",
        "brand": "TechPro",
        "price": 999.99,
        "stock_quantity": 50,
        "sku": "TEC-00001",
    },
    {
        "name": "Wireless Mouse",
        "description": "Ergonomic wireless mouse",
        "category": "Electronics",
        "brand": "TechPro",
        "price": 29.99,
        "stock_quantity": 200,
        "sku": "TEC-00002",
    },
    {
        "name": "Classic T-Shirt",
        "description": "Comfortable cotton t-shirt",
        "category": "Clothing",
        "brand": "UrbanStyle",
        "price": 19.99,
        "stock_quantity": 150,
        "sku": "URB-00001",
    },
    {
        "name": "Running Shoes",
        "description": "Lightweight running shoes",
        "category": "Sports & Outdoors",
        "brand": "ActiveGear",
        "price": 89.99,
        "stock_quantity": 75,
        "sku": "ACT-00001",
    },
    {
        "name": "Yoga Mat",
        "description": "Non-slip yoga mat",
        "category": "Sports & Outdoors",
        "brand": "ActiveGear",
        "price": 39.99,
        "stock_quantity": 100,
        "sku": "ACT-00002",
    },
]


async def insert_rows(settings: Settings, rows: list[dict[str, Any]]) -> None:
    """Insert rows straight into the store named by settings."""
    database = Database(settings.database_url)
    try:
        await database.create_tables()
        async with database.session() as session:
            await ProductRepository(session).insert_batch(rows)
            await session.commit()
    finally:
        await database.dispose()


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a fresh SQLite file."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'products.db'}",
        log_json=False,
        log_level="WARNING",
    )


@pytest.fixture
def fixture_products() -> list[dict[str, Any]]:
    """The five reference products."""
    return [dict(row) for row in FIXTURE_PRODUCTS]


@pytest.fixture
def client(settings: Settings) -> Iterator[TestClient]:
    """Create test client over an empty catalog."""
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def seeded_client(
    settings: Settings,
    fixture_products: list[dict[str, Any]],
) -> Iterator[TestClient]:
    """Create test client over a catalog holding the five reference products."""
    asyncio.run(insert_rows(settings, fixture_products))
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def database(settings: Settings) -> AsyncIterator[Database]:
    """Open a database with the schema created."""
    db = Database(settings.database_url)
    await db.create_tables()
    try:
        yield db
    finally:
        await db.dispose()
