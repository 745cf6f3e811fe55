"""Pytest fixtures shared by the catalog service and storefront client tests."""

import asyncio
from typing import Any, Optional

import pytest
from fastapi.testclient import TestClient

from shopsmart.api.main import app, get_catalog
from shopsmart.catalog.store import CatalogStore


class FakeCatalogApi:
    """Stands in for CatalogApiClient. Each response is a payload or an exception to raise."""

    def __init__(self, products: Any = None, health: Any = None, gate: Optional[asyncio.Event] = None):
        if products is None:
            products = CatalogStore().list_payload()
        if health is None:
            health = {"status": "ok", "message": "ShopSmart Backend is running", "timestamp": "2026-01-01T00:00:00.000Z"}
        self.products = products
        self.health = health
        # When set, fetch_products waits on it before answering
        self.gate = gate
        self.product_calls = 0
        self.health_calls = 0

    async def fetch_products(self):
        self.product_calls += 1
        if self.gate is not None:
            await self.gate.wait()
        if isinstance(self.products, BaseException):
            raise self.products
        return self.products

    async def fetch_health(self):
        self.health_calls += 1
        if isinstance(self.health, BaseException):
            raise self.health
        return self.health


@pytest.fixture
def catalog_store():
    return CatalogStore()


@pytest.fixture
def api_client():
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def override_catalog():
    """Swap the served catalog for the duration of a test."""

    def _override(store: CatalogStore) -> None:
        app.dependency_overrides[get_catalog] = lambda: store

    yield _override
    app.dependency_overrides.clear()


@pytest.fixture
def make_fake_api():
    return FakeCatalogApi
