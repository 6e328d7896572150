"""
Pytest fixtures and configuration for Toolshop Backend tests

This file provides shared fixtures that can be used across all test modules.

Author: TM3
Date: 2026-10-19
"""
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from toolshop.core.config import Settings
from toolshop.core.store import ShopStore
from toolshop.domain.category import Category
from toolshop.domain.menu import MenuItem
from toolshop.domain.product import Product, ProductCreate, ProductPrices
from toolshop.main import create_app


@pytest.fixture
def test_settings():
    """
    Provides settings isolated from the environment

    Scope: function
    """
    return Settings(
        ADMIN_USERNAME="admin",
        ADMIN_PASSWORD="admin",
        RECENTLY_VIEWED_LIMIT=8,
        ALLOWED_ORIGINS="http://localhost:3000",
    )


@pytest.fixture
def store(test_settings):
    """
    Provides a freshly seeded store for each test

    Scope: function (mutations never leak between tests)
    """
    return ShopStore.from_seed(test_settings)


@pytest.fixture
def client(store):
    """
    Provides a TestClient bound to the `store` fixture

    Tests can inspect `store` directly after calling the API.
    """
    app = create_app(store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def customer_client(client):
    """Client whose session has a signed-in customer"""
    response = client.post("/api/v1/session/login", json={"mobile": "09123456789"})
    assert response.status_code == 200
    return client


@pytest.fixture
def admin_client(client):
    """Client whose session is an admin session"""
    response = client.post("/api/v1/session/admin-login", json={"username": "admin", "password": "admin"})
    assert response.status_code == 200
    return client


@pytest.fixture
def sample_product_data():
    """
    Provides sample product data for tests
    """
    return ProductCreate(
        sku="RNX-2200",
        name="Ronix Jigsaw",
        stock=10,
        prices=ProductPrices(retail=Decimal("1400000"), wholesale=Decimal("1250000")),
        category="Power Tools",
        description="Variable speed jigsaw",
    )


@pytest.fixture
def make_product():
    """Factory for Product records with sensible defaults"""
    def _make(id, name="Tool", sku=None, retail="100", wholesale="90", stock=5, category="Hand Tools"):
        return Product(
            id=id,
            sku=sku or f"SKU-{id}",
            name=name,
            stock=stock,
            prices=ProductPrices(retail=Decimal(retail), wholesale=Decimal(wholesale)),
            category=category,
        )
    return _make


@pytest.fixture
def make_category():
    """Factory for Category records"""
    def _make(id, parent_id=None, name=None):
        name = name or f"Category {id}"
        return Category(id=id, name=name, slug=name.lower().replace(" ", "-"), parent_id=parent_id)
    return _make


@pytest.fixture
def make_menu_item():
    """Factory for MenuItem records of menu 1"""
    def _make(id, order, parent_id=None, title=None, menu_id=1):
        return MenuItem(
            id=id,
            menu_id=menu_id,
            title=title or f"Item {id}",
            type="page",
            value="home",
            parent_id=parent_id,
            order=order,
        )
    return _make
