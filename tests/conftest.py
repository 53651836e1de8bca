"""Shared fixtures for cart engine, identity and storefront tests."""

import os
import sys
from datetime import datetime
from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Ensure project root is on path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from cart_engine import CartItem, ItemKind, MemoryCartStorage


# ---------------------------------------------------------------------------
# Cart items
# ---------------------------------------------------------------------------


@pytest.fixture
def make_item():
    """Factory for cart items with sensible defaults."""

    def _make(item_id="retail-1", **overrides):
        fields = {
            "id": item_id,
            "name": f"Item {item_id}",
            "unit_price": Decimal("10.00"),
            "kind": ItemKind.FLAT_PURCHASE,
            "quantity": 1,
        }
        fields.update(overrides)
        return CartItem(**fields)

    return _make


@pytest.fixture
def rental_item(make_item):
    """Motorola rental, 25/day, 3 days, quantity 2 (150.00)."""
    return make_item(
        "rental-1",
        name="Motorola XPR 7550e",
        unit_price=Decimal("25.00"),
        kind=ItemKind.TIMED_RENTAL,
        quantity=2,
        start_date=datetime(2025, 1, 1),
        end_date=datetime(2025, 1, 4),
        category="Professional",
    )


@pytest.fixture
def memory_storage():
    return MemoryCartStorage()


# ---------------------------------------------------------------------------
# Storefront app
# ---------------------------------------------------------------------------


@pytest.fixture
def app():
    """Storefront app with freshly reset in-memory databases."""
    from storefront.main import app as _app
    from storefront.database import cart_db, catalog_db, order_db, user_db, seed_staff_account

    cart_db.storage = MemoryCartStorage()
    cart_db.carts.clear()
    catalog_db.reset(seed=True)
    order_db.orders.clear()
    user_db.users.clear()
    seed_staff_account(user_db)

    yield _app


@pytest_asyncio.fixture
async def client(app):
    """Create an httpx AsyncClient for testing."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest_asyncio.fixture
async def staff_headers(client):
    """Authorization header for the seeded employee account."""
    resp = await client.post("/api/auth/login", json={
        "email": "admin@walkierentals.com",
        "password": "admin123",
    })
    assert resp.status_code == 200
    return {"Authorization": f"Bearer {resp.json()['access_token']}"}


@pytest_asyncio.fixture
async def customer_headers(client):
    """Authorization header for a freshly registered customer."""
    resp = await client.post("/api/auth/register", json={
        "email": "pat@example.com",
        "password": "hunter22",
        "name": "Pat",
    })
    assert resp.status_code == 201
    return {"Authorization": f"Bearer {resp.json()['access_token']}"}


@pytest_asyncio.fixture
async def cart_id(client):
    """A fresh cart session id."""
    resp = await client.post("/api/cart")
    assert resp.status_code == 200
    return resp.json()["cart"]["cart_id"]
