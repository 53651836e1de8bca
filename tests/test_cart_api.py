"""
Tests for storefront/routes/cart.py -- cart sessions over HTTP.

Covers:
- Cart creation and lookup
- Adding rentals (explicit dates, presets, missing dates) and retail items
- Quantity updates, removal, clear, visibility
- Price quotes and date presets
"""

import pytest


RENTAL_DATES = {"start_date": "2025-01-01T00:00:00", "end_date": "2025-01-04T00:00:00"}
RENTAL_LINE_ID = "rental-1:20250101000000-20250104000000"


async def _add_rental(client, cart_id, quantity=2, **dates):
    return await client.post(f"/api/cart/{cart_id}/items", json={
        "listing_type": "rentals",
        "listing_id": "rental-1",
        "quantity": quantity,
        **(dates or RENTAL_DATES),
    })


async def _add_retail(client, cart_id, listing_id="retail-1", quantity=1):
    return await client.post(f"/api/cart/{cart_id}/items", json={
        "listing_type": "retail",
        "listing_id": listing_id,
        "quantity": quantity,
    })


# ---------------------------------------------------------------------------
# CART SESSIONS
# ---------------------------------------------------------------------------


class TestCartSessions:

    @pytest.mark.asyncio
    async def test_create_cart(self, client):
        resp = await client.post("/api/cart")
        assert resp.status_code == 200
        cart = resp.json()["cart"]
        assert cart["items"] == []
        assert cart["total_items"] == 0
        assert cart["total_cost_display"] == "$0.00"
        assert cart["is_open"] is False

    @pytest.mark.asyncio
    async def test_get_cart(self, client, cart_id):
        resp = await client.get(f"/api/cart/{cart_id}")
        assert resp.status_code == 200
        assert resp.json()["cart"]["cart_id"] == cart_id

    @pytest.mark.asyncio
    async def test_unknown_cart(self, client):
        resp = await client.get("/api/cart/does-not-exist")
        assert resp.status_code == 404

    @pytest.mark.asyncio
    async def test_cart_rehydrates_from_storage(self, client, cart_id):
        from storefront.database import cart_db

        await _add_retail(client, cart_id, quantity=3)
        cart_db.carts.clear()

        resp = await client.get(f"/api/cart/{cart_id}")
        assert resp.status_code == 200
        assert resp.json()["cart"]["total_items"] == 3

    @pytest.mark.asyncio
    async def test_corrupt_cart_file_loads_empty(self, client, tmp_path):
        from cart_engine import FileCartStorage
        from storefront.database import cart_db

        cart_db.storage = FileCartStorage(tmp_path)
        (tmp_path / f"{cart_db.namespace}_broken.json").write_bytes(b'{"items": [], "is_open": \xff}')

        resp = await client.get("/api/cart/broken")
        assert resp.status_code == 200
        assert resp.json()["cart"]["items"] == []


# ---------------------------------------------------------------------------
# ADD ITEMS
# ---------------------------------------------------------------------------


class TestAddItems:

    @pytest.mark.asyncio
    async def test_add_rental_with_dates(self, client, cart_id):
        resp = await _add_rental(client, cart_id)
        assert resp.status_code == 200

        data = resp.json()
        assert data["message"] == "Added 2x Motorola XPR 7550e to cart"
        line = data["cart"]["items"][0]
        assert line["item"]["id"] == RENTAL_LINE_ID
        assert line["item"]["kind"] == "rental"
        assert line["item"]["rental_days"] == 3
        assert line["line_total_display"] == "$150.00"

    @pytest.mark.asyncio
    async def test_rental_and_retail_totals(self, client, cart_id):
        await _add_rental(client, cart_id)
        resp = await _add_retail(client, cart_id)

        cart = resp.json()["cart"]
        assert cart["total_items"] == 3
        assert cart["total_cost_display"] == "$239.99"

    @pytest.mark.asyncio
    async def test_same_listing_merges(self, client, cart_id):
        await _add_retail(client, cart_id, quantity=1)
        resp = await _add_retail(client, cart_id, quantity=2)

        items = resp.json()["cart"]["items"]
        assert len(items) == 1
        assert items[0]["item"]["quantity"] == 3

    @pytest.mark.asyncio
    async def test_same_rental_different_dates_are_separate_lines(self, client, cart_id):
        await _add_rental(client, cart_id, quantity=1)
        resp = await _add_rental(
            client, cart_id, quantity=1,
            start_date="2025-02-01T00:00:00", end_date="2025-02-02T00:00:00",
        )
        assert len(resp.json()["cart"]["items"]) == 2

    @pytest.mark.asyncio
    async def test_add_rental_with_preset(self, client, cart_id):
        resp = await client.post(f"/api/cart/{cart_id}/items", json={
            "listing_type": "rentals",
            "listing_id": "rental-2",
            "preset_days": 7,
        })
        assert resp.status_code == 200
        line = resp.json()["cart"]["items"][0]
        assert line["item"]["rental_days"] == 7
        assert line["line_total_display"] == "$126.00"

    @pytest.mark.asyncio
    async def test_add_package_is_priced_per_day(self, client, cart_id):
        resp = await client.post(f"/api/cart/{cart_id}/items", json={
            "listing_type": "packages",
            "listing_id": "package-1",
            "preset_days": 3,
        })
        assert resp.status_code == 200
        assert resp.json()["cart"]["total_cost_display"] == "$225.00"

    @pytest.mark.asyncio
    async def test_rental_without_dates_rejected(self, client, cart_id):
        resp = await client.post(f"/api/cart/{cart_id}/items", json={
            "listing_type": "rentals",
            "listing_id": "rental-1",
            "start_date": "2025-01-01T00:00:00",
        })
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Please select rental dates for Motorola XPR 7550e"

    @pytest.mark.asyncio
    async def test_end_before_start_is_treated_as_missing(self, client, cart_id):
        resp = await _add_rental(
            client, cart_id,
            start_date="2025-01-05T00:00:00", end_date="2025-01-02T00:00:00",
        )
        assert resp.status_code == 400

    @pytest.mark.asyncio
    async def test_unknown_listing(self, client, cart_id):
        resp = await _add_retail(client, cart_id, listing_id="retail-999")
        assert resp.status_code == 404

    @pytest.mark.asyncio
    async def test_zero_quantity_rejected(self, client, cart_id):
        resp = await _add_retail(client, cart_id, quantity=0)
        assert resp.status_code == 422


# ---------------------------------------------------------------------------
# UPDATE / REMOVE / CLEAR
# ---------------------------------------------------------------------------


class TestModifyCart:

    @pytest.mark.asyncio
    async def test_update_quantity(self, client, cart_id):
        await _add_retail(client, cart_id)
        resp = await client.put(f"/api/cart/{cart_id}/items/retail-1", json={"quantity": 5})

        assert resp.status_code == 200
        assert resp.json()["message"] == "Cart updated"
        assert resp.json()["cart"]["total_items"] == 5

    @pytest.mark.asyncio
    async def test_update_quantity_zero_removes(self, client, cart_id):
        await _add_rental(client, cart_id)
        resp = await client.put(f"/api/cart/{cart_id}/items/{RENTAL_LINE_ID}", json={"quantity": 0})

        assert resp.status_code == 200
        assert resp.json()["message"] == "Item removed"
        assert resp.json()["cart"]["items"] == []

    @pytest.mark.asyncio
    async def test_update_missing_item(self, client, cart_id):
        resp = await client.put(f"/api/cart/{cart_id}/items/retail-1", json={"quantity": 2})
        assert resp.status_code == 404

    @pytest.mark.asyncio
    async def test_remove_item_is_idempotent(self, client, cart_id):
        await _add_retail(client, cart_id)
        first = await client.delete(f"/api/cart/{cart_id}/items/retail-1")
        second = await client.delete(f"/api/cart/{cart_id}/items/retail-1")

        assert first.status_code == 200
        assert second.status_code == 200
        assert second.json()["cart"]["items"] == []

    @pytest.mark.asyncio
    async def test_clear_keeps_visibility(self, client, cart_id):
        await _add_retail(client, cart_id)
        await client.put(f"/api/cart/{cart_id}/open", json={"is_open": True})

        resp = await client.delete(f"/api/cart/{cart_id}")
        cart = resp.json()["cart"]
        assert resp.json()["message"] == "Cart cleared"
        assert cart["items"] == []
        assert cart["is_open"] is True

    @pytest.mark.asyncio
    async def test_toggle(self, client, cart_id):
        resp = await client.post(f"/api/cart/{cart_id}/toggle")
        assert resp.json()["cart"]["is_open"] is True
        resp = await client.post(f"/api/cart/{cart_id}/toggle")
        assert resp.json()["cart"]["is_open"] is False


# ---------------------------------------------------------------------------
# QUOTES AND PRESETS
# ---------------------------------------------------------------------------


class TestQuotes:

    @pytest.mark.asyncio
    async def test_presets(self, client):
        resp = await client.get("/api/cart/presets")
        assert resp.status_code == 200
        assert [p["days"] for p in resp.json()] == [1, 3, 7, 14, 30]
        assert resp.json()[0]["label"] == "1 Day"

    @pytest.mark.asyncio
    async def test_rental_quote(self, client):
        resp = await client.post("/api/cart/quote", json={
            "listing_type": "rentals",
            "listing_id": "rental-1",
            "quantity": 2,
            **RENTAL_DATES,
        })
        assert resp.status_code == 200
        data = resp.json()
        assert data["rental_days"] == 3
        assert data["total_display"] == "$150.00"

    @pytest.mark.asyncio
    async def test_quote_without_end_date(self, client):
        resp = await client.post("/api/cart/quote", json={
            "listing_type": "rentals",
            "listing_id": "rental-1",
            "start_date": "2025-01-05T00:00:00",
            "end_date": "2025-01-01T00:00:00",
        })
        data = resp.json()
        assert data["end_date"] is None
        assert data["rental_days"] == 0
        assert data["total_display"] == "$0.00"

    @pytest.mark.asyncio
    async def test_retail_quote(self, client):
        resp = await client.post("/api/cart/quote", json={
            "listing_type": "retail",
            "listing_id": "retail-8",
            "quantity": 3,
        })
        assert resp.json()["total_display"] == "$89.97"
