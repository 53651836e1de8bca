"""Cart API routes for the storefront"""

import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, HTTPException

from cart_engine import (
    DATE_PRESETS,
    CartStore,
    CartValidationError,
    CatalogEntry,
    RentalPeriod,
    build_cart_item,
    format_money,
    quote,
)

from ..models.cart import (
    AddToCartRequest,
    CartResponse,
    CartView,
    DatePresetResponse,
    QuoteRequest,
    QuoteResponse,
    SetCartOpenRequest,
    UpdateCartItemRequest,
)
from ..models.listing import ListingType
from ..database.carts import cart_db
from ..database.catalog import catalog_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/cart", tags=["Cart"])


def get_cart_or_404(cart_id: str) -> CartStore:
    store = cart_db.get_cart(cart_id)
    if not store:
        raise HTTPException(status_code=404, detail="Cart not found")
    return store


def get_catalog_entry(listing_type: ListingType, listing_id: str) -> CatalogEntry:
    listing = catalog_db.get_listing(listing_type, listing_id)
    if not listing or not listing.available:
        raise HTTPException(status_code=404, detail="Listing not found")
    return listing.to_catalog_entry()


def select_period(
    start_date: Optional[datetime],
    end_date: Optional[datetime],
    preset_days: Optional[int],
) -> RentalPeriod:
    """Build the rental period from either a preset or explicit dates"""
    period = RentalPeriod()
    if preset_days:
        period.apply_preset(preset_days)
    else:
        period.set_start(start_date)
        period.set_end(end_date)
    return period


@router.get("/presets", response_model=list[DatePresetResponse])
async def list_date_presets():
    """Quick-select rental lengths"""
    return [DatePresetResponse(label=p.label, days=p.days) for p in DATE_PRESETS]


@router.post("/quote", response_model=QuoteResponse)
async def quote_listing(request: QuoteRequest):
    """Preview the price of a listing before adding it"""
    entry = get_catalog_entry(request.listing_type, request.listing_id)
    period = select_period(request.start_date, request.end_date, request.preset_days)

    try:
        result = quote(entry, request.quantity, period)
    except CartValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)

    return QuoteResponse(
        listing_id=entry.id,
        name=entry.name,
        unit_price=result.unit_price,
        quantity=result.quantity,
        rental_days=result.rental_days,
        start_date=period.start,
        end_date=period.end,
        total=result.total,
        total_display=format_money(result.total),
    )


@router.post("", response_model=CartResponse)
async def create_cart():
    """Create a new shopping cart"""
    cart_id, store = cart_db.create_cart()
    return CartResponse(cart=CartView.from_store(cart_id, store), message="Cart created")


@router.get("/{cart_id}", response_model=CartResponse)
async def get_cart(cart_id: str):
    """Get cart by ID"""
    store = get_cart_or_404(cart_id)
    return CartResponse(cart=CartView.from_store(cart_id, store))


@router.post("/{cart_id}/items", response_model=CartResponse)
async def add_to_cart(cart_id: str, request: AddToCartRequest):
    """Add a listing to the cart"""
    store = get_cart_or_404(cart_id)
    entry = get_catalog_entry(request.listing_type, request.listing_id)
    period = select_period(request.start_date, request.end_date, request.preset_days)

    try:
        item = build_cart_item(entry, quantity=request.quantity, period=period)
    except CartValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)

    store.add_item(item)
    return CartResponse(
        cart=CartView.from_store(cart_id, store),
        message=f"Added {request.quantity}x {entry.name} to cart",
    )


@router.put("/{cart_id}/items/{item_id}", response_model=CartResponse)
async def update_cart_item(cart_id: str, item_id: str, request: UpdateCartItemRequest):
    """Update item quantity in cart (0 or less removes the item)"""
    store = get_cart_or_404(cart_id)
    if not store.state.find(item_id):
        raise HTTPException(status_code=404, detail="Item not in cart")

    store.set_quantity(item_id, request.quantity)
    message = "Item removed" if request.quantity <= 0 else "Cart updated"
    return CartResponse(cart=CartView.from_store(cart_id, store), message=message)


@router.delete("/{cart_id}/items/{item_id}", response_model=CartResponse)
async def remove_from_cart(cart_id: str, item_id: str):
    """Remove an item from the cart"""
    store = get_cart_or_404(cart_id)
    store.remove_item(item_id)
    return CartResponse(cart=CartView.from_store(cart_id, store), message="Item removed")


@router.delete("/{cart_id}", response_model=CartResponse)
async def clear_cart(cart_id: str):
    """Clear all items from cart"""
    store = get_cart_or_404(cart_id)
    store.clear()
    return CartResponse(cart=CartView.from_store(cart_id, store), message="Cart cleared")


@router.post("/{cart_id}/toggle", response_model=CartResponse)
async def toggle_cart(cart_id: str):
    """Flip cart visibility"""
    store = get_cart_or_404(cart_id)
    store.toggle_open()
    return CartResponse(cart=CartView.from_store(cart_id, store))


@router.put("/{cart_id}/open", response_model=CartResponse)
async def set_cart_open(cart_id: str, request: SetCartOpenRequest):
    """Show or hide the cart"""
    store = get_cart_or_404(cart_id)
    store.set_open(request.is_open)
    return CartResponse(cart=CartView.from_store(cart_id, store))
