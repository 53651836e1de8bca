"""Cart API models"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from cart_engine import CartItem, CartStore, format_money, item_cost

from .listing import ListingType


class CartLine(BaseModel):
    """Cart item with its computed cost"""
    item: CartItem
    line_total: Decimal
    line_total_display: str


class CartView(BaseModel):
    """Cart as returned by the API"""
    cart_id: str
    items: list[CartLine] = []
    is_open: bool = False
    total_items: int = 0
    total_cost: Decimal = Decimal("0")
    total_cost_display: str = "$0.00"

    @classmethod
    def from_store(cls, cart_id: str, store: CartStore) -> "CartView":
        lines = []
        for item in store.items:
            cost = item_cost(item)
            lines.append(
                CartLine(item=item, line_total=cost, line_total_display=format_money(cost))
            )
        total = store.total_cost()
        return cls(
            cart_id=cart_id,
            items=lines,
            is_open=store.is_open,
            total_items=store.total_items(),
            total_cost=total,
            total_cost_display=format_money(total),
        )


class AddToCartRequest(BaseModel):
    """Request to add a listing to the cart"""
    listing_type: ListingType
    listing_id: str
    quantity: int = Field(default=1, gt=0)
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    preset_days: Optional[int] = Field(default=None, gt=0)


class UpdateCartItemRequest(BaseModel):
    """Request to change a line's quantity (0 or less removes it)"""
    quantity: int


class SetCartOpenRequest(BaseModel):
    is_open: bool


class QuoteRequest(BaseModel):
    """Price preview before adding to the cart"""
    listing_type: ListingType
    listing_id: str
    quantity: int = Field(default=1, gt=0)
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    preset_days: Optional[int] = Field(default=None, gt=0)


class QuoteResponse(BaseModel):
    listing_id: str
    name: str
    unit_price: Decimal
    quantity: int
    rental_days: int
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    total: Decimal
    total_display: str


class DatePresetResponse(BaseModel):
    label: str
    days: int


class CartResponse(BaseModel):
    """Cart API response"""
    cart: CartView
    message: Optional[str] = None
