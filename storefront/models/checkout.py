"""Checkout models for the storefront"""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from decimal import Decimal
from enum import Enum

from cart_engine import CartItem


class OrderStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class ContactDetails(BaseModel):
    """Customer contact and delivery details"""
    name: str = Field(min_length=1)
    email: str = Field(min_length=3)
    phone: Optional[str] = None
    address: str = Field(min_length=1)
    city: str = Field(min_length=1)
    postal_code: str = Field(min_length=1)


class PaymentDetails(BaseModel):
    """Card details for the simulated payment"""
    card_number: str = Field(min_length=4)
    expiry: str
    cvv: str = Field(min_length=3, max_length=4)
    cardholder_name: Optional[str] = None


class CheckoutRequest(BaseModel):
    """Request to checkout"""
    cart_id: str
    contact: ContactDetails
    payment: PaymentDetails


class OrderItem(BaseModel):
    """Item in an order"""
    item: CartItem
    line_total: Decimal


class Order(BaseModel):
    """Completed (simulated) order"""
    order_id: str
    status: OrderStatus
    items: list[OrderItem]
    total_items: int
    total: Decimal
    currency: str = "USD"
    contact: ContactDetails
    payment_last_four: Optional[str] = None
    user_id: Optional[str] = None
    created_at: datetime


class CheckoutResponse(BaseModel):
    """Response from checkout"""
    success: bool
    order: Optional[Order] = None
    message: Optional[str] = None
