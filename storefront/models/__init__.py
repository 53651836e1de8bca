# Storefront Models

from .listing import (
    ListingType,
    Category,
    Rental,
    RetailItem,
    Package,
    PackageContent,
    RentalCreate,
    RetailItemCreate,
    PackageCreate,
    RentalUpdate,
    RetailItemUpdate,
    PackageUpdate,
    DeleteResponse,
)
from .cart import (
    CartView,
    CartLine,
    AddToCartRequest,
    UpdateCartItemRequest,
    SetCartOpenRequest,
    QuoteRequest,
    QuoteResponse,
    DatePresetResponse,
    CartResponse,
)
from .checkout import (
    Order,
    OrderItem,
    OrderStatus,
    CheckoutRequest,
    CheckoutResponse,
    ContactDetails,
    PaymentDetails,
)
from .user import User, UserPublic, LoginRequest, RegisterRequest, TokenResponse, SessionInfo

__all__ = [
    "ListingType",
    "Category",
    "Rental",
    "RetailItem",
    "Package",
    "PackageContent",
    "RentalCreate",
    "RetailItemCreate",
    "PackageCreate",
    "RentalUpdate",
    "RetailItemUpdate",
    "PackageUpdate",
    "DeleteResponse",
    "CartView",
    "CartLine",
    "AddToCartRequest",
    "UpdateCartItemRequest",
    "SetCartOpenRequest",
    "QuoteRequest",
    "QuoteResponse",
    "DatePresetResponse",
    "CartResponse",
    "Order",
    "OrderItem",
    "OrderStatus",
    "CheckoutRequest",
    "CheckoutResponse",
    "ContactDetails",
    "PaymentDetails",
    "User",
    "UserPublic",
    "LoginRequest",
    "RegisterRequest",
    "TokenResponse",
    "SessionInfo",
]
