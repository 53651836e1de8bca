# Cart Engine
# Reducer-driven cart state with rental-aware pricing and snapshot persistence

from .models import CartItem, CartState, CartSnapshot, CatalogEntry, ItemKind
from .actions import AddItem, RemoveItem, UpdateItem, ClearCart, ToggleCart, SetCartOpen
from .reducer import cart_reducer
from .pricing import item_cost, cart_total, total_item_count, format_money
from .rental import RentalPeriod, DatePreset, DATE_PRESETS, Quote, build_cart_item, quote, rental_item_id
from .dates import rental_days
from .storage import CartStorage, MemoryCartStorage, FileCartStorage
from .store import CartStore, CART_STORAGE_KEY
from .exceptions import CartError, CartValidationError, MissingRentalDatesError

__all__ = [
    "CartItem",
    "CartState",
    "CartSnapshot",
    "CatalogEntry",
    "ItemKind",
    "AddItem",
    "RemoveItem",
    "UpdateItem",
    "ClearCart",
    "ToggleCart",
    "SetCartOpen",
    "cart_reducer",
    "item_cost",
    "cart_total",
    "total_item_count",
    "format_money",
    "RentalPeriod",
    "DatePreset",
    "DATE_PRESETS",
    "rental_days",
    "build_cart_item",
    "quote",
    "Quote",
    "rental_item_id",
    "CartStorage",
    "MemoryCartStorage",
    "FileCartStorage",
    "CartStore",
    "CART_STORAGE_KEY",
    "CartError",
    "CartValidationError",
    "MissingRentalDatesError",
]
