# Database modules

from .catalog import catalog_db, CatalogDatabase, CatalogError
from .carts import cart_db, CartSessionDatabase
from .orders import order_db, OrderDatabase
from .users import user_db, UserDatabase, seed_staff_account

__all__ = [
    "catalog_db",
    "CatalogDatabase",
    "CatalogError",
    "cart_db",
    "CartSessionDatabase",
    "order_db",
    "OrderDatabase",
    "user_db",
    "UserDatabase",
    "seed_staff_account",
]
