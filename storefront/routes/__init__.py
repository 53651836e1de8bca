# API Routes

from .catalog import router as catalog_router
from .cart import router as cart_router
from .checkout import router as checkout_router
from .auth import router as auth_router
from .admin import router as admin_router

__all__ = ["catalog_router", "cart_router", "checkout_router", "auth_router", "admin_router"]
