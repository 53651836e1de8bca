"""Cart session storage for the storefront"""

import uuid
import logging
from typing import Optional

from cart_engine import CartStorage, CartStore, FileCartStorage, MemoryCartStorage

from ..core.config import settings

logger = logging.getLogger(__name__)


class CartSessionDatabase:
    """
    Holds one CartStore per cart session.

    Every store writes its snapshot to the shared storage under
    "<namespace>:<cart_id>", so carts survive a restart when file
    storage is configured.
    """

    def __init__(self, storage: CartStorage, namespace: str = "walkie-cart"):
        self.storage = storage
        self.namespace = namespace
        self.carts: dict[str, CartStore] = {}

    def _key(self, cart_id: str) -> str:
        return f"{self.namespace}:{cart_id}"

    def create_cart(self) -> tuple[str, CartStore]:
        """Create a new, empty cart"""
        cart_id = str(uuid.uuid4())
        store = CartStore(storage=self.storage, key=self._key(cart_id))
        self.carts[cart_id] = store
        # Claim the slot so the cart can be found again after a restart
        store.set_open(False)
        return cart_id, store

    def get_cart(self, cart_id: str) -> Optional[CartStore]:
        """Get a cart by ID, rehydrating it from storage on first access"""
        store = self.carts.get(cart_id)
        if store:
            return store

        store = CartStore(storage=self.storage, key=self._key(cart_id))
        if not store.has_snapshot():
            return None

        store.rehydrate()
        self.carts[cart_id] = store
        logger.debug(f"Rehydrated cart {cart_id} with {store.total_items()} items")
        return store


def create_cart_storage() -> CartStorage:
    """File storage when a directory is configured, memory otherwise"""
    if settings.cart_storage_dir:
        logger.info(f"Cart storage: files under {settings.cart_storage_dir}")
        return FileCartStorage(settings.cart_storage_dir)
    return MemoryCartStorage()


# Singleton instance
cart_db = CartSessionDatabase(
    storage=create_cart_storage(),
    namespace=settings.cart_storage_namespace,
)
