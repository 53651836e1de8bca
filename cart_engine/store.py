"""
Cart Store

Owns one cart's state, routes every change through the reducer and
writes a snapshot to storage after each change.
"""

import logging
from decimal import Decimal
from typing import Any, Optional

from pydantic import ValidationError

from .actions import (
    CartAction,
    AddItem,
    RemoveItem,
    UpdateItem,
    ClearCart,
    ToggleCart,
    SetCartOpen,
)
from .models import CartItem, CartState, CartSnapshot
from .pricing import cart_total, total_item_count
from .reducer import cart_reducer
from .storage import CartStorage

logger = logging.getLogger(__name__)

CART_STORAGE_KEY = "walkie-cart"


class CartStore:
    """
    Cart state handle.

    Construct one per cart and pass it to whatever needs the cart.

    Usage:
        store = CartStore(storage=MemoryCartStorage())
        store.rehydrate()
        store.add_item(item)
        store.total_cost()
    """

    def __init__(
        self,
        storage: Optional[CartStorage] = None,
        key: str = CART_STORAGE_KEY,
    ):
        """
        Args:
            storage: Slot storage for snapshots (no persistence when None)
            key: Slot name for this cart
        """
        self.storage = storage
        self.key = key
        self._state = CartState()

    @property
    def state(self) -> CartState:
        return self._state

    @property
    def items(self) -> tuple[CartItem, ...]:
        return self._state.items

    @property
    def is_open(self) -> bool:
        return self._state.is_open

    def dispatch(self, action: CartAction) -> CartState:
        """Apply an action and persist the resulting state"""
        self._state = cart_reducer(self._state, action)
        self._persist()
        return self._state

    def add_item(self, item: CartItem) -> CartState:
        return self.dispatch(AddItem(item))

    def remove_item(self, item_id: str) -> CartState:
        return self.dispatch(RemoveItem(item_id))

    def update_item(self, item_id: str, **updates: Any) -> CartState:
        return self.dispatch(UpdateItem(item_id, updates))

    def set_quantity(self, item_id: str, quantity: int) -> CartState:
        """Set a line's quantity, removing the line when it drops to 0"""
        if quantity <= 0:
            return self.remove_item(item_id)
        return self.update_item(item_id, quantity=quantity)

    def clear(self) -> CartState:
        return self.dispatch(ClearCart())

    def toggle_open(self) -> CartState:
        return self.dispatch(ToggleCart())

    def set_open(self, is_open: bool) -> CartState:
        return self.dispatch(SetCartOpen(is_open))

    def total_items(self) -> int:
        return total_item_count(self._state.items)

    def total_cost(self) -> Decimal:
        return cart_total(self._state.items)

    def snapshot(self) -> CartSnapshot:
        return self._state.to_snapshot()

    def load_snapshot(self, snapshot: CartSnapshot) -> CartState:
        """
        Restore a snapshot by replaying it.

        Items go through add_item one by one so that duplicate ids are
        merged exactly as they would be for a live add.
        """
        self.set_open(snapshot.is_open)
        for item in snapshot.items:
            self.add_item(item)
        return self._state

    def rehydrate(self) -> CartState:
        """
        Load the persisted snapshot for this cart, if any.

        Unreadable or malformed data is logged and ignored, leaving the
        empty initial state. Never raises.
        """
        if self.storage is None:
            return self._state

        raw = self._read_slot()
        if not raw:
            return self._state

        try:
            snapshot = CartSnapshot.model_validate_json(raw)
        except ValidationError as e:
            logger.error(f"Error loading cart {self.key} from storage: {e}")
            return self._state

        return self.load_snapshot(snapshot)

    def has_snapshot(self) -> bool:
        """Whether storage holds a snapshot for this cart"""
        if self.storage is None:
            return False
        try:
            return self.storage.exists(self.key)
        except OSError as e:
            logger.error(f"Error checking cart {self.key} in storage: {e}")
            return False

    def _read_slot(self) -> Optional[str]:
        try:
            return self.storage.get(self.key)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error reading cart {self.key} from storage: {e}")
            return None

    def _persist(self) -> None:
        if self.storage is None:
            return
        try:
            self.storage.set(self.key, self.snapshot().model_dump_json())
        except OSError as e:
            # A failed write is not surfaced to the caller
            logger.warning(f"Error saving cart {self.key} to storage: {e}")
