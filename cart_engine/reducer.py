"""
Cart Reducer

Pure transition function from (state, action) to a new state.
States and items are never mutated in place.
"""

from dataclasses import replace

from .actions import (
    CartAction,
    AddItem,
    RemoveItem,
    UpdateItem,
    ClearCart,
    ToggleCart,
    SetCartOpen,
)
from .models import CartItem, CartState

# Fields an update may not touch: identity, and the derived day count
_PROTECTED_FIELDS = {"id", "rental_days"}


def cart_reducer(state: CartState, action: CartAction) -> CartState:
    """
    Apply an action to a cart state.

    Args:
        state: Current cart state
        action: One of the actions in cart_engine.actions

    Returns:
        The new cart state (the same object when nothing changed)

    Raises:
        TypeError: Unknown action type
    """
    if isinstance(action, AddItem):
        return _add_item(state, action.item)

    if isinstance(action, RemoveItem):
        items = tuple(item for item in state.items if item.id != action.item_id)
        if len(items) == len(state.items):
            return state
        return replace(state, items=items)

    if isinstance(action, UpdateItem):
        return _update_item(state, action.item_id, action.updates)

    if isinstance(action, ClearCart):
        return replace(state, items=())

    if isinstance(action, ToggleCart):
        return replace(state, is_open=not state.is_open)

    if isinstance(action, SetCartOpen):
        return replace(state, is_open=action.is_open)

    raise TypeError(f"Unknown cart action: {type(action).__name__}")


def _add_item(state: CartState, incoming: CartItem) -> CartState:
    existing = state.find(incoming.id)
    if existing is None:
        return replace(state, items=state.items + (incoming,))

    # Merge by id: only the quantity changes
    merged = existing.model_copy(
        update={"quantity": existing.quantity + incoming.quantity}
    )
    items = tuple(merged if item.id == incoming.id else item for item in state.items)
    return replace(state, items=items)


def _update_item(state: CartState, item_id: str, updates: dict) -> CartState:
    existing = state.find(item_id)
    if existing is None:
        return state

    fields = {k: v for k, v in updates.items() if k not in _PROTECTED_FIELDS}
    # Re-validate so dates and rental_days stay consistent
    updated = CartItem.model_validate({**existing.model_dump(), **fields})
    items = tuple(updated if item.id == item_id else item for item in state.items)
    return replace(state, items=items)
