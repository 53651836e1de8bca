"""Cart actions dispatched into the reducer"""

from dataclasses import dataclass, field
from typing import Any, Union

from .models import CartItem


@dataclass(frozen=True)
class AddItem:
    """Append an item, or add its quantity to an existing item with the same id"""
    item: CartItem


@dataclass(frozen=True)
class RemoveItem:
    """Drop the item with this id"""
    item_id: str


@dataclass(frozen=True)
class UpdateItem:
    """Shallow-merge fields into the item with this id"""
    item_id: str
    updates: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ClearCart:
    """Remove every item"""


@dataclass(frozen=True)
class ToggleCart:
    """Flip cart visibility"""


@dataclass(frozen=True)
class SetCartOpen:
    """Set cart visibility"""
    is_open: bool


CartAction = Union[AddItem, RemoveItem, UpdateItem, ClearCart, ToggleCart, SetCartOpen]
