"""Cart Engine Data Models"""

from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from .dates import as_datetime, rental_days


class ItemKind(str, Enum):
    """How an item is billed"""
    TIMED_RENTAL = "rental"
    FLAT_PURCHASE = "store"


class CartItem(BaseModel):
    """Line item held in the cart"""
    id: str = Field(min_length=1)
    name: str
    unit_price: Decimal = Field(ge=0)
    image: Optional[str] = None
    kind: ItemKind = ItemKind.FLAT_PURCHASE
    quantity: int = Field(default=1, ge=1)
    rental_days: Optional[int] = Field(default=None, ge=1)
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    category: Optional[str] = None

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _promote_dates(cls, value):
        # Plain calendar dates are treated as midnight
        if isinstance(value, date) and not isinstance(value, datetime):
            return datetime.combine(value, time.min)
        return value

    @model_validator(mode="after")
    def _derive_rental_days(self) -> "CartItem":
        # An end date before the start is dropped, leaving the end unset
        if self.start_date and self.end_date and as_datetime(self.end_date) < as_datetime(self.start_date):
            self.end_date = None

        # rental_days only exists for dated rentals and always follows the dates
        if self.kind == ItemKind.TIMED_RENTAL and self.start_date and self.end_date:
            self.rental_days = rental_days(self.start_date, self.end_date)
        else:
            self.rental_days = None
        return self

    @property
    def is_rental(self) -> bool:
        return self.kind == ItemKind.TIMED_RENTAL


class CatalogEntry(BaseModel):
    """Listing data handed to the cart by the catalog"""
    id: str
    name: str
    price: Decimal = Field(ge=0)
    image: Optional[str] = None
    kind: ItemKind
    category: Optional[str] = None


@dataclass(frozen=True)
class CartState:
    """Immutable cart state produced by the reducer"""
    items: tuple[CartItem, ...] = ()
    is_open: bool = False

    def find(self, item_id: str) -> Optional[CartItem]:
        """Get an item by ID"""
        return next((item for item in self.items if item.id == item_id), None)

    def to_snapshot(self) -> "CartSnapshot":
        return CartSnapshot(items=list(self.items), is_open=self.is_open)


class CartSnapshot(BaseModel):
    """Serialized cart as written to the storage slot"""
    items: list[CartItem] = []
    is_open: bool = False
