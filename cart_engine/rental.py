"""
Rental Period Selection

Tracks a start/end date pair while a customer picks a rental period,
and turns a catalog entry plus that selection into a cart item.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal
from typing import NamedTuple, Optional

from .dates import DateLike, as_datetime, rental_days
from .exceptions import CartValidationError, MissingRentalDatesError
from .models import CartItem, CatalogEntry, ItemKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DatePreset:
    """Quick-select rental length"""
    label: str
    days: int


DATE_PRESETS: tuple[DatePreset, ...] = (
    DatePreset("1 Day", 1),
    DatePreset("3 Days", 3),
    DatePreset("7 Days", 7),
    DatePreset("14 Days", 14),
    DatePreset("30 Days", 30),
)


class RentalPeriod:
    """
    Start/end selection for a rental.

    An end date before the start is never kept: choosing one clears the
    end date, and moving the start past the current end clears it too.

    Usage:
        period = RentalPeriod()
        period.set_start(datetime(2025, 1, 1))
        period.set_end(datetime(2025, 1, 4))
        period.days  # 3
    """

    def __init__(
        self,
        start: Optional[DateLike] = None,
        end: Optional[DateLike] = None,
    ):
        self._start: Optional[datetime] = None
        self._end: Optional[datetime] = None
        if start is not None:
            self.set_start(start)
        if end is not None:
            self.set_end(end)

    @property
    def start(self) -> Optional[datetime]:
        return self._start

    @property
    def end(self) -> Optional[datetime]:
        return self._end

    @property
    def is_complete(self) -> bool:
        return self._start is not None and self._end is not None

    @property
    def days(self) -> int:
        """Billable days, or 0 while either date is missing"""
        if not self.is_complete:
            return 0
        return rental_days(self._start, self._end)

    def set_start(self, value: Optional[DateLike]) -> None:
        self._start = as_datetime(value) if value is not None else None
        if self._start is not None and self._end is not None and self._start > self._end:
            logger.debug("Start date moved past end date, clearing end date")
            self._end = None

    def set_end(self, value: Optional[DateLike]) -> None:
        end = as_datetime(value) if value is not None else None
        if end is not None and self._start is not None and end < self._start:
            logger.debug("End date before start date, clearing end date")
            end = None
        self._end = end

    def apply_preset(self, days: int, today: Optional[DateLike] = None) -> None:
        """Set start to today and end to today plus the given number of days"""
        if days < 1:
            raise ValueError("Preset length must be at least one day")
        start = as_datetime(today) if today is not None else datetime.now()
        self._start = start
        self._end = start + timedelta(days=days)

    def reset(self) -> None:
        self._start = None
        self._end = None


class Quote(NamedTuple):
    """Price preview for a listing before it is added"""
    unit_price: Decimal
    quantity: int
    rental_days: int
    total: Decimal


def quote(entry: CatalogEntry, quantity: int, period: Optional[RentalPeriod] = None) -> Quote:
    """
    Preview the cost of adding a listing.

    Rentals are priced per selected day (0 days while dates are incomplete).
    """
    if quantity < 1:
        raise CartValidationError("Quantity must be at least 1", field="quantity")

    if entry.kind == ItemKind.TIMED_RENTAL:
        days = period.days if period else 0
        total = entry.price * days * quantity
    else:
        days = 0
        total = entry.price * quantity

    return Quote(unit_price=entry.price, quantity=quantity, rental_days=days, total=total)


def rental_item_id(entry: CatalogEntry, period: Optional[RentalPeriod] = None) -> str:
    """
    Cart line id for a listing.

    Rentals of the same listing over the same dates share a line; a
    different period gets its own line.
    """
    if entry.kind == ItemKind.TIMED_RENTAL and period and period.is_complete:
        return f"{entry.id}:{period.start:%Y%m%d%H%M%S}-{period.end:%Y%m%d%H%M%S}"
    return entry.id


def build_cart_item(
    entry: CatalogEntry,
    quantity: int = 1,
    period: Optional[RentalPeriod] = None,
    item_id: Optional[str] = None,
) -> CartItem:
    """
    Turn a catalog entry into a cart item.

    Args:
        entry: Listing data from the catalog
        quantity: Units to add (at least 1)
        period: Selected rental period (required for rentals)
        item_id: Explicit cart line id (derived from the listing when omitted)

    Returns:
        CartItem ready for AddItem

    Raises:
        MissingRentalDatesError: A rental without both dates
        CartValidationError: Quantity below 1
    """
    if quantity < 1:
        raise CartValidationError("Quantity must be at least 1", field="quantity")

    fields = {
        "id": item_id or rental_item_id(entry, period),
        "name": entry.name,
        "unit_price": entry.price,
        "image": entry.image,
        "kind": entry.kind,
        "quantity": quantity,
        "category": entry.category,
    }

    if entry.kind == ItemKind.TIMED_RENTAL:
        if period is None or not period.is_complete:
            raise MissingRentalDatesError(entry.name)
        fields["start_date"] = period.start
        fields["end_date"] = period.end

    return CartItem(**fields)
