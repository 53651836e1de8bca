"""Cart Engine Exceptions"""

from typing import Optional


class CartError(Exception):
    """Base class for cart engine errors"""


class CartValidationError(CartError):
    """A cart item could not be built from the caller's input"""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


class MissingRentalDatesError(CartValidationError):
    """A rental was committed without both a start and an end date"""

    def __init__(self, listing_name: str):
        super().__init__(
            f"Please select rental dates for {listing_name}",
            field="rental_dates",
        )
        self.listing_name = listing_name
