"""Calendar arithmetic for rental periods"""

from datetime import date, datetime, time, timezone
from typing import Union

DateLike = Union[date, datetime]

_DAY_MICROSECONDS = 24 * 60 * 60 * 1_000_000


def as_datetime(value: DateLike) -> datetime:
    """Normalize a date or datetime to a naive UTC datetime"""
    if not isinstance(value, datetime):
        return datetime.combine(value, time.min)
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def rental_days(start: DateLike, end: DateLike) -> int:
    """
    Number of billable rental days between two points in time.

    Partial days round up and the minimum is one day, so a same-day
    rental is billed as a single day.

    Raises:
        ValueError: end is before start
    """
    start_dt = as_datetime(start)
    end_dt = as_datetime(end)
    if end_dt < start_dt:
        raise ValueError("Rental end date cannot be before the start date")

    delta = end_dt - start_dt
    micros = (delta.days * 86400 + delta.seconds) * 1_000_000 + delta.microseconds
    days = -(-micros // _DAY_MICROSECONDS)
    return max(1, days)
