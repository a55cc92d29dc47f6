"""Domain services package."""

from .booking_totals import (
    BookingsCurrencyAmountsEvaluator,
    compute_booking_totals,
)
from .validation import distinct_currencies, ensure_single_currency

__all__ = [
    "BookingsCurrencyAmountsEvaluator",
    "compute_booking_totals",
    "distinct_currencies",
    "ensure_single_currency",
]
