"""Domain package for booking totals rules and core models."""

from .exceptions import BookingTotalsError, InconsistentCurrenciesError
from .models import (
    Booking,
    BookingRecord,
    BookingTotals,
    CurrencyAmount,
    Price,
)
from .policies import filter_relevant_bookings, is_relevant_booking
from .services import (
    BookingsCurrencyAmountsEvaluator,
    compute_booking_totals,
    distinct_currencies,
    ensure_single_currency,
)

__all__ = [
    "Booking",
    "BookingRecord",
    "BookingTotals",
    "BookingTotalsError",
    "BookingsCurrencyAmountsEvaluator",
    "CurrencyAmount",
    "InconsistentCurrenciesError",
    "Price",
    "compute_booking_totals",
    "distinct_currencies",
    "ensure_single_currency",
    "filter_relevant_bookings",
    "is_relevant_booking",
]
