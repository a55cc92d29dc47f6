"""Domain models package."""

from .booking import AMOUNT_QUANTUM, Booking, BookingRecord, Price
from .money import BookingTotals, CurrencyAmount

__all__ = [
    "AMOUNT_QUANTUM",
    "Booking",
    "BookingRecord",
    "Price",
    "BookingTotals",
    "CurrencyAmount",
]
