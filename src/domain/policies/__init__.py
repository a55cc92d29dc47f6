"""Domain policies package."""

from .booking_filters import filter_relevant_bookings, is_relevant_booking

__all__ = ["filter_relevant_bookings", "is_relevant_booking"]
