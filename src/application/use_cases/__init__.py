"""Application use cases package."""

from .get_booking_totals import BookingTotals, GetBookingTotalsUseCase

__all__ = ["GetBookingTotalsUseCase", "BookingTotals"]
