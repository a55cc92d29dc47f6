"""Policies selecting the bookings that count towards a recipient's totals."""

from collections.abc import Iterable

from src.domain.models.booking import BookingRecord


def is_relevant_booking(booking: BookingRecord, recipient_id: int) -> bool:
    """Return True when a booking belongs to the recipient and is not zero.

    Args:
        booking: Booking to check.
        recipient_id: Key of the invoice recipient being totalled.

    Returns:
        bool: True if the booking contributes to the recipient's totals.
    """
    return booking.invoice_recipient_pk == recipient_id and not booking.is_zero


def filter_relevant_bookings(
    bookings: Iterable[BookingRecord],
    recipient_id: int,
) -> tuple[BookingRecord, ...]:
    """Return the relevant bookings, preserving their order."""
    return tuple(
        booking
        for booking in bookings
        if is_relevant_booking(booking, recipient_id)
    )


__all__ = ["is_relevant_booking", "filter_relevant_bookings"]
