"""In-memory bookings repository adapter."""

from collections.abc import Iterable

from src.domain.models import BookingRecord


class InMemoryBookingsRepository:
    """Bookings repository backed by an in-process list.

    Every stored booking is returned; recipient filtering is left to the
    domain so the zero and currency rules apply in one place.
    """

    def __init__(self, bookings: Iterable[BookingRecord] = ()) -> None:
        self._bookings: list[BookingRecord] = list(bookings)

    def add(self, booking: BookingRecord) -> None:
        self._bookings.append(booking)

    def fetch_bookings(self, recipient_id: int) -> list[BookingRecord]:
        return list(self._bookings)


__all__ = ["InMemoryBookingsRepository"]
