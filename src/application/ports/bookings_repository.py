"""Port for reading bookings billed to invoice recipients."""

from typing import Protocol

from src.domain.models import BookingRecord


class BookingsRepositoryPort(Protocol):
    """Port exposing the bookings needed to total a recipient's invoice."""

    def fetch_bookings(self, recipient_id: int) -> list[BookingRecord]:
        """Return candidate bookings for an invoice recipient.

        Implementations may return bookings of other recipients too; the
        domain filters them out.
        """


__all__ = ["BookingsRepositoryPort"]
