"""Application ports package."""

from .bookings_repository import BookingsRepositoryPort

__all__ = ["BookingsRepositoryPort"]
