"""Composition root for wiring infrastructure adapters."""

from collections.abc import Iterable

from src.application.ports.bookings_repository import BookingsRepositoryPort
from src.application.use_cases.get_booking_totals import (
    GetBookingTotalsUseCase,
)
from src.domain.models import BookingRecord
from src.infrastructure.bookings_repository import InMemoryBookingsRepository
from src.infrastructure.logging.logger import LoggerBuilder
from src.infrastructure.settings import BookingTotalsSettings


def build_logger(settings: BookingTotalsSettings | None = None):
    """Return the application logger configured from settings."""
    resolved = settings or BookingTotalsSettings.from_env()
    return (
        LoggerBuilder()
        .name("booking_totals")
        .subdir("app")
        .prefix("booking_totals")
        .console(resolved.log_console)
        .level(resolved.log_level)
        .build()
    )


def build_bookings_repository(
    bookings: Iterable[BookingRecord] = (),
) -> BookingsRepositoryPort:
    """Return the bookings repository adapter."""
    return InMemoryBookingsRepository(bookings)


def build_get_booking_totals_use_case(
    bookings_repository: BookingsRepositoryPort | None = None,
    settings: BookingTotalsSettings | None = None,
) -> GetBookingTotalsUseCase:
    """Return the booking totals use case wired to its adapters."""
    resolved_repository = bookings_repository or build_bookings_repository()
    return GetBookingTotalsUseCase(
        bookings_repository=resolved_repository,
        logger=build_logger(settings),
    )


__all__ = [
    "build_logger",
    "build_bookings_repository",
    "build_get_booking_totals_use_case",
]
