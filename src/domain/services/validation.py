"""Domain validation helpers."""

from collections.abc import Iterable
from logging import Logger

from src.domain.exceptions import InconsistentCurrenciesError
from src.domain.models.booking import BookingRecord


def distinct_currencies(
    bookings: Iterable[BookingRecord],
    limit: int = 2,
) -> list[str]:
    """Return distinct currency codes in first-seen order.

    Iteration stops as soon as ``limit`` codes have been found.

    Args:
        bookings: Bookings to inspect.
        limit: Maximum number of codes to collect.

    Returns:
        list[str]: Up to ``limit`` distinct currency codes.
    """
    found: list[str] = []
    for booking in bookings:
        if booking.currency not in found:
            found.append(booking.currency)
            if len(found) >= limit:
                break
    return found


def ensure_single_currency(
    bookings: Iterable[BookingRecord],
    logger: Logger,
) -> str:
    """Return the one currency shared by all bookings.

    Args:
        bookings: Relevant bookings, at least one.
        logger: Logger used for warnings.

    Returns:
        str: Shared currency code.

    Raises:
        ValueError: If there are no bookings.
        InconsistentCurrenciesError: If two distinct currencies are found.
    """
    currencies = distinct_currencies(bookings)
    if not currencies:
        raise ValueError("Cannot determine the currency of no bookings")
    if len(currencies) > 1:
        first, second = sorted(currencies)
        logger.warning(
            f"Inconsistent booking currencies: {first} and {second}"
        )
        raise InconsistentCurrenciesError(first, second)
    return currencies[0]


__all__ = ["distinct_currencies", "ensure_single_currency"]
