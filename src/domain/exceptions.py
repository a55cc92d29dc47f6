"""Domain errors raised while aggregating booking amounts."""


class BookingTotalsError(Exception):
    """Base class for booking totals errors."""


class InconsistentCurrenciesError(BookingTotalsError):
    """Raised when relevant bookings are priced in more than one currency.

    Attributes:
        currency_a: First conflicting currency code.
        currency_b: Second conflicting currency code.
    """

    def __init__(self, currency_a: str, currency_b: str) -> None:
        if currency_a == currency_b:
            raise ValueError(
                f"Conflicting currencies must differ, got {currency_a!r} twice"
            )
        self.currency_a = currency_a
        self.currency_b = currency_b
        super().__init__(
            f"Bookings mix currencies: {currency_a!r} and {currency_b!r}"
        )

    @property
    def currencies(self) -> frozenset[str]:
        """Return both conflicting currency codes."""
        return frozenset((self.currency_a, self.currency_b))


__all__ = ["BookingTotalsError", "InconsistentCurrenciesError"]
