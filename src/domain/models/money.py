"""Domain models for currency-tagged amounts."""

from dataclasses import dataclass
from decimal import Decimal

from src.utils.decimal_utils import coerce_decimal


@dataclass(frozen=True)
class CurrencyAmount:
    """A Decimal amount tagged with a currency code.

    Equality compares the numeric value, so ``30`` equals ``30.00`` in the
    same currency. Currency codes are compared verbatim.

    Attributes:
        amount: Exact decimal amount.
        currency_code: Currency code or symbol (e.g. ``EUR`` or ``€``).
    """

    amount: Decimal
    currency_code: str

    def __post_init__(self) -> None:
        if not isinstance(self.currency_code, str) or not self.currency_code:
            raise ValueError("CurrencyAmount requires a currency code")
        object.__setattr__(self, "amount", coerce_decimal(self.amount))

    def __str__(self) -> str:
        return f"{self.amount} {self.currency_code}"


@dataclass(frozen=True)
class BookingTotals:
    """Gross, paid and open totals of one invoice recipient's bookings.

    All slots are ``None`` when no booking was relevant.
    """

    total_amount: CurrencyAmount | None = None
    total_paid_amount: CurrencyAmount | None = None
    total_open_amount: CurrencyAmount | None = None

    @classmethod
    def empty(cls) -> "BookingTotals":
        """Return totals with every slot absent."""
        return cls()

    @property
    def is_empty(self) -> bool:
        return self.total_amount is None

    @property
    def currency_code(self) -> str | None:
        """Return the currency shared by all slots, if any."""
        if self.total_amount is None:
            return None
        return self.total_amount.currency_code


__all__ = ["CurrencyAmount", "BookingTotals"]
