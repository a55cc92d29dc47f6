"""Domain models for bookings and their prices."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Protocol

from src.utils.decimal_utils import coerce_decimal


AMOUNT_QUANTUM = Decimal("0.01")
HUNDRED = Decimal("100")


class BookingRecord(Protocol):
    """Read-only accessor surface consumed by the totals aggregation."""

    @property
    def invoice_recipient_pk(self) -> int:
        """Return the key of the party paying the booking."""

    @property
    def currency(self) -> str:
        """Return the booking currency code."""

    @property
    def total_amount_gross(self) -> Decimal:
        """Return the rounded gross amount of the booking."""

    @property
    def paid_amount(self) -> Decimal:
        """Return the amount already paid."""

    @property
    def open_amount(self) -> Decimal:
        """Return the amount still to be paid."""

    @property
    def is_zero(self) -> bool:
        """Return True when gross and paid amounts are both zero."""


@dataclass(frozen=True)
class Price:
    """Price of a booking, stated either gross or net of tax.

    Attributes:
        amount: Price amount as entered.
        currency: Currency code or symbol.
        tax_rate: Tax rate in percent (19 means 19%).
        gross: True when ``amount`` already includes tax.
    """

    amount: Decimal
    currency: str
    tax_rate: Decimal = Decimal("0")
    gross: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.currency, str) or not self.currency:
            raise ValueError("Price requires a currency")
        object.__setattr__(self, "amount", coerce_decimal(self.amount))
        object.__setattr__(self, "tax_rate", coerce_decimal(self.tax_rate))

    @property
    def tax_factor(self) -> Decimal:
        return 1 + self.tax_rate / HUNDRED

    @property
    def amount_gross(self) -> Decimal:
        """Return the gross amount, rounded half-up to cents if derived."""
        if self.gross:
            return self.amount
        return (self.amount * self.tax_factor).quantize(
            AMOUNT_QUANTUM, rounding=ROUND_HALF_UP
        )

    @property
    def amount_net(self) -> Decimal:
        """Return the net amount, rounded half-up to cents if derived."""
        if not self.gross:
            return self.amount
        return (self.amount / self.tax_factor).quantize(
            AMOUNT_QUANTUM, rounding=ROUND_HALF_UP
        )


@dataclass(frozen=True)
class Booking:
    """A single booking billed to an invoice recipient.

    The open amount is derived per booking from its own rounded gross
    amount, never from aggregated figures.
    """

    pk: int
    invoice_recipient_pk: int
    main_price: Price
    paid_amount: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        object.__setattr__(self, "paid_amount", coerce_decimal(self.paid_amount))

    @property
    def currency(self) -> str:
        return self.main_price.currency

    @property
    def total_amount_gross(self) -> Decimal:
        return self.main_price.amount_gross

    @property
    def open_amount(self) -> Decimal:
        return self.total_amount_gross - self.paid_amount

    @property
    def is_zero(self) -> bool:
        return self.total_amount_gross == 0 and self.paid_amount == 0


__all__ = ["AMOUNT_QUANTUM", "BookingRecord", "Price", "Booking"]
