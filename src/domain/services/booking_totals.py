"""Domain services totalling booking amounts per invoice recipient."""

from collections.abc import Callable, Iterable
from decimal import Decimal
from logging import Logger

from src.domain.models.booking import BookingRecord
from src.domain.models.money import BookingTotals, CurrencyAmount
from src.domain.policies.booking_filters import filter_relevant_bookings
from src.domain.services.validation import ensure_single_currency
from src.utils.decimal_utils import decimal_sum


AmountSelector = Callable[[BookingRecord], Decimal]


def compute_booking_totals(
    bookings: Iterable[BookingRecord],
    recipient_id: int,
    *,
    logger: Logger,
) -> BookingTotals:
    """Add up gross, paid and open amounts of a recipient's bookings.

    Bookings of other recipients and zero bookings are ignored. Each field is
    summed directly from the per-booking rounded values, so no rounding error
    accumulates.

    Args:
        bookings: Bookings to aggregate, in any order.
        recipient_id: Key of the invoice recipient.
        logger: Logger used for diagnostics.

    Returns:
        BookingTotals: Totals in the shared currency, or empty totals when
        no booking is relevant.

    Raises:
        InconsistentCurrenciesError: If relevant bookings mix currencies.
    """
    relevant = filter_relevant_bookings(bookings, recipient_id)
    if not relevant:
        logger.debug(f"No relevant bookings for recipient {recipient_id}")
        return BookingTotals.empty()

    currency = ensure_single_currency(relevant, logger)
    return BookingTotals(
        total_amount=_sum_field(relevant, _gross, currency),
        total_paid_amount=_sum_field(relevant, _paid, currency),
        total_open_amount=_sum_field(relevant, _open, currency),
    )


def _sum_field(
    bookings: tuple[BookingRecord, ...],
    selector: AmountSelector,
    currency: str,
) -> CurrencyAmount:
    return CurrencyAmount(
        amount=decimal_sum(selector(booking) for booking in bookings),
        currency_code=currency,
    )


def _gross(booking: BookingRecord) -> Decimal:
    return booking.total_amount_gross


def _paid(booking: BookingRecord) -> Decimal:
    return booking.paid_amount


def _open(booking: BookingRecord) -> Decimal:
    return booking.open_amount


class BookingsCurrencyAmountsEvaluator:
    """Stateful wrapper keeping the totals of the last ``calculate`` call.

    Totals are reset at the start of every call and stay absent when the call
    fails or finds no relevant booking. An instance must not be shared by
    concurrent callers; use one instance per caller instead.
    """

    def __init__(self, logger: Logger) -> None:
        self._logger = logger
        self._totals = BookingTotals.empty()

    def calculate(
        self,
        bookings: Iterable[BookingRecord],
        recipient_id: int,
    ) -> BookingTotals:
        """Replace the stored totals with those of ``bookings``.

        Raises:
            InconsistentCurrenciesError: If relevant bookings mix currencies.
        """
        self._totals = BookingTotals.empty()
        self._totals = compute_booking_totals(
            bookings,
            recipient_id,
            logger=self._logger,
        )
        return self._totals

    @property
    def totals(self) -> BookingTotals:
        return self._totals

    @property
    def total_amount(self) -> CurrencyAmount | None:
        return self._totals.total_amount

    @property
    def total_paid_amount(self) -> CurrencyAmount | None:
        return self._totals.total_paid_amount

    @property
    def total_open_amount(self) -> CurrencyAmount | None:
        return self._totals.total_open_amount


__all__ = ["compute_booking_totals", "BookingsCurrencyAmountsEvaluator"]
