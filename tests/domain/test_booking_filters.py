"""Tests for booking relevance and currency validation helpers."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from src.domain.exceptions import InconsistentCurrenciesError
from src.domain.policies import filter_relevant_bookings, is_relevant_booking
from src.domain.services.validation import (
    distinct_currencies,
    ensure_single_currency,
)


def _record(recipient: int, currency: str = "EUR", is_zero: bool = False):
    return SimpleNamespace(
        invoice_recipient_pk=recipient,
        currency=currency,
        is_zero=is_zero,
    )


def test_is_relevant_booking_requires_recipient_and_non_zero() -> None:
    """Only non-zero bookings of the recipient are relevant."""
    assert is_relevant_booking(_record(1), 1) is True
    assert is_relevant_booking(_record(2), 1) is False
    assert is_relevant_booking(_record(1, is_zero=True), 1) is False


def test_filter_relevant_bookings_preserves_order() -> None:
    """Filtering keeps the input order of relevant bookings."""
    first = _record(1, "A")
    second = _record(1, "B")
    records = [first, _record(2), _record(1, is_zero=True), second]

    assert filter_relevant_bookings(records, 1) == (first, second)


def test_distinct_currencies_stops_after_limit() -> None:
    """Discovery stops once two codes are known."""

    def _records():
        yield _record(1, "EUR")
        yield _record(1, "EUR")
        yield _record(1, "USD")
        raise AssertionError("iterated past the second currency")

    assert distinct_currencies(_records()) == ["EUR", "USD"]


def test_ensure_single_currency_returns_shared_code() -> None:
    """A single currency is returned as is."""
    logger = MagicMock()

    assert ensure_single_currency([_record(1), _record(1)], logger) == "EUR"
    logger.warning.assert_not_called()


def test_ensure_single_currency_rejects_empty_input() -> None:
    """No bookings means no currency to return."""
    with pytest.raises(ValueError):
        ensure_single_currency([], MagicMock())


def test_ensure_single_currency_reports_pair() -> None:
    """Two codes raise an error carrying both."""
    with pytest.raises(InconsistentCurrenciesError) as excinfo:
        ensure_single_currency([_record(1, "USD"), _record(1, "ETB")], MagicMock())

    assert excinfo.value.currency_a == "ETB"
    assert excinfo.value.currency_b == "USD"
    assert "ETB" in str(excinfo.value)


def test_inconsistent_currencies_error_needs_distinct_codes() -> None:
    """The error always names two different currencies."""
    with pytest.raises(ValueError):
        InconsistentCurrenciesError("EUR", "EUR")


def test_is_relevant_booking_matches_recipient_exactly() -> None:
    """Recipient keys are matched by exact equality, without conversion."""
    assert is_relevant_booking(_record(10001), 10001) is True
    assert is_relevant_booking(_record(10001), "10001") is False
