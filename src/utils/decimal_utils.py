"""Helpers for Decimal normalization."""

from collections.abc import Iterable
from decimal import Decimal


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value (None, int, str or Decimal).

    Returns:
        Decimal: Normalized numeric value.

    Raises:
        TypeError: If the value is a float, whose binary representation
            cannot carry an exact monetary amount.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        raise TypeError(f"Refusing float amount {value!r}; use Decimal or str")
    return Decimal(str(value))


def decimal_sum(values: Iterable[Decimal]) -> Decimal:
    """Add Decimal values exactly, starting from ``Decimal("0")``."""
    return sum(values, Decimal("0"))


__all__ = ["coerce_decimal", "decimal_sum"]
