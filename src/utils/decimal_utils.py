"""Helpers for Decimal normalization."""

from decimal import Decimal


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from JSON records or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise TypeError("Boolean values are not amounts")
    return Decimal(str(value))


def decimal_to_number(value: Decimal) -> int | float | str:
    """Convert a Decimal to a JSON-friendly value without losing precision.

    Integral values become ``int`` so that ``500`` stays ``500`` on the wire.
    Values a float holds exactly become ``float``; anything else is kept as
    its decimal string, which ``coerce_decimal`` reads back unchanged.
    """
    if value == value.to_integral_value():
        return int(value)
    number = float(value)
    if Decimal(repr(number)) == value:
        return number
    return str(value)


__all__ = ["coerce_decimal", "decimal_to_number"]
