"""Helpers for exact Decimal amounts."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize stored or user-provided amounts to Decimal.

    Floats go through ``str`` so that ``0.1`` becomes ``Decimal("0.1")``
    rather than its binary expansion.

    Args:
        value: Raw numeric value from SQL, text storage or adapters.

    Returns:
        Decimal: Normalized numeric value.

    Raises:
        ValueError: If the value is not a finite number.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        result = value
    else:
        if isinstance(value, str):
            value = value.strip().replace(",", "")
        try:
            result = Decimal(str(value))
        except InvalidOperation as exc:
            raise ValueError(f"Invalid amount: {value!r}") from exc
    if not result.is_finite():
        raise ValueError(f"Invalid amount: {value!r}")
    return result


def decimal_to_storage(value: Decimal) -> str:
    """Serialize a Decimal for exact text storage."""
    return str(coerce_decimal(value))


__all__ = ["coerce_decimal", "decimal_to_storage"]
