"""Zero-safe ratio helpers shared by every percentage computation."""

from decimal import Decimal

from networth_engine.utils.decimal_utils import coerce_decimal

HUNDRED = Decimal("100")


def safe_ratio(numerator, denominator, fallback=Decimal("0")) -> Decimal:
    """Divide two amounts, returning ``fallback`` for a zero denominator.

    Args:
        numerator: Dividend, any value accepted by coerce_decimal.
        denominator: Divisor, any value accepted by coerce_decimal.
        fallback: Value returned when the denominator is zero.

    Returns:
        Decimal: numerator / denominator, or the fallback.
    """
    divisor = coerce_decimal(denominator)
    if divisor == 0:
        return coerce_decimal(fallback)
    return coerce_decimal(numerator) / divisor


def safe_percentage(numerator, denominator, fallback=Decimal("0")) -> Decimal:
    """Return ``numerator / denominator * 100`` with the safe_ratio guard."""
    divisor = coerce_decimal(denominator)
    if divisor == 0:
        return coerce_decimal(fallback)
    return safe_ratio(numerator, divisor) * HUNDRED


__all__ = ["safe_ratio", "safe_percentage"]
