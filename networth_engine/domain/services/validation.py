"""Domain validation helpers."""

from decimal import Decimal
from logging import Logger


def validate_non_negative(
    kind: str,
    record_id: str,
    amount: Decimal,
    logger: Logger,
) -> None:
    """Warn when a manual asset value or liability balance is negative.

    Negative amounts are still aggregated as-is; the warning only flags
    data that breaks the store's sign convention.

    Args:
        kind: Record kind used in the message (asset or liability).
        record_id: Identifier of the offending record.
        amount: Raw amount.
        logger: Logger used for warnings.
    """
    if amount < 0:
        logger.warning(f"{kind} {record_id} has a negative amount: {amount}")


__all__ = ["validate_non_negative"]
