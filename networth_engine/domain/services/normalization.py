"""Domain normalization helpers."""

from collections.abc import Iterable
from logging import Logger

from networth_engine.domain.constants import FALLBACK_CATEGORY


def normalize_category(
    category: str | None,
    allowed: Iterable[str],
    logger: Logger,
) -> str:
    """Normalize a raw category value against the allowed categories.

    Args:
        category: Raw category value from a repository.
        allowed: Categories accepted for this side of the balance sheet.
        logger: Logger used for warnings.

    Returns:
        str: Lower-cased category, or ``other`` when unknown or missing.
    """
    cleaned = (category or "").strip().lower().replace(" ", "_")
    if cleaned in allowed:
        return cleaned
    logger.warning(
        f"Unknown category {category!r}; grouping under {FALLBACK_CATEGORY}"
    )
    return FALLBACK_CATEGORY


def normalize_owner_id(value) -> str | None:
    """Normalize an owner identifier to a non-blank string.

    Args:
        value: Raw owner id, a string or any value with a string form such
            as a UUID.

    Returns:
        str | None: Stripped identifier, or None when missing or blank.
    """
    if value is None:
        return None
    cleaned = str(value).strip()
    return cleaned or None


def normalize_transaction_type(value: str | None) -> str | None:
    """Normalize ledger transaction types.

    Args:
        value: Raw transaction type.

    Returns:
        str | None: Lower-cased type, or None when blank.
    """
    if not value:
        return None
    cleaned = value.strip().lower()
    return cleaned or None


__all__ = [
    "normalize_category",
    "normalize_owner_id",
    "normalize_transaction_type",
]
