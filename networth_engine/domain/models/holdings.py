"""Domain models for the records read from the data sources."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal


@dataclass(frozen=True)
class Asset:
    """Manually tracked asset owned by a single owner.

    Attributes:
        id: Asset identifier.
        owner_id: Identifier of the owning user.
        name: Display name.
        category: One of the asset categories.
        type: Free-form asset type inside the category.
        current_value: Current value, expected to be non-negative.
        original_value: Optional acquisition value.
        active: False once the asset has been soft-deleted.
    """

    id: str
    owner_id: str
    name: str
    category: str
    type: str
    current_value: Decimal
    original_value: Decimal | None = None
    active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class Liability:
    """Manually tracked liability owned by a single owner."""

    id: str
    owner_id: str
    name: str
    category: str
    type: str
    current_balance: Decimal
    original_balance: Decimal | None = None
    interest_rate: Decimal | None = None
    monthly_payment: Decimal | None = None
    due_date: date | None = None
    active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class ConnectedAccountBalance:
    """Balance of a bank or mobile money account linked by an aggregator."""

    account_id: str
    owner_id: str
    balance: Decimal
    account_kind: str
    institution: str | None = None


@dataclass(frozen=True)
class TransactionTotals:
    """Current-month ledger sums split by transaction type."""

    income: Decimal
    expense: Decimal


__all__ = [
    "Asset",
    "Liability",
    "ConnectedAccountBalance",
    "TransactionTotals",
]
