"""Domain constants for net worth aggregation and trend analysis."""

from decimal import Decimal

ASSET_CATEGORIES = (
    "property",
    "investments",
    "cash",
    "vehicles",
    "personal",
    "business",
    "other",
)

LIABILITY_CATEGORIES = (
    "loans",
    "credit_cards",
    "mortgages",
    "business_debt",
    "other",
)

CONNECTED_CASH_CATEGORY = "cash"
FALLBACK_CATEGORY = "other"

TRANSACTION_INCOME = "income"
TRANSACTION_EXPENSE = "expense"

# Lower bounds on total growth percentage, checked in order.
TREND_BANDS = (
    (Decimal("15"), "strongly-positive"),
    (Decimal("5"), "positive"),
    (Decimal("-5"), "neutral"),
    (Decimal("-15"), "negative"),
)
TREND_FLOOR = "strongly-negative"

# Upper bounds (exclusive) on the coefficient of variation.
CONSISTENCY_BANDS = (
    (Decimal("0.5"), "high"),
    (Decimal("1.5"), "medium"),
)
CONSISTENCY_FLOOR = "low"

HISTORY_PERIODS = {
    "3M": 3,
    "6M": 6,
    "1Y": 12,
    "2Y": 24,
    "All": -1,
}
DEFAULT_HISTORY_PERIOD = "1Y"


__all__ = [
    "ASSET_CATEGORIES",
    "LIABILITY_CATEGORIES",
    "CONNECTED_CASH_CATEGORY",
    "FALLBACK_CATEGORY",
    "TRANSACTION_INCOME",
    "TRANSACTION_EXPENSE",
    "TREND_BANDS",
    "TREND_FLOOR",
    "CONSISTENCY_BANDS",
    "CONSISTENCY_FLOOR",
    "HISTORY_PERIODS",
    "DEFAULT_HISTORY_PERIOD",
]
