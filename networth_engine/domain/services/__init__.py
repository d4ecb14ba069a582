"""Domain services package."""

from .finance import (
    compute_assets_breakdown,
    compute_liabilities_breakdown,
    compute_monthly_change,
    compute_net_worth_snapshot,
    compute_savings_rate,
)
from .normalization import (
    normalize_category,
    normalize_owner_id,
    normalize_transaction_type,
)
from .ratios import safe_percentage, safe_ratio
from .trend import (
    analyze_trend,
    classify_consistency,
    classify_trend,
    compute_monthly_changes,
)
from .validation import validate_non_negative

__all__ = [
    "compute_assets_breakdown",
    "compute_liabilities_breakdown",
    "compute_monthly_change",
    "compute_net_worth_snapshot",
    "compute_savings_rate",
    "normalize_category",
    "normalize_owner_id",
    "normalize_transaction_type",
    "safe_percentage",
    "safe_ratio",
    "analyze_trend",
    "classify_consistency",
    "classify_trend",
    "compute_monthly_changes",
    "validate_non_negative",
]
