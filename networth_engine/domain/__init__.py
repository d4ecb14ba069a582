"""Domain package for net worth rules and core models."""

from .constants import (
    ASSET_CATEGORIES,
    HISTORY_PERIODS,
    LIABILITY_CATEGORIES,
)
from .demo import DEMO_NET_WORTH_SNAPSHOT
from .models import (
    Asset,
    CategoryBreakdown,
    ConnectedAccountBalance,
    HistoricalPoint,
    Liability,
    MonthlyChange,
    NetWorthSnapshot,
    TransactionTotals,
    TrendAnalysis,
)
from .services import (
    analyze_trend,
    compute_net_worth_snapshot,
    safe_percentage,
    safe_ratio,
)

__all__ = [
    "ASSET_CATEGORIES",
    "HISTORY_PERIODS",
    "LIABILITY_CATEGORIES",
    "DEMO_NET_WORTH_SNAPSHOT",
    "Asset",
    "CategoryBreakdown",
    "ConnectedAccountBalance",
    "HistoricalPoint",
    "Liability",
    "MonthlyChange",
    "NetWorthSnapshot",
    "TransactionTotals",
    "TrendAnalysis",
    "analyze_trend",
    "compute_net_worth_snapshot",
    "safe_percentage",
    "safe_ratio",
]
