"""Domain models package."""

from .finance import (
    CategoryBreakdown,
    HistoricalPoint,
    MonthlyChange,
    NetWorthSnapshot,
    TrendAnalysis,
)
from .holdings import (
    Asset,
    ConnectedAccountBalance,
    Liability,
    TransactionTotals,
)

__all__ = [
    "Asset",
    "Liability",
    "ConnectedAccountBalance",
    "TransactionTotals",
    "CategoryBreakdown",
    "NetWorthSnapshot",
    "HistoricalPoint",
    "MonthlyChange",
    "TrendAnalysis",
]
