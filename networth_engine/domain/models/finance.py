"""Domain models for financial aggregates."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class CategoryBreakdown:
    """Aggregated amount for one asset or liability category.

    Attributes:
        category: Category name.
        amount: Sum of the category's values.
        percentage_of_total: Share of the side's total, in percent.
        item_count: Number of records grouped into the category.
        is_connected: True when connected account balances contributed.
    """

    category: str
    amount: Decimal
    percentage_of_total: Decimal
    item_count: int
    is_connected: bool = False


@dataclass(frozen=True)
class NetWorthSnapshot:
    """Single dated computation of assets, liabilities and net worth.

    ``net_worth`` is derived from the two totals so it cannot disagree with
    them, neither in memory nor when written to the history store.
    """

    total_assets: Decimal
    total_liabilities: Decimal
    assets_breakdown: tuple[CategoryBreakdown, ...]
    liabilities_breakdown: tuple[CategoryBreakdown, ...]
    monthly_income: Decimal
    monthly_expenses: Decimal
    savings_rate: Decimal
    monthly_change: Decimal
    monthly_change_percentage: Decimal
    as_of_date: date
    is_demo: bool = False

    @property
    def net_worth(self) -> Decimal:
        """Return total_assets minus total_liabilities."""
        return self.total_assets - self.total_liabilities


@dataclass(frozen=True)
class HistoricalPoint:
    """Persisted snapshot reduced to the fields used for trend analysis."""

    date: date
    net_worth: Decimal
    total_assets: Decimal
    total_liabilities: Decimal


@dataclass(frozen=True)
class MonthlyChange:
    """Change in net worth between two consecutive history points."""

    date: date
    growth: Decimal
    growth_percentage: Decimal


@dataclass(frozen=True)
class TrendAnalysis:
    """Growth, volatility and classification metrics over a series."""

    total_growth: Decimal
    total_growth_percentage: Decimal
    average_monthly_growth: Decimal
    best_month: MonthlyChange
    worst_month: MonthlyChange
    consistency: str
    trend: str
    coefficient_of_variation: Decimal | None = None
    monthly_changes: tuple[MonthlyChange, ...] = field(default_factory=tuple)


__all__ = [
    "CategoryBreakdown",
    "NetWorthSnapshot",
    "HistoricalPoint",
    "MonthlyChange",
    "TrendAnalysis",
]
