"""Trend analysis over a net worth history series."""

from collections.abc import Sequence
from decimal import Decimal
from logging import Logger

from networth_engine.domain.constants import (
    CONSISTENCY_BANDS,
    CONSISTENCY_FLOOR,
    TREND_BANDS,
    TREND_FLOOR,
)
from networth_engine.domain.models import (
    HistoricalPoint,
    MonthlyChange,
    TrendAnalysis,
)
from networth_engine.domain.services.ratios import safe_percentage, safe_ratio
from networth_engine.utils.decimal_utils import coerce_decimal


def analyze_trend(
    series: Sequence[HistoricalPoint],
    logger: Logger | None = None,
) -> TrendAnalysis | None:
    """Derive growth, consistency and trend metrics from a history series.

    The series is expected in ascending date order. Out-of-order input is
    sorted (stable on equal dates) before any statistic is computed.

    Args:
        series: Historical points, oldest first.
        logger: Optional logger notified when the input needed sorting.

    Returns:
        TrendAnalysis | None: Metrics, or None for fewer than two points.
    """
    points = _ordered(series, logger)
    if len(points) < 2:
        return None

    first = coerce_decimal(points[0].net_worth)
    last = coerce_decimal(points[-1].net_worth)
    total_growth = last - first
    total_growth_percentage = safe_percentage(total_growth, first)

    changes = compute_monthly_changes(points)
    growths = [change.growth for change in changes]
    average = _mean(growths)
    variance = _mean([(growth - average) ** 2 for growth in growths])
    stddev = variance.sqrt()

    coefficient = (
        abs(safe_ratio(stddev, average)) if average != 0 else None
    )

    return TrendAnalysis(
        total_growth=total_growth,
        total_growth_percentage=total_growth_percentage,
        average_monthly_growth=average,
        best_month=max(changes, key=lambda change: change.growth),
        worst_month=min(changes, key=lambda change: change.growth),
        consistency=classify_consistency(coefficient, stddev),
        trend=classify_trend(total_growth_percentage),
        coefficient_of_variation=coefficient,
        monthly_changes=tuple(changes),
    )


def compute_monthly_changes(
    points: Sequence[HistoricalPoint],
) -> list[MonthlyChange]:
    """Return the change between each pair of consecutive points.

    Args:
        points: Historical points, oldest first.

    Returns:
        list[MonthlyChange]: One entry per pair, dated at the later point.
    """
    changes = []
    for previous, current in zip(points, points[1:]):
        previous_value = coerce_decimal(previous.net_worth)
        growth = coerce_decimal(current.net_worth) - previous_value
        changes.append(
            MonthlyChange(
                date=current.date,
                growth=growth,
                growth_percentage=safe_percentage(growth, previous_value),
            )
        )
    return changes


def classify_consistency(
    coefficient: Decimal | None,
    stddev: Decimal = Decimal("0"),
) -> str:
    """Map a coefficient of variation to high, medium or low.

    A zero average growth leaves the coefficient undefined (None). Such a
    series is only consistent when its changes do not vary at all.

    Args:
        coefficient: |stddev / mean| of the monthly growth, or None.
        stddev: Standard deviation of the monthly growth.

    Returns:
        str: Consistency label.
    """
    if coefficient is None:
        return CONSISTENCY_BANDS[0][1] if stddev == 0 else CONSISTENCY_FLOOR
    for upper_bound, label in CONSISTENCY_BANDS:
        if coefficient < upper_bound:
            return label
    return CONSISTENCY_FLOOR


def classify_trend(total_growth_percentage: Decimal) -> str:
    """Map a total growth percentage to one of the five trend bands."""
    for lower_bound, label in TREND_BANDS:
        if total_growth_percentage >= lower_bound:
            return label
    return TREND_FLOOR


def _ordered(
    series: Sequence[HistoricalPoint],
    logger: Logger | None,
) -> list[HistoricalPoint]:
    points = list(series or ())
    ordered = sorted(points, key=lambda point: point.date)
    if ordered != points and logger is not None:
        logger.warning(
            f"History series of {len(points)} points was not sorted by date"
        )
    return ordered


def _mean(values: list[Decimal]) -> Decimal:
    if not values:
        return Decimal("0")
    return sum(values, Decimal("0")) / Decimal(len(values))


__all__ = [
    "analyze_trend",
    "compute_monthly_changes",
    "classify_consistency",
    "classify_trend",
]
