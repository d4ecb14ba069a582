"""Tests for net worth trend analysis."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from networth_engine.domain.models import HistoricalPoint
from networth_engine.domain.services.trend import (
    analyze_trend,
    classify_consistency,
    classify_trend,
    compute_monthly_changes,
)


def _series(*values: int) -> list[HistoricalPoint]:
    return [
        HistoricalPoint(
            date=date(2024, index + 1, 1),
            net_worth=Decimal(value),
            total_assets=Decimal(value),
            total_liabilities=Decimal("0"),
        )
        for index, value in enumerate(values)
    ]


def test_trend_for_growing_series() -> None:
    """A bumpy but growing series should be strongly positive."""
    analysis = analyze_trend(_series(100000, 115000, 108000, 130000))

    assert analysis is not None
    assert analysis.total_growth == Decimal("30000")
    assert analysis.total_growth_percentage == Decimal("30")
    assert analysis.average_monthly_growth == Decimal("10000")
    assert analysis.best_month.growth == Decimal("22000")
    assert analysis.best_month.date == date(2024, 4, 1)
    assert analysis.worst_month.growth == Decimal("-7000")
    assert analysis.worst_month.date == date(2024, 3, 1)
    assert analysis.trend == "strongly-positive"
    assert analysis.consistency == "medium"
    assert abs(analysis.coefficient_of_variation - Decimal("1.2356")) < Decimal(
        "0.0001"
    )
    assert len(analysis.monthly_changes) == 3


@pytest.mark.parametrize("values", [(), (100000,)])
def test_trend_requires_two_points(values) -> None:
    """Fewer than two points should produce no analysis."""
    assert analyze_trend(_series(*values)) is None


def test_flat_series_is_highly_consistent() -> None:
    """No movement at all should be neutral and highly consistent."""
    analysis = analyze_trend(_series(100, 100, 100))

    assert analysis.trend == "neutral"
    assert analysis.consistency == "high"
    assert analysis.coefficient_of_variation is None


def test_oscillating_series_with_zero_mean_is_low_consistency() -> None:
    """Changes averaging zero but varying should not read as consistent."""
    analysis = analyze_trend(_series(100, 200, 100))

    assert analysis.average_monthly_growth == Decimal("0")
    assert analysis.coefficient_of_variation is None
    assert analysis.consistency == "low"
    assert analysis.trend == "neutral"


def test_best_and_worst_month_ties_use_first_occurrence() -> None:
    """Equal growth values should resolve to the earliest month."""
    analysis = analyze_trend(_series(100, 150, 200))

    assert analysis.best_month.date == date(2024, 2, 1)
    assert analysis.worst_month.date == date(2024, 2, 1)


def test_zero_starting_value_gives_zero_percentages() -> None:
    """A zero first value should not raise on percentage division."""
    analysis = analyze_trend(_series(0, 1000))

    assert analysis.total_growth == Decimal("1000")
    assert analysis.total_growth_percentage == Decimal("0")
    assert analysis.monthly_changes[0].growth_percentage == Decimal("0")


def test_unsorted_series_is_sorted_and_logged() -> None:
    """Out-of-order points should be sorted before analysis."""
    logger = MagicMock()
    points = _series(100, 120, 150)

    analysis = analyze_trend(list(reversed(points)), logger=logger)

    assert analysis.total_growth == Decimal("50")
    logger.warning.assert_called_once()


def test_sorted_series_does_not_warn() -> None:
    """Already ordered input should be analysed silently."""
    logger = MagicMock()

    analyze_trend(_series(100, 120), logger=logger)

    logger.warning.assert_not_called()


def test_monthly_changes_are_dated_at_later_point() -> None:
    """Each change should carry the date of the newer point."""
    changes = compute_monthly_changes(_series(200, 100))

    assert len(changes) == 1
    assert changes[0].date == date(2024, 2, 1)
    assert changes[0].growth == Decimal("-100")
    assert changes[0].growth_percentage == Decimal("-50")


@pytest.mark.parametrize(
    ("percentage", "expected"),
    [
        ("15", "strongly-positive"),
        ("14.99", "positive"),
        ("5", "positive"),
        ("4.99", "neutral"),
        ("-5", "neutral"),
        ("-5.01", "negative"),
        ("-15", "negative"),
        ("-15.01", "strongly-negative"),
    ],
)
def test_trend_band_boundaries(percentage: str, expected: str) -> None:
    """Band lower bounds should be inclusive."""
    assert classify_trend(Decimal(percentage)) == expected


@pytest.mark.parametrize(
    ("coefficient", "expected"),
    [
        ("0", "high"),
        ("0.49", "high"),
        ("0.5", "medium"),
        ("1.49", "medium"),
        ("1.5", "low"),
    ],
)
def test_consistency_band_boundaries(coefficient: str, expected: str) -> None:
    """Consistency upper bounds should be exclusive."""
    assert classify_consistency(Decimal(coefficient)) == expected
