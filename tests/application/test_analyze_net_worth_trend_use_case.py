"""Tests for the history slicing and trend analysis use case."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from networth_engine.application.ports.errors import DataSourceError
from networth_engine.application.use_cases.analyze_net_worth_trend import (
    AnalyzeNetWorthTrendUseCase,
    resolve_period_months,
)
from networth_engine.domain.models import HistoricalPoint


def _point(day: date, value: str) -> HistoricalPoint:
    return HistoricalPoint(
        date=day,
        net_worth=Decimal(value),
        total_assets=Decimal(value),
        total_liabilities=Decimal("0"),
    )


def test_get_history_uses_window_start() -> None:
    """A 12-month window should start one year before today."""
    repository = MagicMock()
    repository.list_snapshots_between.return_value = []
    use_case = AnalyzeNetWorthTrendUseCase(repository, logger=MagicMock())

    use_case.get_history("owner-1", months=12, today=date(2024, 6, 15))

    repository.list_snapshots_between.assert_called_once_with(
        "owner-1",
        date(2023, 6, 15),
        date(2024, 6, 15),
    )


def test_get_history_without_limit_loads_everything() -> None:
    """Non-positive month counts should drop the lower bound."""
    repository = MagicMock()
    repository.list_snapshots_between.return_value = []
    use_case = AnalyzeNetWorthTrendUseCase(repository, logger=MagicMock())

    use_case.get_history("owner-1", months=-1, today=date(2024, 6, 15))

    repository.list_snapshots_between.assert_called_once_with(
        "owner-1",
        None,
        date(2024, 6, 15),
    )


def test_get_history_sorts_points() -> None:
    """Points should come back oldest first."""
    repository = MagicMock()
    repository.list_snapshots_between.return_value = [
        _point(date(2024, 3, 1), "300"),
        _point(date(2024, 1, 1), "100"),
    ]
    use_case = AnalyzeNetWorthTrendUseCase(repository, logger=MagicMock())

    points = use_case.get_history("owner-1", today=date(2024, 6, 1))

    assert [point.date for point in points] == [
        date(2024, 1, 1),
        date(2024, 3, 1),
    ]


def test_get_history_failure_returns_empty_list() -> None:
    """Store errors should be logged, not raised."""
    repository = MagicMock()
    repository.list_snapshots_between.side_effect = DataSourceError(
        "net_worth_snapshots",
        "timeout",
    )
    logger = MagicMock()
    use_case = AnalyzeNetWorthTrendUseCase(repository, logger=logger)

    assert use_case.get_history("owner-1", today=date(2024, 6, 1)) == []
    logger.error.assert_called_once()


def test_execute_returns_report_with_analysis() -> None:
    """Enough history should produce trend metrics."""
    repository = MagicMock()
    repository.list_snapshots_between.return_value = [
        _point(date(2024, 1, 1), "100000"),
        _point(date(2024, 2, 1), "115000"),
        _point(date(2024, 3, 1), "108000"),
        _point(date(2024, 4, 1), "130000"),
    ]
    use_case = AnalyzeNetWorthTrendUseCase(
        repository,
        logger=MagicMock(),
        default_months=6,
    )

    report = use_case.execute("owner-1", today=date(2024, 4, 30))

    assert report.start_date == date(2023, 10, 30)
    assert report.end_date == date(2024, 4, 30)
    assert len(report.points) == 4
    assert report.analysis.trend == "strongly-positive"
    assert report.analysis.total_growth == Decimal("30000")


def test_execute_with_short_history_has_no_analysis() -> None:
    """A single snapshot should yield a report without metrics."""
    repository = MagicMock()
    repository.list_snapshots_between.return_value = [
        _point(date(2024, 1, 1), "100"),
    ]
    use_case = AnalyzeNetWorthTrendUseCase(repository, logger=MagicMock())

    report = use_case.execute("owner-1", months=3, today=date(2024, 2, 1))

    assert report.analysis is None
    assert len(report.points) == 1


@pytest.mark.parametrize(
    ("label", "expected"),
    [("3M", 3), ("6M", 6), ("1Y", 12), ("2Y", 24), ("All", -1)],
)
def test_resolve_period_months_known_labels(label, expected) -> None:
    """Known period labels should map to month counts."""
    assert resolve_period_months(label) == expected


def test_resolve_period_months_unknown_label_uses_default() -> None:
    """Unknown labels should warn and fall back to one year."""
    logger = MagicMock()

    assert resolve_period_months("5Y", logger=logger) == 12
    logger.warning.assert_called_once()
