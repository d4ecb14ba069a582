"""Use case analysing the trend of an owner's net worth history."""

from dataclasses import dataclass
from datetime import date

from networth_engine.application.ports.snapshot_repository import (
    SnapshotHistoryPort,
)
from networth_engine.domain.constants import (
    DEFAULT_HISTORY_PERIOD,
    HISTORY_PERIODS,
)
from networth_engine.domain.models import HistoricalPoint, TrendAnalysis
from networth_engine.domain.services.trend import analyze_trend
from networth_engine.infrastructure.logging.logger import get_app_logger
from networth_engine.utils.date_utils import subtract_months


@dataclass(frozen=True)
class NetWorthTrendReport:
    """History slice and the trend metrics derived from it.

    Attributes:
        points: Snapshots in the window, oldest first.
        analysis: Trend metrics, or None with fewer than two points.
        start_date: Lower bound of the window, None for all history.
        end_date: Upper bound of the window.
    """

    points: tuple[HistoricalPoint, ...]
    analysis: TrendAnalysis | None
    start_date: date | None
    end_date: date


def resolve_period_months(label: str | None, logger=None) -> int:
    """Translate a history period label (3M, 6M, 1Y, 2Y, All) to months.

    Args:
        label: Period label; unknown labels fall back to the default period.
        logger: Optional logger used for warnings.

    Returns:
        int: Number of months, -1 meaning all history.
    """
    if label in HISTORY_PERIODS:
        return HISTORY_PERIODS[label]
    if logger is not None:
        logger.warning(
            f"Unknown history period {label!r}; "
            f"using {DEFAULT_HISTORY_PERIOD}"
        )
    return HISTORY_PERIODS[DEFAULT_HISTORY_PERIOD]


class AnalyzeNetWorthTrendUseCase:
    """Load a time-bounded slice of snapshot history and analyse it."""

    def __init__(
        self,
        snapshot_repository: SnapshotHistoryPort,
        logger=None,
        default_months: int = HISTORY_PERIODS[DEFAULT_HISTORY_PERIOD],
    ) -> None:
        """Initialize the use case.

        Args:
            snapshot_repository: Snapshot history store.
            logger: Optional logger compatible with logging.Logger-like API.
            default_months: Window used when execute() gets no months value.
        """
        self._snapshots = snapshot_repository
        self._logger = logger or get_app_logger()
        self._default_months = default_months

    def get_history(
        self,
        owner_id: str,
        months: int | None = None,
        today: date | None = None,
    ) -> list[HistoricalPoint]:
        """Return the owner's snapshots for the last ``months`` months.

        Args:
            owner_id: Owner of the history.
            months: Window length; zero or negative loads all history.
            today: Reference date; defaults to the current date.

        Returns:
            list[HistoricalPoint]: Points sorted by date, empty on failure.
        """
        end_date = today or date.today()
        start_date = self._window_start(months, end_date)
        try:
            points = self._snapshots.list_snapshots_between(
                owner_id,
                start_date,
                end_date,
            )
        except Exception as exc:
            self._logger.error(
                f"Failed to load net worth history for owner={owner_id}: "
                f"{exc!r}"
            )
            return []
        return sorted(points, key=lambda point: point.date)

    def execute(
        self,
        owner_id: str,
        months: int | None = None,
        today: date | None = None,
    ) -> NetWorthTrendReport:
        """Return the history window and its trend analysis.

        Args:
            owner_id: Owner of the history.
            months: Window length; zero or negative loads all history.
            today: Reference date; defaults to the current date.

        Returns:
            NetWorthTrendReport: Points and metrics for the window.
        """
        end_date = today or date.today()
        points = self.get_history(owner_id, months, end_date)
        analysis = analyze_trend(points, logger=self._logger)
        if analysis is None:
            self._logger.info(
                f"Not enough history to analyse trend for owner={owner_id} "
                f"({len(points)} points)"
            )
        else:
            self._logger.info(
                f"Trend for owner={owner_id}: {analysis.trend}, "
                f"consistency={analysis.consistency}, "
                f"growth={analysis.total_growth}"
            )
        return NetWorthTrendReport(
            points=tuple(points),
            analysis=analysis,
            start_date=self._window_start(months, end_date),
            end_date=end_date,
        )

    def _window_start(self, months: int | None, end_date: date) -> date | None:
        resolved = self._default_months if months is None else months
        if resolved <= 0:
            return None
        return subtract_months(end_date, resolved)


__all__ = [
    "AnalyzeNetWorthTrendUseCase",
    "NetWorthTrendReport",
    "resolve_period_months",
]
