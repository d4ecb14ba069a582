"""Application use cases package."""

from .analyze_net_worth_trend import (
    AnalyzeNetWorthTrendUseCase,
    NetWorthTrendReport,
    resolve_period_months,
)
from .compute_net_worth import ComputeNetWorthUseCase
from .create_monthly_snapshots import (
    BatchSnapshotResult,
    CreateMonthlySnapshotsUseCase,
    SnapshotCreationResult,
)
from .save_snapshot import SaveSnapshotUseCase

__all__ = [
    "AnalyzeNetWorthTrendUseCase",
    "NetWorthTrendReport",
    "resolve_period_months",
    "ComputeNetWorthUseCase",
    "BatchSnapshotResult",
    "CreateMonthlySnapshotsUseCase",
    "SnapshotCreationResult",
    "SaveSnapshotUseCase",
]
