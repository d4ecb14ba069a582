"""Tests for persisting computed snapshots."""

from datetime import date
from decimal import Decimal
import uuid
from unittest.mock import MagicMock

from networth_engine.application.ports.errors import DataSourceError
from networth_engine.application.use_cases.save_snapshot import (
    SaveSnapshotUseCase,
)
from networth_engine.domain.demo import DEMO_NET_WORTH_SNAPSHOT
from networth_engine.domain.models import NetWorthSnapshot


def _snapshot() -> NetWorthSnapshot:
    return NetWorthSnapshot(
        total_assets=Decimal("1000"),
        total_liabilities=Decimal("400"),
        assets_breakdown=(),
        liabilities_breakdown=(),
        monthly_income=Decimal("0"),
        monthly_expenses=Decimal("0"),
        savings_rate=Decimal("0"),
        monthly_change=Decimal("0"),
        monthly_change_percentage=Decimal("0"),
        as_of_date=date(2024, 6, 1),
    )


def test_execute_inserts_snapshot() -> None:
    """A live snapshot should be appended to the history."""
    repository = MagicMock()
    snapshot = _snapshot()
    use_case = SaveSnapshotUseCase(repository, logger=MagicMock())

    assert use_case.execute("owner-1", snapshot) is True
    repository.insert_snapshot.assert_called_once_with("owner-1", snapshot)


def test_execute_refuses_demo_snapshot() -> None:
    """Demonstration data must never reach the history store."""
    repository = MagicMock()
    logger = MagicMock()
    use_case = SaveSnapshotUseCase(repository, logger=logger)

    assert use_case.execute("owner-1", DEMO_NET_WORTH_SNAPSHOT) is False
    repository.insert_snapshot.assert_not_called()
    logger.warning.assert_called_once()


def test_execute_requires_owner() -> None:
    """Snapshots without an owner should be rejected."""
    repository = MagicMock()
    use_case = SaveSnapshotUseCase(repository, logger=MagicMock())

    assert use_case.execute("", _snapshot()) is False
    repository.insert_snapshot.assert_not_called()


def test_execute_reports_insert_failure() -> None:
    """Store errors should be logged and reported as False."""
    repository = MagicMock()
    repository.insert_snapshot.side_effect = DataSourceError(
        "net_worth_snapshots",
        "disk full",
    )
    logger = MagicMock()
    use_case = SaveSnapshotUseCase(repository, logger=logger)

    assert use_case.execute("owner-1", _snapshot()) is False
    logger.error.assert_called_once()


def test_execute_accepts_uuid_owner_id() -> None:
    """UUID owner ids should be stored under their string form."""
    repository = MagicMock()
    owner_id = uuid.uuid4()
    snapshot = _snapshot()
    use_case = SaveSnapshotUseCase(repository, logger=MagicMock())

    assert use_case.execute(owner_id, snapshot) is True
    repository.insert_snapshot.assert_called_once_with(
        str(owner_id),
        snapshot,
    )
