"""Use case recording one net worth snapshot per owner and month.

The job is meant to run on a schedule:

* list owners holding at least one active asset or liability;
* skip owners that already have a snapshot in the current month;
* aggregate and append a snapshot for everyone else.
"""

from dataclasses import dataclass, field
from datetime import date
import time
from typing import Callable

from networth_engine.application.ports.snapshot_repository import (
    SnapshotHistoryPort,
)
from networth_engine.application.use_cases.compute_net_worth import (
    ComputeNetWorthUseCase,
)
from networth_engine.infrastructure.logging.logger import get_app_logger
from networth_engine.utils.date_utils import month_start


@dataclass(frozen=True)
class SnapshotCreationResult:
    """Outcome of the monthly snapshot for one owner.

    Attributes:
        success: False when the snapshot could not be produced or written.
        skipped: True when the month already had a snapshot.
        error: Failure description when success is False.
    """

    success: bool
    skipped: bool = False
    error: str | None = None


@dataclass(frozen=True)
class BatchSnapshotResult:
    """Summary of a monthly snapshot run over all active owners."""

    total_owners: int = 0
    successful: int = 0
    failed: int = 0
    skipped: int = 0
    errors: list[str] = field(default_factory=list)


class CreateMonthlySnapshotsUseCase:
    """Create the current month's snapshot for every active owner."""

    def __init__(
        self,
        compute_net_worth: ComputeNetWorthUseCase,
        snapshot_repository: SnapshotHistoryPort,
        logger=None,
        delay_seconds: float = 0.1,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize the use case.

        Args:
            compute_net_worth: Aggregator producing the snapshots.
            snapshot_repository: Snapshot history store.
            logger: Optional logger compatible with logging.Logger-like API.
            delay_seconds: Pause between owners to spread database load.
            sleep: Function used to pause between owners.
        """
        self._compute = compute_net_worth
        self._snapshots = snapshot_repository
        self._logger = logger or get_app_logger()
        self._delay_seconds = delay_seconds
        self._sleep = sleep

    def create_for_owner(
        self,
        owner_id: str,
        today: date | None = None,
    ) -> SnapshotCreationResult:
        """Create the current month's snapshot for one owner.

        Args:
            owner_id: Owner to snapshot.
            today: Reference date; defaults to the current date.

        Returns:
            SnapshotCreationResult: Whether the snapshot was written,
            skipped or failed.
        """
        as_of = today or date.today()
        try:
            exists = self._snapshots.has_snapshot_in_month(
                owner_id,
                month_start(as_of),
            )
            if exists:
                return SnapshotCreationResult(success=True, skipped=True)
        except Exception as exc:
            return SnapshotCreationResult(
                success=False,
                error=f"Error checking existing snapshots: {exc}",
            )

        snapshot = self._compute.execute(owner_id, today=as_of)
        if snapshot.is_demo:
            return SnapshotCreationResult(
                success=False,
                error="Net worth could not be computed from live data",
            )

        try:
            self._snapshots.insert_snapshot(owner_id, snapshot)
        except Exception as exc:
            return SnapshotCreationResult(
                success=False,
                error=f"Error creating snapshot: {exc}",
            )
        return SnapshotCreationResult(success=True)

    def run(self, today: date | None = None) -> BatchSnapshotResult:
        """Create snapshots for every active owner.

        Args:
            today: Reference date; defaults to the current date.

        Returns:
            BatchSnapshotResult: Counts and collected error messages.
        """
        as_of = today or date.today()
        try:
            owner_ids = self._snapshots.list_active_owner_ids()
        except Exception as exc:
            self._logger.error(f"Error fetching active owners: {exc!r}")
            return BatchSnapshotResult(
                errors=[f"Error fetching owners: {exc}"]
            )

        successful = failed = skipped = 0
        errors: list[str] = []
        for index, owner_id in enumerate(owner_ids):
            result = self.create_for_owner(owner_id, today=as_of)
            if result.skipped:
                skipped += 1
            elif result.success:
                successful += 1
            else:
                failed += 1
                errors.append(f"Owner {owner_id}: {result.error}")
            if self._delay_seconds and index < len(owner_ids) - 1:
                self._sleep(self._delay_seconds)

        batch = BatchSnapshotResult(
            total_owners=len(owner_ids),
            successful=successful,
            failed=failed,
            skipped=skipped,
            errors=errors,
        )
        self._logger.info(
            f"Monthly snapshots for {as_of.strftime('%Y-%m')}: "
            f"owners={batch.total_owners}, created={batch.successful}, "
            f"skipped={batch.skipped}, failed={batch.failed}"
        )
        for error in errors:
            self._logger.warning(error)
        return batch


__all__ = [
    "CreateMonthlySnapshotsUseCase",
    "SnapshotCreationResult",
    "BatchSnapshotResult",
]
