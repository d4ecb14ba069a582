"""Use case persisting a net worth snapshot to the history store."""

from networth_engine.application.ports.snapshot_repository import (
    SnapshotHistoryPort,
)
from networth_engine.domain.models import NetWorthSnapshot
from networth_engine.domain.services.normalization import normalize_owner_id
from networth_engine.infrastructure.logging.logger import get_app_logger


class SaveSnapshotUseCase:
    """Append one snapshot to an owner's history without ever raising.

    A single insert is attempted for live snapshots. Demonstration
    snapshots and blank owner ids are refused before any insert, so the
    call returns False without touching the store in those cases. Insert
    failures are logged and swallowed so the caller's aggregation path is
    never interrupted by the write.
    """

    def __init__(
        self,
        snapshot_repository: SnapshotHistoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            snapshot_repository: Snapshot history store.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._snapshots = snapshot_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        owner_id,
        snapshot: NetWorthSnapshot,
    ) -> bool:
        """Persist the snapshot.

        Args:
            owner_id: Owner of the history, a string or any value with a
                string form such as a UUID.
            snapshot: Snapshot returned by the aggregator.

        Returns:
            bool: True when the row was written. Callers may ignore it.
        """
        owner = normalize_owner_id(owner_id)
        if owner is None:
            self._logger.warning("Snapshot not saved: missing owner id")
            return False
        if snapshot.is_demo:
            self._logger.warning(
                f"Snapshot not saved for owner={owner}: "
                "demonstration data is never persisted"
            )
            return False
        try:
            self._snapshots.insert_snapshot(owner, snapshot)
        except Exception as exc:
            self._logger.error(
                f"Failed to save net worth snapshot for owner={owner}: "
                f"{exc!r}"
            )
            return False
        self._logger.info(
            f"Saved net worth snapshot for owner={owner} "
            f"dated {snapshot.as_of_date}"
        )
        return True


__all__ = ["SaveSnapshotUseCase"]
