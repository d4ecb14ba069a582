"""Port for the append-only net worth snapshot history."""

from datetime import date
from typing import Protocol

from networth_engine.domain.models import HistoricalPoint, NetWorthSnapshot


class SnapshotHistoryPort(Protocol):
    """Port exposing reads and appends on persisted snapshots."""

    def get_latest_snapshot_before(
        self,
        owner_id: str,
        before: date,
    ) -> NetWorthSnapshot | None:
        """Return the newest snapshot dated strictly before ``before``."""

    def insert_snapshot(
        self,
        owner_id: str,
        snapshot: NetWorthSnapshot,
    ) -> None:
        """Append a snapshot to the owner's history."""

    def list_snapshots_between(
        self,
        owner_id: str,
        start_date: date | None,
        end_date: date | None,
    ) -> list[HistoricalPoint]:
        """Return snapshots in the date range, oldest first."""

    def has_snapshot_in_month(self, owner_id: str, month_start: date) -> bool:
        """Return True when a snapshot exists in the given month."""

    def list_active_owner_ids(self) -> list[str]:
        """Return owners holding at least one active asset or liability."""


__all__ = ["SnapshotHistoryPort"]
