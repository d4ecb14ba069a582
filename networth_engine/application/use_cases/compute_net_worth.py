"""Use case aggregating every data source into a net worth snapshot."""

from concurrent.futures import Future, ThreadPoolExecutor
from datetime import date

from networth_engine.application.ports.auth import AuthenticationPort
from networth_engine.application.ports.holdings_repository import (
    AssetsRepositoryPort,
    ConnectedBalancesRepositoryPort,
    LiabilitiesRepositoryPort,
    TransactionsRepositoryPort,
)
from networth_engine.application.ports.snapshot_repository import (
    SnapshotHistoryPort,
)
from networth_engine.domain.demo import DEMO_NET_WORTH_SNAPSHOT
from networth_engine.domain.models import NetWorthSnapshot
from networth_engine.domain.services.finance import compute_net_worth_snapshot
from networth_engine.domain.services.normalization import normalize_owner_id
from networth_engine.infrastructure.logging.logger import get_app_logger
from networth_engine.utils.date_utils import month_start


DEFAULT_MAX_WORKERS = 5


class ComputeNetWorthUseCase:
    """Compute an owner's current net worth from all data sources.

    The four live reads (assets, liabilities, connected balances, ledger
    totals) and the previous-snapshot lookup run concurrently. The call
    never raises: an unauthenticated owner or a failed live read yields
    ``DEMO_NET_WORTH_SNAPSHOT``.
    """

    def __init__(
        self,
        assets_repository: AssetsRepositoryPort,
        liabilities_repository: LiabilitiesRepositoryPort,
        connected_balances_repository: ConnectedBalancesRepositoryPort,
        transactions_repository: TransactionsRepositoryPort,
        snapshot_repository: SnapshotHistoryPort,
        logger=None,
        authentication: AuthenticationPort | None = None,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ) -> None:
        """Initialize the use case.

        Args:
            assets_repository: Manual asset store.
            liabilities_repository: Manual liability store.
            connected_balances_repository: Connected account balance store.
            transactions_repository: Transaction ledger aggregates.
            snapshot_repository: Snapshot history store.
            logger: Optional logger compatible with logging.Logger-like API.
            authentication: Optional collaborator resolving the signed-in
                owner when execute() is called without an owner id.
            max_workers: Thread pool size for the concurrent reads.
        """
        self._assets = assets_repository
        self._liabilities = liabilities_repository
        self._connected = connected_balances_repository
        self._transactions = transactions_repository
        self._snapshots = snapshot_repository
        self._logger = logger or get_app_logger()
        self._authentication = authentication
        self._max_workers = max(1, max_workers)

    def execute(
        self,
        owner_id=None,
        today: date | None = None,
    ) -> NetWorthSnapshot:
        """Return the owner's net worth snapshot.

        Args:
            owner_id: Owner to aggregate, a string or any value with a string
                form such as a UUID. When omitted, the authentication
                collaborator is asked for the signed-in owner.
            today: Reference date; defaults to the current date.

        Returns:
            NetWorthSnapshot: Fresh snapshot, or the demonstration snapshot
            when the owner is unauthenticated or a live read failed.
        """
        resolved_owner = None
        try:
            resolved_owner = self._resolve_owner(owner_id)
            if not resolved_owner:
                self._logger.warning(
                    "No authenticated owner; returning demonstration snapshot"
                )
                return DEMO_NET_WORTH_SNAPSHOT
            return self._aggregate(resolved_owner, today or date.today())
        except Exception as exc:
            self._logger.error(
                f"Net worth aggregation failed for owner={resolved_owner}: "
                f"{exc!r}; returning demonstration snapshot"
            )
            return DEMO_NET_WORTH_SNAPSHOT

    def _aggregate(self, owner_id: str, as_of: date) -> NetWorthSnapshot:
        executor = ThreadPoolExecutor(
            max_workers=self._max_workers,
            thread_name_prefix="networth-read",
        )
        try:
            assets_future = executor.submit(
                self._assets.list_active_assets,
                owner_id,
            )
            liabilities_future = executor.submit(
                self._liabilities.list_active_liabilities,
                owner_id,
            )
            connected_future = executor.submit(
                self._connected.list_connected_balances,
                owner_id,
            )
            transactions_future = executor.submit(
                self._transactions.sum_current_month_by_type,
                owner_id,
                as_of,
            )
            previous_future = executor.submit(
                self._snapshots.get_latest_snapshot_before,
                owner_id,
                month_start(as_of),
            )

            assets = list(assets_future.result())
            liabilities = list(liabilities_future.result())
            connected = list(connected_future.result())
            transactions = transactions_future.result()
            previous = self._previous_snapshot(previous_future, owner_id)
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        self._logger.info(
            f"Fetched for owner={owner_id}: {len(assets)} assets, "
            f"{len(liabilities)} liabilities, {len(connected)} connected "
            f"accounts, previous snapshot "
            f"{'found' if previous is not None else 'not found'}"
        )

        snapshot = compute_net_worth_snapshot(
            assets,
            liabilities,
            connected,
            transactions,
            previous,
            as_of_date=as_of,
            logger=self._logger,
        )
        self._logger.info(
            f"Net worth computed for owner={owner_id}: "
            f"assets={snapshot.total_assets}, "
            f"liabilities={snapshot.total_liabilities}, "
            f"net_worth={snapshot.net_worth}"
        )
        return snapshot

    def _previous_snapshot(
        self,
        future: Future,
        owner_id: str,
    ) -> NetWorthSnapshot | None:
        """Return the previous snapshot, treating a failed lookup as absent."""
        try:
            return future.result()
        except Exception as exc:
            self._logger.warning(
                f"Previous snapshot lookup failed for owner={owner_id}: "
                f"{exc!r}; monthly change is computed against zero"
            )
            return None

    def _resolve_owner(self, owner_id) -> str | None:
        if owner_id is not None:
            return normalize_owner_id(owner_id)
        if self._authentication is None:
            return None
        try:
            resolved = self._authentication.current_owner_id()
        except Exception as exc:
            self._logger.error(f"Authentication lookup failed: {exc!r}")
            return None
        if resolved is not None and not isinstance(resolved, str):
            self._logger.error(
                f"Authentication returned a non-string owner id: {resolved!r}"
            )
            return None
        return normalize_owner_id(resolved)


__all__ = ["ComputeNetWorthUseCase", "DEFAULT_MAX_WORKERS"]
