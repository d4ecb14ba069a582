"""Composition root for wiring infrastructure adapters."""

from networth_engine.application.ports.auth import AuthenticationPort
from networth_engine.application.ports.database import DatabaseEnginePort
from networth_engine.application.use_cases.analyze_net_worth_trend import (
    AnalyzeNetWorthTrendUseCase,
)
from networth_engine.application.use_cases.compute_net_worth import (
    ComputeNetWorthUseCase,
)
from networth_engine.application.use_cases.create_monthly_snapshots import (
    CreateMonthlySnapshotsUseCase,
)
from networth_engine.application.use_cases.save_snapshot import (
    SaveSnapshotUseCase,
)
from networth_engine.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from networth_engine.infrastructure.holdings_repository import (
    SqlAlchemyAssetsRepository,
    SqlAlchemyConnectedBalancesRepository,
    SqlAlchemyLiabilitiesRepository,
    SqlAlchemyTransactionsRepository,
)
from networth_engine.infrastructure.logging.logger import (
    get_app_logger,
    get_job_logger,
)
from networth_engine.infrastructure.settings import EngineSettings
from networth_engine.infrastructure.snapshot_repository import (
    SqlAlchemySnapshotHistoryRepository,
)


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_snapshot_repository(
    db_port: DatabaseEnginePort | None = None,
) -> SqlAlchemySnapshotHistoryRepository:
    """Return the snapshot history repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemySnapshotHistoryRepository(resolved_db)


def build_compute_net_worth(
    db_port: DatabaseEnginePort | None = None,
    authentication: AuthenticationPort | None = None,
    settings: EngineSettings | None = None,
    logger=None,
) -> ComputeNetWorthUseCase:
    """Return the aggregator wired to the SQL-backed stores."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or EngineSettings.from_env()
    return ComputeNetWorthUseCase(
        assets_repository=SqlAlchemyAssetsRepository(resolved_db),
        liabilities_repository=SqlAlchemyLiabilitiesRepository(resolved_db),
        connected_balances_repository=SqlAlchemyConnectedBalancesRepository(
            resolved_db
        ),
        transactions_repository=SqlAlchemyTransactionsRepository(resolved_db),
        snapshot_repository=build_snapshot_repository(resolved_db),
        logger=logger or get_app_logger(),
        authentication=authentication,
        max_workers=resolved_settings.max_workers,
    )


def build_save_snapshot(
    db_port: DatabaseEnginePort | None = None,
) -> SaveSnapshotUseCase:
    """Return the snapshot writer."""
    return SaveSnapshotUseCase(
        build_snapshot_repository(db_port),
        logger=get_app_logger(),
    )


def build_analyze_net_worth_trend(
    db_port: DatabaseEnginePort | None = None,
    settings: EngineSettings | None = None,
) -> AnalyzeNetWorthTrendUseCase:
    """Return the history trend analyser."""
    resolved_settings = settings or EngineSettings.from_env()
    return AnalyzeNetWorthTrendUseCase(
        build_snapshot_repository(db_port),
        logger=get_app_logger(),
        default_months=resolved_settings.history_months,
    )


def build_create_monthly_snapshots(
    db_port: DatabaseEnginePort | None = None,
    settings: EngineSettings | None = None,
) -> CreateMonthlySnapshotsUseCase:
    """Return the monthly snapshot job, logging to the jobs logger."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or EngineSettings.from_env()
    logger = get_job_logger()
    return CreateMonthlySnapshotsUseCase(
        compute_net_worth=build_compute_net_worth(
            resolved_db,
            settings=resolved_settings,
            logger=logger,
        ),
        snapshot_repository=build_snapshot_repository(resolved_db),
        logger=logger,
        delay_seconds=resolved_settings.snapshot_delay_seconds,
    )


__all__ = [
    "build_database_adapter",
    "build_snapshot_repository",
    "build_compute_net_worth",
    "build_save_snapshot",
    "build_analyze_net_worth_trend",
    "build_create_monthly_snapshots",
]
