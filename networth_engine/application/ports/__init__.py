"""Application ports package."""

from .auth import AuthenticationPort
from .database import DatabaseEnginePort
from .errors import DataSourceError
from .holdings_repository import (
    AssetsRepositoryPort,
    ConnectedBalancesRepositoryPort,
    LiabilitiesRepositoryPort,
    TransactionsRepositoryPort,
)
from .snapshot_repository import SnapshotHistoryPort

__all__ = [
    "AuthenticationPort",
    "DatabaseEnginePort",
    "DataSourceError",
    "AssetsRepositoryPort",
    "ConnectedBalancesRepositoryPort",
    "LiabilitiesRepositoryPort",
    "TransactionsRepositoryPort",
    "SnapshotHistoryPort",
]
