"""Ports for the live data sources read during aggregation."""

from datetime import date
from typing import Protocol

from networth_engine.domain.models import (
    Asset,
    ConnectedAccountBalance,
    Liability,
    TransactionTotals,
)


class AssetsRepositoryPort(Protocol):
    """Port exposing read access to manual assets."""

    def list_active_assets(self, owner_id: str) -> list[Asset]:
        """Return the owner's assets that have not been soft-deleted."""


class LiabilitiesRepositoryPort(Protocol):
    """Port exposing read access to manual liabilities."""

    def list_active_liabilities(self, owner_id: str) -> list[Liability]:
        """Return the owner's liabilities that have not been soft-deleted."""


class ConnectedBalancesRepositoryPort(Protocol):
    """Port exposing balances of accounts linked by an aggregator."""

    def list_connected_balances(
        self,
        owner_id: str,
    ) -> list[ConnectedAccountBalance]:
        """Return the owner's connected bank and mobile money balances."""


class TransactionsRepositoryPort(Protocol):
    """Port exposing aggregated reads over the transaction ledger."""

    def sum_current_month_by_type(
        self,
        owner_id: str,
        as_of: date,
    ) -> TransactionTotals:
        """Return income and expense sums for the month containing as_of."""


__all__ = [
    "AssetsRepositoryPort",
    "LiabilitiesRepositoryPort",
    "ConnectedBalancesRepositoryPort",
    "TransactionsRepositoryPort",
]
