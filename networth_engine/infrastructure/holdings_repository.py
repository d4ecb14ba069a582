"""SQLAlchemy-backed repositories for the live data sources."""

from datetime import date
from decimal import Decimal

from sqlalchemy import Date, bindparam, text

from networth_engine.application.ports.database import DatabaseEnginePort
from networth_engine.application.ports.holdings_repository import (
    AssetsRepositoryPort,
    ConnectedBalancesRepositoryPort,
    LiabilitiesRepositoryPort,
    TransactionsRepositoryPort,
)
from networth_engine.domain.constants import (
    TRANSACTION_EXPENSE,
    TRANSACTION_INCOME,
)
from networth_engine.domain.models import (
    Asset,
    ConnectedAccountBalance,
    Liability,
    TransactionTotals,
)
from networth_engine.domain.services.normalization import (
    normalize_transaction_type,
)
from networth_engine.infrastructure.sql_utils import translate_errors
from networth_engine.utils.date_utils import (
    coerce_date,
    coerce_datetime,
    month_start,
    next_month_start,
)
from networth_engine.utils.decimal_utils import (
    coerce_decimal,
    coerce_optional_decimal,
)


SELECT_ACTIVE_ASSETS_SQL = text(
    """
    SELECT id, owner_id, name, category, type, current_value,
           original_value, is_active, created_at, updated_at
    FROM assets
    WHERE owner_id = :owner_id AND is_active = :active
    ORDER BY id
    """
)

SELECT_ACTIVE_LIABILITIES_SQL = text(
    """
    SELECT id, owner_id, name, category, type, current_balance,
           original_balance, interest_rate, monthly_payment, due_date,
           is_active, created_at, updated_at
    FROM liabilities
    WHERE owner_id = :owner_id AND is_active = :active
    ORDER BY id
    """
)

SELECT_CONNECTED_BALANCES_SQL = text(
    """
    SELECT id, owner_id, balance, account_kind, institution
    FROM connected_accounts
    WHERE owner_id = :owner_id AND is_active = :active
    ORDER BY id
    """
)

SUM_TRANSACTIONS_BY_TYPE_SQL = text(
    """
    SELECT type, SUM(amount) AS total
    FROM transactions
    WHERE owner_id = :owner_id
      AND transaction_date >= :start_date
      AND transaction_date < :end_date
    GROUP BY type
    """
).bindparams(
    bindparam("start_date", type_=Date),
    bindparam("end_date", type_=Date),
)


class SqlAlchemyAssetsRepository(AssetsRepositoryPort):
    """Manual asset store backed by the ``assets`` table."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port

    def list_active_assets(self, owner_id: str) -> list[Asset]:
        with translate_errors("assets"):
            engine = self._db_port.get_engine()
            with engine.connect() as conn:
                rows = conn.execute(
                    SELECT_ACTIVE_ASSETS_SQL,
                    {"owner_id": owner_id, "active": True},
                ).all()
        return [
            Asset(
                id=str(row.id),
                owner_id=row.owner_id,
                name=row.name,
                category=row.category,
                type=row.type,
                current_value=coerce_decimal(row.current_value),
                original_value=coerce_optional_decimal(row.original_value),
                active=bool(row.is_active),
                created_at=coerce_datetime(row.created_at),
                updated_at=coerce_datetime(row.updated_at),
            )
            for row in rows
        ]


class SqlAlchemyLiabilitiesRepository(LiabilitiesRepositoryPort):
    """Manual liability store backed by the ``liabilities`` table."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        self._db_port = db_port

    def list_active_liabilities(self, owner_id: str) -> list[Liability]:
        with translate_errors("liabilities"):
            engine = self._db_port.get_engine()
            with engine.connect() as conn:
                rows = conn.execute(
                    SELECT_ACTIVE_LIABILITIES_SQL,
                    {"owner_id": owner_id, "active": True},
                ).all()
        return [
            Liability(
                id=str(row.id),
                owner_id=row.owner_id,
                name=row.name,
                category=row.category,
                type=row.type,
                current_balance=coerce_decimal(row.current_balance),
                original_balance=coerce_optional_decimal(row.original_balance),
                interest_rate=coerce_optional_decimal(row.interest_rate),
                monthly_payment=coerce_optional_decimal(row.monthly_payment),
                due_date=coerce_date(row.due_date),
                active=bool(row.is_active),
                created_at=coerce_datetime(row.created_at),
                updated_at=coerce_datetime(row.updated_at),
            )
            for row in rows
        ]


class SqlAlchemyConnectedBalancesRepository(ConnectedBalancesRepositoryPort):
    """Connected account balances mirrored by the account aggregator."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        self._db_port = db_port

    def list_connected_balances(
        self,
        owner_id: str,
    ) -> list[ConnectedAccountBalance]:
        with translate_errors("connected_accounts"):
            engine = self._db_port.get_engine()
            with engine.connect() as conn:
                rows = conn.execute(
                    SELECT_CONNECTED_BALANCES_SQL,
                    {"owner_id": owner_id, "active": True},
                ).all()
        return [
            ConnectedAccountBalance(
                account_id=str(row.id),
                owner_id=row.owner_id,
                balance=coerce_decimal(row.balance),
                account_kind=row.account_kind,
                institution=row.institution,
            )
            for row in rows
        ]


class SqlAlchemyTransactionsRepository(TransactionsRepositoryPort):
    """Read-only aggregates over the ``transactions`` ledger table."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        self._db_port = db_port

    def sum_current_month_by_type(
        self,
        owner_id: str,
        as_of: date,
    ) -> TransactionTotals:
        """Return income and expense sums for the calendar month of as_of.

        Args:
            owner_id: Owner of the ledger entries.
            as_of: Any date inside the month to aggregate.

        Returns:
            TransactionTotals: Sums by type; types other than income and
            expense are ignored.
        """
        params = {
            "owner_id": owner_id,
            "start_date": month_start(as_of),
            "end_date": next_month_start(as_of),
        }
        with translate_errors("transactions"):
            engine = self._db_port.get_engine()
            with engine.connect() as conn:
                rows = conn.execute(SUM_TRANSACTIONS_BY_TYPE_SQL, params).all()

        totals = {
            TRANSACTION_INCOME: Decimal("0"),
            TRANSACTION_EXPENSE: Decimal("0"),
        }
        for row in rows:
            kind = normalize_transaction_type(row.type)
            if kind in totals:
                totals[kind] += coerce_decimal(row.total)
        return TransactionTotals(
            income=totals[TRANSACTION_INCOME],
            expense=totals[TRANSACTION_EXPENSE],
        )


__all__ = [
    "SqlAlchemyAssetsRepository",
    "SqlAlchemyLiabilitiesRepository",
    "SqlAlchemyConnectedBalancesRepository",
    "SqlAlchemyTransactionsRepository",
    "SELECT_ACTIVE_ASSETS_SQL",
    "SELECT_ACTIVE_LIABILITIES_SQL",
    "SELECT_CONNECTED_BALANCES_SQL",
    "SUM_TRANSACTIONS_BY_TYPE_SQL",
]
