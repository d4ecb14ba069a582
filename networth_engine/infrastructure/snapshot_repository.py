"""SQLAlchemy-backed repository for the net worth snapshot history."""

from datetime import date, datetime, timezone
from decimal import Decimal
import json
import uuid

from sqlalchemy import Date, DateTime, bindparam, text

from networth_engine.application.ports.database import DatabaseEnginePort
from networth_engine.application.ports.snapshot_repository import (
    SnapshotHistoryPort,
)
from networth_engine.domain.models import (
    CategoryBreakdown,
    HistoricalPoint,
    NetWorthSnapshot,
)
from networth_engine.infrastructure.sql_utils import translate_errors
from networth_engine.utils.date_utils import coerce_date, next_month_start
from networth_engine.utils.decimal_utils import coerce_decimal


SNAPSHOT_COLUMNS = (
    "id",
    "owner_id",
    "snapshot_date",
    "total_assets",
    "total_liabilities",
    "net_worth",
    "monthly_income",
    "monthly_expenses",
    "savings_rate",
    "monthly_change",
    "monthly_change_percentage",
    "assets_breakdown",
    "liabilities_breakdown",
    "created_at",
)

CREATE_SNAPSHOTS_SQL = """
CREATE TABLE IF NOT EXISTS net_worth_snapshots (
    id TEXT PRIMARY KEY,
    owner_id TEXT NOT NULL,
    snapshot_date DATE NOT NULL,
    total_assets NUMERIC NOT NULL,
    total_liabilities NUMERIC NOT NULL,
    net_worth NUMERIC NOT NULL,
    monthly_income NUMERIC NOT NULL DEFAULT 0,
    monthly_expenses NUMERIC NOT NULL DEFAULT 0,
    savings_rate NUMERIC NOT NULL DEFAULT 0,
    monthly_change NUMERIC NOT NULL DEFAULT 0,
    monthly_change_percentage NUMERIC NOT NULL DEFAULT 0,
    assets_breakdown TEXT,
    liabilities_breakdown TEXT,
    created_at TIMESTAMP NOT NULL
)
"""

CREATE_SNAPSHOTS_INDEX_SQL = """
CREATE INDEX IF NOT EXISTS ix_net_worth_snapshots_owner_date
ON net_worth_snapshots (owner_id, snapshot_date)
"""

INSERT_SNAPSHOT_SQL = text(
    f"""
    INSERT INTO net_worth_snapshots ({", ".join(SNAPSHOT_COLUMNS)})
    VALUES ({", ".join(f":{column}" for column in SNAPSHOT_COLUMNS)})
    """
).bindparams(
    bindparam("snapshot_date", type_=Date),
    bindparam("created_at", type_=DateTime),
)

SELECT_LATEST_BEFORE_SQL = text(
    f"""
    SELECT {", ".join(SNAPSHOT_COLUMNS)}
    FROM net_worth_snapshots
    WHERE owner_id = :owner_id AND snapshot_date < :before
    ORDER BY snapshot_date DESC, created_at DESC
    LIMIT 1
    """
).bindparams(bindparam("before", type_=Date))

SELECT_ACTIVE_OWNERS_SQL = text(
    """
    SELECT owner_id FROM assets WHERE is_active = :active
    UNION
    SELECT owner_id FROM liabilities WHERE is_active = :active
    ORDER BY owner_id
    """
)


class SqlAlchemySnapshotHistoryRepository(SnapshotHistoryPort):
    """Append-only snapshot history stored in ``net_worth_snapshots``."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port

    def prepare_storage(self) -> None:
        """Ensure the snapshot table and its lookup index exist."""
        with translate_errors("net_worth_snapshots"):
            engine = self._db_port.get_engine()
            with engine.begin() as conn:
                conn.exec_driver_sql(CREATE_SNAPSHOTS_SQL)
                conn.exec_driver_sql(CREATE_SNAPSHOTS_INDEX_SQL)

    def get_latest_snapshot_before(
        self,
        owner_id: str,
        before: date,
    ) -> NetWorthSnapshot | None:
        with translate_errors("net_worth_snapshots"):
            engine = self._db_port.get_engine()
            with engine.connect() as conn:
                row = conn.execute(
                    SELECT_LATEST_BEFORE_SQL,
                    {"owner_id": owner_id, "before": before},
                ).first()
        if row is None:
            return None
        return self._to_snapshot(row)

    def insert_snapshot(
        self,
        owner_id: str,
        snapshot: NetWorthSnapshot,
    ) -> None:
        """Append a snapshot; net_worth is written from the live totals.

        Args:
            owner_id: Owner of the history.
            snapshot: Snapshot to persist.
        """
        payload = {
            "id": str(uuid.uuid4()),
            "owner_id": owner_id,
            "snapshot_date": snapshot.as_of_date,
            "total_assets": str(snapshot.total_assets),
            "total_liabilities": str(snapshot.total_liabilities),
            "net_worth": str(snapshot.net_worth),
            "monthly_income": str(snapshot.monthly_income),
            "monthly_expenses": str(snapshot.monthly_expenses),
            "savings_rate": str(snapshot.savings_rate),
            "monthly_change": str(snapshot.monthly_change),
            "monthly_change_percentage": str(
                snapshot.monthly_change_percentage
            ),
            "assets_breakdown": _dump_breakdown(snapshot.assets_breakdown),
            "liabilities_breakdown": _dump_breakdown(
                snapshot.liabilities_breakdown
            ),
            "created_at": datetime.now(timezone.utc).replace(tzinfo=None),
        }
        with translate_errors("net_worth_snapshots"):
            engine = self._db_port.get_engine()
            with engine.begin() as conn:
                conn.execute(INSERT_SNAPSHOT_SQL, payload)

    def list_snapshots_between(
        self,
        owner_id: str,
        start_date: date | None,
        end_date: date | None,
    ) -> list[HistoricalPoint]:
        query, params = self._build_history_query(
            owner_id,
            start_date,
            end_date,
        )
        with translate_errors("net_worth_snapshots"):
            engine = self._db_port.get_engine()
            with engine.connect() as conn:
                rows = conn.execute(query, params).all()
        return [
            HistoricalPoint(
                date=coerce_date(row.snapshot_date),
                net_worth=coerce_decimal(row.net_worth),
                total_assets=coerce_decimal(row.total_assets),
                total_liabilities=coerce_decimal(row.total_liabilities),
            )
            for row in rows
        ]

    def has_snapshot_in_month(self, owner_id: str, month_start: date) -> bool:
        query = text(
            """
            SELECT id
            FROM net_worth_snapshots
            WHERE owner_id = :owner_id
              AND snapshot_date >= :start_date
              AND snapshot_date < :end_date
            LIMIT 1
            """
        ).bindparams(
            bindparam("start_date", type_=Date),
            bindparam("end_date", type_=Date),
        )
        params = {
            "owner_id": owner_id,
            "start_date": month_start,
            "end_date": next_month_start(month_start),
        }
        with translate_errors("net_worth_snapshots"):
            engine = self._db_port.get_engine()
            with engine.connect() as conn:
                row = conn.execute(query, params).first()
        return row is not None

    def list_active_owner_ids(self) -> list[str]:
        with translate_errors("owners"):
            engine = self._db_port.get_engine()
            with engine.connect() as conn:
                rows = conn.execute(
                    SELECT_ACTIVE_OWNERS_SQL,
                    {"active": True},
                ).all()
        return [row.owner_id for row in rows]

    @staticmethod
    def _build_history_query(
        owner_id: str,
        start_date: date | None,
        end_date: date | None,
    ):
        base_sql = """
        SELECT snapshot_date, net_worth, total_assets, total_liabilities
        FROM net_worth_snapshots
        WHERE owner_id = :owner_id
        """
        params: dict[str, object] = {"owner_id": owner_id}
        binds = []
        if start_date:
            base_sql += " AND snapshot_date >= :start_date"
            params["start_date"] = start_date
            binds.append(bindparam("start_date", type_=Date))
        if end_date:
            base_sql += " AND snapshot_date <= :end_date"
            params["end_date"] = end_date
            binds.append(bindparam("end_date", type_=Date))
        base_sql += " ORDER BY snapshot_date ASC, created_at ASC"
        return text(base_sql).bindparams(*binds), params

    @staticmethod
    def _to_snapshot(row) -> NetWorthSnapshot:
        return NetWorthSnapshot(
            total_assets=coerce_decimal(row.total_assets),
            total_liabilities=coerce_decimal(row.total_liabilities),
            assets_breakdown=_load_breakdown(row.assets_breakdown),
            liabilities_breakdown=_load_breakdown(row.liabilities_breakdown),
            monthly_income=coerce_decimal(row.monthly_income),
            monthly_expenses=coerce_decimal(row.monthly_expenses),
            savings_rate=coerce_decimal(row.savings_rate),
            monthly_change=coerce_decimal(row.monthly_change),
            monthly_change_percentage=coerce_decimal(
                row.monthly_change_percentage
            ),
            as_of_date=coerce_date(row.snapshot_date),
        )


def _dump_breakdown(items: tuple[CategoryBreakdown, ...]) -> str:
    return json.dumps(
        [
            {
                "category": item.category,
                "amount": str(item.amount),
                "percentage_of_total": str(item.percentage_of_total),
                "item_count": item.item_count,
                "is_connected": item.is_connected,
            }
            for item in items
        ]
    )


def _load_breakdown(raw: str | None) -> tuple[CategoryBreakdown, ...]:
    if not raw:
        return ()
    return tuple(
        CategoryBreakdown(
            category=item["category"],
            amount=Decimal(str(item["amount"])),
            percentage_of_total=Decimal(str(item["percentage_of_total"])),
            item_count=int(item.get("item_count", 0)),
            is_connected=bool(item.get("is_connected", False)),
        )
        for item in json.loads(raw)
    )


__all__ = [
    "SqlAlchemySnapshotHistoryRepository",
    "SNAPSHOT_COLUMNS",
    "CREATE_SNAPSHOTS_SQL",
    "CREATE_SNAPSHOTS_INDEX_SQL",
    "INSERT_SNAPSHOT_SQL",
]
