"""Domain services for net worth aggregates."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from logging import Logger

from networth_engine.domain.constants import (
    ASSET_CATEGORIES,
    CONNECTED_CASH_CATEGORY,
    LIABILITY_CATEGORIES,
)
from networth_engine.domain.models import (
    Asset,
    CategoryBreakdown,
    ConnectedAccountBalance,
    Liability,
    NetWorthSnapshot,
    TransactionTotals,
)
from networth_engine.domain.services.normalization import normalize_category
from networth_engine.domain.services.ratios import safe_percentage
from networth_engine.domain.services.validation import validate_non_negative
from networth_engine.utils.decimal_utils import coerce_decimal, sum_decimals


class _CategoryTotal:
    """Mutable accumulator used while grouping records by category."""

    __slots__ = ("amount", "count", "connected")

    def __init__(self) -> None:
        self.amount = Decimal("0")
        self.count = 0
        self.connected = False


def compute_assets_breakdown(
    assets: Iterable[Asset],
    connected_balances: Iterable[ConnectedAccountBalance],
    *,
    logger: Logger,
) -> tuple[CategoryBreakdown, ...]:
    """Group manual assets by category and fold connected balances into cash.

    Args:
        assets: Active manual assets.
        connected_balances: Balances from linked bank and mobile money
            accounts.
        logger: Logger used for warnings.

    Returns:
        tuple[CategoryBreakdown, ...]: Breakdown sorted by amount, largest
        first.
    """
    totals: dict[str, _CategoryTotal] = {}
    for asset in assets:
        value = coerce_decimal(asset.current_value)
        validate_non_negative("Asset", asset.id, value, logger)
        category = normalize_category(asset.category, ASSET_CATEGORIES, logger)
        entry = totals.setdefault(category, _CategoryTotal())
        entry.amount += value
        entry.count += 1

    connected = list(connected_balances)
    if connected:
        entry = totals.setdefault(CONNECTED_CASH_CATEGORY, _CategoryTotal())
        entry.amount += sum_decimals(item.balance for item in connected)
        entry.count += len(connected)
        entry.connected = True

    return _build_breakdown(totals)


def compute_liabilities_breakdown(
    liabilities: Iterable[Liability],
    *,
    logger: Logger,
) -> tuple[CategoryBreakdown, ...]:
    """Group manual liabilities by category.

    Args:
        liabilities: Active manual liabilities.
        logger: Logger used for warnings.

    Returns:
        tuple[CategoryBreakdown, ...]: Breakdown sorted by amount, largest
        first. Liabilities are never marked as connected.
    """
    totals: dict[str, _CategoryTotal] = {}
    for liability in liabilities:
        balance = coerce_decimal(liability.current_balance)
        validate_non_negative("Liability", liability.id, balance, logger)
        category = normalize_category(
            liability.category,
            LIABILITY_CATEGORIES,
            logger,
        )
        entry = totals.setdefault(category, _CategoryTotal())
        entry.amount += balance
        entry.count += 1
    return _build_breakdown(totals)


def compute_savings_rate(income: Decimal, expenses: Decimal) -> Decimal:
    """Return the share of income left after expenses, in percent.

    Args:
        income: Monthly income.
        expenses: Monthly expenses.

    Returns:
        Decimal: Savings rate, 0 when there is no income.
    """
    return safe_percentage(income - expenses, income)


def compute_monthly_change(
    net_worth: Decimal,
    previous: NetWorthSnapshot | None,
) -> tuple[Decimal, Decimal]:
    """Compare a net worth against the last snapshot of a previous month.

    Args:
        net_worth: Current net worth.
        previous: Latest snapshot before the current month, if any.

    Returns:
        tuple[Decimal, Decimal]: Absolute change and change percentage.
    """
    previous_net_worth = (
        previous.net_worth if previous is not None else Decimal("0")
    )
    change = net_worth - previous_net_worth
    return change, safe_percentage(change, previous_net_worth)


def compute_net_worth_snapshot(
    assets: list[Asset],
    liabilities: list[Liability],
    connected_balances: list[ConnectedAccountBalance],
    transactions: TransactionTotals,
    previous: NetWorthSnapshot | None,
    *,
    as_of_date: date,
    logger: Logger,
) -> NetWorthSnapshot:
    """Combine data source outputs into a net worth snapshot.

    Args:
        assets: Active manual assets.
        liabilities: Active manual liabilities.
        connected_balances: Linked account balances.
        transactions: Current-month income and expense totals.
        previous: Latest snapshot before the current month, if any.
        as_of_date: Date stamped on the snapshot.
        logger: Logger used for warnings.

    Returns:
        NetWorthSnapshot: Totals, breakdowns and monthly metrics.
    """
    total_assets = sum_decimals(
        asset.current_value for asset in assets
    ) + sum_decimals(item.balance for item in connected_balances)
    total_liabilities = sum_decimals(
        liability.current_balance for liability in liabilities
    )
    net_worth = total_assets - total_liabilities

    income = coerce_decimal(transactions.income)
    expenses = coerce_decimal(transactions.expense)
    monthly_change, monthly_change_percentage = compute_monthly_change(
        net_worth,
        previous,
    )

    return NetWorthSnapshot(
        total_assets=total_assets,
        total_liabilities=total_liabilities,
        assets_breakdown=compute_assets_breakdown(
            assets,
            connected_balances,
            logger=logger,
        ),
        liabilities_breakdown=compute_liabilities_breakdown(
            liabilities,
            logger=logger,
        ),
        monthly_income=income,
        monthly_expenses=expenses,
        savings_rate=compute_savings_rate(income, expenses),
        monthly_change=monthly_change,
        monthly_change_percentage=monthly_change_percentage,
        as_of_date=as_of_date,
    )


def _build_breakdown(
    totals: dict[str, _CategoryTotal],
) -> tuple[CategoryBreakdown, ...]:
    grand_total = sum_decimals(entry.amount for entry in totals.values())
    items = [
        CategoryBreakdown(
            category=category,
            amount=entry.amount,
            percentage_of_total=safe_percentage(entry.amount, grand_total),
            item_count=entry.count,
            is_connected=entry.connected,
        )
        for category, entry in totals.items()
    ]
    return tuple(sorted(items, key=lambda item: (-item.amount, item.category)))


__all__ = [
    "compute_assets_breakdown",
    "compute_liabilities_breakdown",
    "compute_savings_rate",
    "compute_monthly_change",
    "compute_net_worth_snapshot",
]
