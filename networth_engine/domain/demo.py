"""Demonstration snapshot returned when live data cannot be aggregated.

The aggregator substitutes this constant when the owner is unauthenticated
or one of the live-data reads fails, so UI callers always receive a
well-formed snapshot. ``is_demo`` lets callers and the snapshot writer tell
it apart from real data.
"""

from datetime import date
from decimal import Decimal

from networth_engine.domain.models import CategoryBreakdown, NetWorthSnapshot


DEMO_NET_WORTH_SNAPSHOT = NetWorthSnapshot(
    total_assets=Decimal("500000"),
    total_liabilities=Decimal("200000"),
    assets_breakdown=(
        CategoryBreakdown(
            category="property",
            amount=Decimal("300000"),
            percentage_of_total=Decimal("60"),
            item_count=1,
        ),
        CategoryBreakdown(
            category="investments",
            amount=Decimal("125000"),
            percentage_of_total=Decimal("25"),
            item_count=2,
        ),
        CategoryBreakdown(
            category="cash",
            amount=Decimal("75000"),
            percentage_of_total=Decimal("15"),
            item_count=2,
            is_connected=True,
        ),
    ),
    liabilities_breakdown=(
        CategoryBreakdown(
            category="mortgages",
            amount=Decimal("160000"),
            percentage_of_total=Decimal("80"),
            item_count=1,
        ),
        CategoryBreakdown(
            category="credit_cards",
            amount=Decimal("30000"),
            percentage_of_total=Decimal("15"),
            item_count=2,
        ),
        CategoryBreakdown(
            category="loans",
            amount=Decimal("10000"),
            percentage_of_total=Decimal("5"),
            item_count=1,
        ),
    ),
    monthly_income=Decimal("10000"),
    monthly_expenses=Decimal("6000"),
    savings_rate=Decimal("40"),
    monthly_change=Decimal("50000"),
    monthly_change_percentage=Decimal("20"),
    as_of_date=date(2024, 1, 1),
    is_demo=True,
)


__all__ = ["DEMO_NET_WORTH_SNAPSHOT"]
