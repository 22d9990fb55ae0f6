"""Tests for the sales aggregator."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from storeadmin.reporting.aggregator import (
    CategoryRecord,
    CategorySales,
    DailySales,
    OrderRecord,
    ProductRecord,
    RecentOrder,
    TopProduct,
    aggregate_sales,
)

# A Sunday
NOW = datetime(2026, 3, 15, 12, 0, tzinfo=timezone.utc)


def order(order_id: str, user_id: str, total: str, created_at: datetime) -> OrderRecord:
    return OrderRecord(
        id=order_id,
        user_id=user_id,
        total=Decimal(total),
        status="DELIVERED",
        created_at=created_at,
    )


@pytest.fixture
def orders() -> list[OrderRecord]:
    """Four orders: three this week, one from January."""
    return [
        order("o3", "user-a", "25.50", datetime(2026, 3, 9, 8, 0, tzinfo=timezone.utc)),
        order("o1", "user-a", "100.00", datetime(2026, 3, 15, 9, 0, tzinfo=timezone.utc)),
        order("o4", "user-c", "10.50", datetime(2026, 1, 1, 10, 0, tzinfo=timezone.utc)),
        order("o2", "user-b", "50.00", datetime(2026, 3, 14, 18, 30, tzinfo=timezone.utc)),
    ]


@pytest.fixture
def products() -> list[ProductRecord]:
    return [
        ProductRecord("p1", "Tee", "cat-mens"),
        ProductRecord("p2", "Hoodie", "cat-mens"),
        ProductRecord("p3", "Laptop", "cat-electronics"),
        ProductRecord("p4", "Cap", "cat-mens"),
    ]


@pytest.fixture
def categories() -> list[CategoryRecord]:
    return [
        CategoryRecord("cat-electronics", "Electronics"),
        CategoryRecord("cat-mens", "Men's Fashion"),
        CategoryRecord("cat-pets", "Pet Supplies"),
    ]


@pytest.fixture
def lines() -> list[str]:
    return ["p2", "p1", "p2", "p3", "p2", "p-deleted"]


class TestAggregateSales:
    """Tests for aggregate_sales."""

    def test_totals(self, orders, lines, products, categories) -> None:
        """Should sum revenue and average it over all orders."""
        summary = aggregate_sales(orders, lines, products, categories, now=NOW)

        assert summary.total_revenue == Decimal("186.00")
        assert summary.total_sales == 4
        assert summary.avg_order_value == Decimal("46.50")

    def test_new_customers_in_last_30_days(self, orders, lines, products, categories) -> None:
        """Should count distinct customers ordering in the window."""
        summary = aggregate_sales(orders, lines, products, categories, now=NOW)

        assert summary.new_customers == 2

    def test_daily_series(self, orders, lines, products, categories) -> None:
        """Should give seven weekdays, oldest first, ending today."""
        summary = aggregate_sales(orders, lines, products, categories, now=NOW)

        assert summary.sales_data == [
            DailySales("Monday", Decimal("25.50")),
            DailySales("Tuesday", Decimal("0")),
            DailySales("Wednesday", Decimal("0")),
            DailySales("Thursday", Decimal("0")),
            DailySales("Friday", Decimal("0")),
            DailySales("Saturday", Decimal("50.00")),
            DailySales("Sunday", Decimal("100.00")),
        ]

    def test_category_sales_list_every_category(
        self, orders, lines, products, categories
    ) -> None:
        """Should count order lines per category, including empty ones."""
        summary = aggregate_sales(orders, lines, products, categories, now=NOW)

        assert summary.category_sales == [
            CategorySales("Electronics", 1),
            CategorySales("Men's Fashion", 4),
            CategorySales("Pet Supplies", 0),
        ]

    def test_recent_orders(self, orders, lines, products, categories) -> None:
        """Should list the three newest orders, newest first."""
        summary = aggregate_sales(orders, lines, products, categories, now=NOW)

        assert summary.recent_orders == [
            RecentOrder("o1", "user-a", Decimal("100.00"), "DELIVERED", "2026-03-15"),
            RecentOrder("o2", "user-b", Decimal("50.00"), "DELIVERED", "2026-03-14"),
            RecentOrder("o3", "user-a", Decimal("25.50"), "DELIVERED", "2026-03-09"),
        ]

    def test_top_products_ties_keep_listing_order(
        self, orders, lines, products, categories
    ) -> None:
        """Should rank by units sold, breaking ties by listing order."""
        summary = aggregate_sales(orders, lines, products, categories, now=NOW)

        assert summary.top_products == [
            TopProduct("Hoodie", 3),
            TopProduct("Tee", 1),
            TopProduct("Laptop", 1),
        ]

    def test_no_orders(self, products, categories) -> None:
        """Should report zeros instead of failing on an empty store."""
        summary = aggregate_sales([], [], products, categories, now=NOW)

        assert summary.total_revenue == Decimal("0")
        assert summary.total_sales == 0
        assert summary.avg_order_value == Decimal("0")
        assert summary.new_customers == 0
        assert [d.total for d in summary.sales_data] == [Decimal("0")] * 7
        assert [c.sales for c in summary.category_sales] == [0, 0, 0]
        assert summary.recent_orders == []

    def test_naive_timestamps_are_utc(self, products, categories) -> None:
        """Should read naive timestamps as UTC."""
        naive = [order("o1", "user-a", "5", datetime(2026, 3, 15, 1, 0))]

        summary = aggregate_sales(naive, [], products, categories, now=NOW)

        assert summary.sales_data[-1] == DailySales("Sunday", Decimal("5"))
        assert summary.new_customers == 1
