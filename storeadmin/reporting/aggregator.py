"""Sales aggregation.

A pure reduction over one consistent read of a store's orders, order
lines, products and categories. Nothing here touches the database, so
the dashboard numbers can be tested with plain data.
"""

from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

NEW_CUSTOMER_WINDOW_DAYS = 30
SERIES_DAYS = 7
RECENT_ORDER_COUNT = 3
TOP_PRODUCT_COUNT = 3

WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

_CENT = Decimal("0.01")


# ============================================================================
# Inputs
# ============================================================================


@dataclass(frozen=True)
class OrderRecord:
    """Order fields the aggregator reads."""

    id: str
    user_id: str
    total: Decimal
    status: str
    created_at: datetime


@dataclass(frozen=True)
class ProductRecord:
    """Product with the category it belongs to through its subcategory."""

    id: str
    name: str
    category_id: str


@dataclass(frozen=True)
class CategoryRecord:
    id: str
    name: str


# ============================================================================
# Outputs
# ============================================================================


@dataclass(frozen=True)
class DailySales:
    date: str
    total: Decimal


@dataclass(frozen=True)
class CategorySales:
    category: str
    sales: int


@dataclass(frozen=True)
class RecentOrder:
    id: str
    user_id: str
    total: Decimal
    status: str
    date: str


@dataclass(frozen=True)
class TopProduct:
    name: str
    sold: int


@dataclass(frozen=True)
class SalesSummary:
    """Dashboard figures for one store.

    Attributes:
        total_revenue: Sum of all order totals.
        total_sales: Number of orders.
        new_customers: Distinct customers ordering in the last 30 days.
        avg_order_value: Revenue per order, 0 without orders.
        sales_data: Revenue per day for the last 7 days, oldest first.
        category_sales: Order lines per category, every category listed.
        recent_orders: The newest orders.
        top_products: Products with the most order lines.
    """

    total_revenue: Decimal
    total_sales: int
    new_customers: int
    avg_order_value: Decimal
    sales_data: list[DailySales] = field(default_factory=list)
    category_sales: list[CategorySales] = field(default_factory=list)
    recent_orders: list[RecentOrder] = field(default_factory=list)
    top_products: list[TopProduct] = field(default_factory=list)


# ============================================================================
# Reduction
# ============================================================================


def aggregate_sales(
    orders: Sequence[OrderRecord],
    lines: Iterable[str],
    products: Sequence[ProductRecord],
    categories: Sequence[CategoryRecord],
    now: datetime | None = None,
) -> SalesSummary:
    """Reduce a store's order history into dashboard figures.

    Args:
        orders: The store's orders.
        lines: Product id of every order line for the store's products.
        products: The store's products, in listing order.
        categories: All categories, in display order.
        now: Reference time; defaults to the current UTC time.

    Returns:
        The sales summary.
    """
    now = _as_utc(now or datetime.now(timezone.utc))

    total_revenue = sum((Decimal(o.total) for o in orders), Decimal("0"))
    total_sales = len(orders)
    avg_order_value = (
        (total_revenue / total_sales).quantize(_CENT) if total_sales else Decimal("0")
    )

    window_start = now - timedelta(days=NEW_CUSTOMER_WINDOW_DAYS)
    new_customers = len(
        {o.user_id for o in orders if _as_utc(o.created_at) >= window_start}
    )

    sold = Counter(lines)

    category_of = {p.id: p.category_id for p in products}
    per_category: Counter[str] = Counter()
    for product_id, count in sold.items():
        if product_id in category_of:
            per_category[category_of[product_id]] += count

    # sorted() is stable, so ties keep listing order
    ranked = sorted(products, key=lambda p: sold[p.id], reverse=True)

    newest = sorted(orders, key=lambda o: _as_utc(o.created_at), reverse=True)

    return SalesSummary(
        total_revenue=total_revenue,
        total_sales=total_sales,
        new_customers=new_customers,
        avg_order_value=avg_order_value,
        sales_data=_daily_series(orders, now.date()),
        category_sales=[
            CategorySales(category=c.name, sales=per_category[c.id]) for c in categories
        ],
        recent_orders=[
            RecentOrder(
                id=o.id,
                user_id=o.user_id,
                total=Decimal(o.total),
                status=o.status,
                date=_as_utc(o.created_at).date().isoformat(),
            )
            for o in newest[:RECENT_ORDER_COUNT]
        ],
        top_products=[
            TopProduct(name=p.name, sold=sold[p.id]) for p in ranked[:TOP_PRODUCT_COUNT]
        ],
    )


def _daily_series(orders: Sequence[OrderRecord], today: date) -> list[DailySales]:
    totals: dict[date, Decimal] = {}
    for order in orders:
        day = _as_utc(order.created_at).date()
        totals[day] = totals.get(day, Decimal("0")) + Decimal(order.total)

    series = []
    for offset in range(SERIES_DAYS - 1, -1, -1):
        day = today - timedelta(days=offset)
        series.append(
            DailySales(date=WEEKDAY_NAMES[day.weekday()], total=totals.get(day, Decimal("0")))
        )
    return series


def _as_utc(value: datetime) -> datetime:
    # Some drivers hand back naive datetimes for timezone-aware columns
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
