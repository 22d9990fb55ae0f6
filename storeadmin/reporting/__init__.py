"""Reporting: orders and the store sales dashboard."""

from storeadmin.reporting.aggregator import (
    CategoryRecord,
    CategorySales,
    DailySales,
    OrderRecord,
    ProductRecord,
    RecentOrder,
    SalesSummary,
    TopProduct,
    aggregate_sales,
)
from storeadmin.reporting.models import Order, OrderProduct
from storeadmin.reporting.service import DashboardService

__all__ = [
    "CategoryRecord",
    "CategorySales",
    "DailySales",
    "DashboardService",
    "Order",
    "OrderProduct",
    "OrderRecord",
    "ProductRecord",
    "RecentOrder",
    "SalesSummary",
    "TopProduct",
    "aggregate_sales",
]
