"""Dashboard service: loads a store's sales data and reduces it."""

from datetime import datetime

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storeadmin.catalog.models import Category, Subcategory
from storeadmin.products.models import Product
from storeadmin.reporting.aggregator import (
    CategoryRecord,
    OrderRecord,
    ProductRecord,
    SalesSummary,
    aggregate_sales,
)
from storeadmin.reporting.models import Order, OrderProduct
from storeadmin.stores.repository import StoreRepository

logger = structlog.get_logger()


class DashboardService:
    """Service for store sales dashboards.

    Example usage:
        async with async_session_factory() as session:
            summary = await DashboardService(session).get_dashboard(store_id, user_id)
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.stores = StoreRepository(session)

    async def get_dashboard(
        self,
        store_id: str,
        caller_id: str,
        now: datetime | None = None,
    ) -> SalesSummary:
        """Build the sales summary for a store the caller owns.

        Raises:
            NotFoundError: If the store does not exist.
            OwnershipError: If the caller does not own the store.
        """
        await self.stores.get_owned(store_id, caller_id)

        orders = await self._load_orders(store_id)
        products = await self._load_products(store_id)
        lines = await self._load_lines(store_id)
        categories = await self._load_categories()

        summary = aggregate_sales(orders, lines, products, categories, now=now)
        logger.info(
            "Dashboard computed",
            store_id=store_id,
            orders=summary.total_sales,
            products=len(products),
        )
        return summary

    async def _load_orders(self, store_id: str) -> list[OrderRecord]:
        result = await self.session.execute(
            select(Order).where(Order.store_id == store_id)
        )
        return [
            OrderRecord(
                id=o.id,
                user_id=o.user_id,
                total=o.total,
                status=o.status,
                created_at=o.created_at,
            )
            for o in result.scalars().all()
        ]

    async def _load_products(self, store_id: str) -> list[ProductRecord]:
        query = (
            select(Product.id, Product.name, Subcategory.category_id)
            .join(Subcategory, Product.subcategory_id == Subcategory.id)
            .where(Product.store_id == store_id)
            .order_by(Product.created_at, Product.id)
        )
        result = await self.session.execute(query)
        return [
            ProductRecord(id=row.id, name=row.name, category_id=row.category_id)
            for row in result.all()
        ]

    async def _load_lines(self, store_id: str) -> list[str]:
        query = (
            select(OrderProduct.product_id)
            .join(Product, OrderProduct.product_id == Product.id)
            .where(Product.store_id == store_id)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def _load_categories(self) -> list[CategoryRecord]:
        result = await self.session.execute(select(Category).order_by(Category.name))
        return [CategoryRecord(id=c.id, name=c.name) for c in result.scalars().all()]
