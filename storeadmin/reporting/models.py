"""SQLAlchemy models for orders.

Orders are written by the storefront checkout, which is outside this
service; here they are only read for reporting.
"""

from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from storeadmin.catalog.models import new_id
from storeadmin.infrastructure.database import Base


class Order(Base):
    """Customer order placed against a store.

    Attributes:
        id: Order identifier.
        store_id: Store the order was placed in.
        user_id: Ordering customer.
        total: Order total.
        status: Order status as recorded by checkout.
        created_at: Placement timestamp.
    """

    __tablename__ = "orders"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    store_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("stores.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    total: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="PENDING")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        index=True,
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Order(id={self.id}, total={self.total}, status={self.status})>"


class OrderProduct(Base):
    """One order line: a product that was part of an order."""

    __tablename__ = "order_products"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    order_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True
    )
    product_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True
    )
