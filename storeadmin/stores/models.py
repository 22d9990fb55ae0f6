"""SQLAlchemy model for stores (tenants)."""

from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from storeadmin.infrastructure.database import Base


class Store(Base):
    """A tenant storefront.

    Attributes:
        id: Store identifier.
        name: Display name.
        user_id: Identity of the owning user, issued by the identity provider.
        created_at: Creation timestamp.
    """

    __tablename__ = "stores"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid4()))
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    user_id: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Store(id={self.id}, name={self.name})>"
