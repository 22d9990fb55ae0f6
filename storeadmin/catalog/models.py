"""SQLAlchemy models for the reference catalog.

Defines the Category > Subcategory > Option > OptionValue hierarchy and
Brands, which are linked many-to-many to Categories.
"""

from uuid import uuid4

from sqlalchemy import Column, ForeignKey, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from storeadmin.infrastructure.database import Base


def new_id() -> str:
    """Generate an opaque identifier."""
    return str(uuid4())


brand_categories = Table(
    "brand_categories",
    Base.metadata,
    Column(
        "brand_id",
        String(36),
        ForeignKey("brands.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "category_id",
        String(36),
        ForeignKey("categories.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class Category(Base):
    """Top-level catalog category (e.g., "Men's Fashion").

    Attributes:
        id: Category identifier.
        name: Display name.
        slug: Unique slug derived from the name.
    """

    __tablename__ = "categories"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    slug: Mapped[str] = mapped_column(String(200), nullable=False, unique=True)

    subcategories: Mapped[list["Subcategory"]] = relationship(
        "Subcategory",
        back_populates="category",
        order_by="Subcategory.name",
    )
    brands: Mapped[list["Brand"]] = relationship(
        "Brand",
        secondary=brand_categories,
        back_populates="categories",
        order_by="Brand.name",
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Category(id={self.id}, name={self.name})>"


class Subcategory(Base):
    """Subcategory owned by exactly one category (e.g., "Tops").

    A product references one subcategory, which fixes its category and
    the options its variants may use.
    """

    __tablename__ = "subcategories"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    category_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("categories.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    category: Mapped["Category"] = relationship("Category", back_populates="subcategories")

    def __repr__(self) -> str:
        """String representation."""
        return f"<Subcategory(id={self.id}, name={self.name})>"


class Option(Base):
    """An axis of variation scoped to one subcategory (e.g., "Color").

    The same name may recur under other subcategories as distinct rows.
    """

    __tablename__ = "options"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    subcategory_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("subcategories.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Option(id={self.id}, name={self.name})>"


class OptionValue(Base):
    """One concrete value of an option (e.g., "Red")."""

    __tablename__ = "option_values"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    value: Mapped[str] = mapped_column(String(200), nullable=False)
    option_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("options.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<OptionValue(id={self.id}, value={self.value})>"


class Brand(Base):
    """A brand, offerable only for the categories it is linked to."""

    __tablename__ = "brands"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    slug: Mapped[str] = mapped_column(String(200), nullable=False, unique=True)

    categories: Mapped[list["Category"]] = relationship(
        "Category",
        secondary=brand_categories,
        back_populates="brands",
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Brand(id={self.id}, name={self.name})>"
