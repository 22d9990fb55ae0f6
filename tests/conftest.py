"""Shared fixtures.

Every test gets a fresh in-memory SQLite database holding a small
catalog:

- "Men's Fashion" > "T-Shirts" with options Color (Red, Blue) and
  Size (S, M); brand Nike is linked to Men's Fashion.
- "Electronics" > "Laptops" with option Material (Aluminium); brand
  Dell is linked to Electronics.

Store "store-1" is owned by "user-1", store "store-2" by "user-2".
"""

from collections.abc import AsyncGenerator, Callable
from decimal import Decimal
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event, insert
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import storeadmin.products.models  # noqa: F401
import storeadmin.reporting.models  # noqa: F401
from storeadmin.catalog.models import (
    Brand,
    Category,
    Option,
    OptionValue,
    Subcategory,
    brand_categories,
)
from storeadmin.catalog.service import catalog_cache
from storeadmin.domain.value_objects import OptionSelection, ProductDraft, VariantDraft
from storeadmin.infrastructure.database import Base, get_session
from storeadmin.main import app
from storeadmin.stores.models import Store

OWNER = "user-1"
OTHER_USER = "user-2"


# ============================================================================
# Database Fixtures
# ============================================================================


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create an in-memory database with all tables."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine.sync_engine, "connect")
    def enable_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def seeded(session: AsyncSession) -> AsyncSession:
    """Insert the test catalog and stores."""
    session.add_all(
        [
            Category(id="cat-mens", name="Men's Fashion", slug="mens-fashion"),
            Category(id="cat-electronics", name="Electronics", slug="electronics"),
            Brand(id="brand-nike", name="Nike", slug="nike"),
            Brand(id="brand-dell", name="Dell", slug="dell"),
            Store(id="store-1", name="First Store", user_id=OWNER),
            Store(id="store-2", name="Second Store", user_id=OTHER_USER),
        ]
    )
    await session.flush()

    await session.execute(
        insert(brand_categories),
        [
            {"brand_id": "brand-nike", "category_id": "cat-mens"},
            {"brand_id": "brand-dell", "category_id": "cat-electronics"},
        ],
    )

    session.add_all(
        [
            Subcategory(id="sub-tshirts", name="T-Shirts", category_id="cat-mens"),
            Subcategory(id="sub-laptops", name="Laptops", category_id="cat-electronics"),
        ]
    )
    await session.flush()

    session.add_all(
        [
            Option(id="opt-color", name="Color", subcategory_id="sub-tshirts"),
            Option(id="opt-size", name="Size", subcategory_id="sub-tshirts"),
            Option(id="opt-material", name="Material", subcategory_id="sub-laptops"),
        ]
    )
    await session.flush()

    session.add_all(
        [
            OptionValue(id="val-red", value="Red", option_id="opt-color"),
            OptionValue(id="val-blue", value="Blue", option_id="opt-color"),
            OptionValue(id="val-s", value="S", option_id="opt-size"),
            OptionValue(id="val-m", value="M", option_id="opt-size"),
            OptionValue(id="val-aluminium", value="Aluminium", option_id="opt-material"),
        ]
    )
    await session.commit()
    return session


@pytest.fixture(autouse=True)
def clear_catalog_cache() -> None:
    """Start every test with an empty catalog cache."""
    catalog_cache.clear()


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def make_draft() -> Callable[..., ProductDraft]:
    """Factory for valid T-Shirt product drafts."""

    def factory(**overrides: Any) -> ProductDraft:
        fields: dict[str, Any] = {
            "name": "Classic Tee",
            "description": "A soft cotton tee",
            "price": Decimal("19.99"),
            "subcategory_id": "sub-tshirts",
            "brand_id": "brand-nike",
            "images": ("https://img.example.com/tee-front.jpg",),
            "variants": (
                VariantDraft(
                    price=Decimal("10"),
                    stock=5,
                    selections=(
                        OptionSelection("opt-color", "val-red"),
                        OptionSelection("opt-size", "val-s"),
                    ),
                ),
                VariantDraft(
                    price=Decimal("10"),
                    stock=3,
                    selections=(OptionSelection("opt-color", "val-blue"),),
                ),
            ),
        }
        fields.update(overrides)
        return ProductDraft(**fields)

    return factory


@pytest.fixture
def product_payload() -> dict[str, Any]:
    """CreateProduct request body in the camelCase shape clients send."""
    return {
        "name": "Classic Tee",
        "description": "A soft cotton tee",
        "price": 19.99,
        "categoryId": "cat-mens",
        "subcategoryId": "sub-tshirts",
        "brandId": "brand-nike",
        "isFeatured": False,
        "options": ["opt-color", "opt-size"],
        "images": [{"url": "https://img.example.com/tee-front.jpg"}],
        "variants": [
            {"price": 10, "stock": 5, "opt-color": "val-red", "opt-size": "val-s"},
            {"price": 10, "stock": 3, "opt-color": "val-blue"},
        ],
    }


# ============================================================================
# Client Fixtures
# ============================================================================


@pytest_asyncio.fixture
async def client(seeded: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create an HTTP client for the app, authenticated as the owner of store-1."""

    async def override_session() -> AsyncGenerator[AsyncSession, None]:
        yield seeded

    app.dependency_overrides[get_session] = override_session
    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        headers={"X-User-ID": OWNER},
    ) as client:
        yield client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def anonymous_client(seeded: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create an HTTP client without a caller identity."""

    async def override_session() -> AsyncGenerator[AsyncSession, None]:
        yield seeded

    app.dependency_overrides[get_session] = override_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
