#!/usr/bin/env python3
"""Seed catalog script.

Creates the tables (unless told not to) and inserts the default
category, brand, subcategory, option and option-value taxonomy.
Seeding is idempotent: rows that already exist are left alone.

Usage:
    python scripts/seed_catalog.py
    python scripts/seed_catalog.py --skip-create-tables
    python scripts/seed_catalog.py --demo-store-owner user-1
"""

import argparse
import asyncio

from storeadmin.catalog.service import CatalogService
from storeadmin.infrastructure.config import settings
from storeadmin.infrastructure.database import async_session_factory, create_tables, engine
from storeadmin.infrastructure.logging import configure_logging
from storeadmin.stores.service import StoreService

DEMO_STORE_NAME = "Demo Store"


async def seed() -> dict[str, int]:
    """Seed the default taxonomy.

    Returns:
        Number of rows created per kind.
    """
    async with async_session_factory() as session:
        service = CatalogService(session)
        return await service.seed_catalog()


async def seed_demo_store(owner_id: str) -> tuple[str, bool]:
    """Create the demo store for an owner unless it already exists.

    Args:
        owner_id: Caller id that will own the store.

    Returns:
        Store id and whether it was created.
    """
    async with async_session_factory() as session:
        service = StoreService(session)
        for store in await service.list_stores(owner_id):
            if store.name == DEMO_STORE_NAME:
                return store.id, False

        store = await service.create_store(owner_id, DEMO_STORE_NAME)
        return store.id, True


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Seed the product catalog taxonomy",
    )
    parser.add_argument(
        "--skip-create-tables",
        action="store_true",
        help="Don't create tables first (use when migrations manage the schema)",
    )
    parser.add_argument(
        "--demo-store-owner",
        metavar="USER_ID",
        help="Also create a demo store owned by this caller id",
    )

    args = parser.parse_args()
    configure_logging(settings)

    print("=" * 60)
    print("Storefront Admin Catalog Seeder")
    print("=" * 60)

    if not args.skip_create_tables:
        print("Creating database tables...")
        await create_tables()
        print("Tables ready.")
        print()

    try:
        result = await seed()
        for kind, count in result.items():
            print(f"  Created {count} {kind.replace('_', ' ')}")

        if args.demo_store_owner:
            store_id, created = await seed_demo_store(args.demo_store_owner)
            state = "Created" if created else "Kept existing"
            print(f"  {state} demo store {store_id} for {args.demo_store_owner}")
    finally:
        await engine.dispose()

    print("=" * 60)
    print("Seeding complete!")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
