"""Store application service.

Creates, renames, lists and deletes the caller's stores. Deleting a
store removes its products (with every child row) and its orders in
one transaction.
"""

from collections.abc import Sequence

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from storeadmin.domain.exceptions import PersistenceError, ValidationError
from storeadmin.infrastructure.database import transaction
from storeadmin.products.repository import ProductRepository
from storeadmin.stores.models import Store
from storeadmin.stores.repository import StoreRepository

logger = structlog.get_logger()


class StoreService:
    """Service for store management.

    Example usage:
        async with async_session_factory() as session:
            service = StoreService(session)
            store = await service.create_store(user_id, "Main Street Shop")
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.stores = StoreRepository(session)
        self.products = ProductRepository(session)

    async def list_stores(self, caller_id: str) -> Sequence[Store]:
        """List the stores the caller owns."""
        return await self.stores.list_by_owner(caller_id)

    async def create_store(self, caller_id: str, name: str) -> Store:
        """Create a store owned by the caller.

        Raises:
            ValidationError: If the name is blank.
            PersistenceError: If the transaction failed; nothing was saved.
        """
        self._require_name(name)

        store = Store(name=name, user_id=caller_id)
        async with transaction(self.session, PersistenceError, caller_id=caller_id):
            await self.stores.add(store)

        logger.info("Store created", store_id=store.id, caller_id=caller_id)
        return store

    async def rename_store(self, store_id: str, caller_id: str, name: str) -> Store:
        """Rename a store the caller owns.

        Raises:
            NotFoundError: If the store does not exist.
            OwnershipError: If the caller does not own the store.
            ValidationError: If the name is blank.
        """
        store = await self.stores.get_owned(store_id, caller_id)
        self._require_name(name)

        async with transaction(self.session, PersistenceError, store_id=store_id):
            store.name = name
            await self.session.flush()

        logger.info("Store renamed", store_id=store_id)
        return store

    async def delete_store(self, store_id: str, caller_id: str) -> None:
        """Delete a store the caller owns, with its products and orders.

        Raises:
            NotFoundError: If the store does not exist.
            OwnershipError: If the caller does not own the store.
            PersistenceError: If the transaction failed; nothing changed.
        """
        store = await self.stores.get_owned(store_id, caller_id)

        product_ids = await self.products.list_ids_by_store(store_id)
        async with transaction(self.session, PersistenceError, store_id=store_id):
            for product_id in product_ids:
                await self.products.delete(product_id)
            await self.stores.delete(store)

        logger.info("Store deleted", store_id=store_id, product_count=len(product_ids))

    @staticmethod
    def _require_name(name: str | None) -> None:
        if not name or not name.strip():
            raise ValidationError("name", "Name is required")
