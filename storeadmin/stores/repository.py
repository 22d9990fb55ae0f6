"""Store repository and ownership check.

Writes only flush; the store service commits.
"""

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storeadmin.domain.exceptions import NotFoundError, OwnershipError
from storeadmin.stores.models import Store


class StoreRepository:
    """Repository for Store operations."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, store_id: str) -> Store | None:
        """Get store by ID.

        Args:
            store_id: Store ID.

        Returns:
            Store if found, None otherwise.
        """
        return await self.session.get(Store, store_id)

    async def get_owned(self, store_id: str, caller_id: str) -> Store:
        """Get a store the caller owns.

        Raises:
            NotFoundError: If the store does not exist.
            OwnershipError: If the caller is not the owner.
        """
        store = await self.get(store_id)
        if store is None:
            raise NotFoundError("Store", store_id)
        ensure_store_owner(store, caller_id)
        return store

    async def list_by_owner(self, user_id: str) -> Sequence[Store]:
        """Get a user's stores, oldest first."""
        query = select(Store).where(Store.user_id == user_id).order_by(Store.created_at)
        result = await self.session.execute(query)
        return result.scalars().all()

    async def add(self, store: Store) -> Store:
        """Insert a store row."""
        self.session.add(store)
        await self.session.flush()
        return store

    async def delete(self, store: Store) -> None:
        """Delete a store row; its orders go with it."""
        await self.session.delete(store)
        await self.session.flush()


def ensure_store_owner(store: Store, caller_id: str) -> None:
    """Raise OwnershipError unless the caller owns the store."""
    if not caller_id or store.user_id != caller_id:
        raise OwnershipError(store.id)
