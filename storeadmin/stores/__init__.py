"""Stores: tenant records and the caller-owns-store check."""

from storeadmin.stores.models import Store
from storeadmin.stores.repository import StoreRepository, ensure_store_owner

__all__ = ["Store", "StoreRepository", "ensure_store_owner"]
