"""API layer module.

Contains FastAPI routers, request/response schemas and middleware.
"""

from storeadmin.api.catalog import router as catalog_router
from storeadmin.api.dashboard import router as dashboard_router
from storeadmin.api.health import router as health_router
from storeadmin.api.products import router as products_router
from storeadmin.api.stores import router as stores_router

__all__ = [
    "catalog_router",
    "dashboard_router",
    "health_router",
    "products_router",
    "stores_router",
]
