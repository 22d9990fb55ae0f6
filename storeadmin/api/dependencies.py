"""FastAPI dependencies shared by the routers."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from storeadmin.catalog.service import CatalogService
from storeadmin.infrastructure.database import get_session
from storeadmin.products.service import ProductService
from storeadmin.reporting.service import DashboardService
from storeadmin.stores.service import StoreService

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_caller_id(request: Request) -> str:
    """Get the caller id attached by CallerIdentityMiddleware."""
    caller_id = getattr(request.state, "caller_id", None)
    if not caller_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={
                "error_code": "UNAUTHENTICATED",
                "message": "Missing caller identity",
            },
        )
    return caller_id


def get_product_service(session: SessionDep) -> ProductService:
    """Get product service bound to the request session."""
    return ProductService(session)


def get_store_service(session: SessionDep) -> StoreService:
    """Get store service bound to the request session."""
    return StoreService(session)


def get_catalog_service(session: SessionDep) -> CatalogService:
    """Get catalog service bound to the request session."""
    return CatalogService(session)


def get_dashboard_service(session: SessionDep) -> DashboardService:
    """Get dashboard service bound to the request session."""
    return DashboardService(session)


CallerId = Annotated[str, Depends(get_caller_id)]
