"""Store API endpoints.

The caller's own stores: list, create, rename and delete.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from storeadmin.api.dependencies import CallerId, get_store_service
from storeadmin.api.schemas import (
    ErrorResponse,
    StoreCreateRequest,
    StoreListResponse,
    StoreResponse,
    StoreUpdateRequest,
)
from storeadmin.stores.models import Store
from storeadmin.stores.service import StoreService

router = APIRouter(prefix="/stores", tags=["Stores"])

StoreServiceDep = Annotated[StoreService, Depends(get_store_service)]


def store_to_response(store: Store) -> StoreResponse:
    """Convert Store model to response schema."""
    return StoreResponse(
        id=store.id,
        name=store.name,
        user_id=store.user_id,
        created_at=store.created_at,
    )


@router.get(
    "",
    response_model=StoreListResponse,
    responses={401: {"model": ErrorResponse}},
    summary="List my stores",
)
async def list_stores(caller_id: CallerId, service: StoreServiceDep) -> StoreListResponse:
    """List the stores owned by the caller."""
    stores = await service.list_stores(caller_id)
    return StoreListResponse(items=[store_to_response(s) for s in stores], total=len(stores))


@router.post(
    "",
    response_model=StoreResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Create a store",
)
async def create_store(
    request: StoreCreateRequest,
    caller_id: CallerId,
    service: StoreServiceDep,
) -> StoreResponse:
    """Create a store owned by the caller.

    Args:
        request: Store name.
        caller_id: Authenticated caller, recorded as the owner.
        service: Store service.

    Returns:
        The created store.
    """
    store = await service.create_store(caller_id, request.name)
    return store_to_response(store)


@router.patch(
    "/{store_id}",
    response_model=StoreResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Rename a store",
)
async def rename_store(
    store_id: str,
    request: StoreUpdateRequest,
    caller_id: CallerId,
    service: StoreServiceDep,
) -> StoreResponse:
    store = await service.rename_store(store_id, caller_id, request.name)
    return store_to_response(store)


@router.delete(
    "/{store_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Delete a store",
    description="Delete the store together with its products and orders.",
)
async def delete_store(
    store_id: str,
    caller_id: CallerId,
    service: StoreServiceDep,
) -> Response:
    await service.delete_store(store_id, caller_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
