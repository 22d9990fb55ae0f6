"""Dashboard API endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from storeadmin.api.dependencies import CallerId, get_dashboard_service
from storeadmin.api.schemas import (
    CategorySalesSchema,
    DailySalesSchema,
    DashboardResponse,
    ErrorResponse,
    RecentOrderSchema,
    TopProductSchema,
)
from storeadmin.reporting.aggregator import SalesSummary
from storeadmin.reporting.service import DashboardService

router = APIRouter(prefix="/stores/{store_id}/dashboard", tags=["Dashboard"])


def summary_to_response(summary: SalesSummary) -> DashboardResponse:
    """Convert SalesSummary to response schema."""
    return DashboardResponse(
        total_revenue=float(summary.total_revenue),
        total_sales=summary.total_sales,
        new_customers=summary.new_customers,
        avg_order_value=float(summary.avg_order_value),
        sales_data=[
            DailySalesSchema(date=p.date, total=float(p.total)) for p in summary.sales_data
        ],
        category_sales=[
            CategorySalesSchema(category=c.category, sales=c.sales)
            for c in summary.category_sales
        ],
        recent_orders=[
            RecentOrderSchema(
                id=o.id,
                user_id=o.user_id,
                total=float(o.total),
                status=o.status,
                date=o.date,
            )
            for o in summary.recent_orders
        ],
        top_products=[
            TopProductSchema(name=p.name, sold=p.sold) for p in summary.top_products
        ],
    )


@router.get(
    "",
    response_model=DashboardResponse,
    responses={
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Get store sales dashboard",
)
async def get_dashboard(
    store_id: str,
    caller_id: CallerId,
    service: Annotated[DashboardService, Depends(get_dashboard_service)],
) -> DashboardResponse:
    """Revenue, sales, customers and rankings for a store the caller owns."""
    summary = await service.get_dashboard(store_id, caller_id)
    return summary_to_response(summary)
