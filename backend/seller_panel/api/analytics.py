"""
Seller Analytics API Endpoints

Author: Amzify Team
Date: 2025-11-07
"""
from fastapi import APIRouter, Depends, HTTPException, Query

from seller_panel.core.auth import TokenUser, require_seller
from seller_panel.services.seller_dashboard_service import SellerDashboardService

router = APIRouter()


def get_dashboard_service() -> SellerDashboardService:
    return SellerDashboardService()


@router.get("/seller/stats")
async def get_seller_stats(
    time_range: str = Query("30d", alias="timeRange", description="7d, 30d, 90d or 1y"),
    user: TokenUser = Depends(require_seller),
    service: SellerDashboardService = Depends(get_dashboard_service)
):
    """Sales totals, top products and daily revenue for the selected range"""
    try:
        return service.get_range_stats(user.id, time_range)

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error fetching analytics: {str(e)}")


@router.get("/seller")
async def get_seller_analytics(
    time_range: str = Query("30d", alias="range", description="7d, 30d, 90d or 1y"),
    user: TokenUser = Depends(require_seller),
    service: SellerDashboardService = Depends(get_dashboard_service)
):
    try:
        return {
            "success": True,
            "data": {
                **service.get_range_stats(user.id, time_range),
                "analytics": service.get_analytics(user.id),
            },
        }

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error fetching analytics: {str(e)}")
