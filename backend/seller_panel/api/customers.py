"""
Customer Analytics API Endpoints
Who buys from the seller: overview, list, segments, profiles, purchase
insights and CSV exports. Every route requires the seller role.

Author: Amzify Team
Date: 2025-11-08
"""
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from seller_panel.api.responses import csv_response
from seller_panel.core.auth import TokenUser, require_seller
from seller_panel.domain.customer import CUSTOMER_SEGMENTS
from seller_panel.services.customer_analytics_service import CustomerAnalyticsService

router = APIRouter()


def get_customer_service() -> CustomerAnalyticsService:
    return CustomerAnalyticsService()


@router.get("/seller")
async def get_my_customers(
    user: TokenUser = Depends(require_seller),
    service: CustomerAnalyticsService = Depends(get_customer_service)
):
    """First page of the seller's customers, highest spend first"""
    try:
        return service.list_customers(user.id)

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error fetching customers: {str(e)}")


@router.get("/insights")
async def get_customer_insights(
    user: TokenUser = Depends(require_seller),
    service: CustomerAnalyticsService = Depends(get_customer_service)
):
    try:
        return {
            "overview": service.get_overview(user.id),
            "segments": service.get_segmentation(user.id),
        }

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error fetching customer insights: {str(e)}")


@router.get("/analytics/overview")
async def get_overview(
    user: TokenUser = Depends(require_seller),
    service: CustomerAnalyticsService = Depends(get_customer_service)
):
    try:
        return service.get_overview(user.id)

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error fetching customer analytics: {str(e)}")


@router.get("/list")
async def list_customers(
    search: Optional[str] = Query(None, description="Name or email"),
    segment: Optional[str] = Query(None, description=", ".join(CUSTOMER_SEGMENTS)),
    start_date: Optional[datetime] = Query(None, alias="startDate"),
    end_date: Optional[datetime] = Query(None, alias="endDate"),
    page: int = Query(1, ge=1),
    limit: int = Query(50, ge=1, le=200),
    user: TokenUser = Depends(require_seller),
    service: CustomerAnalyticsService = Depends(get_customer_service)
):
    try:
        return service.list_customers(
            user.id, search=search, segment=segment,
            start_date=start_date, end_date=end_date, page=page, limit=limit
        )

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error fetching customers: {str(e)}")


@router.get("/segmentation")
async def get_segmentation(
    user: TokenUser = Depends(require_seller),
    service: CustomerAnalyticsService = Depends(get_customer_service)
):
    try:
        return {"segments": service.get_segmentation(user.id)}

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error fetching segmentation data: {str(e)}")


# =============================================================================
# CSV exports
# =============================================================================

@router.get("/export/customers")
async def export_customers(
    start_date: Optional[datetime] = Query(None, alias="startDate"),
    end_date: Optional[datetime] = Query(None, alias="endDate"),
    user: TokenUser = Depends(require_seller),
    service: CustomerAnalyticsService = Depends(get_customer_service)
):
    try:
        return csv_response(service.export_customers(user.id, start_date, end_date), "customers")

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error exporting customers: {str(e)}")


@router.get("/export/purchase-report")
async def export_purchase_report(
    start_date: Optional[datetime] = Query(None, alias="startDate"),
    end_date: Optional[datetime] = Query(None, alias="endDate"),
    user: TokenUser = Depends(require_seller),
    service: CustomerAnalyticsService = Depends(get_customer_service)
):
    try:
        return csv_response(service.export_purchase_report(user.id, start_date, end_date), "purchase_report")

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error exporting purchase report: {str(e)}")


@router.get("/export/repeat-customers")
async def export_repeat_customers(
    user: TokenUser = Depends(require_seller),
    service: CustomerAnalyticsService = Depends(get_customer_service)
):
    try:
        return csv_response(service.export_repeat_customers(user.id), "repeat_customers")

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error exporting repeat customers: {str(e)}")


# =============================================================================
# Single customer
# =============================================================================

@router.get("/{customer_id}")
async def get_customer_profile(
    customer_id: str,
    user: TokenUser = Depends(require_seller),
    service: CustomerAnalyticsService = Depends(get_customer_service)
):
    try:
        profile = service.get_profile(user.id, customer_id)
        if not profile:
            raise HTTPException(status_code=404, detail="Customer not found")

        return profile

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error fetching customer profile: {str(e)}")


@router.get("/{customer_id}/activity")
async def get_customer_activity(
    customer_id: str,
    user: TokenUser = Depends(require_seller),
    service: CustomerAnalyticsService = Depends(get_customer_service)
):
    try:
        activities = service.get_activity(user.id, customer_id)
        if activities is None:
            raise HTTPException(status_code=404, detail="Customer not found")

        return {"activities": activities}

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error fetching customer activity: {str(e)}")


@router.get("/{customer_id}/ai-insights")
async def get_customer_ai_insights(
    customer_id: str,
    user: TokenUser = Depends(require_seller),
    service: CustomerAnalyticsService = Depends(get_customer_service)
):
    """Rule-based next-purchase prediction, discount suggestion and churn risk"""
    try:
        return service.get_insights(user.id, customer_id)

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error generating insights: {str(e)}")
