"""
Seller API Endpoints
Everything under /seller: dashboard, logistics views, profile, revenue,
payouts and social media. Every route requires the seller role.

Author: Amzify Team
Date: 2025-11-07
"""
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile

from seller_panel.api.responses import csv_response
from seller_panel.core.auth import TokenUser, require_seller
from seller_panel.domain.finance import PayoutRequest, RevenuePeriod
from seller_panel.domain.seller import SellerProfileUpdate
from seller_panel.domain.social import SocialConnect, SocialPostCreate
from seller_panel.repositories.seller_repository import SellerRepository
from seller_panel.services.logistics_service import LogisticsService
from seller_panel.services.revenue_service import PayoutRejected, RevenueService
from seller_panel.services.seller_dashboard_service import SellerDashboardService, normalize_trend
from seller_panel.services.social_media_service import SocialMediaService
from seller_panel.services.storage_service import UploadRejected, upload_image

logger = logging.getLogger(__name__)

router = APIRouter()


# Dependencies: services
def get_dashboard_service() -> SellerDashboardService:
    return SellerDashboardService()


def get_logistics_service() -> LogisticsService:
    return LogisticsService()


def get_revenue_service() -> RevenueService:
    return RevenueService()


def get_social_service() -> SocialMediaService:
    return SocialMediaService()


# =============================================================================
# Dashboard
# =============================================================================

@router.get("/dashboard")
async def get_dashboard(
    user: TokenUser = Depends(require_seller),
    service: SellerDashboardService = Depends(get_dashboard_service)
):
    """Stats, 5 recent orders, 4 top products and 30-day analytics"""
    try:
        return service.get_dashboard(user.id)

    except Exception as e:
        logger.error(f"Dashboard failed for seller {user.id}: {e}")
        raise HTTPException(status_code=500, detail=f"Error fetching dashboard data: {str(e)}")


@router.get("/orders")
async def get_recent_orders(
    limit: int = Query(10, ge=1, le=100),
    user: TokenUser = Depends(require_seller),
    service: SellerDashboardService = Depends(get_dashboard_service)
):
    try:
        orders = service.get_recent_orders(user.id, limit)
        return {"orders": orders, "total": len(orders)}

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error fetching orders: {str(e)}")


@router.get("/top-products")
async def get_top_products(
    limit: int = Query(4, ge=1, le=50),
    user: TokenUser = Depends(require_seller),
    service: SellerDashboardService = Depends(get_dashboard_service)
):
    try:
        products = service.get_top_products(user.id, limit)
        return {"products": products, "total": len(products)}

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error fetching top products: {str(e)}")


@router.get("/analytics")
async def get_analytics(
    user: TokenUser = Depends(require_seller),
    service: SellerDashboardService = Depends(get_dashboard_service)
):
    try:
        return service.get_analytics(user.id)

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error fetching analytics: {str(e)}")


@router.get("/dashboard/trends")
async def get_trends(
    user: TokenUser = Depends(require_seller),
    service: SellerDashboardService = Depends(get_dashboard_service)
):
    """6-month series plus each series scaled to 0-100 for the charts"""
    try:
        trends = service.get_trends(user.id)
        return {
            **trends,
            "normalized": {key: normalize_trend(points, key) for key, points in trends.items()},
        }

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error fetching trend analysis: {str(e)}")


# =============================================================================
# Logistics views
# =============================================================================

@router.get("/logistics/overview")
async def get_logistics_overview(
    user: TokenUser = Depends(require_seller),
    service: LogisticsService = Depends(get_logistics_service)
):
    try:
        return {
            "warehouse": service.get_overview(user.id),
            "transportation": service.get_transport_analytics(user.id),
            "reverseLogistics": service.get_returns(user.id),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error fetching logistics data: {str(e)}")


@router.get("/logistics/shipments")
async def get_shipment_tracking(
    user: TokenUser = Depends(require_seller),
    service: LogisticsService = Depends(get_logistics_service)
):
    try:
        shipments = service.get_shipment_tracking(user.id)
        return {"shipments": shipments, "total": len(shipments)}

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error fetching shipments: {str(e)}")


@router.get("/logistics/returns")
async def get_returns(
    user: TokenUser = Depends(require_seller),
    service: LogisticsService = Depends(get_logistics_service)
):
    try:
        return service.get_returns(user.id)

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error fetching returns data: {str(e)}")


@router.get("/logistics/transport")
async def get_transport_analytics(
    user: TokenUser = Depends(require_seller),
    service: LogisticsService = Depends(get_logistics_service)
):
    try:
        return service.get_transport_analytics(user.id)

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error fetching transportation analytics: {str(e)}")


# =============================================================================
# Profile
# =============================================================================

@router.get("/profile")
async def get_profile(user: TokenUser = Depends(require_seller)):
    try:
        profile = SellerRepository().find_profile(user.id)
        if not profile:
            raise HTTPException(status_code=404, detail="Seller profile not found")

        return {"profile": profile.model_dump()}

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error fetching profile: {str(e)}")


@router.put("/profile")
async def update_profile(update: SellerProfileUpdate, user: TokenUser = Depends(require_seller)):
    try:
        changes = update.changes()
        if not changes:
            raise HTTPException(status_code=400, detail="No fields to update")

        profile = SellerRepository().update_profile(user.id, changes)
        if not profile:
            raise HTTPException(status_code=404, detail="Seller profile not found")

        return {"message": "Profile updated successfully", "profile": profile.model_dump()}

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error updating profile: {str(e)}")


@router.post("/profile/image")
async def upload_profile_image(image: UploadFile = File(...), user: TokenUser = Depends(require_seller)):
    try:
        content = await image.read()
        url = upload_image(user.id, "profile", content, image.content_type)
        SellerRepository().set_profile_image(user.id, url)

        return {"message": "Profile image updated successfully", "imageUrl": url}

    except UploadRejected as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error uploading profile image: {str(e)}")


# =============================================================================
# Revenue and payouts
# =============================================================================

@router.get("/revenue")
async def get_revenue(
    period: RevenuePeriod = Query("month"),
    user: TokenUser = Depends(require_seller),
    service: RevenueService = Depends(get_revenue_service)
):
    try:
        return {"success": True, "data": service.get_revenue(user.id, period)}

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error fetching revenue: {str(e)}")


@router.get("/payouts")
async def get_payouts(
    user: TokenUser = Depends(require_seller),
    service: RevenueService = Depends(get_revenue_service)
):
    try:
        return {"success": True, "payouts": service.list_payouts(user.id)}

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error fetching payouts: {str(e)}")


@router.get("/payouts/export")
async def export_payouts(
    user: TokenUser = Depends(require_seller),
    service: RevenueService = Depends(get_revenue_service)
):
    try:
        return csv_response(service.export_payouts(user.id), "payout_history")

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error exporting payouts: {str(e)}")


@router.post("/payouts/request")
async def request_payout(
    request: PayoutRequest,
    user: TokenUser = Depends(require_seller),
    service: RevenueService = Depends(get_revenue_service)
):
    try:
        payout = service.request_payout(user.id, request.amount, request.method)
        return {"success": True, "message": "Payout requested successfully", "payout": payout}

    except PayoutRejected as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error requesting payout: {str(e)}")


@router.get("/financial/summary")
async def get_financial_summary(
    user: TokenUser = Depends(require_seller),
    service: RevenueService = Depends(get_revenue_service)
):
    try:
        return {"success": True, "summary": service.get_financial_summary(user.id)}

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error fetching financial summary: {str(e)}")


# =============================================================================
# Social media
# =============================================================================

@router.post("/social/connect")
async def connect_social(
    request: SocialConnect,
    user: TokenUser = Depends(require_seller),
    service: SocialMediaService = Depends(get_social_service)
):
    try:
        account = service.connect(user.id, request)
        return {"success": True, "message": f"{request.platform} connected", "account": account}

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error connecting account: {str(e)}")


@router.delete("/social/disconnect/{platform}")
async def disconnect_social(
    platform: str,
    user: TokenUser = Depends(require_seller),
    service: SocialMediaService = Depends(get_social_service)
):
    try:
        if not service.disconnect(user.id, platform):
            raise HTTPException(status_code=404, detail=f"{platform} is not connected")

        return {"success": True, "message": f"{platform} disconnected"}

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error disconnecting account: {str(e)}")


@router.get("/social/stats")
async def get_social_stats(
    user: TokenUser = Depends(require_seller),
    service: SocialMediaService = Depends(get_social_service)
):
    try:
        return {"success": True, "stats": service.get_stats(user.id)}

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error fetching social stats: {str(e)}")


@router.post("/social/post")
async def create_social_post(
    request: SocialPostCreate,
    user: TokenUser = Depends(require_seller),
    service: SocialMediaService = Depends(get_social_service)
):
    try:
        post = service.create_post(user.id, request)
        return {"success": True, "post": post}

    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error creating post: {str(e)}")
