"""
Orders API Endpoints
Orders containing the seller's items, and status updates

Author: Amzify Team
Date: 2025-11-04
"""
import logging
import math
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from seller_panel.core.auth import TokenUser, require_seller, require_seller_or_admin
from seller_panel.domain.order import OrderStatusUpdate
from seller_panel.repositories.order_repository import OrderRepository

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/seller/my-orders")
async def get_my_orders(
    status: Optional[str] = Query(None, description="Filter by order status"),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    user: TokenUser = Depends(require_seller)
):
    """Orders with at least one of the seller's items; only those items are listed"""
    try:
        orders, total = OrderRepository().find_by_seller(
            user.id, status=status, limit=limit, offset=(page - 1) * limit
        )

        return {
            "orders": [order.to_dict() for order in orders],
            "pagination": {"page": page, "limit": limit, "total": total, "pages": math.ceil(total / limit)},
        }

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error fetching orders: {str(e)}")


@router.get("/{order_id}")
async def get_order(order_id: str, user: TokenUser = Depends(require_seller)):
    try:
        order = OrderRepository().find_by_id_for_seller(order_id, user.id)
        if not order:
            raise HTTPException(status_code=404, detail="Order not found or access denied")

        return {"order": order.to_dict()}

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error fetching order: {str(e)}")


async def _update_status(order_id: str, update: OrderStatusUpdate, user: TokenUser):
    try:
        repo = OrderRepository()

        if user.role == "seller" and not repo.seller_owns_items(order_id, user.id):
            raise HTTPException(status_code=404, detail="Order not found or access denied")

        order = repo.update_status(order_id, update.status)
        if not order:
            raise HTTPException(status_code=404, detail="Order not found")

        logger.info(f"Order {order_id} set to {update.status} by {user.role} {user.id}")
        return {"message": "Order status updated successfully", "order": order}

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error updating order status: {str(e)}")


@router.put("/{order_id}/status")
async def put_order_status(
    order_id: str,
    update: OrderStatusUpdate,
    user: TokenUser = Depends(require_seller_or_admin)
):
    """Sellers may only update orders that contain their items; admins any order"""
    return await _update_status(order_id, update, user)


@router.patch("/{order_id}/status")
async def patch_order_status(
    order_id: str,
    update: OrderStatusUpdate,
    user: TokenUser = Depends(require_seller_or_admin)
):
    return await _update_status(order_id, update, user)
