"""
Logistics API Endpoints
Shipments for the seller's orders and tracking number generation

Author: Amzify Team
Date: 2025-11-06
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from seller_panel.core.auth import TokenUser, require_seller, require_seller_or_admin
from seller_panel.domain.logistics import ShipmentCreate, ShipmentStatusUpdate, TrackingRequest
from seller_panel.services.logistics_service import LogisticsService

router = APIRouter()


def get_logistics_service() -> LogisticsService:
    return LogisticsService()


@router.get("/shipments")
async def get_shipments(
    status: Optional[str] = Query(None, description="Filter by shipment status"),
    user: TokenUser = Depends(require_seller),
    service: LogisticsService = Depends(get_logistics_service)
):
    try:
        shipments = service.list_shipments(user.id, status)
        return {"shipments": [s.model_dump() for s in shipments], "total": len(shipments)}

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error fetching shipments: {str(e)}")


@router.post("/shipments", status_code=201)
async def create_shipment(
    data: ShipmentCreate,
    user: TokenUser = Depends(require_seller),
    service: LogisticsService = Depends(get_logistics_service)
):
    """Ship an order; a tracking number is generated when none is given"""
    try:
        shipment = service.create_shipment(user.id, data)
        return {"message": "Shipment created successfully", "shipment": shipment.model_dump()}

    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error creating shipment: {str(e)}")


@router.put("/shipments/{shipment_id}/status")
async def update_shipment_status(
    shipment_id: str,
    update: ShipmentStatusUpdate,
    user: TokenUser = Depends(require_seller),
    service: LogisticsService = Depends(get_logistics_service)
):
    try:
        shipment = service.update_shipment_status(
            user.id, shipment_id, update.status, update.description, update.location
        )
        return {"message": "Shipment status updated successfully", "shipment": shipment.model_dump()}

    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error updating shipment: {str(e)}")


@router.post("/generate-tracking/{order_id}")
async def generate_tracking(
    order_id: str,
    request: Optional[TrackingRequest] = None,
    user: TokenUser = Depends(require_seller_or_admin),
    service: LogisticsService = Depends(get_logistics_service)
):
    """Assign a new tracking number to an order (sellers: own orders only)"""
    try:
        carrier = request.carrier if request else None
        seller_id = user.id if user.role == "seller" else None
        tracking_number = service.assign_tracking_number(order_id, carrier, seller_id=seller_id)

        return {"success": True, "trackingNumber": tracking_number, "carrier": carrier or "Standard"}

    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error generating tracking number: {str(e)}")
