"""
Marketing API Endpoints
Discount campaigns owned by a seller

Author: Amzify Team
Date: 2025-11-05
"""
import logging

from fastapi import APIRouter, Depends, HTTPException

from seller_panel.core.auth import TokenUser, require_seller
from seller_panel.domain.marketing import CampaignCreate, CampaignUpdate
from seller_panel.repositories.campaign_repository import CampaignRepository

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND = "Campaign not found or access denied"


@router.get("/campaigns")
async def get_campaigns(user: TokenUser = Depends(require_seller)):
    try:
        campaigns = CampaignRepository().find_by_seller(user.id)
        return {"campaigns": [campaign.to_dict() for campaign in campaigns]}

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error fetching campaigns: {str(e)}")


@router.post("/campaigns", status_code=201)
async def create_campaign(data: CampaignCreate, user: TokenUser = Depends(require_seller)):
    try:
        campaign = CampaignRepository().create(user.id, data)
        logger.info(f"Seller {user.id} created campaign {campaign.id}")
        return {"message": "Campaign created successfully", "campaign": campaign.to_dict()}

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error creating campaign: {str(e)}")


@router.put("/campaigns/{campaign_id}")
async def update_campaign(campaign_id: str, data: CampaignUpdate, user: TokenUser = Depends(require_seller)):
    try:
        changes = data.changes()
        if not changes:
            raise HTTPException(status_code=400, detail="No fields to update")

        campaign = CampaignRepository().update(campaign_id, user.id, changes)
        if not campaign:
            raise HTTPException(status_code=404, detail=NOT_FOUND)

        return {"message": "Campaign updated successfully", "campaign": campaign.to_dict()}

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error updating campaign: {str(e)}")


@router.delete("/campaigns/{campaign_id}")
async def delete_campaign(campaign_id: str, user: TokenUser = Depends(require_seller)):
    try:
        if not CampaignRepository().delete(campaign_id, user.id):
            raise HTTPException(status_code=404, detail=NOT_FOUND)

        return {"message": "Campaign deleted successfully"}

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error deleting campaign: {str(e)}")
