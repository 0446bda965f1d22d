"""
AI Content API Endpoints
Template-based listing and social copy. No model is called: the text is
picked from lookup tables keyed by the detected product type.

Author: Amzify Team
Date: 2025-11-09
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import Field

from seller_panel.core.auth import TokenUser, require_seller
from seller_panel.domain.seller import CamelModel
from seller_panel.services import content_generator

router = APIRouter()


# Request models (camelCase bodies from the dashboard)
class ProductTextRequest(CamelModel):
    product_name: str = Field(..., min_length=1)
    category: Optional[str] = None


class SeoRequest(CamelModel):
    product_name: str = Field(..., min_length=1)
    description: str = ""


class ImproveDescriptionRequest(CamelModel):
    current_description: str = Field(..., min_length=1)
    tone: str = "professional"


class SocialPostRequest(CamelModel):
    product_name: str = Field(..., min_length=1)
    platform: str = "facebook"
    product_info: Optional[str] = None


class ImproveSocialPostRequest(CamelModel):
    current_post: str = Field(..., min_length=1)
    platform: str = "facebook"
    tone: str = "engaging"


@router.post("/generate-description")
async def generate_description(request: ProductTextRequest, user: TokenUser = Depends(require_seller)):
    return {"success": True, "text": content_generator.generate_description(request.product_name, request.category)}


@router.post("/generate-short-description")
async def generate_short_description(request: ProductTextRequest, user: TokenUser = Depends(require_seller)):
    return {
        "success": True,
        "text": content_generator.generate_short_description(request.product_name, request.category),
    }


@router.post("/generate-seo")
async def generate_seo(request: SeoRequest, user: TokenUser = Depends(require_seller)):
    """Title (max 60 chars) and meta description (max 160 chars)"""
    return {"success": True, **content_generator.generate_seo(request.product_name, request.description)}


@router.post("/improve-description")
async def improve_description(request: ImproveDescriptionRequest, user: TokenUser = Depends(require_seller)):
    try:
        return {
            "success": True,
            "text": content_generator.improve_description(request.current_description, request.tone),
        }

    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/social-post")
async def social_post(request: SocialPostRequest, user: TokenUser = Depends(require_seller)):
    return {
        "success": True,
        "text": content_generator.generate_social_post(
            request.product_name, request.platform.lower(), request.product_info
        ),
    }


@router.post("/hashtags")
async def hashtags(request: ProductTextRequest, user: TokenUser = Depends(require_seller)):
    return {"success": True, "text": content_generator.generate_hashtags(request.product_name, request.category)}


@router.post("/improve-social-post")
async def improve_social_post(request: ImproveSocialPostRequest, user: TokenUser = Depends(require_seller)):
    try:
        return {
            "success": True,
            "text": content_generator.improve_social_post(request.current_post, request.platform, request.tone),
        }

    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
