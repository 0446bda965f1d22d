"""
Categories API Endpoints
Read-only catalog categories

Author: Amzify Team
Date: 2025-11-03
"""
from fastapi import APIRouter, HTTPException

from seller_panel.repositories.category_repository import CategoryRepository

router = APIRouter()


@router.get("/")
async def get_categories():
    try:
        categories = CategoryRepository().find_all()
        return {"categories": [category.model_dump() for category in categories]}

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error fetching categories: {str(e)}")


@router.get("/{category_id}")
async def get_category(category_id: str):
    try:
        category = CategoryRepository().find_by_id(category_id)
        if not category:
            raise HTTPException(status_code=404, detail="Category not found")

        return {"category": category.model_dump()}

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error fetching category: {str(e)}")
