"""
Products API Endpoints
Public catalog browsing and seller listing management

Sellers only ever modify their own listings: writes are filtered by
seller_id and a foreign or missing product yields 404.

Author: Amzify Team
Date: 2025-11-03
"""
import logging
import math
from typing import List, Optional

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile
from pydantic import BaseModel, Field

from seller_panel.core.auth import TokenUser, require_seller
from seller_panel.domain.product import ProductCreate, ProductUpdate
from seller_panel.repositories.category_repository import CategoryRepository
from seller_panel.repositories.product_repository import ProductRepository
from seller_panel.services.identifiers import generate_barcode, generate_sku, slugify
from seller_panel.services.storage_service import UploadRejected, upload_image

logger = logging.getLogger(__name__)

router = APIRouter()

MAX_IMAGES_PER_UPLOAD = 10
NOT_FOUND = "Product not found or access denied"


class SkuRequest(BaseModel):
    name: str = Field(..., min_length=1)
    category: Optional[str] = None


@router.get("/")
async def get_products(
    category: Optional[str] = Query(None, description="Filter by category id"),
    search: Optional[str] = Query(None, min_length=1, max_length=100, description="Search by name or SKU"),
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100)
):
    """Active products visible in the storefront"""
    try:
        repo = ProductRepository()
        products, total = repo.find_all(
            category_id=category,
            status="active",
            search=search,
            limit=limit,
            offset=(page - 1) * limit
        )

        return {
            "products": [product.to_dict() for product in products],
            "pagination": {"page": page, "limit": limit, "total": total, "pages": math.ceil(total / limit)},
        }

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error fetching products: {str(e)}")


@router.get("/seller/my-products")
async def get_my_products(
    status: Optional[str] = Query(None, description="pending_approval, active or inactive"),
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    user: TokenUser = Depends(require_seller)
):
    try:
        repo = ProductRepository()
        products, total = repo.find_all(
            seller_id=user.id,
            status=status,
            limit=limit,
            offset=(page - 1) * limit
        )

        return {
            "products": [product.to_dict() for product in products],
            "pagination": {"page": page, "limit": limit, "total": total, "pages": math.ceil(total / limit)},
        }

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error fetching products: {str(e)}")


@router.post("/generate-sku")
async def generate_product_codes(request: SkuRequest, user: TokenUser = Depends(require_seller)):
    """Suggest a SKU and an EAN-13 barcode for a new listing"""
    return {"sku": generate_sku(request.name, request.category), "barcode": generate_barcode()}


@router.get("/{product_id}")
async def get_product(product_id: str):
    try:
        product = ProductRepository().find_by_id(product_id)
        if not product or product.status != "active":
            raise HTTPException(status_code=404, detail="Product not found")

        return {"product": product.to_dict()}

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error fetching product: {str(e)}")


@router.post("/", status_code=201)
async def create_product(data: ProductCreate, user: TokenUser = Depends(require_seller)):
    """
    Create a listing; it starts in pending_approval

    A SKU is generated from name and category when none is given.
    """
    try:
        category = CategoryRepository().find_by_id(data.category_id)
        if not category:
            raise HTTPException(status_code=400, detail="Category not found")

        repo = ProductRepository()
        if data.sku:
            if repo.sku_exists(data.sku):
                raise HTTPException(status_code=400, detail="SKU already exists")
        else:
            data.sku = generate_sku(data.name, category.name)

        product = repo.create(user.id, data, slugify(data.name))
        logger.info(f"Seller {user.id} created product {product.id}")

        return {"message": "Product created successfully", "product": product.to_dict()}

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error creating product: {str(e)}")


@router.put("/{product_id}")
async def update_product(product_id: str, data: ProductUpdate, user: TokenUser = Depends(require_seller)):
    try:
        changes = data.changes()
        if not changes:
            raise HTTPException(status_code=400, detail="No fields to update")

        repo = ProductRepository()
        if changes.get("sku") and repo.sku_exists(changes["sku"], exclude_product_id=product_id):
            raise HTTPException(status_code=400, detail="SKU already exists")
        if "name" in changes:
            changes["slug"] = slugify(changes["name"])

        product = repo.update(product_id, user.id, changes)
        if not product:
            raise HTTPException(status_code=404, detail=NOT_FOUND)

        return {"message": "Product updated successfully", "product": product.to_dict()}

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error updating product: {str(e)}")


@router.delete("/{product_id}")
async def delete_product(product_id: str, user: TokenUser = Depends(require_seller)):
    try:
        if not ProductRepository().delete(product_id, user.id):
            raise HTTPException(status_code=404, detail=NOT_FOUND)

        logger.info(f"Seller {user.id} deleted product {product_id}")
        return {"message": "Product deleted successfully"}

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error deleting product: {str(e)}")


@router.post("/{product_id}/images")
async def upload_product_images(
    product_id: str,
    images: List[UploadFile] = File(...),
    user: TokenUser = Depends(require_seller)
):
    """Upload up to 10 images to storage and append their URLs to the listing"""
    try:
        if len(images) > MAX_IMAGES_PER_UPLOAD:
            raise HTTPException(status_code=400, detail=f"At most {MAX_IMAGES_PER_UPLOAD} images per upload")

        repo = ProductRepository()
        product = repo.find_by_id(product_id)
        if not product or product.seller_id != user.id:
            raise HTTPException(status_code=404, detail=NOT_FOUND)

        urls = []
        for image in images:
            content = await image.read()
            urls.append(upload_image(user.id, f"products/{product_id}", content, image.content_type))

        product = repo.append_images(product_id, user.id, urls)
        if not product:
            raise HTTPException(status_code=404, detail=NOT_FOUND)

        return {"message": "Images uploaded successfully", "images": urls, "product": product.to_dict()}

    except UploadRejected as e:
        raise HTTPException(status_code=400, detail=str(e))
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error uploading images: {str(e)}")
