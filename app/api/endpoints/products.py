"""
Product endpoints - read-only catalog resource.
Design: Thin controller; service layer holds lookup and search logic.
"""

from fastapi import APIRouter, HTTPException, Query, status

from app.core.dependencies import SearchService
from app.schemas.product import Product, ProductListResponse

router = APIRouter()


# Declared before /{product_id} so the literal path wins
@router.get("/best-sellers", response_model=ProductListResponse, response_model_exclude_none=True)
async def best_sellers(service: SearchService, limit: int = Query(10, ge=1, le=100)):
    """Best-selling products, most purchased first."""
    return ProductListResponse(results=await service.best_sellers(limit))


@router.get("/{product_id}", response_model=Product, response_model_exclude_none=True)
async def get_product(service: SearchService, product_id: str):
    """Full product record by id (integer id or SKU)."""
    product = service.get_by_id(product_id)
    if not product:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    return product
