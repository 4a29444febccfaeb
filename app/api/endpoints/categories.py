"""Category endpoints - static category list."""

from fastapi import APIRouter, HTTPException, status

from app.core.dependencies import Categories
from app.schemas.category import Category, CategoryListResponse

router = APIRouter()


@router.get("", response_model=CategoryListResponse)
async def list_categories(categories: Categories):
    """All categories with their (static) product counts."""
    return CategoryListResponse(categories=categories.get_all())


@router.get("/{category_id}", response_model=Category)
async def get_category(categories: Categories, category_id: int):
    category = categories.get_by_id(category_id)
    if not category:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    return category
