"""
Search endpoint - product search with filters and pagination.
Challenge: Validate params, delegate to the search service, paginate the ordered result set.
"""

import logging

from fastapi import APIRouter, HTTPException, Query, status

from app.core.dependencies import AppSettings, SearchService
from app.schemas.product import SearchFilters, SearchResponse
from app.services.pagination import paginate

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=SearchResponse, response_model_exclude_none=True)
async def search_products(
    service: SearchService,
    settings: AppSettings,
    query: str | None = Query(None, description="Search term", examples=["headphones"]),
    category: str | None = Query(None, description="Category label or id"),
    category_id: str | None = Query(None, description="Alias of category for numeric category ids"),
    min_price: float | None = Query(None, alias="minPrice", ge=0),
    max_price: float | None = Query(None, alias="maxPrice", ge=0),
    min_rating: float | None = Query(None, alias="minRating", ge=0, le=5),
    min_stars: float | None = Query(None, alias="minStars", ge=0, le=5),
    is_best_seller: str | None = Query(None, alias="isBestSeller"),
    page: int = Query(1, ge=1),
    limit: int | None = Query(None, ge=1, description="Page size (defaults to the configured page size)"),
):
    """Search products by text with optional category, price, rating and best-seller filters."""
    # Page-size bounds follow the app's settings
    if limit is None:
        limit = settings.default_page_size
    elif limit > settings.max_page_size:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid request parameters")

    if not query or not query.strip():
        logger.warning("Search attempted without query parameter")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Search query is required")

    # Empty strings (e.g. ?category=) impose no constraint
    filters = SearchFilters(
        category=category or category_id or None,
        min_price=min_price,
        max_price=max_price,
        min_rating=min_rating if min_rating is not None else min_stars,
        is_best_seller=is_best_seller or None,
    )
    results = await service.search(query, filters)
    window, pagination = paginate(results, page=page, limit=limit)
    logger.info("Search completed: query=%r total=%d page=%d", query, pagination.total, page)
    return SearchResponse(query=query, filters=filters, pagination=pagination, results=window)
