"""
FastAPI dependencies - injection for services built at app startup (SOLID: Dependency Inversion).
Challenge: Handlers never reach for module globals; tests swap services via app construction.
"""

from typing import Annotated

from fastapi import Depends, Request

from app.config import Settings
from app.services.category_service import CategoryService
from app.services.product_service import ProductSearchService


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_search_service(request: Request) -> ProductSearchService:
    """Process-scoped search service (catalog + optional Elasticsearch client)."""
    return request.app.state.search_service


def get_category_service(request: Request) -> CategoryService:
    return request.app.state.category_service


AppSettings = Annotated[Settings, Depends(get_app_settings)]
SearchService = Annotated[ProductSearchService, Depends(get_search_service)]
Categories = Annotated[CategoryService, Depends(get_category_service)]
