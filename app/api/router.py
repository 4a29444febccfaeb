"""
API router - aggregates all endpoint modules (RESTful structure).
"""

from fastapi import APIRouter

from app.api.endpoints import categories, health, products, search

# Mounted at the application root: /health, /api/...
health_router = APIRouter()
health_router.include_router(health.router, prefix="/health", tags=["health"])

api_router = APIRouter(prefix="/api")
api_router.include_router(search.router, prefix="/search", tags=["search"])
api_router.include_router(products.router, prefix="/products", tags=["products"])
api_router.include_router(categories.router, prefix="/categories", tags=["categories"])
