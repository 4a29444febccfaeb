"""
FastAPI application entry point.
Challenge: Mount routes, middleware (logging, Prometheus), exception handlers, startup/shutdown of the ES client.
"""

import logging
from contextlib import asynccontextmanager

from elasticsearch import AsyncElasticsearch
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import make_asgi_app

from app.api.router import api_router, health_router
from app.catalog.store import CatalogStore
from app.config import Settings, get_settings
from app.core.errors import register_exception_handlers
from app.core.logging import log_requests, setup_logging
from app.search.elasticsearch_client import (
    create_elasticsearch_client,
    ensure_products_index,
    index_products,
)
from app.services.category_service import CategoryService
from app.services.product_service import ProductSearchService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: prepare the Elasticsearch index when configured. Shutdown: close the ES client."""
    settings: Settings = app.state.settings
    service: ProductSearchService = app.state.search_service
    if service.es is not None and settings.elasticsearch_sync_on_startup:
        try:
            await ensure_products_index(service.es, settings.elasticsearch_index)
            await index_products(service.es, settings.elasticsearch_index, list(service.catalog))
        except Exception as e:
            # ES may be down; app still works (search falls back to the catalog)
            logger.warning("Elasticsearch startup sync failed: %s", e)
    logger.info(
        "%s started: catalog=%s products=%d elasticsearch=%s",
        settings.service_name,
        settings.catalog_variant,
        len(service.catalog),
        "enabled" if service.es is not None else "disabled",
    )
    yield
    if service.es is not None:
        await service.es.close()


def create_app(settings: Settings | None = None, es_client: AsyncElasticsearch | None = None) -> FastAPI:
    """Build the app. An injected es_client overrides the one derived from settings."""
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="REST API for product search and filtering with categories, price ranges, ratings and pagination.",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/api-docs",
    )

    if es_client is None and settings.elasticsearch_enabled:
        es_client = create_elasticsearch_client(settings)

    app.state.settings = settings
    app.state.search_service = ProductSearchService(
        catalog=CatalogStore.from_variant(settings.catalog_variant),
        es=es_client,
        index=settings.elasticsearch_index,
        timeout=settings.elasticsearch_request_timeout,
        max_results=settings.search_max_results,
    )
    app.state.category_service = CategoryService()

    # CORS for frontend/API consumers
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests)
    register_exception_handlers(app)

    # Prometheus metrics at /metrics
    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)

    app.include_router(health_router)
    app.include_router(api_router)

    return app


app = create_app()
