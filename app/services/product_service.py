"""
Product search service - business logic for catalog search (SOLID: Single Responsibility).
Challenge: Query Elasticsearch first, fall back to the in-memory catalog on any failure.
Design: Engine client and catalog are injected; one attempt with a bounded timeout, never retried.
"""

import asyncio
import logging
from typing import Any

from elasticsearch import AsyncElasticsearch
from prometheus_client import Counter

from app.catalog.store import CatalogStore
from app.schemas.product import Product, SearchFilters
from app.search import evaluator
from app.search.query_builder import (
    DEFAULT_MAX_RESULTS,
    compose_best_sellers_body,
    compose_search_body,
)

logger = logging.getLogger(__name__)

SEARCH_REQUESTS = Counter(
    "search_requests_total",
    "Product searches served, by backend",
    ["backend"],
)
SEARCH_FALLBACKS = Counter(
    "search_fallbacks_total",
    "Searches that fell back to the in-memory catalog after an Elasticsearch failure",
)


class EmptyQueryError(ValueError):
    """Raised when search is called without a usable query string."""


def _hits_to_products(response: Any) -> list[Product]:
    """Map a search response to Products, keeping the relevance score. Raises on malformed bodies."""
    # Response may be ObjectApiResponse; support both .body and dict access
    body = getattr(response, "body", response)
    hits = body["hits"]["hits"]
    products = []
    for hit in hits:
        source = dict(hit["_source"])
        source.pop("indexed_at", None)
        source["score"] = hit.get("_score")
        products.append(Product.model_validate(source))
    return products


class ProductSearchService:
    """Handles product use cases: search with fallback, detail lookup, best sellers."""

    def __init__(
        self,
        catalog: CatalogStore,
        es: AsyncElasticsearch | None = None,
        index: str = "products",
        timeout: float = 2.0,
        max_results: int = DEFAULT_MAX_RESULTS,
    ):
        self.catalog = catalog
        self.es = es
        self.index = index
        self.timeout = timeout
        self.max_results = max_results

    async def _run_engine_search(self, body: dict[str, Any]) -> list[Product]:
        """Single engine round trip, bounded by the configured timeout."""
        response = await asyncio.wait_for(
            self.es.search(index=self.index, **body),
            timeout=self.timeout,
        )
        return _hits_to_products(response)

    async def search(self, query: str, filters: SearchFilters | None = None) -> list[Product]:
        """Ordered matches for query + filters. Engine errors are recovered, never raised."""
        if not query or not query.strip():
            raise EmptyQueryError("Search query is required")
        filters = filters or SearchFilters()

        if self.es is None:
            SEARCH_REQUESTS.labels(backend="memory").inc()
            return evaluator.evaluate(query, filters, self.catalog)

        try:
            results = await self._run_engine_search(
                compose_search_body(query, filters, size=self.max_results)
            )
        except Exception as e:
            logger.warning(
                "Elasticsearch search failed, falling back to in-memory search: query=%r filters=%s error=%s",
                query,
                filters.model_dump(exclude_none=True),
                str(e) or type(e).__name__,
            )
            SEARCH_FALLBACKS.inc()
            SEARCH_REQUESTS.labels(backend="memory").inc()
            return evaluator.evaluate(query, filters, self.catalog)

        SEARCH_REQUESTS.labels(backend="elasticsearch").inc()
        logger.info("Elasticsearch search completed: query=%r results=%d", query, len(results))
        return results

    def get_by_id(self, product_id: str) -> Product | None:
        """Catalog lookup. Ids are compared as exact, case-sensitive strings."""
        product = self.catalog.get(product_id)
        if product is None:
            logger.warning("Product not found: id=%s", product_id)
        return product

    async def best_sellers(self, limit: int = 10) -> list[Product]:
        """Top best sellers by popularity. Falls back to the catalog like search does."""
        if self.es is None:
            return evaluator.best_sellers(self.catalog, limit)
        try:
            return await self._run_engine_search(compose_best_sellers_body(limit))
        except Exception as e:
            logger.warning("Elasticsearch best sellers failed, using catalog: error=%s", str(e) or type(e).__name__)
            SEARCH_FALLBACKS.inc()
            return evaluator.best_sellers(self.catalog, limit)
