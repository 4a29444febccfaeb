"""
Pytest fixtures - apps, clients and fake Elasticsearch engines.
Challenge: Isolated tests; no real Elasticsearch, engine behaviour simulated with AsyncMock.
"""

import os

# Module-level app in app.main must not build a real ES client during tests
os.environ.setdefault("ELASTICSEARCH_ENABLED", "false")

from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.catalog.store import CatalogStore
from app.config import Settings
from app.main import create_app


def make_settings(**overrides) -> Settings:
    values = {"elasticsearch_enabled": False, "catalog_variant": "basic"}
    values.update(overrides)
    return Settings(**values)


def make_es(search=None, health=None) -> MagicMock:
    """Fake AsyncElasticsearch exposing the methods the app awaits."""
    es = MagicMock()
    es.search = search or AsyncMock(return_value={"hits": {"hits": []}})
    es.cluster.health = health or AsyncMock(return_value={"cluster_name": "test", "status": "green"})
    es.close = AsyncMock()
    return es


def es_hit(source: dict, score: float = 1.0) -> dict:
    return {"_id": str(source["id"]), "_score": score, "_source": source}


async def _client_for(app) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def basic_catalog() -> CatalogStore:
    return CatalogStore.from_variant("basic")


@pytest.fixture
def sku_catalog() -> CatalogStore:
    return CatalogStore.from_variant("sku")


@pytest.fixture
def failing_es() -> MagicMock:
    """Engine that refuses every connection."""
    return make_es(
        search=AsyncMock(side_effect=ConnectionError("Connection refused")),
        health=AsyncMock(side_effect=ConnectionError("Connection refused")),
    )


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Basic catalog, Elasticsearch disabled."""
    async for ac in _client_for(create_app(make_settings())):
        yield ac


@pytest_asyncio.fixture
async def sku_client() -> AsyncGenerator[AsyncClient, None]:
    """SKU catalog, Elasticsearch disabled."""
    async for ac in _client_for(create_app(make_settings(catalog_variant="sku"))):
        yield ac


@pytest_asyncio.fixture
async def fallback_client(failing_es) -> AsyncGenerator[AsyncClient, None]:
    """Basic catalog with an unreachable Elasticsearch (every search falls back)."""
    async for ac in _client_for(create_app(make_settings(elasticsearch_enabled=True), es_client=failing_es)):
        yield ac
