"""
Product API tests - detail lookup, 404 handling, best sellers.
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_get_product_detail(client: AsyncClient):
    response = await client.get("/api/products/1")
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == 1
    assert data["name"] == "Wireless Bluetooth Headphones"
    assert data["inStock"] is True
    assert data["rating"] == 4.5
    assert data["reviewCount"] == 120


@pytest.mark.asyncio
async def test_get_product_not_found(client: AsyncClient):
    response = await client.get("/api/products/999")
    assert response.status_code == 404
    assert response.json() == {"error": "Product not found"}


@pytest.mark.asyncio
async def test_get_product_by_sku(sku_client: AsyncClient):
    response = await sku_client.get("/api/products/B014TMV5YE")
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == "B014TMV5YE"
    assert data["category"] == 104
    assert data["rating"] == 4.5
    assert data["reviewCount"] == 0
    assert data["isBestSeller"] is False
    assert data["popularity"] == 2000
    assert "inStock" not in data


@pytest.mark.asyncio
async def test_sku_lookup_is_case_sensitive(sku_client: AsyncClient):
    response = await sku_client.get("/api/products/b014tmv5ye")
    assert response.status_code == 404
    assert response.json() == {"error": "Product not found"}


@pytest.mark.asyncio
async def test_best_sellers(sku_client: AsyncClient):
    response = await sku_client.get("/api/products/best-sellers", params={"limit": 2})
    assert response.status_code == 200
    assert [p["id"] for p in response.json()["results"]] == ["B07ZPKN6YR", "B09X5JNC5R"]


@pytest.mark.asyncio
async def test_best_sellers_empty_for_basic_catalog(client: AsyncClient):
    response = await client.get("/api/products/best-sellers")
    assert response.status_code == 200
    assert response.json() == {"results": []}
