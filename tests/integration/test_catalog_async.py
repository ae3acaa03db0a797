"""
Async client tests for the catalog routes
"""

import pytest
from httpx import ASGITransport, AsyncClient

pytestmark = pytest.mark.integration


@pytest.mark.asyncio
async def test_filtered_components_async(app):
    """The pipeline route answers over an async client"""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get(
            "/filtered-components",
            params={"type": "CPU", "brand": "Intel", "sort": "name", "page": "1"},
        )

    assert response.status_code == 200, f"Expected 200, got {response.status_code}"
    assert "Intel Core i9-10900K" in response.text


@pytest.mark.asyncio
async def test_concurrent_requests_see_same_catalog(app):
    """Requests share the read-only catalog without interfering"""
    import asyncio

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        responses = await asyncio.gather(
            client.get("/filtered-components", params={"sort": "name"}),
            client.get("/filtered-components", params={"sort": "price"}),
            client.get("/filtered-components"),
        )

    by_name, by_price, unsorted = (r.text for r in responses)
    assert "AMD Radeon RX 6800 XT" in by_name
    assert "EVGA SuperNOVA 850 G5" in by_price
    assert "Intel Core i9-10900K" in unsorted


@pytest.mark.asyncio
async def test_empty_result_async(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/filtered-components", params={"brand": "Apple"})

    assert response.status_code == 404
    assert response.json() == {"error": "No data available"}
