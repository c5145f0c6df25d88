"""Tests for the HTTP surface over the scraper service."""

from unittest.mock import AsyncMock, patch

import pytest
from httpx import ASGITransport, AsyncClient

from techreview.dependencies import get_scraper
from techreview.main import app
from techreview.scrapers.adapters import DienmayxanhAdapter, ThegioididongAdapter

from conftest import DMX_URL, TGDD_URL

pytestmark = pytest.mark.anyio


@pytest.fixture
async def client(anyio_backend, service):
    app.dependency_overrides[get_scraper] = lambda: service
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


async def test_health(client):
    response = await client.get("/api/v1/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["sources"] == ["thegioididong", "dienmayxanh"]


async def test_describe_lists_supported_sites(client):
    response = await client.get("/api/v1/scrape")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["endpoints"]["supported_sites"] == ["thegioididong.com", "dienmayxanh.com"]


async def test_scrape_single_success(client, make_product):
    with patch.object(ThegioididongAdapter, "extract", new_callable=AsyncMock,
                      return_value=make_product()):
        response = await client.post("/api/v1/scrape", json={"url": TGDD_URL})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Product scraped successfully"
    assert body["data"]["source"] == "thegioididong"
    assert body["data"]["price"]["current"] == 25000000
    assert body["data"]["reviews"] == []
    assert "error" not in body


async def test_scrape_single_failure_is_400(client):
    response = await client.post("/api/v1/scrape", json={"url": "https://www.amazon.com/dp/B0"})

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert "Invalid URL" in body["error"]
    assert "data" not in body


async def test_scrape_single_passes_source_hint(client, make_product):
    with patch.object(DienmayxanhAdapter, "extract", new_callable=AsyncMock,
                      return_value=make_product(TGDD_URL)) as extract:
        response = await client.post(
            "/api/v1/scrape", json={"url": TGDD_URL, "source": "dienmayxanh"}
        )

    assert response.status_code == 200
    extract.assert_awaited_once_with(TGDD_URL)


async def test_scrape_batch_keeps_order_and_failures(client, make_product):
    with patch.object(ThegioididongAdapter, "extract", new_callable=AsyncMock,
                      return_value=make_product()), \
            patch.object(DienmayxanhAdapter, "extract", new_callable=AsyncMock,
                         side_effect=Exception("Scraping failed")):
        response = await client.post(
            "/api/v1/scrape", json={"urls": [TGDD_URL, DMX_URL, "invalid-url"]}
        )

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Scraped 3 products"
    assert [item["success"] for item in body["data"]] == [True, False, False]
    assert body["data"][1]["error"] == "Scraping failed"


async def test_scrape_empty_batch(client):
    response = await client.post("/api/v1/scrape", json={"urls": []})

    assert response.status_code == 200
    assert response.json()["data"] == []


async def test_scrape_requires_url_or_urls(client):
    response = await client.post("/api/v1/scrape", json={})

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "URL or URLs are required"}


async def test_root_points_at_endpoints(client):
    response = await client.get("/")

    assert response.status_code == 200
    assert response.json()["scrape"] == "/api/v1/scrape"
