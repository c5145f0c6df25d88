"""Pytest configuration and shared fixtures."""

from contextlib import asynccontextmanager
from unittest.mock import AsyncMock

import pytest

from techreview.scrapers.base import (
    NormalizedProduct,
    ProductPrice,
    ProductRating,
    SourceId,
)
from techreview.scrapers.factory import AdapterRegistry
from techreview.scrapers.register_adapters import register_all_adapters
from techreview.scrapers.scraper_service import ScraperService
from techreview.scrapers.utils.rate_limiter import IntervalRateLimiter


TGDD_URL = "https://www.thegioididong.com/dtdd/samsung-galaxy-s24-ultra-5g"
DMX_URL = "https://www.dienmayxanh.com/tu-lanh/samsung-rt22m4032by-sv"


class FakePage:
    """Stands in for a Playwright Page that already rendered `html`."""

    def __init__(self, html: str = ""):
        self.goto = AsyncMock()
        self.wait_for_selector = AsyncMock()
        self.content = AsyncMock(return_value=html)


class FakeBrowserManager:
    """BrowserManager double that counts opened and closed sessions."""

    navigation_timeout_ms = 30000
    content_wait_timeout_ms = 10000

    def __init__(self, html: str = ""):
        self.page = FakePage(html)
        self.opened = 0
        self.closed = 0

    @asynccontextmanager
    async def session(self):
        self.opened += 1
        try:
            yield self.page
        finally:
            self.closed += 1


@pytest.fixture
def anyio_backend():
    """Use asyncio as the async backend for tests."""
    return "asyncio"


@pytest.fixture
def fake_browser() -> FakeBrowserManager:
    return FakeBrowserManager()


@pytest.fixture
def registry(fake_browser: FakeBrowserManager) -> AdapterRegistry:
    """Registry with every real adapter, wired to a fake browser."""
    return register_all_adapters(AdapterRegistry(browser_manager=fake_browser))


@pytest.fixture
def service(registry: AdapterRegistry) -> ScraperService:
    """Service with a short interval so tests stay fast."""
    return ScraperService(
        registry=registry,
        rate_limiter=IntervalRateLimiter(min_interval=0.05),
        batch_delay=0.0,
    )


@pytest.fixture
def make_product():
    """Factory for valid NormalizedProduct instances."""

    def _make(url: str = TGDD_URL, source: SourceId = SourceId.THEGIOIDIDONG, **overrides):
        values = dict(
            id=url.rstrip("/").rsplit("/", 1)[-1],
            name="Samsung Galaxy S24 Ultra",
            brand="Samsung",
            price=ProductPrice(current=25000000, currency="VND"),
            url=url,
            source=source,
            description="Test description",
            rating=ProductRating(average=4.5, count=100),
        )
        values.update(overrides)
        return NormalizedProduct(**values)

    return _make
