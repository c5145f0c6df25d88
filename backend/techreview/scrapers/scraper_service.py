"""Scraper orchestration service.

Composes URL validation, routing, rate limiting and adapter invocation
into a single fallible operation, and drives it over batches of URLs.
Failures are returned as ScrapingResult values; nothing raises out of
scrape_product() or scrape_multiple_products().
"""

import asyncio
from typing import List, Optional, Sequence, Union

import structlog

from techreview.config import settings
from techreview.core.exceptions import UnsupportedSourceError, join_names
from techreview.scrapers.base import ScrapingRequest, ScrapingResult, SourceId
from techreview.scrapers.factory import AdapterRegistry, get_adapter_registry
from techreview.scrapers.register_adapters import register_all_adapters
from techreview.scrapers.router import SourceRouter
from techreview.scrapers.utils.rate_limiter import IntervalRateLimiter

logger = structlog.get_logger(__name__)

SUCCESS_MESSAGE = "Product scraped successfully"
UNKNOWN_ERROR = "Unknown error occurred"
AUTO_SOURCE = "auto"


class ScraperService:
    """Service for scraping product pages one at a time or in ordered batches.

    All collaborators are injectable so tests can build independent
    instances instead of sharing process-wide state.
    """

    def __init__(
        self,
        registry: Optional[AdapterRegistry] = None,
        rate_limiter: Optional[IntervalRateLimiter] = None,
        router: Optional[SourceRouter] = None,
        batch_delay: Optional[float] = None,
    ):
        """Initialize scraper service.

        Args:
            registry: Adapter registry; the global one when omitted
            rate_limiter: Shared gate; a new one built from settings when omitted
            router: Source router; built on the registry when omitted
            batch_delay: Pause between batch items in seconds; defaults to
                the rate limiter's interval
        """
        self.registry = registry if registry is not None else get_adapter_registry()
        self.rate_limiter = rate_limiter or IntervalRateLimiter(
            min_interval=settings.SCRAPE_MIN_INTERVAL_SECONDS
        )
        self.router = router or SourceRouter(self.registry)
        self.batch_delay = self.rate_limiter.min_interval if batch_delay is None else batch_delay
        self.logger = logger.bind(service="scraper_service")

    def invalid_url_message(self) -> str:
        hostnames = self.registry.supported_hostnames()
        return f"Invalid URL. Only {join_names(hostnames)} are supported."

    async def scrape_product(self, request: Union[ScrapingRequest, str]) -> ScrapingResult:
        """Scrape a single product page.

        Invalid URLs are rejected before the rate limiter is touched, so
        they never consume a slot.

        Args:
            request: ScrapingRequest, or a bare URL

        Returns:
            ScrapingResult; never raises
        """
        if isinstance(request, str):
            request = ScrapingRequest(url=request)

        try:
            if not self.router.is_supported(request.url):
                self.logger.info("scrape_rejected", url=request.url, reason="invalid_url")
                return ScrapingResult.failed(self.invalid_url_message())

            await self.rate_limiter.throttle()

            source = self._resolve_source(request)
            adapter = self.registry.create_adapter(source)
            if adapter is None:
                raise UnsupportedSourceError(source.value, self._supported_source_names())

            self.logger.info("scrape_dispatched", url=request.url, source=source.value)
            product = await adapter.extract(request.url)
        except Exception as e:
            error = str(e) or UNKNOWN_ERROR
            self.logger.error(
                "scrape_failed",
                url=request.url,
                error=error,
                error_type=type(e).__name__,
            )
            return ScrapingResult.failed(error)

        return ScrapingResult.succeeded(product, message=SUCCESS_MESSAGE)

    async def scrape_multiple_products(self, urls: Sequence[str]) -> List[ScrapingResult]:
        """Scrape URLs strictly one after another.

        One result per URL, in input order. A failing item is recorded in
        place and never stops the rest of the batch.

        Args:
            urls: Product page URLs

        Returns:
            List of ScrapingResult, same length and order as urls
        """
        results: List[ScrapingResult] = []
        total = len(urls)

        for index, url in enumerate(urls):
            result = await self.scrape_product(ScrapingRequest(url=url))
            results.append(result)

            if index < total - 1:
                await asyncio.sleep(self.batch_delay)

        self.logger.info(
            "batch_complete",
            total=total,
            succeeded=sum(1 for r in results if r.success),
            failed=sum(1 for r in results if not r.success),
        )
        return results

    def _resolve_source(self, request: ScrapingRequest) -> SourceId:
        """Use the request's source hint when given, otherwise classify the URL."""
        hint = request.source
        if hint is None or hint == AUTO_SOURCE:
            return self.router.classify(request.url)

        try:
            source = SourceId(hint)
        except ValueError:
            raise UnsupportedSourceError(str(hint), self._supported_source_names()) from None

        if not self.registry.has_adapter(source):
            raise UnsupportedSourceError(source.value, self._supported_source_names())
        return source

    def _supported_source_names(self) -> List[str]:
        return [source.value for source in self.registry.get_registered_sources()]


# Default service shared by the whole process
_scraper_service: Optional[ScraperService] = None


def get_scraper_service() -> ScraperService:
    """Get the global ScraperService, registering adapters on first use."""
    global _scraper_service
    if _scraper_service is None:
        registry = get_adapter_registry()
        if not registry.get_registered_sources():
            register_all_adapters(registry)
        _scraper_service = ScraperService(
            registry=registry,
            batch_delay=settings.get_batch_item_delay(),
        )
    return _scraper_service


async def scrape_product(request: Union[ScrapingRequest, str]) -> ScrapingResult:
    """Scrape one product with the default service."""
    return await get_scraper_service().scrape_product(request)


async def scrape_multiple_products(urls: Sequence[str]) -> List[ScrapingResult]:
    """Scrape a batch of products with the default service."""
    return await get_scraper_service().scrape_multiple_products(urls)
