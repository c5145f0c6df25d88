"""Product-page scraper for supported Vietnamese electronics retailers.

This package provides:
- The normalized product model every adapter returns
- Base adapter classes for building retailer-specific scrapers
- A registry and hostname router for picking the right adapter
- A process-wide rate limiter and the single/batch orchestrator
"""

from .base import (
    BaseSiteAdapter,
    BaseScraperAdapter,
    NormalizedProduct,
    ProductImage,
    ProductPrice,
    ProductRating,
    ProductReview,
    ProductSpecification,
    ScrapingRequest,
    ScrapingResult,
    SourceId,
)
from .factory import AdapterRegistry, adapter_registry, get_adapter_registry
from .router import SourceRouter
from .scraper_service import (
    ScraperService,
    get_scraper_service,
    scrape_multiple_products,
    scrape_product,
)

__all__ = [
    # Base classes
    "BaseSiteAdapter",
    "BaseScraperAdapter",
    # Data structures
    "NormalizedProduct",
    "ProductImage",
    "ProductPrice",
    "ProductRating",
    "ProductReview",
    "ProductSpecification",
    "ScrapingRequest",
    "ScrapingResult",
    "SourceId",
    # Registry and routing
    "AdapterRegistry",
    "adapter_registry",
    "get_adapter_registry",
    "SourceRouter",
    # Orchestration
    "ScraperService",
    "get_scraper_service",
    "scrape_product",
    "scrape_multiple_products",
]
