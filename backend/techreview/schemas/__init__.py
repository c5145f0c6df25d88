"""Pydantic schemas for the scraper API.

All request/response models are defined here for easy import.
"""

from techreview.schemas.health import HealthCheckResponse
from techreview.schemas.scrape import (
    BatchScrapeResponse,
    ProductResponse,
    ScrapeErrorResponse,
    ScrapeRequestBody,
    ScrapeResultResponse,
)

__all__ = [
    "HealthCheckResponse",
    "BatchScrapeResponse",
    "ProductResponse",
    "ScrapeErrorResponse",
    "ScrapeRequestBody",
    "ScrapeResultResponse",
]
