"""Pydantic schemas for the scrape endpoint.

These mirror the dataclasses in techreview.scrapers.base and are built
from them with from_attributes, so the HTTP shape follows the model.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from techreview.scrapers.base import SourceId


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class ScrapeRequestBody(BaseModel):
    """Either a single url (with optional source hint) or a list of urls."""

    url: Optional[str] = Field(
        None,
        description="Product page URL",
        examples=["https://www.thegioididong.com/dtdd/samsung-galaxy-s24-ultra-5g"],
    )
    urls: Optional[List[str]] = Field(
        None,
        description="Product page URLs, scraped sequentially in order",
    )
    source: Optional[str] = Field(
        None,
        description="Source hint: 'thegioididong', 'dienmayxanh' or 'auto'",
        examples=["auto"],
    )


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class _FromAttributes(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class PriceResponse(_FromAttributes):
    current: int
    currency: str
    original: Optional[int] = None


class ImageResponse(_FromAttributes):
    url: str
    alt: Optional[str] = None


class SpecificationResponse(_FromAttributes):
    name: str
    value: str


class RatingResponse(_FromAttributes):
    average: float
    count: int


class ReviewResponse(_FromAttributes):
    rating: float
    comment: str
    author: Optional[str] = None
    date: Optional[str] = None


class ProductResponse(_FromAttributes):
    """Normalized product as returned by the scraper."""

    id: str
    name: str
    brand: str
    price: PriceResponse
    description: str
    images: List[ImageResponse]
    specifications: List[SpecificationResponse]
    reviews: List[ReviewResponse]
    rating: RatingResponse
    availability: bool
    url: str
    source: SourceId
    scraped_at: datetime


class ScrapeResultResponse(_FromAttributes):
    """One scrape outcome: success with data, or failure with error."""

    success: bool
    data: Optional[ProductResponse] = None
    error: Optional[str] = None
    message: Optional[str] = None


class BatchScrapeResponse(BaseModel):
    success: bool = True
    data: List[ScrapeResultResponse]
    message: str


class ScrapeErrorResponse(BaseModel):
    success: bool = False
    error: str
