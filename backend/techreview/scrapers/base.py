"""Base scraper adapter interface.

All retailer-specific scrapers should inherit from BaseSiteAdapter
(usually through BaseScraperAdapter) and declare the selectors used
to pull product fields out of a rendered product page.
"""

from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

import structlog
from bs4 import BeautifulSoup

from playwright.async_api import Error as PlaywrightError, Page

from techreview.core.exceptions import ScrapeFailure
from techreview.scrapers.utils.normalizer import (
    PLACEHOLDER_MARKERS,
    PriceNormalizer,
    RatingNormalizer,
    clean_text,
    derive_product_id,
    parse_specification,
    resolve_image_url,
)


class SourceId(str, Enum):
    """Supported retailers."""

    THEGIOIDIDONG = "thegioididong"
    DIENMAYXANH = "dienmayxanh"


@dataclass
class ProductPrice:
    """Price as published by the retailer (no currency conversion)."""

    current: int
    currency: str
    original: Optional[int] = None


@dataclass
class ProductImage:
    url: str
    alt: Optional[str] = None


@dataclass
class ProductSpecification:
    name: str
    value: str


@dataclass
class ProductRating:
    average: float = 0.0
    count: int = 0


@dataclass
class ProductReview:
    rating: float
    comment: str
    author: Optional[str] = None
    date: Optional[str] = None


@dataclass
class NormalizedProduct:
    """Normalized product data structure returned by all adapters."""

    id: str  # Derived from the product URL
    name: str
    brand: str
    price: ProductPrice
    url: str
    source: SourceId
    description: str = ""
    images: List[ProductImage] = field(default_factory=list)
    specifications: List[ProductSpecification] = field(default_factory=list)
    reviews: List[ProductReview] = field(default_factory=list)  # Needs separate scraping
    rating: ProductRating = field(default_factory=ProductRating)
    availability: bool = True
    scraped_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        """Validate data after initialization."""
        if not self.id:
            raise ValueError("id is required")
        if not self.name:
            raise ValueError("name is required")
        if not self.url:
            raise ValueError("url is required")
        if self.price is None or self.price.current < 0:
            raise ValueError("price.current must be a non-negative integer")

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation."""
        data = asdict(self)
        data["source"] = self.source.value
        data["scraped_at"] = self.scraped_at.isoformat()
        return data


@dataclass
class ScrapingRequest:
    url: str
    source: Optional[str] = None  # None or "auto" means detect from url


@dataclass
class ScrapingResult:
    """Outcome of one scrape: either success with data, or failure with error.

    Build instances with succeeded() / failed() rather than directly.
    """

    success: bool
    data: Optional[NormalizedProduct] = None
    error: Optional[str] = None
    message: Optional[str] = None

    def __post_init__(self):
        if self.success and (self.data is None or self.error is not None):
            raise ValueError("successful result needs data and no error")
        if not self.success and (not self.error or self.data is not None):
            raise ValueError("failed result needs an error and no data")

    @classmethod
    def succeeded(
        cls, data: NormalizedProduct, message: Optional[str] = None
    ) -> "ScrapingResult":
        return cls(success=True, data=data, message=message)

    @classmethod
    def failed(cls, error: str) -> "ScrapingResult":
        return cls(success=False, error=error)

    def to_dict(self) -> Dict[str, Any]:
        if self.success:
            result: Dict[str, Any] = {"success": True, "data": self.data.to_dict()}
            if self.message:
                result["message"] = self.message
            return result
        return {"success": False, "error": self.error}


class BaseSiteAdapter(ABC):
    """Abstract base class for all retailer adapters.

    One adapter exists per SourceId. An adapter turns a product page URL
    into a NormalizedProduct or raises ScrapeFailure.
    """

    source: SourceId = None  # Must be overridden in subclass
    shop_name: str = ""  # Display name, e.g. "Thế Giới Di Động"
    hostnames: Tuple[str, ...] = ()  # Hostname substrings routed to this adapter
    origin: str = ""  # Canonical origin for resolving relative links
    currency: str = "VND"

    def __init__(self):
        """Initialize the adapter with dependency injection points."""
        self.browser_manager = None  # Injected by the registry
        self.logger = structlog.get_logger(adapter=self.source_name)

    @property
    def source_name(self) -> str:
        return self.source.value if self.source else ""

    @abstractmethod
    async def extract(self, url: str) -> NormalizedProduct:
        """Scrape a single product page.

        Args:
            url: Product page URL on this retailer

        Returns:
            NormalizedProduct

        Raises:
            ScrapeFailure: If the page could not be loaded or parsed
        """
        pass


class BaseScraperAdapter(BaseSiteAdapter):
    """Base class for browser-rendered product pages parsed with BeautifulSoup.

    Subclasses only declare selectors; the shared normalization rules
    (price, rating, images, specifications, id) live here and in
    techreview.scrapers.utils.normalizer so every retailer applies them
    identically.
    """

    # Marker that shows the product page has rendered
    content_selector: str = ""

    # Selectors are tried in order; the first non-empty text wins
    name_selectors: Tuple[str, ...] = ()
    brand_selectors: Tuple[str, ...] = ()
    price_selectors: Tuple[str, ...] = ()
    original_price_selectors: Tuple[str, ...] = ()
    description_selectors: Tuple[str, ...] = ()
    rating_selectors: Tuple[str, ...] = ()

    # Selectors whose matches are all collected, in page order
    image_selector: str = ""
    specification_selector: str = ""

    placeholder_markers: Tuple[str, ...] = PLACEHOLDER_MARKERS
    out_of_stock_selectors: Tuple[str, ...] = ()
    out_of_stock_phrases: Tuple[str, ...] = ()

    async def extract(self, url: str) -> NormalizedProduct:
        if self.browser_manager is None:
            raise ScrapeFailure(self.source_name, "no browser manager configured")

        self.logger.info("scrape_started", url=url)
        try:
            async with self.browser_manager.session() as page:
                html = await self._load_page(page, url)
        except PlaywrightError as e:
            self.logger.warning("page_load_failed", url=url, error=str(e))
            raise ScrapeFailure(self.source_name, str(e)) from e

        try:
            product = self.parse_product(html, url)
        except ScrapeFailure:
            raise
        except Exception as e:
            self.logger.warning("page_parse_failed", url=url, error=str(e))
            raise ScrapeFailure(self.source_name, f"could not parse product page: {e}") from e

        self.logger.info(
            "scrape_finished",
            url=url,
            product_id=product.id,
            price=product.price.current,
            images=len(product.images),
        )
        return product

    async def _load_page(self, page: Page, url: str) -> str:
        """Navigate, wait for the network to settle and the content marker to appear.

        Returns:
            Rendered HTML
        """
        manager = self.browser_manager
        await page.goto(url, wait_until="networkidle", timeout=manager.navigation_timeout_ms)
        if self.content_selector:
            await page.wait_for_selector(
                self.content_selector, timeout=manager.content_wait_timeout_ms
            )
        return await page.content()

    def parse_product(self, html: str, url: str) -> NormalizedProduct:
        """Parse a rendered product page into a NormalizedProduct."""
        soup = BeautifulSoup(html, "html.parser")

        name = self._first_text(soup, self.name_selectors)
        if not name:
            raise ScrapeFailure(self.source_name, "product name not found on page")

        brand = self._first_text(soup, self.brand_selectors) or name.split()[0]

        price = ProductPrice(
            current=PriceNormalizer.extract_price(self._first_text(soup, self.price_selectors)),
            currency=self.currency,
        )
        original_text = self._first_text(soup, self.original_price_selectors)
        if original_text:
            original = PriceNormalizer.extract_price(original_text)
            if original > price.current:
                price.original = original

        average, count = RatingNormalizer.parse(self._first_text(soup, self.rating_selectors))

        return NormalizedProduct(
            id=derive_product_id(url, self.source_name),
            name=name,
            brand=brand,
            price=price,
            url=url,
            source=self.source,
            description=self._first_text(soup, self.description_selectors),
            images=self._parse_images(soup),
            specifications=self._parse_specifications(soup),
            rating=ProductRating(average=average, count=count),
            availability=self._is_available(soup),
        )

    def _first_text(self, soup: BeautifulSoup, selectors: Tuple[str, ...]) -> str:
        for selector in selectors:
            node = soup.select_one(selector)
            if node:
                text = clean_text(node.get_text(" "))
                if text:
                    return text
        return ""

    def _parse_images(self, soup: BeautifulSoup) -> List[ProductImage]:
        if not self.image_selector:
            return []

        images: List[ProductImage] = []
        seen: set = set()
        for img in soup.select(self.image_selector):
            # Lazy-loaded images carry a sentinel in src and the real path in data-src
            image_url = None
            for attr in ("src", "data-src"):
                image_url = resolve_image_url(img.get(attr), self.origin, self.placeholder_markers)
                if image_url:
                    break
            if not image_url or image_url in seen:
                continue
            seen.add(image_url)
            images.append(ProductImage(url=image_url, alt=clean_text(img.get("alt", ""))))
        return images

    def _parse_specifications(self, soup: BeautifulSoup) -> List[ProductSpecification]:
        if not self.specification_selector:
            return []

        specs: List[ProductSpecification] = []
        for node in soup.select(self.specification_selector):
            parsed = parse_specification(node.get_text(" "))
            if parsed:
                specs.append(ProductSpecification(name=parsed[0], value=parsed[1]))
        return specs

    def _is_available(self, soup: BeautifulSoup) -> bool:
        """True unless the page carries an explicit out-of-stock signal."""
        for selector in self.out_of_stock_selectors:
            if soup.select_one(selector):
                return False

        if self.out_of_stock_phrases:
            # Related-product carousels carry their own stock labels
            scope = soup.select_one(self.content_selector) if self.content_selector else None
            text = clean_text((scope or soup).get_text(" ")).lower()
            if any(phrase.lower() in text for phrase in self.out_of_stock_phrases):
                return False
        return True
