"""Thế Giới Di Động (thegioididong.com) scraper adapter.

Product pages are rendered client-side; the page is ready once
.product-info exists.

Structure:
  - .product-info h1 (name), .product-info .brand
  - .product-info .price (current), .product-info .price-old (list price)
  - .product-info img / .product-image img (gallery)
  - .specs li / .specification li ("Màn hình: 6.8 inch")
  - .product-info .rating ("4.5 (100)")
"""

import structlog

from techreview.scrapers.base import BaseScraperAdapter, SourceId
from techreview.scrapers.utils.normalizer import PLACEHOLDER_MARKERS


logger = structlog.get_logger()


class ThegioididongAdapter(BaseScraperAdapter):
    """Thế Giới Di Động product page adapter."""

    source = SourceId.THEGIOIDIDONG
    shop_name = "Thế Giới Di Động"
    hostnames = ("thegioididong.com",)
    origin = "https://www.thegioididong.com"
    currency = "VND"

    content_selector = ".product-info"

    name_selectors = (".product-info h1", ".product-name")
    brand_selectors = (".product-info .brand",)
    price_selectors = (".product-info .price", ".price-current")
    original_price_selectors = (".product-info .price-old", ".box-price-old")
    description_selectors = (
        ".product-info .description",
        ".product-detail .content",
        ".product-info p",
    )
    rating_selectors = (".product-info .rating",)

    image_selector = ".product-info img, .product-image img"
    specification_selector = ".product-info .specs li, .product-detail .specification li"

    placeholder_markers = PLACEHOLDER_MARKERS + ("no-image",)
    out_of_stock_selectors = (".product-info .stop-selling",)
    out_of_stock_phrases = ("Ngừng kinh doanh", "Hết hàng")

    def __init__(self):
        super().__init__()
        self.logger = logger.bind(adapter=self.source_name)
