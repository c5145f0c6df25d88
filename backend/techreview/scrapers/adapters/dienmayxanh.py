"""Điện Máy Xanh (dienmayxanh.com) scraper adapter.

Same parent company as Thế Giới Di Động, but the appliance pages use the
"box" layout: .box-main wraps the product block and the price sits in
.box-price-present. Older product pages still use .product-info.
"""

import structlog

from techreview.scrapers.base import BaseScraperAdapter, SourceId


logger = structlog.get_logger()


class DienmayxanhAdapter(BaseScraperAdapter):
    """Điện Máy Xanh product page adapter."""

    source = SourceId.DIENMAYXANH
    shop_name = "Điện Máy Xanh"
    hostnames = ("dienmayxanh.com",)
    origin = "https://www.dienmayxanh.com"
    currency = "VND"

    content_selector = ".box-main, .product-info"

    name_selectors = (".box-main h1", ".product-info h1", ".product-name")
    brand_selectors = (".box-main .brand", ".product-info .brand")
    price_selectors = (".box-price-present", ".product-info .price", ".price-current")
    original_price_selectors = (".box-price-old", ".product-info .price-old")
    description_selectors = (
        ".article-content",
        ".product-detail .content",
        ".product-info .description",
    )
    rating_selectors = (".box-rating", ".product-info .rating")

    image_selector = ".box-main .gallery img, .product-image img, .product-info img"
    specification_selector = ".parameter li, .product-detail .specification li"

    out_of_stock_selectors = (".box-main .stop-selling", ".productstatus.out-of-stock")
    out_of_stock_phrases = ("Ngừng kinh doanh", "Hết hàng")

    def __init__(self):
        super().__init__()
        self.logger = logger.bind(adapter=self.source_name)
