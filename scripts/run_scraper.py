"""Manual scraper runner for testing and debugging adapters.

Scrapes one or more product pages through the same service the API
uses (validation, rate limiting, per-item failure isolation) and prints
the results.

Usage:
    python scripts/run_scraper.py https://www.thegioididong.com/dtdd/samsung-galaxy-s24-ultra-5g
    python scripts/run_scraper.py URL1 URL2 --json
    python scripts/run_scraper.py URL --source dienmayxanh
"""

import asyncio
import argparse
import json
import sys
import os
from typing import List, Optional

# Add backend to path so we can import techreview modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "backend"))

from techreview.scrapers.base import ScrapingRequest, ScrapingResult
from techreview.scrapers.scraper_service import get_scraper_service


async def run_scraper(urls: List[str], source: Optional[str] = None) -> List[ScrapingResult]:
    """Scrape the given URLs with the default service.

    Args:
        urls: Product page URLs
        source: Optional source hint, only used for a single URL

    Returns:
        One result per URL, in order
    """
    service = get_scraper_service()
    if len(urls) == 1:
        return [await service.scrape_product(ScrapingRequest(url=urls[0], source=source))]
    return await service.scrape_multiple_products(urls)


def _print_result(index: int, result: ScrapingResult) -> None:
    if not result.success:
        print(f"[{index}] ❌ {result.error}\n")
        return

    product = result.data
    print(f"[{index}] {product.name}")
    print(f"    🏢 Brand: {product.brand}")
    print(f"    💰 Price: {_format_price(product.price.current, product.price.currency)}")
    if product.price.original:
        print(f"    🔖 Original: {_format_price(product.price.original, product.price.currency)}")
    print(f"    ⭐ Rating: {product.rating.average} ({product.rating.count})")
    print(f"    📦 Available: {'yes' if product.availability else 'no'}")
    print(f"    🖼️  Images: {len(product.images)}  📋 Specs: {len(product.specifications)}")
    print(f"    🔗 URL: {product.url[:80]}")
    print()


def _format_price(price: int, currency: str) -> str:
    """Format price with currency symbol.

    Args:
        price: The price value
        currency: Currency code (e.g., "VND")

    Returns:
        Formatted price string
    """
    if currency == "VND":
        return f"{price:,}".replace(",", ".") + "₫"
    return f"{price:,} {currency}"


def main():
    """Parse arguments and run the scraper."""
    parser = argparse.ArgumentParser(
        description="Scrape product pages from supported retailers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/run_scraper.py https://www.thegioididong.com/dtdd/samsung-galaxy-s24-ultra-5g
  python scripts/run_scraper.py URL1 URL2 --json
        """,
    )

    parser.add_argument("urls", nargs="+", help="Product page URL(s)")

    parser.add_argument(
        "--source",
        help="Source hint for a single URL (e.g., 'thegioididong', 'dienmayxanh', 'auto')",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON instead of a summary",
    )

    args = parser.parse_args()

    results = asyncio.run(run_scraper(args.urls, args.source))

    if args.json:
        print(json.dumps([r.to_dict() for r in results], ensure_ascii=False, indent=2))
    else:
        print(f"\n{'='*70}")
        print(f"  Scraped {len(results)} URL(s)")
        print(f"{'='*70}\n")
        for i, result in enumerate(results, 1):
            _print_result(i, result)

    failed = sum(1 for r in results if not r.success)
    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    main()
