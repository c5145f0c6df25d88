"""Data normalization utilities shared by every site adapter.

Price, rating, image, specification and id rules must behave identically
across retailers, so adapters never reimplement them.
"""

import re
import time
from typing import Optional, Tuple
from urllib.parse import urljoin, urlparse


# Substrings marking lazy-load sentinels and "no image" stand-ins
PLACEHOLDER_MARKERS: Tuple[str, ...] = ("placeholder", "data:image")

# First run of digits with thousands separators: "25.000.000đ", "25,000,000"
_PRICE_PATTERN = re.compile(r"\d[\d.,]*")
_RATING_AVERAGE_PATTERN = re.compile(r"(\d+(?:\.\d+)?)")
_RATING_COUNT_PATTERN = re.compile(r"\((\d+)\)")
_ID_STRIP_PATTERN = re.compile(r"[^A-Za-z0-9-]")


class PriceNormalizer:
    """Price parsing utilities.

    Prices are kept in the unit the retailer publishes; no currency
    conversion happens here.
    """

    @staticmethod
    def extract_price(text: Optional[str]) -> int:
        """Extract the first price-like number from text.

        Handles formats such as:
        - "25.000.000đ" -> 25000000
        - "25,000,000" -> 25000000
        - "Giá: 1.990.000₫ (-10%)" -> 1990000

        Args:
            text: Text containing price information

        Returns:
            Integer price, or 0 when the text contains no digits
        """
        if not text:
            return 0

        match = _PRICE_PATTERN.search(text)
        if not match:
            return 0

        digits = re.sub(r"\D", "", match.group(0))
        return int(digits) if digits else 0


class RatingNormalizer:
    """Rating parsing for free-text strings like "4.5 (100)"."""

    @staticmethod
    def parse(text: Optional[str]) -> Tuple[float, int]:
        """Parse an average score and a parenthesized review count.

        The parenthesized count is removed before looking for the average
        so that "(100)" alone is not read as a 100-star average.

        Args:
            text: Rating text scraped from the page

        Returns:
            Tuple of (average, count); each is 0 when not found
        """
        if not text:
            return 0.0, 0

        count_match = _RATING_COUNT_PATTERN.search(text)
        count = int(count_match.group(1)) if count_match else 0

        remainder = _RATING_COUNT_PATTERN.sub(" ", text)
        average_match = _RATING_AVERAGE_PATTERN.search(remainder)
        average = float(average_match.group(1)) if average_match else 0.0

        return average, count


def clean_text(text: Optional[str]) -> str:
    """Collapse runs of whitespace and strip."""
    if not text:
        return ""
    return " ".join(text.split())


def resolve_image_url(
    src: Optional[str],
    origin: str,
    placeholder_markers: Tuple[str, ...] = PLACEHOLDER_MARKERS,
) -> Optional[str]:
    """Turn an <img> source into an absolute URL.

    Args:
        src: Raw src / data-src attribute value
        origin: Retailer origin, e.g. "https://www.thegioididong.com"
        placeholder_markers: Substrings identifying placeholder images

    Returns:
        Absolute image URL, or None for empty or placeholder sources
    """
    if not src:
        return None

    src = src.strip()
    if not src:
        return None

    resolved = urljoin(origin.rstrip("/") + "/", src)
    lowered = resolved.lower()
    if any(marker in lowered for marker in placeholder_markers):
        return None
    return resolved


def parse_specification(line: Optional[str]) -> Optional[Tuple[str, str]]:
    """Split a "name: value" line.

    Only the first colon separates name from value, so "Giờ mở cửa: 8:00"
    keeps its full value.

    Returns:
        (name, value), or None for lines without a colon or with an empty side
    """
    text = clean_text(line)
    if ":" not in text:
        return None

    name, _, value = text.partition(":")
    name, value = name.strip(), value.strip()
    if not name or not value:
        return None
    return name, value


def derive_product_id(url: str, source: str, now: Optional[float] = None) -> str:
    """Derive a stable product id from its URL.

    Uses the last non-empty path segment with everything except letters,
    digits and hyphens removed. Falls back to "<source>-<epoch millis>".

    Args:
        url: Product page URL
        source: Source name used in the fallback id
        now: Timestamp override for the fallback (seconds since epoch)

    Returns:
        Non-empty product id
    """
    segments = [segment for segment in urlparse(url).path.split("/") if segment]
    product_id = _ID_STRIP_PATTERN.sub("", segments[-1]) if segments else ""
    if product_id:
        return product_id

    timestamp = time.time() if now is None else now
    return f"{source}-{int(timestamp * 1000)}"
