"""Scraper utilities for rate limiting, browser sessions, and data normalization."""

from .rate_limiter import IntervalRateLimiter
from .user_agents import get_random_user_agent, USER_AGENTS
from .normalizer import (
    PLACEHOLDER_MARKERS,
    PriceNormalizer,
    RatingNormalizer,
    clean_text,
    derive_product_id,
    parse_specification,
    resolve_image_url,
)


__all__ = [
    # Rate limiting
    "IntervalRateLimiter",
    # User agents
    "get_random_user_agent",
    "USER_AGENTS",
    # Normalization
    "PLACEHOLDER_MARKERS",
    "PriceNormalizer",
    "RatingNormalizer",
    "clean_text",
    "derive_product_id",
    "parse_specification",
    "resolve_image_url",
]
