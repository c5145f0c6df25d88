"""Retailer-specific adapter implementations.

Each adapter module should implement a class that inherits from
BaseScraperAdapter and declares the selectors for its product pages.
"""

from .thegioididong import ThegioididongAdapter
from .dienmayxanh import DienmayxanhAdapter

__all__ = [
    "ThegioididongAdapter",
    "DienmayxanhAdapter",
]
