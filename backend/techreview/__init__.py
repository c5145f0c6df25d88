"""techreview -- product scraping backend for the affiliate review site."""

__version__ = "0.1.0"
