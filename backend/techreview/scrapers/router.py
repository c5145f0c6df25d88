"""Classify product URLs by hostname into a registered retailer."""

from typing import Optional
from urllib.parse import urlparse

from techreview.core.exceptions import InvalidUrlError, UnsupportedSourceError
from techreview.scrapers.base import SourceId
from techreview.scrapers.factory import AdapterRegistry


class SourceRouter:
    """Maps a URL's hostname to the SourceId of the adapter that handles it.

    Matching is a case-insensitive substring test against the hostnames
    declared by registered adapters; the first registered match wins.
    """

    def __init__(self, registry: AdapterRegistry):
        self.registry = registry

    def classify(self, url: str) -> SourceId:
        """Classify a URL.

        Raises:
            InvalidUrlError: The string is not an absolute http(s) URL
            UnsupportedSourceError: No registered retailer matches the hostname
        """
        hostname = self._hostname(url)
        if hostname is None:
            raise InvalidUrlError(url)

        for pattern, source in self.registry.hostname_table():
            if pattern in hostname:
                return source

        raise UnsupportedSourceError(hostname, self.registry.supported_hostnames())

    def is_supported(self, url: str) -> bool:
        """Cheap validity probe: parses and matches a registered hostname."""
        try:
            self.classify(url)
        except (InvalidUrlError, UnsupportedSourceError):
            return False
        return True

    @staticmethod
    def _hostname(url: str) -> Optional[str]:
        if not isinstance(url, str):
            return None
        try:
            parsed = urlparse(url.strip())
            hostname = parsed.hostname
        except ValueError:
            return None
        if parsed.scheme not in ("http", "https") or not hostname:
            return None
        return hostname.lower()
