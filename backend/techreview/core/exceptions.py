"""Custom exception classes for the scraper."""

from typing import Iterable


class TechReviewException(Exception):
    """Base exception for all scraper errors."""

    def __init__(self, message: str = "An unexpected error occurred"):
        self.message = message
        super().__init__(self.message)


class InvalidUrlError(TechReviewException):
    """Raised when the input does not parse as an absolute http(s) URL."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Invalid URL: {url!r}")


class UnsupportedSourceError(TechReviewException):
    """Raised when a URL or source hint matches no registered retailer."""

    def __init__(self, value: str, supported: Iterable[str]):
        self.value = value
        self.supported = list(supported)
        super().__init__(
            f"Unsupported source: {value!r}. Only {join_names(self.supported)} are supported."
        )


class ScrapeFailure(TechReviewException):
    """Raised when a site adapter could not complete extraction."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Scraper error for {source}: {reason}")


def join_names(names: list) -> str:
    """Render ["a", "b", "c"] as "a, b and c"."""
    if not names:
        return "no websites"
    if len(names) == 1:
        return names[0]
    return ", ".join(names[:-1]) + " and " + names[-1]
