"""FastAPI dependency injection providers."""

from techreview.scrapers.scraper_service import ScraperService, get_scraper_service


def get_scraper() -> ScraperService:
    """Return the process-wide scraper service.

    Every request shares it so the rate limiter spaces scrapes across
    concurrent requests. Override in tests with app.dependency_overrides.
    """
    return get_scraper_service()
