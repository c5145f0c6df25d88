"""Health check endpoint."""

from fastapi import APIRouter, Depends

from techreview.config import settings
from techreview.dependencies import get_scraper
from techreview.schemas import HealthCheckResponse
from techreview.scrapers.scraper_service import ScraperService

router = APIRouter()


@router.get("/health", response_model=HealthCheckResponse)
async def health_check(service: ScraperService = Depends(get_scraper)):
    """Return service status and the retailers that can be scraped."""
    sources = [source.value for source in service.registry.get_registered_sources()]
    return HealthCheckResponse(
        status="ok" if sources else "degraded",
        environment=settings.ENVIRONMENT,
        sources=sources,
    )
