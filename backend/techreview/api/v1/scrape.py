"""Product scraping endpoint.

Thin HTTP wrapper over the scraper service:

  - POST {"url": ..., "source"?: ...}  -> one result (400 when it failed)
  - POST {"urls": [...]}                -> every result, in order (always 200)
  - GET                                 -> usage description

All scraping failures arrive as result values from the service, so this
module never has to catch scraper exceptions.
"""

import structlog
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from techreview.dependencies import get_scraper
from techreview.schemas.scrape import (
    BatchScrapeResponse,
    ScrapeErrorResponse,
    ScrapeRequestBody,
    ScrapeResultResponse,
)
from techreview.scrapers.base import ScrapingRequest
from techreview.scrapers.scraper_service import ScraperService

router = APIRouter()
logger = structlog.get_logger(__name__)


@router.post("/scrape")
async def scrape(body: ScrapeRequestBody, service: ScraperService = Depends(get_scraper)):
    """Scrape one product URL or a batch of URLs."""
    if body.url:
        result = await service.scrape_product(ScrapingRequest(url=body.url, source=body.source))
        payload = ScrapeResultResponse.model_validate(result).model_dump(mode="json", exclude_none=True)
        status_code = status.HTTP_200_OK if result.success else status.HTTP_400_BAD_REQUEST
        return JSONResponse(content=payload, status_code=status_code)

    if body.urls is not None:
        logger.info("batch_scrape_requested", count=len(body.urls))
        results = await service.scrape_multiple_products(body.urls)
        response = BatchScrapeResponse(
            data=[ScrapeResultResponse.model_validate(result) for result in results],
            message=f"Scraped {len(results)} products",
        )
        return JSONResponse(content=response.model_dump(mode="json", exclude_none=True))

    error = ScrapeErrorResponse(error="URL or URLs are required")
    return JSONResponse(content=error.model_dump(), status_code=status.HTTP_400_BAD_REQUEST)


@router.get("/scrape")
async def describe_scrape(service: ScraperService = Depends(get_scraper)):
    """Describe the scrape endpoint and the supported websites."""
    return {
        "success": True,
        "message": "Product Scraping API",
        "endpoints": {
            "POST": "/api/v1/scrape",
            "description": "Scrape product information from Vietnamese e-commerce websites",
            "supported_sites": service.registry.supported_hostnames(),
            "example": {
                "single": {
                    "url": "https://www.thegioididong.com/dtdd/samsung-galaxy-s24-ultra-5g",
                },
                "multiple": {"urls": ["url1", "url2"]},
            },
        },
    }
