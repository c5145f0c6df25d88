"""Scraper backend -- FastAPI Application Entry Point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from techreview.api.v1.router import api_v1_router
from techreview.config import settings
from techreview.scrapers.scraper_service import get_scraper_service

# Configure logging
logging.basicConfig(
    level=logging.INFO if settings.DEBUG else logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown events."""
    logger.info("Starting scraper API server...")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.info(f"Minimum scrape interval: {settings.SCRAPE_MIN_INTERVAL_SECONDS}s")

    # Builds the shared service and registers all adapters
    service = get_scraper_service()
    logger.info(
        "Registered sources: "
        + ", ".join(source.value for source in service.registry.get_registered_sources())
    )

    yield

    logger.info("Shutting down scraper API server...")


app = FastAPI(
    title="TechReview Scraper API",
    description="Product scraping backend for the affiliate review site",
    version="0.1.0",
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_URL, "http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_v1_router, prefix="/api/v1")


@app.get("/")
async def root():
    """Root endpoint - API information. Start with: uvicorn techreview.main:app --port 8000"""
    return {
        "name": "TechReview Scraper API",
        "version": "0.1.0",
        "docs": "/docs" if settings.DEBUG else None,
        "health": "/api/v1/health",
        "scrape": "/api/v1/scrape",
    }
