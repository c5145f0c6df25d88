"""Application configuration via Pydantic Settings."""

from typing import Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global scraper settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    # App
    ENVIRONMENT: str = "development"
    DEBUG: bool = True

    # Politeness: minimum spacing between the starts of two scrapes
    SCRAPE_MIN_INTERVAL_SECONDS: float = 2.0

    # Extra pause between batch items. None reuses SCRAPE_MIN_INTERVAL_SECONDS.
    BATCH_ITEM_DELAY_SECONDS: Optional[float] = None

    # Playwright timeouts
    NAVIGATION_TIMEOUT_MS: int = 30000
    CONTENT_WAIT_TIMEOUT_MS: int = 10000

    # Browser
    BROWSER_HEADLESS: bool = True
    BROWSER_LOCALE: str = "vi-VN"
    BROWSER_TIMEZONE: str = "Asia/Ho_Chi_Minh"

    # Frontend
    FRONTEND_URL: str = "http://localhost:3000"

    @model_validator(mode="after")
    def check_intervals(self) -> "Settings":
        """Negative delays make no sense for asyncio.sleep."""
        if self.SCRAPE_MIN_INTERVAL_SECONDS < 0:
            raise ValueError("SCRAPE_MIN_INTERVAL_SECONDS must be >= 0")
        if self.BATCH_ITEM_DELAY_SECONDS is not None and self.BATCH_ITEM_DELAY_SECONDS < 0:
            raise ValueError("BATCH_ITEM_DELAY_SECONDS must be >= 0")
        return self

    def get_batch_item_delay(self) -> float:
        """Resolve the pause inserted between consecutive batch items.

        Returns:
            Delay in seconds
        """
        if self.BATCH_ITEM_DELAY_SECONDS is None:
            return self.SCRAPE_MIN_INTERVAL_SECONDS
        return self.BATCH_ITEM_DELAY_SECONDS


settings = Settings()
