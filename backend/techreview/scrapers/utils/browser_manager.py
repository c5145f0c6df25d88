"""Playwright browser sessions with anti-detection.

Every scrape gets its own browser: launched for the call and closed on
every exit path, so a failing page never leaks a Chromium process.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable, List, Optional

import structlog
from playwright.async_api import Page, async_playwright

from techreview.config import settings
from techreview.scrapers.utils.user_agents import get_random_user_agent

logger = structlog.get_logger(__name__)


class BrowserManager:
    """Launches isolated, short-lived Chromium sessions.

    Each session is configured with:
    - A realistic desktop user-agent
    - Vietnamese locale and timezone
    - Stealth JS injection to mask automation signals
    """

    def __init__(
        self,
        headless: bool = True,
        navigation_timeout_ms: int = 30000,
        content_wait_timeout_ms: int = 10000,
        locale: str = "vi-VN",
        timezone_id: str = "Asia/Ho_Chi_Minh",
        user_agent_factory: Callable[[], str] = get_random_user_agent,
    ):
        self.headless = headless
        self.navigation_timeout_ms = navigation_timeout_ms
        self.content_wait_timeout_ms = content_wait_timeout_ms
        self.locale = locale
        self.timezone_id = timezone_id
        self._user_agent_factory = user_agent_factory

    @property
    def launch_args(self) -> List[str]:
        return [
            "--no-sandbox",
            "--disable-setuid-sandbox",
            "--disable-blink-features=AutomationControlled",
            "--disable-dev-shm-usage",
        ]

    @asynccontextmanager
    async def session(self) -> AsyncIterator[Page]:
        """Open a fresh browser and yield a ready page.

        The browser is closed when the block exits, including when the
        body raises.
        """
        user_agent = self._user_agent_factory()
        async with async_playwright() as playwright:
            browser = await playwright.chromium.launch(
                headless=self.headless,
                args=self.launch_args,
            )
            logger.debug("browser_session_opened", headless=self.headless)
            try:
                context = await browser.new_context(
                    user_agent=user_agent,
                    viewport={"width": 1920, "height": 1080},
                    locale=self.locale,
                    timezone_id=self.timezone_id,
                    java_script_enabled=True,
                )
                await context.add_init_script(STEALTH_JS)
                page = await context.new_page()
                yield page
            finally:
                await browser.close()
                logger.debug("browser_session_closed")


# Minimal stealth JS to mask automation signals
STEALTH_JS = """
Object.defineProperty(navigator, 'webdriver', { get: () => undefined });
Object.defineProperty(navigator, 'languages', { get: () => ['vi-VN', 'vi', 'en-US', 'en'] });
Object.defineProperty(navigator, 'plugins', { get: () => [1, 2, 3, 4, 5] });
window.chrome = { runtime: {} };
"""


# Singleton instance
_browser_manager: Optional[BrowserManager] = None


def get_browser_manager() -> BrowserManager:
    """Get the global BrowserManager singleton."""
    global _browser_manager
    if _browser_manager is None:
        _browser_manager = BrowserManager(
            headless=settings.BROWSER_HEADLESS,
            navigation_timeout_ms=settings.NAVIGATION_TIMEOUT_MS,
            content_wait_timeout_ms=settings.CONTENT_WAIT_TIMEOUT_MS,
            locale=settings.BROWSER_LOCALE,
            timezone_id=settings.BROWSER_TIMEZONE,
        )
    return _browser_manager
