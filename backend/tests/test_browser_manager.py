"""Tests for BrowserManager session lifecycle (Playwright is mocked)."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from techreview.scrapers.utils.browser_manager import STEALTH_JS, BrowserManager

pytestmark = pytest.mark.anyio


def mock_playwright():
    """Build a fake async_playwright() entry point and return (factory, browser, context, page)."""
    page = MagicMock(name="page")
    context = MagicMock(name="context")
    context.add_init_script = AsyncMock()
    context.new_page = AsyncMock(return_value=page)

    browser = MagicMock(name="browser")
    browser.new_context = AsyncMock(return_value=context)
    browser.close = AsyncMock()

    playwright = MagicMock(name="playwright")
    playwright.chromium.launch = AsyncMock(return_value=browser)

    manager = MagicMock(name="playwright_manager")
    manager.__aenter__ = AsyncMock(return_value=playwright)
    manager.__aexit__ = AsyncMock(return_value=False)

    factory = MagicMock(return_value=manager)
    return factory, playwright, browser, context, page


async def test_session_yields_configured_page():
    factory, playwright, browser, context, page = mock_playwright()
    manager = BrowserManager(headless=True, user_agent_factory=lambda: "UA/1.0")

    with patch("techreview.scrapers.utils.browser_manager.async_playwright", factory):
        async with manager.session() as session_page:
            assert session_page is page

    playwright.chromium.launch.assert_awaited_once_with(headless=True, args=manager.launch_args)
    kwargs = browser.new_context.await_args.kwargs
    assert kwargs["user_agent"] == "UA/1.0"
    assert kwargs["locale"] == "vi-VN"
    assert kwargs["timezone_id"] == "Asia/Ho_Chi_Minh"
    context.add_init_script.assert_awaited_once_with(STEALTH_JS)
    browser.close.assert_awaited_once()


async def test_browser_closed_when_body_raises():
    factory, _, browser, _, _ = mock_playwright()
    manager = BrowserManager()

    with patch("techreview.scrapers.utils.browser_manager.async_playwright", factory):
        with pytest.raises(RuntimeError):
            async with manager.session():
                raise RuntimeError("page crashed")

    browser.close.assert_awaited_once()


async def test_browser_closed_when_context_setup_fails():
    factory, _, browser, _, _ = mock_playwright()
    browser.new_context.side_effect = RuntimeError("context failed")
    manager = BrowserManager()

    with patch("techreview.scrapers.utils.browser_manager.async_playwright", factory):
        with pytest.raises(RuntimeError):
            async with manager.session():
                pass

    browser.close.assert_awaited_once()


def test_launch_args_hide_automation():
    assert "--disable-blink-features=AutomationControlled" in BrowserManager().launch_args
