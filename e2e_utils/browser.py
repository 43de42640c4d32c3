"""Local Playwright page sessions for end-to-end login tests."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from playwright.async_api import Page, async_playwright

from .models import BrowserOptions
from .screenshot import ScreenshotSequence

logger = logging.getLogger(__name__)

BROWSER_ARGS = [
    "--disable-blink-features=AutomationControlled",
    "--no-sandbox",
    "--disable-infobars",
    "--disable-gpu",
    "--no-first-run",
]


@asynccontextmanager
async def open_page(
    options: Optional[BrowserOptions] = None,
    screenshots: Optional[ScreenshotSequence] = None,
) -> AsyncGenerator[Page, None]:
    """Yield a fresh page, closing its context afterwards.

    If the block raises and ``screenshots`` is given, an error screenshot is
    attempted before the exception propagates.
    """
    options = options or BrowserOptions()

    async with async_playwright() as p:
        if options.ws_endpoint:
            logger.info(f"Connecting to remote browser: {options.ws_endpoint}")
            browser = await p.chromium.connect_over_cdp(options.ws_endpoint)
        else:
            logger.info("Launching local Chromium browser")
            browser = await p.chromium.launch(headless=options.headless, args=BROWSER_ARGS)

        context = await browser.new_context(
            viewport={"width": options.viewport_width, "height": options.viewport_height},
            user_agent=options.user_agent,
            ignore_https_errors=options.ignore_https_errors,
        )
        page = None
        try:
            page = await context.new_page()
            logger.info("Browser page created successfully")
            yield page
        except Exception as e:
            logger.error(f"Browser page error: {e}")
            if screenshots is not None and page is not None:
                await screenshots.take_diagnostic_screenshot(page)
            raise
        finally:
            await context.close()
            if not options.ws_endpoint:
                await browser.close()
            logger.info("Browser session closed")
