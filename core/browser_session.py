"""
Sesja przegladarki — jedna przegladarka, jeden kontekst, jedna strona na test.
Zamykana zawsze, takze gdy test sie wywali.
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from playwright.async_api import Page, async_playwright

from config import Settings

logger = logging.getLogger(__name__)

CHROMIUM_ARGS = [
    "--no-sandbox",
    "--disable-dev-shm-usage",
    "--disable-blink-features=AutomationControlled",
]


@asynccontextmanager
async def browser_session(settings: Settings) -> AsyncIterator[Page]:
    async with async_playwright() as p:
        browser = await p.chromium.launch(
            headless=settings.headless,
            slow_mo=settings.slow_mo_ms or None,
            args=CHROMIUM_ARGS,
        )
        browser_context = None
        try:
            browser_context = await browser.new_context(viewport={'width': 1280, 'height': 720})
            browser_context.set_default_timeout(settings.timeout_ms)
            page = await browser_context.new_page()
            logger.info(f"Przegladarka uruchomiona. Base URL: {settings.base_url}")
            yield page
        finally:
            if browser_context is not None:
                await browser_context.close()
            await browser.close()
            logger.info("Przegladarka zamknieta.")
