"""Numbered screenshots for step-by-step login test runs."""

import logging
import os
from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncGenerator, List, Optional, Tuple

from playwright.async_api import Page

from .config import settings
from .constants import ERROR_PAGE_LABEL, SUPPORTED_SCREENSHOT_TYPES
from .models import CapturedScreenshot

logger = logging.getLogger(__name__)


def create_folder(folder_name: str) -> None:
    """Create ``folder_name`` and any missing parents."""
    if not os.path.isdir(folder_name):
        os.makedirs(folder_name, exist_ok=True)
        logger.info(f"Created screenshot folder: {folder_name}")


class ScreenshotSequence:
    """Writes screenshots as ``{n}_{label}.{ext}`` into one folder.

    ``n`` starts at 1 and is never reused within an instance, including for
    captures that failed. The folder defaults to ``settings.screenshot_dir``.
    """

    def __init__(
        self,
        folder_name: Optional[str] = None,
        image_type: Optional[str] = None,
        full_page: Optional[bool] = None,
    ):
        self.image_type = image_type or settings.screenshot_type
        if self.image_type not in SUPPORTED_SCREENSHOT_TYPES:
            raise ValueError(f"Unsupported screenshot type: {self.image_type}")
        self.full_page = full_page if full_page is not None else settings.screenshot_full_page
        self.folder_name = folder_name or settings.screenshot_dir
        self.screenshot_num = 0
        self.history: List[CapturedScreenshot] = []
        create_folder(self.folder_name)

    def _next_path(self, screenshot_name: str) -> Tuple[int, str]:
        self.screenshot_num += 1
        filename = f"{self.screenshot_num}_{screenshot_name}.{self.image_type}"
        return self.screenshot_num, os.path.join(self.folder_name, filename)

    async def take_screenshot(self, page: Page, screenshot_name: str) -> CapturedScreenshot:
        """Capture ``page`` under the next sequence number.

        Capture errors propagate unchanged.
        """
        # Reserve the number before awaiting so concurrent calls never share one
        number, path = self._next_path(screenshot_name)
        await page.screenshot(path=path, type=self.image_type, full_page=self.full_page)

        captured = CapturedScreenshot(
            sequence_number=number,
            label=screenshot_name,
            path=path,
            captured_at=datetime.now(),
        )
        self.history.append(captured)
        logger.info(f"Screenshot saved: {path}")
        return captured

    async def take_diagnostic_screenshot(
        self, page: Page, screenshot_name: str = ERROR_PAGE_LABEL
    ) -> Optional[CapturedScreenshot]:
        """Best-effort capture: a failure is logged and ``None`` returned."""
        try:
            return await self.take_screenshot(page, screenshot_name)
        except Exception as e:
            logger.warning(f"Failed to take diagnostic screenshot '{screenshot_name}': {e}")
            return None

    @asynccontextmanager
    async def capture_on_failure(
        self, page: Page, screenshot_name: str = ERROR_PAGE_LABEL
    ) -> AsyncGenerator[Page, None]:
        """Take a diagnostic screenshot if the wrapped block raises, then re-raise."""
        try:
            yield page
        except Exception as e:
            logger.error(f"Step failed, capturing '{screenshot_name}': {e}")
            await self.take_diagnostic_screenshot(page, screenshot_name)
            raise
