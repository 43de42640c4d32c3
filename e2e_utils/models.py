"""Data models for the e2e utilities."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from .config import settings
from .constants import DEFAULT_USER_AGENT, DEFAULT_VIEWPORT


class CapturedScreenshot(BaseModel):
    """A screenshot written by a ScreenshotSequence."""

    sequence_number: int
    label: str
    path: str
    captured_at: datetime


class BrowserOptions(BaseModel):
    """Options for a local Playwright browser session."""

    headless: bool = settings.headless
    viewport_width: int = DEFAULT_VIEWPORT["width"]
    viewport_height: int = DEFAULT_VIEWPORT["height"]
    user_agent: Optional[str] = DEFAULT_USER_AGENT
    ignore_https_errors: bool = True

    # Connect over CDP instead of launching Chromium when set
    ws_endpoint: Optional[str] = settings.browser_ws_endpoint or None
