"""Configuration for the e2e utilities."""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

from .constants import (
    DEFAULT_POLL_INTERVAL_MS,
    DEFAULT_SCREENSHOT_DIR,
    DEFAULT_SCREENSHOT_TYPE,
)

# Load environment variables from .env file
load_dotenv()


class Settings:
    """Defaults for polling, screenshots and the test browser."""

    # Polling settings
    poll_interval_ms: int = int(
        os.environ.get("E2E_POLL_INTERVAL_MS", str(DEFAULT_POLL_INTERVAL_MS))
    )

    # Screenshot settings
    screenshot_dir: str = os.environ.get("SCREENSHOT_DIR", DEFAULT_SCREENSHOT_DIR)
    screenshot_type: str = os.environ.get("SCREENSHOT_TYPE", DEFAULT_SCREENSHOT_TYPE)
    screenshot_full_page: bool = (
        os.environ.get("SCREENSHOT_FULL_PAGE", "false").lower() == "true"
    )

    # Browser settings
    headless: bool = os.environ.get("HEADLESS", "true").lower() == "true"
    browser_ws_endpoint: str = os.environ.get("BROWSER_WS_ENDPOINT", "")

    # Logging
    log_level: str = os.environ.get("LOG_LEVEL", "INFO").upper()


# Global settings instance
settings = Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for a test run."""
    logging.basicConfig(
        level=level or settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
