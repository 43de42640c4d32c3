"""Polling and screenshot helpers for end-to-end login tests."""

from .browser import open_page
from .models import BrowserOptions, CapturedScreenshot
from .polling import Poller, PollTimeoutError, poll_until_success
from .screenshot import ScreenshotSequence, create_folder

__all__ = [
    "BrowserOptions",
    "CapturedScreenshot",
    "Poller",
    "PollTimeoutError",
    "ScreenshotSequence",
    "create_folder",
    "open_page",
    "poll_until_success",
]
