"""Constants for the e2e utilities."""


ONE_SECOND_IN_MS = 1000

# Polling (in milliseconds)
DEFAULT_POLL_INTERVAL_MS = 200

# Screenshots
DEFAULT_SCREENSHOT_DIR = "screenshots"
DEFAULT_SCREENSHOT_TYPE = "png"
SUPPORTED_SCREENSHOT_TYPES = ("png", "jpeg")
ERROR_PAGE_LABEL = "errorPage"

# Browser
DEFAULT_VIEWPORT = {"width": 1280, "height": 720}
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/131.0.0.0 Safari/537.36"
)
