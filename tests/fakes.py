"""Test doubles shared across the suites."""

from pathlib import Path


class FakeClock:
    """Millisecond clock whose sleep advances time instantly."""

    def __init__(self, start_ms: float = 0.0):
        self.now_ms = start_ms
        self.sleeps = []

    def __call__(self) -> float:
        return self.now_ms

    def advance(self, ms: float) -> None:
        self.now_ms = round(self.now_ms + ms, 6)

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.advance(seconds * 1000)


class FakePage:
    """Stands in for a Playwright page; writes a stub image on screenshot."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.calls = []

    async def screenshot(self, path: str, type: str = "png", full_page: bool = False) -> bytes:
        self.calls.append({"path": path, "type": type, "full_page": full_page})
        if self.fail:
            raise RuntimeError("Target page, context or browser has been closed")
        data = b"\x89PNG\r\n\x1a\n"
        Path(path).write_bytes(data)
        return data
