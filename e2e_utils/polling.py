"""Poll an async probe on a fixed cadence until it succeeds or times out."""

import asyncio
import logging
import time
from typing import Awaitable, Callable, Optional

from .config import settings
from .constants import ONE_SECOND_IN_MS

logger = logging.getLogger(__name__)

Probe = Callable[[], Awaitable[object]]
Clock = Callable[[], float]
Sleep = Callable[[float], Awaitable[object]]


def monotonic_ms() -> float:
    """Monotonic clock in milliseconds."""
    return time.monotonic() * ONE_SECOND_IN_MS


class PollTimeoutError(TimeoutError):
    """Raised when no probe attempt succeeded within the timeout."""

    def __init__(
        self,
        timeout_ms: float,
        attempts: int,
        last_error: Optional[BaseException] = None,
    ):
        self.timeout_ms = timeout_ms
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(
            f"Timed out while polling after {timeout_ms}ms ({attempts} attempts)"
        )


class Poller:
    """Runs a probe every ``interval_ms`` until it stops raising.

    The timeout is checked at the start of each tick, before the probe is
    invoked, so a failing poll settles somewhere in
    ``[timeout_ms, timeout_ms + interval_ms)`` after it started. Ticks are
    aligned to ``start + k * interval_ms`` so a slow probe does not shift the
    cadence; ticks missed while a probe was still running are skipped.

    ``clock`` returns milliseconds and ``sleep`` takes seconds; both can be
    replaced to drive the poller deterministically.
    """

    def __init__(
        self,
        interval_ms: Optional[float] = None,
        clock: Optional[Clock] = None,
        sleep: Optional[Sleep] = None,
    ):
        self.interval_ms = interval_ms if interval_ms is not None else settings.poll_interval_ms
        if self.interval_ms <= 0:
            raise ValueError(f"Poll interval must be positive, got {self.interval_ms}")
        self._clock = clock or monotonic_ms
        self._sleep = sleep or asyncio.sleep

    async def poll_until_success(self, probe: Probe, timeout_ms: float) -> None:
        """Wait until ``probe`` completes without raising.

        Raises:
            PollTimeoutError: no attempt succeeded before ``timeout_ms`` elapsed.
                The last probe failure is attached as ``last_error`` and as the
                exception cause.
        """
        if timeout_ms < 0:
            raise ValueError(f"Timeout must not be negative, got {timeout_ms}")

        start = self._clock()
        next_tick = start
        attempts = 0
        last_error: Optional[Exception] = None

        while True:
            next_tick += self.interval_ms
            now = self._clock()
            if next_tick < now:
                # Ticks missed while a slow probe ran are dropped; a tick due now fires now
                next_tick += -(-(now - next_tick) // self.interval_ms) * self.interval_ms
            await self._sleep((next_tick - now) / ONE_SECOND_IN_MS)

            elapsed = self._clock() - start
            if elapsed >= timeout_ms:
                logger.error(
                    f"Polling timed out after {elapsed:.0f}ms and {attempts} attempts, "
                    f"last error: {last_error!r}"
                )
                raise PollTimeoutError(timeout_ms, attempts, last_error) from last_error

            attempts += 1
            try:
                await probe()
            except Exception as e:
                # Not ready yet, check again on the next tick
                last_error = e
                logger.debug(f"Poll attempt {attempts} not ready: {e!r}")
                continue

            logger.debug(f"Poll succeeded on attempt {attempts} after {elapsed:.0f}ms")
            return


async def poll_until_success(
    probe: Probe,
    timeout_ms: float,
    interval_ms: Optional[float] = None,
) -> None:
    """Poll ``probe`` with a default :class:`Poller`."""
    await Poller(interval_ms=interval_ms).poll_until_success(probe, timeout_ms)
