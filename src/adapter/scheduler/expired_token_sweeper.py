"""Background loop that purges expired password recovery requests."""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

logger = logging.getLogger(__name__)

MIN_INTERVAL_SECONDS = 30


class ExpiredTokenSweeper:
    """
    Runs `sweep` every `interval_seconds` on the event loop.

    `sweep` is typically a bound PasswordRecoveryService
    .delete_all_expired_password_reset_tokens built on a fresh unit of work.
    A failed sweep is logged and retried on the next tick.
    """

    def __init__(
        self,
        sweep: Callable[[], Awaitable[int]],
        interval_seconds: int = 3600,
        startup_delay_seconds: int = 0,
    ):
        self.sweep = sweep
        self.interval_seconds = max(MIN_INTERVAL_SECONDS, interval_seconds)
        self.startup_delay_seconds = max(0, startup_delay_seconds)
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def run_once(self) -> None:
        try:
            deleted = await self.sweep()
            logger.info(f"Expired token sweep completed: deleted={deleted}")
        except Exception:
            logger.exception("Expired token sweep failed")

    async def _loop(self) -> None:
        if self.startup_delay_seconds:
            await asyncio.sleep(self.startup_delay_seconds)
        while True:
            await self.run_once()
            await asyncio.sleep(self.interval_seconds)

    def start(self) -> None:
        if self._task is not None:
            return
        self._task = asyncio.create_task(self._loop(), name="expired-token-sweeper")
        logger.info(f"Expired token sweeper started (every {self.interval_seconds} seconds)")

    async def stop(self) -> None:
        task = self._task
        self._task = None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.info("Expired token sweeper stopped")
