"""
In-process event bus.

Subscribers run in registration order, after the publishing operation has
committed. Async handlers are awaited; sync handlers run in a worker thread.
A failing subscriber is logged and does not reach the publisher, since the
publishing operation is already committed by then.
"""

import asyncio
import inspect
import logging
from typing import Any, List

from src.app.services.event_publisher import EventHandler, IEventPublisher

logger = logging.getLogger(__name__)


class InMemoryEventPublisher(IEventPublisher):
    """
    Delivers events to subscribers registered in this process.

    With record_events=True every published event is kept in
    published_events, for tests only: events may carry plaintext secrets.
    """

    def __init__(self, record_events: bool = False):
        self._subscribers: List[EventHandler] = []
        self.record_events = record_events
        self.published_events: List[Any] = []

    def subscribe(self, handler: EventHandler) -> None:
        self._subscribers.append(handler)

    async def publish(self, event: Any) -> None:
        if self.record_events:
            self.published_events.append(event)
        event_type = type(event).__name__

        failed = 0
        for handler in self._subscribers:
            try:
                if inspect.iscoroutinefunction(handler) or inspect.iscoroutinefunction(
                    getattr(handler, "__call__", None)
                ):
                    await handler(event)
                else:
                    await asyncio.to_thread(handler, event)
            except Exception:
                failed += 1
                logger.exception(f"Event handler failed for {event_type}")

        logger.debug(
            f"{event_type} delivered to {len(self._subscribers) - failed} "
            f"of {len(self._subscribers)} subscriber(s)"
        )
