from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Union

EventHandler = Callable[[Any], Union[Awaitable[None], None]]


class IEventPublisher(ABC):
    """In-process event bus interface - application layer"""

    @abstractmethod
    async def publish(self, event: Any) -> None:
        """Deliver an event to every subscriber"""
        pass

    @abstractmethod
    def subscribe(self, handler: EventHandler) -> None:
        """Register a sync or async callable invoked for each published event"""
        pass
