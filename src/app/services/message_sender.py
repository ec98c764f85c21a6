from abc import ABC, abstractmethod

from pydantic import BaseModel


class IMessageSender(ABC):
    """Outbound message broker interface - application layer"""

    @abstractmethod
    async def send(self, destination: str, routing_key: str, message: BaseModel) -> None:
        """
        Hand a message to the broker.

        Args:
            destination: Configured topic the message is addressed to
            routing_key: Routing key consumers bind on (e.g. "password.recovery")
            message: Payload, serialized as JSON by the adapter
        """
        pass

    async def close(self) -> None:
        """Release broker connections. Senders without connections keep the default."""
        pass
