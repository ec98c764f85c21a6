"""
Message broker adapters.

Destinations are Redis streams: each send appends one entry holding the
routing key and the JSON payload, so consumers can bind on the routing key
with a consumer group.
"""

import logging
from typing import List, Tuple

from pydantic import BaseModel
from redis.asyncio import Redis

from src.app.services.message_sender import IMessageSender

logger = logging.getLogger(__name__)


class RedisMessageSender(IMessageSender):
    """Publishes messages to Redis streams"""

    def __init__(self, redis: Redis, max_stream_length: int = 10000):
        self.redis = redis
        self.max_stream_length = max_stream_length

    async def send(self, destination: str, routing_key: str, message: BaseModel) -> None:
        entry_id = await self.redis.xadd(
            destination,
            {"routing_key": routing_key, "payload": message.model_dump_json()},
            maxlen=self.max_stream_length,
            approximate=True,
        )
        logger.debug(f"Message {routing_key} sent to {destination} as {entry_id}")

    async def close(self) -> None:
        await self.redis.aclose()
        logger.debug("Redis message sender closed")


class InMemoryMessageSender(IMessageSender):
    """Keeps sent messages in memory, for development and tests"""

    def __init__(self):
        self.sent: List[Tuple[str, str, BaseModel]] = []

    async def send(self, destination: str, routing_key: str, message: BaseModel) -> None:
        self.sent.append((destination, routing_key, message))
        logger.debug(f"Message {routing_key} recorded for {destination}")
