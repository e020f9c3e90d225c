"""
Queue producers: the collaborators that actually deliver serialized events.

Producers own delivery guarantees, retries and connection handling. They must
be safe for concurrent use by several in-flight webhook deliveries.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from collections import defaultdict

from redis.asyncio import ConnectionPool, Redis

from waba_webhooks.core.config.settings import Settings
from waba_webhooks.core.logging.logger import get_logger


class EventProducer(ABC):
    """Sends serialized events to a named queue."""

    @abstractmethod
    async def send_message_to_queue(self, message_body: str, queue_name: str) -> None:
        """
        Hand one message body to the queue.

        Raises:
            Exception: Any failure to enqueue; callers treat it as fatal
        """

    async def close(self) -> None:
        """Release connections held by the producer."""


class RedisEventProducer(EventProducer):
    """
    Producer backed by Redis lists.

    Each queue name is a Redis list; messages are LPUSHed so consumers can
    BRPOP them in arrival order.
    """

    def __init__(self, client: Redis):
        self._client = client
        self.logger = get_logger(__name__)

    @classmethod
    def from_url(cls, url: str, *, max_connections: int = 64) -> RedisEventProducer:
        pool = ConnectionPool.from_url(
            url,
            decode_responses=True,
            encoding="utf-8",
            max_connections=max_connections,
        )
        return cls(Redis(connection_pool=pool))

    async def send_message_to_queue(self, message_body: str, queue_name: str) -> None:
        length = await self._client.lpush(queue_name, message_body)
        self.logger.debug(f"LPUSH {queue_name} (queue length now {length})")

    async def close(self) -> None:
        await self._client.aclose()


class InMemoryEventProducer(EventProducer):
    """Producer that keeps messages in process memory, for development and tests."""

    def __init__(self):
        self._queues: dict[str, list[str]] = defaultdict(list)
        self._lock = asyncio.Lock()

    async def send_message_to_queue(self, message_body: str, queue_name: str) -> None:
        async with self._lock:
            self._queues[queue_name].append(message_body)

    def messages(self, queue_name: str) -> list[str]:
        """Messages sent to a queue, oldest first."""
        return list(self._queues.get(queue_name, []))

    def clear(self) -> None:
        self._queues.clear()


def create_event_producer(settings: Settings) -> EventProducer:
    """Redis producer when REDIS_URL is configured, in-memory otherwise."""
    if settings.has_redis:
        return RedisEventProducer.from_url(
            settings.redis_url, max_connections=settings.redis_max_connections
        )

    get_logger(__name__).warning(
        "REDIS_URL not configured - queued events are kept in memory only"
    )
    return InMemoryEventProducer()
