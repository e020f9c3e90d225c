"""Queue publishing for canonical events."""

from .producers import (
    EventProducer,
    InMemoryEventProducer,
    RedisEventProducer,
    create_event_producer,
)
from .publisher import QueuePublisher

__all__ = [
    "EventProducer",
    "InMemoryEventProducer",
    "QueuePublisher",
    "RedisEventProducer",
    "create_event_producer",
]
