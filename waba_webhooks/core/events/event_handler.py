"""
Base event handler for webhook deliveries.

One concrete handler exists per EventType. A handler consumes the raw
delivery, turns it into zero or more canonical events and performs the side
effect that goes with them (queueing, dispatching, ...).
"""

from abc import ABC, abstractmethod
from typing import ClassVar

from waba_webhooks.core.logging.logger import ContextLogger, get_logger
from waba_webhooks.schemas.core.types import EventType
from waba_webhooks.schemas.events import WebhookDelivery


class WebhookEventHandler(ABC):
    """
    Base class for webhook event handlers.

    Subclasses set ``event_type`` and implement ``handle``. Whether a failure
    inside ``handle`` propagates is decided by each handler: some deliveries
    must be redelivered on failure, others are processed best-effort.
    """

    event_type: ClassVar[EventType]

    def __init__(self, logger: ContextLogger | None = None):
        # Logger named after the concrete handler module, not this base class
        self.logger = logger or get_logger(self.__class__.__module__)

    @abstractmethod
    async def handle(self, delivery: WebhookDelivery) -> None:
        """
        Process one webhook delivery.

        Args:
            delivery: Raw payload text and optional provider timestamp
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(event_type={self.event_type.value})"
