"""
Handler registry: EventType -> WebhookEventHandler.

The registry is keyed by the closed EventType enum. String keys (the
provider's change.field, e.g. "messages") are converted to EventType at the
boundary; a key with no EventType is a routing error.
"""

from waba_webhooks.core.errors import UnrecognizedEventTypeError
from waba_webhooks.core.events.event_handler import WebhookEventHandler
from waba_webhooks.core.logging.logger import get_logger
from waba_webhooks.schemas.core.types import EventType
from waba_webhooks.schemas.events import WebhookDelivery


class HandlerRegistry:
    """Maps each event type to the single handler registered for it."""

    def __init__(self):
        self._handlers: dict[EventType, WebhookEventHandler] = {}
        self.logger = get_logger(__name__)

    def register(self, handler: WebhookEventHandler) -> "HandlerRegistry":
        """
        Register a handler under its event type.

        Returns:
            The registry, for chaining

        Raises:
            ValueError: If a handler is already registered for the event type
        """
        event_type = handler.event_type
        if event_type in self._handlers:
            raise ValueError(
                f"Handler already registered for {event_type.value}: "
                f"{self._handlers[event_type]!r}"
            )
        self._handlers[event_type] = handler
        self.logger.debug(f"Registered {handler!r}")
        return self

    def get(self, event_type: EventType) -> WebhookEventHandler | None:
        return self._handlers.get(event_type)

    def resolve(self, key: EventType | str) -> WebhookEventHandler:
        """
        Find the handler for an event type or webhook field key.

        Raises:
            UnrecognizedEventTypeError: If the key has no registered handler
        """
        if isinstance(key, EventType):
            event_type = key
        else:
            try:
                event_type = EventType.from_field(key)
            except ValueError as e:
                raise UnrecognizedEventTypeError(key) from e

        handler = self._handlers.get(event_type)
        if handler is None:
            raise UnrecognizedEventTypeError(event_type.value)
        return handler

    async def dispatch(self, key: EventType | str, delivery: WebhookDelivery) -> None:
        """Route a delivery to its handler; handler errors propagate unchanged."""
        handler = self.resolve(key)
        self.logger.debug(f"Dispatching {delivery} to {handler!r}")
        await handler.handle(delivery)

    @property
    def registered_event_types(self) -> list[EventType]:
        return list(self._handlers)

    def missing_event_types(self) -> set[EventType]:
        """Event types that have no handler yet."""
        return set(EventType) - set(self._handlers)

    @property
    def is_complete(self) -> bool:
        return not self.missing_event_types()

    def __len__(self) -> int:
        return len(self._handlers)

    def __contains__(self, event_type: object) -> bool:
        return event_type in self._handlers
