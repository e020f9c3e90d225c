"""
Concrete webhook event handlers and the default registry wiring.
"""

from waba_webhooks.core.config.settings import PipelineSettings
from waba_webhooks.core.events.handler_registry import HandlerRegistry
from waba_webhooks.messaging.queue.producers import EventProducer
from waba_webhooks.messaging.queue.publisher import QueuePublisher
from waba_webhooks.processors.message_dispatcher import MessageKindDispatcher

from .messages_handler import MessagesHandler
from .quality_update_handler import MessageTemplateQualityUpdateHandler


def create_default_registry(
    pipeline_settings: PipelineSettings,
    producer: EventProducer,
    dispatcher: MessageKindDispatcher | None = None,
) -> HandlerRegistry:
    """
    Build a registry with a handler for every event type.

    Args:
        pipeline_settings: Resolved queue names
        producer: Queue collaborator shared by all deliveries
        dispatcher: Custom message dispatcher (defaults to the logging one)
    """
    publisher = QueuePublisher(producer, pipeline_settings.quality_update_queue_name)
    registry = (
        HandlerRegistry()
        .register(MessageTemplateQualityUpdateHandler(publisher))
        .register(MessagesHandler(dispatcher=dispatcher))
    )
    if not registry.is_complete:
        raise RuntimeError(
            f"No handler registered for: {sorted(t.value for t in registry.missing_event_types())}"
        )
    return registry


__all__ = [
    "MessageTemplateQualityUpdateHandler",
    "MessagesHandler",
    "create_default_registry",
]
