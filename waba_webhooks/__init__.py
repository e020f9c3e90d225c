"""
WABA webhooks: normalization and dispatch of WhatsApp Business webhook events.

Quality-update changes become canonical events on a queue; inbound messages
are dispatched to one handler arm per message kind.
"""

from waba_webhooks.core.events import HandlerRegistry, WebhookEventHandler
from waba_webhooks.handlers import (
    MessagesHandler,
    MessageTemplateQualityUpdateHandler,
    create_default_registry,
)
from waba_webhooks.processors.message_dispatcher import MessageKindDispatcher
from waba_webhooks.schemas.core.types import EventType, MessageType
from waba_webhooks.schemas.events import CanonicalEvent, WebhookDelivery

__all__ = [
    "CanonicalEvent",
    "EventType",
    "HandlerRegistry",
    "MessageKindDispatcher",
    "MessageTemplateQualityUpdateHandler",
    "MessageType",
    "MessagesHandler",
    "WebhookDelivery",
    "WebhookEventHandler",
    "create_default_registry",
]
