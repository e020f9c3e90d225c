"""Provider webhook envelope schemas."""

from .webhook_envelope import (
    Change,
    ChangeValue,
    Entry,
    GenericValue,
    MessagingValue,
    QualityUpdateValue,
    WebhookEnvelope,
)

__all__ = [
    "Change",
    "ChangeValue",
    "Entry",
    "GenericValue",
    "MessagingValue",
    "QualityUpdateValue",
    "WebhookEnvelope",
]
