"""Canonical event schemas."""

from .canonical_event import (
    CanonicalEvent,
    MessagesDetails,
    QualityUpdate,
    TemplateInfo,
)
from .delivery import WebhookDelivery

__all__ = [
    "CanonicalEvent",
    "MessagesDetails",
    "QualityUpdate",
    "TemplateInfo",
    "WebhookDelivery",
]
