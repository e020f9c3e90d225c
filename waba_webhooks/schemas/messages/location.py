"""
Location inbound message.

Coordinates are carried as sent; range checking is left to whoever consumes
the pin.
"""

from typing import ClassVar, Literal

from waba_webhooks.schemas.core.base_model import WebhookModel
from waba_webhooks.schemas.core.types import MessageType
from waba_webhooks.schemas.messages.base import BaseInboundMessage


class LocationPayload(WebhookModel):
    """Shared location pin."""

    latitude: float | None = None
    longitude: float | None = None
    address: str | None = None
    name: str | None = None
    url: str | None = None


class LocationMessage(BaseInboundMessage):
    payload_keys: ClassVar[frozenset[str]] = frozenset({"location"})

    type: Literal[MessageType.LOCATION]
    location: LocationPayload | None = None
