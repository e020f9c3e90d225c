"""
Shared enums for webhook events, inbound message kinds and error codes.
"""

from enum import Enum


class EventType(str, Enum):
    """Webhook event types the service knows how to normalize."""

    MESSAGE_TEMPLATE_QUALITY_UPDATE = "MESSAGE_TEMPLATE_QUALITY_UPDATE"
    MESSAGES = "MESSAGES"

    @property
    def field(self) -> str:
        """The provider's change.field key for this event type."""
        return self.value.lower()

    @classmethod
    def from_field(cls, field: str) -> "EventType":
        """
        Resolve an event type from a webhook field key.

        Accepts both the provider key ("messages") and the enum name ("MESSAGES").

        Raises:
            ValueError: If no event type matches
        """
        try:
            return cls(field.strip().upper())
        except (AttributeError, ValueError) as e:
            raise ValueError(f"Unknown webhook event type: {field!r}") from e


class MessageType(str, Enum):
    """Inbound message kinds carried by MESSAGES events."""

    TEXT = "text"
    AUDIO = "audio"
    IMAGE = "image"
    DOCUMENT = "document"
    VIDEO = "video"
    STICKER = "sticker"
    UNSUPPORTED = "unsupported"
    ORDER = "order"
    LOCATION = "location"
    BUTTON = "button"
    INTERACTIVE = "interactive"
    CONTACTS = "contacts"
    REACTION = "reaction"

    @classmethod
    def parse(cls, raw: object) -> "MessageType | None":
        """
        Parse a raw type tag case-insensitively.

        Returns None for null or unrecognized tags instead of raising.
        """
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            return None
        tag = raw.strip().lower()
        if tag == "contact":
            tag = "contacts"
        try:
            return cls(tag)
        except ValueError:
            return None


class ErrorCode(str, Enum):
    """Error codes for webhook processing."""

    MALFORMED_ENVELOPE = "malformed_envelope"
    UNRECOGNIZED_EVENT_TYPE = "unrecognized_event_type"
    PUBLISH_FAILURE = "publish_failure"
    PROCESSING_ERROR = "processing_error"
