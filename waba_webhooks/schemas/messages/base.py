"""
Base model for inbound message variants.

Every variant carries the common envelope of a WhatsApp message (id, sender,
timestamp, context, referral) plus exactly one variant-specific payload. A
variant refuses payload keys that belong to other variants, so a message
tagged "audio" can never carry an image payload.
"""

from typing import Any, ClassVar

from pydantic import AliasChoices, Field, field_validator, model_validator

from waba_webhooks.schemas.core.base_model import WebhookModel
from waba_webhooks.schemas.core.types import MessageType

# Every key that holds a variant payload, across all message kinds.
VARIANT_PAYLOAD_KEYS: frozenset[str] = frozenset(
    {
        "text",
        "emoji",
        "reaction",
        "audio",
        "image",
        "document",
        "video",
        "sticker",
        "errors",
        "order",
        "location",
        "button",
        "interactive",
        "contacts",
        "contact",
    }
)


class ContextMetadata(WebhookModel):
    """Reply/forward context attached to a message."""

    from_: str | None = Field(
        None,
        validation_alias=AliasChoices("from", "from_"),
        serialization_alias="from",
    )
    id: str | None = None
    forwarded: bool | None = None
    frequently_forwarded: bool | None = None


class Referral(WebhookModel):
    """Click-to-WhatsApp ad referral information."""

    source_url: str | None = None
    source_id: str | None = None
    source_type: str | None = None
    body: str | None = None
    headline: str | None = None
    media_type: str | None = None
    ctwa_clid: str | None = None


class BaseInboundMessage(WebhookModel):
    """Fields shared by every inbound message variant."""

    # Keys of the payload this variant owns; everything else in
    # VARIANT_PAYLOAD_KEYS is foreign to it.
    payload_keys: ClassVar[frozenset[str]] = frozenset()

    message_id: str | None = Field(
        None,
        validation_alias=AliasChoices("messageId", "message_id", "id"),
        serialization_alias="messageId",
    )
    user_phone_number: str | None = Field(
        None,
        validation_alias=AliasChoices("userPhoneNumber", "user_phone_number", "from"),
        serialization_alias="userPhoneNumber",
    )
    timestamp: str | None = None
    context: ContextMetadata | None = None
    referral: Referral | None = None

    @field_validator("type", mode="before", check_fields=False)
    @classmethod
    def normalize_type(cls, v: Any) -> Any:
        """Accept message tags in any case ("AUDIO", "audio")."""
        return MessageType.parse(v) or v

    @model_validator(mode="before")
    @classmethod
    def reject_foreign_payloads(cls, data: Any) -> Any:
        """Refuse payloads that belong to a different variant."""
        if not isinstance(data, dict) or not cls.payload_keys:
            return data
        foreign = sorted(
            key
            for key in VARIANT_PAYLOAD_KEYS - cls.payload_keys
            if data.get(key) is not None
        )
        if foreign:
            raise ValueError(
                f"{data.get('type')!r} message cannot carry payload(s) {foreign}"
            )
        return data

    @property
    def variant(self) -> str:
        """Tag used to discriminate the message union."""
        return self.type.value
