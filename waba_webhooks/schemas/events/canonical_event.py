"""
Canonical event model.

A CanonicalEvent is the normalized, queue-ready form of one webhook change.
It carries exactly one detail payload, chosen by its type:

- MESSAGE_TEMPLATE_QUALITY_UPDATE -> template_info
- MESSAGES -> messages_details

Serialization omits fields that were never set and keeps fields explicitly set
to None, so "absent" and "null" survive the trip to the queue.
"""

from typing import Any

from pydantic import AliasChoices, Field, field_validator, model_validator

from waba_webhooks.schemas.core.base_model import WebhookModel
from waba_webhooks.schemas.core.types import EventType
from waba_webhooks.schemas.messages import InboundMessageList


class QualityUpdate(WebhookModel):
    """Template quality score transition."""

    previous_quality_score: str | None = None
    new_quality_score: str | None = None


class TemplateInfo(WebhookModel):
    """Template the quality update refers to."""

    template_id: str | None = None
    template_name: str | None = None
    template_language: str | None = None
    quality_update: QualityUpdate | None = None


class MessagesDetails(WebhookModel):
    """Inbound messages received on one business phone number."""

    business_phone_number_id: str | None = None
    messages: InboundMessageList | None = None


# Detail field each event type owns.
DETAIL_FIELDS: dict[EventType, str] = {
    EventType.MESSAGE_TEMPLATE_QUALITY_UPDATE: "template_info",
    EventType.MESSAGES: "messages_details",
}


class CanonicalEvent(WebhookModel):
    """Normalized webhook event."""

    waba_id: str | None = Field(
        None,
        validation_alias=AliasChoices("wabaId", "waba_id", "correlationId"),
        serialization_alias="wabaId",
    )
    webhook_triggered_timestamp: str | None = None
    type: EventType
    template_info: TemplateInfo | None = None
    messages_details: MessagesDetails | None = None

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, v: Any) -> Any:
        """Accept "MESSAGES" as well as the webhook field key "messages"."""
        if isinstance(v, str):
            try:
                return EventType.from_field(v)
            except ValueError:
                return v
        return v

    @model_validator(mode="after")
    def validate_single_detail(self):
        """Only the detail payload owned by the event type may be populated."""
        owned = DETAIL_FIELDS[self.type]
        for event_type, detail_field in DETAIL_FIELDS.items():
            if detail_field != owned and getattr(self, detail_field) is not None:
                raise ValueError(
                    f"{self.type.value} event cannot carry {detail_field} "
                    f"(owned by {event_type.value})"
                )
        return self

    @property
    def correlation_id(self) -> str | None:
        return self.waba_id

    def to_queue_json(self) -> str:
        """Serialize to the camelCase JSON body published on the queue."""
        return self.model_dump_json(by_alias=True, exclude_unset=True)

    def with_timestamp(self, timestamp: str) -> "CanonicalEvent":
        """Copy of this event with webhook_triggered_timestamp replaced."""
        return self.model_copy(update={"webhook_triggered_timestamp": timestamp})
