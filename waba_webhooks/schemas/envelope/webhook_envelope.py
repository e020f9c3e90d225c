"""
Provider webhook envelope: entries of changes, each change tagged by field.

The shape of ``change.value`` depends on ``change.field``. Value fields keep
the difference between "sent as null" and "not sent": use
``value.is_present(name)`` rather than comparing against None when it matters.
"""

from typing import Any

from pydantic import ConfigDict, SerializeAsAny, ValidationInfo, field_validator, model_validator

from waba_webhooks.schemas.core.base_model import WebhookModel
from waba_webhooks.schemas.core.types import EventType
from waba_webhooks.schemas.messages import InboundMessageList


class ChangeValue(WebhookModel):
    """Base for every change value shape."""


class QualityUpdateValue(ChangeValue):
    """Value of a message_template_quality_update change."""

    previous_quality_score: str | None = None
    new_quality_score: str | None = None
    message_template_id: str | None = None
    message_template_name: str | None = None
    message_template_language: str | None = None


class MessagingValue(ChangeValue):
    """Value of a messages change."""

    business_phone_number_id: str | None = None
    messages: InboundMessageList | None = None

    @model_validator(mode="before")
    @classmethod
    def lift_metadata_phone_id(cls, data: Any) -> Any:
        """Use metadata.phone_number_id when the flat key is not sent."""
        if not isinstance(data, dict):
            return data
        metadata = data.get("metadata")
        has_flat_key = "business_phone_number_id" in data or "businessPhoneNumberId" in data
        if isinstance(metadata, dict) and not has_flat_key and "phone_number_id" in metadata:
            data = {**data, "business_phone_number_id": metadata["phone_number_id"]}
        return data


class GenericValue(ChangeValue):
    """Value of a change field this service does not model; keys are kept verbatim."""

    model_config = ConfigDict(extra="allow")


VALUE_MODELS: dict[str, type[ChangeValue]] = {
    EventType.MESSAGE_TEMPLATE_QUALITY_UPDATE.field: QualityUpdateValue,
    EventType.MESSAGES.field: MessagingValue,
}


class Change(WebhookModel):
    """One field-level update inside an entry."""

    field: str
    value: SerializeAsAny[ChangeValue] | None = None

    @field_validator("field")
    @classmethod
    def validate_field(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Change field cannot be empty")
        return v

    @field_validator("value", mode="before")
    @classmethod
    def select_value_shape(cls, v: Any, info: ValidationInfo) -> Any:
        """Build the value model that matches the change field."""
        if v is None or isinstance(v, ChangeValue):
            return v
        field = info.data.get("field")
        model = VALUE_MODELS.get(field, GenericValue) if field else GenericValue
        return model.model_validate(v)

    @property
    def event_type(self) -> EventType | None:
        """Event type for this change, or None for fields without one."""
        try:
            return EventType.from_field(self.field)
        except ValueError:
            return None


class Entry(WebhookModel):
    """One business account's changes."""

    id: str | None = None
    time: int | None = None
    changes: list[Change]


class WebhookEnvelope(WebhookModel):
    """Top-level webhook delivery body."""

    object: str | None = None
    entry: list[Entry]

    @property
    def change_count(self) -> int:
        return sum(len(entry.changes) for entry in self.entry)
