"""
Messages that cannot be processed as a regular kind.

UnsupportedMessage is a real provider tag (the user sent something the
platform cannot deliver). UnrecognizedMessage and MalformedMessage are
produced locally: the first when the tag is missing or unknown, the second
when a known tag carries a payload of the wrong shape.
"""

from typing import Any, ClassVar, Literal

from pydantic import field_validator

from waba_webhooks.schemas.core.base_model import WebhookModel
from waba_webhooks.schemas.core.types import MessageType
from waba_webhooks.schemas.messages.base import BaseInboundMessage


class ErrorData(WebhookModel):
    details: str | None = None


class MessageError(WebhookModel):
    code: int | None = None
    title: str | None = None
    message: str | None = None
    error_data: ErrorData | None = None


class UnsupportedMessage(BaseInboundMessage):
    payload_keys: ClassVar[frozenset[str]] = frozenset({"errors"})

    type: Literal[MessageType.UNSUPPORTED]
    errors: list[MessageError] | None = None


class UnrecognizedMessage(BaseInboundMessage):
    """Message whose type tag is null or outside the known set."""

    type: str | None = None

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, v: Any) -> Any:
        """Keep the raw tag as received."""
        return v.value if isinstance(v, MessageType) else v

    @property
    def variant(self) -> str:
        return "unrecognized"


class MalformedMessage(BaseInboundMessage):
    """Known tag whose payload does not match the variant's shape."""

    type: str | None = None
    reason: str

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, v: Any) -> Any:
        return v.value if isinstance(v, MessageType) else v

    @property
    def variant(self) -> str:
        return "malformed"
