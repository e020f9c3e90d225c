"""
Text-like inbound messages: plain text, reactions and quick-reply buttons.
"""

from typing import Any, ClassVar, Literal

from pydantic import model_validator

from waba_webhooks.schemas.core.base_model import WebhookModel
from waba_webhooks.schemas.core.types import MessageType
from waba_webhooks.schemas.messages.base import BaseInboundMessage


class TextMessage(BaseInboundMessage):
    """
    Plain text message.

    The provider sends ``{"text": {"body": "..."}}``; the internal format sends
    ``{"text": "..."}``. Both end up as a plain string.
    """

    payload_keys: ClassVar[frozenset[str]] = frozenset({"text"})

    type: Literal[MessageType.TEXT]
    text: str | None = None

    @model_validator(mode="before")
    @classmethod
    def flatten_body(cls, data: Any) -> Any:
        if isinstance(data, dict) and isinstance(data.get("text"), dict):
            data = {**data, "text": data["text"].get("body")}
        return data


class ReactionMessage(BaseInboundMessage):
    """Emoji reaction to an earlier message."""

    payload_keys: ClassVar[frozenset[str]] = frozenset({"emoji", "reaction"})

    type: Literal[MessageType.REACTION]
    emoji: str | None = None
    reacted_message_id: str | None = None

    @model_validator(mode="before")
    @classmethod
    def flatten_reaction(cls, data: Any) -> Any:
        if isinstance(data, dict) and isinstance(data.get("reaction"), dict):
            reaction = data["reaction"]
            data = {k: v for k, v in data.items() if k != "reaction"}
            data.setdefault("emoji", reaction.get("emoji"))
            data.setdefault("reacted_message_id", reaction.get("message_id"))
        return data


class ButtonPayload(WebhookModel):
    """Quick-reply button content."""

    payload: str | None = None
    text: str | None = None


class ButtonMessage(BaseInboundMessage):
    """Reply to a template quick-reply button."""

    payload_keys: ClassVar[frozenset[str]] = frozenset({"button"})

    type: Literal[MessageType.BUTTON]
    button: ButtonPayload | None = None
