"""
Inbound message schemas.

InboundMessage is a tagged union over every message variant. Lists of
messages are validated element by element: a malformed element becomes a
MalformedMessage instead of failing the whole list, and an element with a
missing or unknown tag becomes an UnrecognizedMessage.
"""

from typing import Annotated, Any, Union

from pydantic import BeforeValidator, Discriminator, Tag, ValidationError

from waba_webhooks.schemas.core.types import MessageType

from .base import BaseInboundMessage, ContextMetadata, Referral
from .contacts import ContactCard, ContactEmail, ContactName, ContactPhone, ContactsMessage
from .interactive import (
    ButtonReply,
    InteractiveMessage,
    InteractivePayload,
    ListReply,
    OrderMessage,
    OrderPayload,
    OrderProduct,
)
from .location import LocationMessage, LocationPayload
from .media import (
    AudioMessage,
    AudioPayload,
    DocumentMessage,
    DocumentPayload,
    ImageMessage,
    ImagePayload,
    StickerMessage,
    StickerPayload,
    VideoMessage,
    VideoPayload,
)
from .text import ButtonMessage, ButtonPayload, ReactionMessage, TextMessage
from .unsupported import (
    ErrorData,
    MalformedMessage,
    MessageError,
    UnrecognizedMessage,
    UnsupportedMessage,
)

MESSAGE_MODELS: dict[MessageType, type[BaseInboundMessage]] = {
    MessageType.TEXT: TextMessage,
    MessageType.AUDIO: AudioMessage,
    MessageType.IMAGE: ImageMessage,
    MessageType.DOCUMENT: DocumentMessage,
    MessageType.VIDEO: VideoMessage,
    MessageType.STICKER: StickerMessage,
    MessageType.UNSUPPORTED: UnsupportedMessage,
    MessageType.ORDER: OrderMessage,
    MessageType.LOCATION: LocationMessage,
    MessageType.BUTTON: ButtonMessage,
    MessageType.INTERACTIVE: InteractiveMessage,
    MessageType.CONTACTS: ContactsMessage,
    MessageType.REACTION: ReactionMessage,
}

if set(MESSAGE_MODELS) != set(MessageType):
    raise RuntimeError(
        f"Message types without a model: {set(MessageType) - set(MESSAGE_MODELS)}"
    )


def _message_tag(value: Any) -> str | None:
    if isinstance(value, BaseInboundMessage):
        return value.variant
    if isinstance(value, dict):
        tag = MessageType.parse(value.get("type"))
        return tag.value if tag else "unrecognized"
    return None


InboundMessage = Annotated[
    Union[
        Annotated[TextMessage, Tag(MessageType.TEXT.value)],
        Annotated[AudioMessage, Tag(MessageType.AUDIO.value)],
        Annotated[ImageMessage, Tag(MessageType.IMAGE.value)],
        Annotated[DocumentMessage, Tag(MessageType.DOCUMENT.value)],
        Annotated[VideoMessage, Tag(MessageType.VIDEO.value)],
        Annotated[StickerMessage, Tag(MessageType.STICKER.value)],
        Annotated[UnsupportedMessage, Tag(MessageType.UNSUPPORTED.value)],
        Annotated[OrderMessage, Tag(MessageType.ORDER.value)],
        Annotated[LocationMessage, Tag(MessageType.LOCATION.value)],
        Annotated[ButtonMessage, Tag(MessageType.BUTTON.value)],
        Annotated[InteractiveMessage, Tag(MessageType.INTERACTIVE.value)],
        Annotated[ContactsMessage, Tag(MessageType.CONTACTS.value)],
        Annotated[ReactionMessage, Tag(MessageType.REACTION.value)],
        Annotated[UnrecognizedMessage, Tag("unrecognized")],
        Annotated[MalformedMessage, Tag("malformed")],
    ],
    Discriminator(_message_tag),
]


def parse_inbound_message(raw: Any) -> BaseInboundMessage | None:
    """
    Build the message variant for one raw message.

    Never raises: null stays null, shape errors become a MalformedMessage.
    """
    if raw is None or isinstance(raw, BaseInboundMessage):
        return raw
    if not isinstance(raw, dict):
        return MalformedMessage(reason=f"Message must be an object, got {type(raw).__name__}")

    tag = MessageType.parse(raw.get("type"))
    model = MESSAGE_MODELS[tag] if tag else UnrecognizedMessage
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        raw_type = raw.get("type")
        raw_id = raw.get("messageId") or raw.get("message_id") or raw.get("id")
        return MalformedMessage(
            message_id=raw_id if isinstance(raw_id, str) else None,
            type=raw_type if isinstance(raw_type, str) else None,
            reason=f"{e.error_count()} validation error(s): "
            + "; ".join(err["msg"] for err in e.errors()),
        )


def _parse_message_list(value: Any) -> Any:
    if isinstance(value, list):
        return [parse_inbound_message(item) for item in value]
    return value


InboundMessageList = Annotated[
    list[InboundMessage | None], BeforeValidator(_parse_message_list)
]

__all__ = [
    "AudioMessage",
    "AudioPayload",
    "BaseInboundMessage",
    "ButtonMessage",
    "ButtonPayload",
    "ButtonReply",
    "ContactCard",
    "ContactEmail",
    "ContactName",
    "ContactPhone",
    "ContactsMessage",
    "ContextMetadata",
    "DocumentMessage",
    "DocumentPayload",
    "ErrorData",
    "ImageMessage",
    "ImagePayload",
    "InboundMessage",
    "InboundMessageList",
    "InteractiveMessage",
    "InteractivePayload",
    "ListReply",
    "LocationMessage",
    "LocationPayload",
    "MESSAGE_MODELS",
    "MalformedMessage",
    "MessageError",
    "OrderMessage",
    "OrderPayload",
    "OrderProduct",
    "ReactionMessage",
    "Referral",
    "StickerMessage",
    "StickerPayload",
    "TextMessage",
    "UnrecognizedMessage",
    "UnsupportedMessage",
    "VideoMessage",
    "VideoPayload",
    "parse_inbound_message",
]
