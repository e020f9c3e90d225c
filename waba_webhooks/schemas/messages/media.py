"""
Media inbound messages: audio, image, document, video and sticker.

Media payloads only reference the asset (id, mime type, hash); the binary has
to be fetched separately from the provider's media API.
"""

from typing import ClassVar, Literal

from pydantic import AliasChoices, Field

from waba_webhooks.schemas.core.base_model import WebhookModel
from waba_webhooks.schemas.core.types import MessageType
from waba_webhooks.schemas.messages.base import BaseInboundMessage


class MediaPayload(WebhookModel):
    """Fields common to every media asset reference."""

    id: str | None = None
    mime_type: str | None = None
    sha256: str | None = None


class AudioPayload(MediaPayload):
    caption: str | None = None
    is_voice_recording: bool | None = Field(
        None,
        validation_alias=AliasChoices("isVoiceRecording", "is_voice_recording", "voice"),
        serialization_alias="isVoiceRecording",
    )


class ImagePayload(MediaPayload):
    caption: str | None = None


class DocumentPayload(MediaPayload):
    caption: str | None = None
    file_name: str | None = Field(
        None,
        validation_alias=AliasChoices("fileName", "file_name", "filename"),
        serialization_alias="fileName",
    )


class VideoPayload(MediaPayload):
    caption: str | None = None


class StickerPayload(MediaPayload):
    is_animated: bool | None = Field(
        None,
        validation_alias=AliasChoices("isAnimated", "is_animated", "animated"),
        serialization_alias="isAnimated",
    )


class AudioMessage(BaseInboundMessage):
    """Voice recording or uploaded audio file."""

    payload_keys: ClassVar[frozenset[str]] = frozenset({"audio"})

    type: Literal[MessageType.AUDIO]
    audio: AudioPayload | None = None


class ImageMessage(BaseInboundMessage):
    payload_keys: ClassVar[frozenset[str]] = frozenset({"image"})

    type: Literal[MessageType.IMAGE]
    image: ImagePayload | None = None


class DocumentMessage(BaseInboundMessage):
    payload_keys: ClassVar[frozenset[str]] = frozenset({"document"})

    type: Literal[MessageType.DOCUMENT]
    document: DocumentPayload | None = None


class VideoMessage(BaseInboundMessage):
    payload_keys: ClassVar[frozenset[str]] = frozenset({"video"})

    type: Literal[MessageType.VIDEO]
    video: VideoPayload | None = None


class StickerMessage(BaseInboundMessage):
    payload_keys: ClassVar[frozenset[str]] = frozenset({"sticker"})

    type: Literal[MessageType.STICKER]
    sticker: StickerPayload | None = None
