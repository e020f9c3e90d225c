"""
Message-kind dispatcher for inbound messages.

Walks the messages of a MessagesDetails and sends each one to the arm for its
kind. Every arm is an async method that subclasses can override, so one kind
can start forwarding or transforming messages without touching the others or
the match itself. The default arms write one structured log line each, with
None placeholders for anything the provider did not send.

One bad message never stops the batch: null messages, messages without a
type, unknown or malformed kinds, and exceptions raised by an arm are all
logged and skipped.
"""

from dataclasses import dataclass

from waba_webhooks.core.logging.logger import ContextLogger, get_logger
from waba_webhooks.schemas.core.types import MessageType
from waba_webhooks.schemas.events import MessagesDetails
from waba_webhooks.schemas.messages import (
    AudioMessage,
    BaseInboundMessage,
    ButtonMessage,
    ContactsMessage,
    DocumentMessage,
    ImageMessage,
    InteractiveMessage,
    LocationMessage,
    MalformedMessage,
    OrderMessage,
    ReactionMessage,
    StickerMessage,
    TextMessage,
    UnrecognizedMessage,
    UnsupportedMessage,
    VideoMessage,
)

# Arm method for every message kind.
MESSAGE_ARMS: dict[MessageType, str] = {
    MessageType.TEXT: "on_text",
    MessageType.AUDIO: "on_audio",
    MessageType.IMAGE: "on_image",
    MessageType.DOCUMENT: "on_document",
    MessageType.VIDEO: "on_video",
    MessageType.STICKER: "on_sticker",
    MessageType.UNSUPPORTED: "on_unsupported",
    MessageType.ORDER: "on_order",
    MessageType.LOCATION: "on_location",
    MessageType.BUTTON: "on_button",
    MessageType.INTERACTIVE: "on_interactive",
    MessageType.CONTACTS: "on_contacts",
    MessageType.REACTION: "on_reaction",
}

if set(MESSAGE_ARMS) != set(MessageType):
    raise RuntimeError(
        f"Message types without a dispatch arm: {set(MessageType) - set(MESSAGE_ARMS)}"
    )


@dataclass
class DispatchSummary:
    """Outcome counts for one dispatched batch."""

    processed: int = 0
    skipped: int = 0
    unrecognized: int = 0

    @property
    def total(self) -> int:
        return self.processed + self.skipped + self.unrecognized


class MessageKindDispatcher:
    """Dispatches inbound messages to one arm per message kind."""

    def __init__(self, logger: ContextLogger | None = None):
        self.logger = logger or get_logger(__name__)

    async def dispatch(self, details: MessagesDetails) -> DispatchSummary:
        """
        Dispatch every message in the batch.

        Args:
            details: Business phone number and its inbound messages

        Returns:
            Counts of processed, skipped and unrecognized messages
        """
        summary = DispatchSummary()
        phone_id = details.business_phone_number_id

        for message in details.messages or []:
            if message is None or message.type is None:
                self.logger.warning(f"Skipping null or invalid message: {message}")
                summary.skipped += 1
                continue

            self.logger.info(
                f"Processing message ID: {message.message_id} with type: "
                f"{_tag(message)} for business phone: {phone_id}"
            )
            try:
                handled = await self.dispatch_message(message, phone_id)
            except Exception as e:
                self.logger.error(
                    f"Error processing message {message.message_id} "
                    f"of type {_tag(message)}: {e}",
                    exc_info=True,
                )
                summary.skipped += 1
                continue

            if handled:
                summary.processed += 1
            elif isinstance(message, MalformedMessage):
                summary.skipped += 1
            else:
                summary.unrecognized += 1

        self.logger.debug(
            f"Dispatched {summary.total} message(s): {summary.processed} processed, "
            f"{summary.skipped} skipped, {summary.unrecognized} unrecognized"
        )
        return summary

    async def dispatch_message(
        self, message: BaseInboundMessage, phone_id: str | None
    ) -> bool:
        """
        Run the arm matching the message's kind.

        Returns:
            True if an arm handled the message, False if it was unknown or malformed
        """
        match message:
            case TextMessage():
                await self.on_text(message, phone_id)
            case AudioMessage():
                await self.on_audio(message, phone_id)
            case ImageMessage():
                await self.on_image(message, phone_id)
            case DocumentMessage():
                await self.on_document(message, phone_id)
            case VideoMessage():
                await self.on_video(message, phone_id)
            case StickerMessage():
                await self.on_sticker(message, phone_id)
            case UnsupportedMessage():
                await self.on_unsupported(message, phone_id)
            case OrderMessage():
                await self.on_order(message, phone_id)
            case LocationMessage():
                await self.on_location(message, phone_id)
            case ButtonMessage():
                await self.on_button(message, phone_id)
            case InteractiveMessage():
                await self.on_interactive(message, phone_id)
            case ContactsMessage():
                await self.on_contacts(message, phone_id)
            case ReactionMessage():
                await self.on_reaction(message, phone_id)
            case MalformedMessage():
                self.logger.warning(
                    f"Skipping malformed {message.type} message "
                    f"{message.message_id}: {message.reason}"
                )
                return False
            case UnrecognizedMessage():
                self.logger.warning(f"Unknown message type: {message.type}")
                return False
            case _:
                self.logger.warning(f"Unknown message type: {_tag(message)}")
                return False
        return True

    # Arms. Override any of these to change what happens to one message kind.

    async def on_reaction(self, message: ReactionMessage, phone_id: str | None) -> None:
        self.logger.info(
            f"Reaction message - Emoji: {message.emoji}, "
            f"User: {message.user_phone_number}"
        )

    async def on_text(self, message: TextMessage, phone_id: str | None) -> None:
        self.logger.info(
            f"Text message - Content: {message.text}, User: {message.user_phone_number}"
        )

    async def on_audio(self, message: AudioMessage, phone_id: str | None) -> None:
        audio = message.audio
        self.logger.info(
            f"Audio message - ID: {audio.id if audio else None}, "
            f"Caption: {audio.caption if audio else None}, "
            f"MimeType: {audio.mime_type if audio else None}, "
            f"IsVoice: {audio.is_voice_recording if audio else None}"
        )

    async def on_image(self, message: ImageMessage, phone_id: str | None) -> None:
        image = message.image
        self.logger.info(
            f"Image message - ID: {image.id if image else None}, "
            f"Caption: {image.caption if image else None}, "
            f"MimeType: {image.mime_type if image else None}, "
            f"SHA256: {image.sha256 if image else None}"
        )

    async def on_document(self, message: DocumentMessage, phone_id: str | None) -> None:
        document = message.document
        self.logger.info(
            f"Document message - ID: {document.id if document else None}, "
            f"Caption: {document.caption if document else None}, "
            f"MimeType: {document.mime_type if document else None}, "
            f"SHA256: {document.sha256 if document else None}, "
            f"FileName: {document.file_name if document else None}"
        )

    async def on_video(self, message: VideoMessage, phone_id: str | None) -> None:
        video = message.video
        self.logger.info(
            f"Video message - ID: {video.id if video else None}, "
            f"Caption: {video.caption if video else None}, "
            f"MimeType: {video.mime_type if video else None}, "
            f"SHA256: {video.sha256 if video else None}"
        )

    async def on_sticker(self, message: StickerMessage, phone_id: str | None) -> None:
        sticker = message.sticker
        self.logger.info(
            f"Sticker message - ID: {sticker.id if sticker else None}, "
            f"MimeType: {sticker.mime_type if sticker else None}, "
            f"SHA256: {sticker.sha256 if sticker else None}, "
            f"IsAnimated: {sticker.is_animated if sticker else None}"
        )

    async def on_unsupported(
        self, message: UnsupportedMessage, phone_id: str | None
    ) -> None:
        self.logger.info(f"Unsupported message - Errors: {message.errors}")

    async def on_order(self, message: OrderMessage, phone_id: str | None) -> None:
        order = message.order
        self.logger.info(
            f"Order message - CatalogID: {order.catalog_id if order else None}, "
            f"Products: {order.products if order else None}"
        )

    async def on_location(self, message: LocationMessage, phone_id: str | None) -> None:
        location = message.location
        self.logger.info(
            f"Location message - Latitude: {location.latitude if location else None}, "
            f"Longitude: {location.longitude if location else None}, "
            f"Address: {location.address if location else None}"
        )

    async def on_button(self, message: ButtonMessage, phone_id: str | None) -> None:
        button = message.button
        self.logger.info(
            f"Button message - Payload: {button.payload if button else None}, "
            f"Text: {button.text if button else None}"
        )

    async def on_interactive(
        self, message: InteractiveMessage, phone_id: str | None
    ) -> None:
        interactive = message.interactive
        self.logger.info(
            f"Interactive message - Type: {interactive.type if interactive else None}, "
            f"ListReply: {interactive.list_reply if interactive else None}, "
            f"ButtonReply: {interactive.button_reply if interactive else None}"
        )

    async def on_contacts(self, message: ContactsMessage, phone_id: str | None) -> None:
        self.logger.info(f"Contacts message - Contacts: {message.contacts}")


def _tag(message: BaseInboundMessage) -> str | None:
    tag = message.type
    return tag.value if isinstance(tag, MessageType) else tag
