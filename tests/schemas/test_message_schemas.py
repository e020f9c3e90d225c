"""
Tests for the inbound message union.

Covers both the provider's raw message shape and the internal camelCase
shape, plus the local MalformedMessage/UnrecognizedMessage fallbacks.
"""

import pytest

from waba_webhooks.schemas.core.types import MessageType
from waba_webhooks.schemas.events import MessagesDetails
from waba_webhooks.schemas.messages import (
    MESSAGE_MODELS,
    AudioMessage,
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
    parse_inbound_message,
)

PROVIDER_MESSAGES = [
    ({"type": "text", "text": {"body": "hello"}}, TextMessage),
    ({"type": "audio", "audio": {"id": "A1", "mime_type": "audio/ogg", "voice": True}}, AudioMessage),
    ({"type": "image", "image": {"id": "I1", "caption": "cat"}}, ImageMessage),
    ({"type": "document", "document": {"id": "D1", "filename": "a.pdf"}}, DocumentMessage),
    ({"type": "video", "video": {"id": "V1"}}, VideoMessage),
    ({"type": "sticker", "sticker": {"id": "S1", "animated": False}}, StickerMessage),
    ({"type": "unsupported", "errors": [{"code": 131051, "title": "Unsupported"}]}, UnsupportedMessage),
    ({"type": "order", "order": {"catalog_id": "C1", "product_items": [{"quantity": 2}]}}, OrderMessage),
    ({"type": "location", "location": {"latitude": 4.6, "longitude": -74.1}}, LocationMessage),
    ({"type": "button", "button": {"payload": "YES", "text": "Yes"}}, ButtonMessage),
    ({"type": "interactive", "interactive": {"type": "button_reply", "button_reply": {"id": "b1"}}}, InteractiveMessage),
    ({"type": "contacts", "contacts": [{"name": {"formatted_name": "Ann"}}]}, ContactsMessage),
    ({"type": "reaction", "reaction": {"emoji": "+1", "message_id": "M0"}}, ReactionMessage),
]


class TestMessageVariants:
    """Every known tag builds its own variant."""

    def test_every_message_type_has_a_model(self):
        assert set(MESSAGE_MODELS) == set(MessageType)

    @pytest.mark.parametrize("raw,expected_class", PROVIDER_MESSAGES)
    def test_provider_shape(self, raw, expected_class):
        message = parse_inbound_message({"id": "wamid.1", "from": "573001", **raw})

        assert type(message) is expected_class
        assert message.message_id == "wamid.1"
        assert message.user_phone_number == "573001"

    def test_tags_are_case_insensitive(self):
        message = parse_inbound_message({"type": "AUDIO", "audio": {"id": "A1"}})

        assert isinstance(message, AudioMessage)
        assert message.type is MessageType.AUDIO

    def test_contact_alias_tag(self):
        message = parse_inbound_message(
            {"type": "contact", "contact": [{"phones": [{"phone": "+1 555"}]}]}
        )

        assert isinstance(message, ContactsMessage)
        assert message.contacts[0].phones[0].phone == "+1 555"

    def test_internal_audio_shape(self):
        message = parse_inbound_message(
            {
                "messageId": "M1",
                "userPhoneNumber": "555",
                "type": "AUDIO",
                "audio": {"id": "A1", "mimeType": "audio/ogg", "isVoiceRecording": True},
            }
        )

        assert message.audio.id == "A1"
        assert message.audio.mime_type == "audio/ogg"
        assert message.audio.is_voice_recording is True
        assert message.audio.caption is None

    def test_text_body_is_flattened(self):
        provider = parse_inbound_message({"type": "text", "text": {"body": "hi"}})
        internal = parse_inbound_message({"type": "text", "text": "hi"})

        assert provider.text == internal.text == "hi"

    def test_text_whitespace_is_preserved(self):
        message = parse_inbound_message(
            {"type": "text", "text": {"body": "  hi  "}, "from": " 555 "}
        )

        assert message.text == "  hi  "
        assert message.user_phone_number == " 555 "

    def test_out_of_range_location_is_kept(self):
        message = parse_inbound_message(
            {"type": "location", "location": {"latitude": 123.0, "longitude": 0}}
        )

        assert isinstance(message, LocationMessage)
        assert message.location.latitude == 123.0
        assert message.location.longitude == 0.0

    def test_reaction_is_flattened(self):
        message = parse_inbound_message(
            {"type": "reaction", "reaction": {"emoji": "+1", "message_id": "M0"}}
        )

        assert message.emoji == "+1"
        assert message.reacted_message_id == "M0"

    def test_null_payload_is_accepted(self):
        message = parse_inbound_message({"type": "image", "image": None})

        assert isinstance(message, ImageMessage)
        assert message.image is None

    def test_context_from_key(self):
        message = parse_inbound_message(
            {"type": "text", "text": "hi", "context": {"from": "555", "id": "M0"}}
        )

        assert message.context.from_ == "555"
        assert message.context.id == "M0"


class TestMessageFallbacks:
    """Messages that cannot become a regular variant."""

    def test_foreign_payload_is_malformed(self):
        message = parse_inbound_message(
            {"id": "M1", "type": "audio", "image": {"id": "I1"}}
        )

        assert isinstance(message, MalformedMessage)
        assert message.type == "audio"
        assert message.message_id == "M1"
        assert "image" in message.reason

    def test_wrong_payload_shape_is_malformed(self):
        message = parse_inbound_message({"type": "audio", "audio": "not-an-object"})

        assert isinstance(message, MalformedMessage)
        assert message.variant == "malformed"

    def test_non_object_is_malformed(self):
        message = parse_inbound_message("text")

        assert isinstance(message, MalformedMessage)
        assert message.type is None

    def test_unknown_tag_keeps_raw_value(self):
        message = parse_inbound_message({"id": "M1", "type": "poll"})

        assert isinstance(message, UnrecognizedMessage)
        assert message.type == "poll"
        assert message.variant == "unrecognized"

    def test_missing_tag_is_unrecognized_without_type(self):
        message = parse_inbound_message({"id": "M1"})

        assert isinstance(message, UnrecognizedMessage)
        assert message.type is None

    def test_null_stays_null(self):
        assert parse_inbound_message(None) is None


class TestMessageList:
    """A list of messages is validated element by element."""

    def test_one_bad_element_does_not_fail_the_list(self):
        details = MessagesDetails.model_validate(
            {
                "businessPhoneNumberId": "P1",
                "messages": [
                    {"type": "text", "text": "ok"},
                    None,
                    {"type": "audio", "image": {}},
                    {"type": "poll"},
                ],
            }
        )

        kinds = [type(message) for message in details.messages]
        assert kinds == [TextMessage, type(None), MalformedMessage, UnrecognizedMessage]

    def test_serializes_camel_case(self):
        details = MessagesDetails.model_validate(
            {
                "business_phone_number_id": "P1",
                "messages": [{"id": "M1", "type": "document", "document": {"filename": "a.pdf"}}],
            }
        )

        dumped = details.model_dump(by_alias=True, exclude_unset=True)
        assert dumped["businessPhoneNumberId"] == "P1"
        assert dumped["messages"][0]["messageId"] == "M1"
        assert dumped["messages"][0]["document"] == {"fileName": "a.pdf"}
