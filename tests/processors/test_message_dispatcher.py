"""
Tests for MessageKindDispatcher.
"""

import logging
from contextlib import ExitStack
from unittest.mock import AsyncMock, patch

import pytest

from waba_webhooks.processors import DispatchSummary, MessageKindDispatcher
from waba_webhooks.processors.message_dispatcher import MESSAGE_ARMS
from waba_webhooks.schemas.core.types import MessageType
from waba_webhooks.schemas.events import MessagesDetails


def details(*messages):
    return MessagesDetails.model_validate(
        {"businessPhoneNumberId": "PHONE1", "messages": list(messages)}
    )


@pytest.fixture
def dispatcher():
    return MessageKindDispatcher()


@pytest.fixture
def arms(dispatcher):
    """Replace every arm with an AsyncMock, keyed by message type."""
    with ExitStack() as stack:
        yield {
            message_type: stack.enter_context(
                patch.object(dispatcher, arm_name, new_callable=AsyncMock)
            )
            for message_type, arm_name in MESSAGE_ARMS.items()
        }


def test_every_message_type_has_an_arm():
    assert set(MESSAGE_ARMS) == set(MessageType)


@pytest.mark.asyncio
class TestDispatchTotality:
    """Every message kind reaches exactly its own arm."""

    @pytest.mark.parametrize("message_type", list(MessageType))
    async def test_routes_to_single_arm(self, dispatcher, arms, message_type):
        summary = await dispatcher.dispatch(
            details({"messageId": "M1", "type": message_type.value.upper()})
        )

        assert summary == DispatchSummary(processed=1)
        for arm_type, arm in arms.items():
            if arm_type is message_type:
                arm.assert_awaited_once()
                message, phone_id = arm.await_args.args
                assert message.message_id == "M1"
                assert phone_id == "PHONE1"
            else:
                arm.assert_not_awaited()


@pytest.mark.asyncio
class TestDispatchIsolation:
    """One bad message never stops the rest of the batch."""

    async def test_null_and_typeless_messages_are_skipped(self, dispatcher, arms, caplog):
        batch = details(
            {"messageId": "M1", "type": "text", "text": "first"},
            None,
            {"messageId": "M2"},
            {"messageId": "M3", "type": "text", "text": "last"},
        )

        with caplog.at_level(logging.WARNING):
            summary = await dispatcher.dispatch(batch)

        assert summary == DispatchSummary(processed=2, skipped=2)
        assert arms[MessageType.TEXT].await_count == 2
        assert caplog.text.count("Skipping null or invalid message") == 2

    async def test_unknown_type_is_logged_and_skipped(self, dispatcher, arms, caplog):
        with caplog.at_level(logging.WARNING):
            summary = await dispatcher.dispatch(details({"messageId": "M1", "type": "poll"}))

        assert summary == DispatchSummary(unrecognized=1)
        assert "Unknown message type: poll" in caplog.text
        assert not any(arm.await_count for arm in arms.values())

    async def test_malformed_message_is_skipped(self, dispatcher, arms, caplog):
        batch = details(
            {"messageId": "M1", "type": "audio", "image": {"id": "I1"}},
            {"messageId": "M2", "type": "image", "image": {"id": "I1"}},
        )

        with caplog.at_level(logging.WARNING):
            summary = await dispatcher.dispatch(batch)

        assert summary == DispatchSummary(processed=1, skipped=1)
        arms[MessageType.AUDIO].assert_not_awaited()
        arms[MessageType.IMAGE].assert_awaited_once()
        assert "Skipping malformed audio message M1" in caplog.text

    async def test_arm_failure_does_not_stop_batch(self, dispatcher, arms, caplog):
        arms[MessageType.TEXT].side_effect = RuntimeError("boom")
        batch = details(
            {"messageId": "M1", "type": "text", "text": "fails"},
            {"messageId": "M2", "type": "audio", "audio": {"id": "A1"}},
        )

        with caplog.at_level(logging.ERROR):
            summary = await dispatcher.dispatch(batch)

        assert summary == DispatchSummary(processed=1, skipped=1)
        arms[MessageType.AUDIO].assert_awaited_once()
        assert "Error processing message M1 of type text: boom" in caplog.text

    async def test_null_message_list(self, dispatcher):
        summary = await dispatcher.dispatch(MessagesDetails(business_phone_number_id="P1"))

        assert summary.total == 0


@pytest.mark.asyncio
class TestDefaultArms:
    """The default arms log one line per message, tolerating missing data."""

    async def test_audio_log_line(self, dispatcher, caplog):
        batch = details(
            {
                "messageId": "M1",
                "userPhoneNumber": "555",
                "type": "AUDIO",
                "audio": {"id": "A1", "mimeType": "audio/ogg", "isVoiceRecording": True},
            }
        )

        with caplog.at_level(logging.INFO):
            await dispatcher.dispatch(batch)

        assert (
            "Processing message ID: M1 with type: audio for business phone: PHONE1"
            in caplog.text
        )
        assert (
            "Audio message - ID: A1, Caption: None, MimeType: audio/ogg, IsVoice: True"
            in caplog.text
        )

    @pytest.mark.parametrize(
        "message_type,expected",
        [
            ("audio", "Audio message - ID: None, Caption: None, MimeType: None, IsVoice: None"),
            ("image", "Image message - ID: None, Caption: None, MimeType: None, SHA256: None"),
            ("document", "FileName: None"),
            ("video", "Video message - ID: None"),
            ("sticker", "IsAnimated: None"),
            ("order", "Order message - CatalogID: None, Products: None"),
            ("location", "Location message - Latitude: None, Longitude: None, Address: None"),
            ("button", "Button message - Payload: None, Text: None"),
            ("interactive", "Interactive message - Type: None"),
            ("contacts", "Contacts message - Contacts: None"),
            ("reaction", "Reaction message - Emoji: None, User: None"),
            ("text", "Text message - Content: None, User: None"),
            ("unsupported", "Unsupported message - Errors: None"),
        ],
    )
    async def test_missing_payload_logs_placeholders(
        self, dispatcher, caplog, message_type, expected
    ):
        with caplog.at_level(logging.INFO):
            summary = await dispatcher.dispatch(details({"type": message_type}))

        assert summary.processed == 1
        assert expected in caplog.text

    async def test_out_of_range_location_reaches_its_arm(self, dispatcher, caplog):
        batch = details(
            {
                "messageId": "L1",
                "type": "LOCATION",
                "location": {"latitude": 123.0, "longitude": 0},
            }
        )

        with caplog.at_level(logging.INFO):
            summary = await dispatcher.dispatch(batch)

        assert summary == DispatchSummary(processed=1)
        assert "Location message - Latitude: 123.0, Longitude: 0.0" in caplog.text
        assert "Skipping malformed" not in caplog.text
