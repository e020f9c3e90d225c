"""
Normalizer for MESSAGES deliveries.

The messages body is already close to canonical form, so it is deserialized
straight into a CanonicalEvent instead of going through the generic envelope.
Every failure here is soft: it is logged and the caller gets None.
"""

import json

from pydantic import ValidationError

from waba_webhooks.core.errors import MalformedEnvelopeError, UnrecognizedEventTypeError
from waba_webhooks.core.logging.logger import ContextLogger, get_logger
from waba_webhooks.processors.envelope_parser import decode_payload
from waba_webhooks.processors.timestamps import resolve_triggered_timestamp
from waba_webhooks.schemas.core.types import EventType
from waba_webhooks.schemas.events import CanonicalEvent, WebhookDelivery


class MessagesNormalizer:
    """Turns a raw MESSAGES delivery into a CanonicalEvent, or None."""

    event_type = EventType.MESSAGES

    def __init__(self, logger: ContextLogger | None = None):
        self.logger = logger or get_logger(__name__)

    def normalize(self, delivery: WebhookDelivery) -> CanonicalEvent | None:
        """
        Deserialize the delivery body into a MESSAGES event.

        Returns:
            The event, with the delivery timestamp applied when present, or
            None when the body is absent, malformed or of another type
        """
        if delivery.payload is None:
            self.logger.error(f"Payload content is null: {delivery}")
            return None

        try:
            event = self.parse(delivery.payload)
        except UnrecognizedEventTypeError as e:
            self.logger.error(f"Invalid payload or type is not MESSAGES: {e}")
            return None
        except MalformedEnvelopeError as e:
            self.logger.error(f"Failed to map payload to a MESSAGES event: {e}")
            return None

        timestamp = resolve_triggered_timestamp(
            delivery.timestamp, event.webhook_triggered_timestamp
        )
        if timestamp is not None and timestamp != event.webhook_triggered_timestamp:
            event = event.with_timestamp(timestamp)
        return event

    def parse(self, payload: str | bytes) -> CanonicalEvent:
        """
        Parse and type-check a MESSAGES body.

        Raises:
            MalformedEnvelopeError: If the body is not UTF-8 or not a valid
                event object
            UnrecognizedEventTypeError: If the body's type is not MESSAGES
        """
        payload_text = decode_payload(payload)
        try:
            data = json.loads(payload_text)
        except json.JSONDecodeError as e:
            raise MalformedEnvelopeError(f"Payload is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise MalformedEnvelopeError(
                f"Payload must be a JSON object, got {type(data).__name__}"
            )

        raw_type = data.get("type")
        try:
            event_type = EventType.from_field(raw_type)
        except ValueError as e:
            raise UnrecognizedEventTypeError(raw_type, self.event_type.value) from e
        if event_type is not self.event_type:
            raise UnrecognizedEventTypeError(raw_type, self.event_type.value)

        try:
            return CanonicalEvent.model_validate(data)
        except ValidationError as e:
            raise MalformedEnvelopeError(f"Payload does not match a MESSAGES event: {e}") from e
