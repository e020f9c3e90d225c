"""
Envelope parser: raw webhook body text -> WebhookEnvelope.
"""

import json

from pydantic import ValidationError

from waba_webhooks.core.errors import MalformedEnvelopeError
from waba_webhooks.core.logging.logger import ContextLogger, get_logger
from waba_webhooks.schemas.envelope import WebhookEnvelope


def decode_payload(payload: str | bytes | None) -> str | None:
    """
    Return the body as text, decoding raw bytes as strict UTF-8.

    Raises:
        MalformedEnvelopeError: If the bytes are not valid UTF-8
    """
    if not isinstance(payload, bytes):
        return payload
    try:
        return payload.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedEnvelopeError(f"Webhook payload is not valid UTF-8: {e}") from e


class EnvelopeParser:
    """Deserializes webhook bodies into the typed envelope."""

    def __init__(self, logger: ContextLogger | None = None):
        self.logger = logger or get_logger(__name__)

    def parse(self, payload: str | bytes | None) -> WebhookEnvelope:
        """
        Parse a raw webhook body.

        Args:
            payload: JSON body of the delivery, as text or raw bytes

        Returns:
            Parsed envelope with entries and changes

        Raises:
            MalformedEnvelopeError: If the body is absent, not UTF-8, not a
                JSON object, or does not match the envelope structure
        """
        payload_text = decode_payload(payload)
        if payload_text is None or not payload_text.strip():
            raise MalformedEnvelopeError("Webhook payload is empty")

        try:
            data = json.loads(payload_text)
        except json.JSONDecodeError as e:
            raise MalformedEnvelopeError(f"Webhook payload is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise MalformedEnvelopeError(
                f"Webhook payload must be a JSON object, got {type(data).__name__}"
            )

        try:
            envelope = WebhookEnvelope.model_validate(data)
        except ValidationError as e:
            raise MalformedEnvelopeError(
                f"Webhook payload does not match the envelope structure: {e}"
            ) from e

        self.logger.debug(
            f"Parsed webhook envelope: {len(envelope.entry)} entries, "
            f"{envelope.change_count} changes"
        )
        return envelope
