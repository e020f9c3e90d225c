"""
Exception hierarchy for webhook processing.
"""

from waba_webhooks.schemas.core.types import ErrorCode


class WebhookError(Exception):
    """Base exception for webhook processing errors."""

    def __init__(self, message: str, error_code: ErrorCode):
        self.message = message
        self.error_code = error_code
        super().__init__(message)


class MalformedEnvelopeError(WebhookError):
    """Raised when a payload is absent, unparsable or structurally invalid."""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.MALFORMED_ENVELOPE)


class UnrecognizedEventTypeError(WebhookError):
    """Raised when an event-type discriminator does not match what was expected."""

    def __init__(self, event_type: object, expected: object | None = None):
        self.event_type = event_type
        self.expected = expected
        if expected is None:
            message = f"Unrecognized webhook event type: {event_type!r}"
        else:
            message = f"Event type {event_type!r} does not match expected {expected!r}"
        super().__init__(message, ErrorCode.UNRECOGNIZED_EVENT_TYPE)


class PublishFailureError(WebhookError):
    """Raised when an event cannot be serialized or handed to the queue producer."""

    def __init__(self, message: str, queue_name: str | None = None):
        self.queue_name = queue_name
        super().__init__(message, ErrorCode.PUBLISH_FAILURE)


class WebhookProcessingError(WebhookError):
    """Fatal failure of a delivery; the caller is expected to trigger redelivery."""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.PROCESSING_ERROR)
