"""
Handler for message_template_quality_update webhooks.

All-or-nothing: parse and build every event first, then publish in order.
Any failure, including a single failed publish, aborts the delivery with a
WebhookProcessingError so the provider redelivers it.
"""

from waba_webhooks.core.errors import WebhookProcessingError
from waba_webhooks.core.events.event_handler import WebhookEventHandler
from waba_webhooks.core.logging.context import set_delivery_context
from waba_webhooks.core.logging.logger import ContextLogger
from waba_webhooks.messaging.queue.publisher import QueuePublisher
from waba_webhooks.processors.envelope_parser import EnvelopeParser
from waba_webhooks.processors.quality_update_processor import QualityUpdateNormalizer
from waba_webhooks.schemas.core.types import EventType
from waba_webhooks.schemas.events import WebhookDelivery


class MessageTemplateQualityUpdateHandler(WebhookEventHandler):
    """Normalizes quality updates and queues one event per change."""

    event_type = EventType.MESSAGE_TEMPLATE_QUALITY_UPDATE

    def __init__(
        self,
        publisher: QueuePublisher,
        parser: EnvelopeParser | None = None,
        normalizer: QualityUpdateNormalizer | None = None,
        logger: ContextLogger | None = None,
    ):
        super().__init__(logger)
        self.publisher = publisher
        self.parser = parser or EnvelopeParser()
        self.normalizer = normalizer or QualityUpdateNormalizer()

    async def handle(self, delivery: WebhookDelivery) -> None:
        """
        Parse, normalize and publish a quality-update delivery.

        Raises:
            WebhookProcessingError: On any parse, build or publish failure,
                with the original error as ``__cause__``
        """
        try:
            envelope = self.parser.parse(delivery.payload)
            if envelope.entry:
                set_delivery_context(waba_id=envelope.entry[0].id)

            events = self.normalizer.normalize(envelope, delivery.timestamp)
            self.logger.info(
                f"Publishing {len(events)} {self.event_type.value} event(s) "
                f"to {self.publisher.queue_name}"
            )
            for event in events:
                await self.publisher.publish(event)
        except Exception as e:
            self.logger.error(
                f"Failed to process {self.event_type.value} webhook: {e}", exc_info=True
            )
            raise WebhookProcessingError("Failed to process webhook payload") from e
