"""
Handler for messages webhooks.

Best-effort: nothing raised while normalizing or dispatching escapes
``handle``, so a bad payload or message never turns into a redelivery.
"""

from waba_webhooks.core.events.event_handler import WebhookEventHandler
from waba_webhooks.core.logging.context import set_delivery_context
from waba_webhooks.core.logging.logger import ContextLogger
from waba_webhooks.processors.message_dispatcher import MessageKindDispatcher
from waba_webhooks.processors.messages_processor import MessagesNormalizer
from waba_webhooks.schemas.core.types import EventType
from waba_webhooks.schemas.events import WebhookDelivery


class MessagesHandler(WebhookEventHandler):
    """Normalizes inbound messages and dispatches them by kind."""

    event_type = EventType.MESSAGES

    def __init__(
        self,
        dispatcher: MessageKindDispatcher | None = None,
        normalizer: MessagesNormalizer | None = None,
        logger: ContextLogger | None = None,
    ):
        super().__init__(logger)
        self.dispatcher = dispatcher or MessageKindDispatcher()
        self.normalizer = normalizer or MessagesNormalizer()

    async def handle(self, delivery: WebhookDelivery) -> None:
        self.logger.info(f"Processing messages update: {delivery}")
        try:
            event = self.normalizer.normalize(delivery)
            if event is None:
                return

            details = event.messages_details
            if details is None or details.messages is None:
                self.logger.warning(
                    f"No messages details found in payload for wabaId={event.waba_id}"
                )
                return

            set_delivery_context(
                waba_id=event.waba_id, phone_number_id=details.business_phone_number_id
            )
            await self.dispatcher.dispatch(details)
        except Exception as e:
            self.logger.error(
                f"Error processing messages payload {delivery}: {e}", exc_info=True
            )
