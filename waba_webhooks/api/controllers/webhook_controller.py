"""
Webhook controller: turns HTTP requests into deliveries for the registry.

Routes handle HTTP concerns; the controller maps registry outcomes to status
codes. Each delivery is processed to completion before the response is sent,
so a failed quality update reaches the provider as a 5xx and is redelivered.
"""

from fastapi import HTTPException

from waba_webhooks.core.errors import UnrecognizedEventTypeError, WebhookProcessingError
from waba_webhooks.core.events.handler_registry import HandlerRegistry
from waba_webhooks.core.logging.context import clear_delivery_context
from waba_webhooks.core.logging.logger import get_logger
from waba_webhooks.schemas.events import WebhookDelivery


class WebhookController:
    """Routes webhook deliveries through the handler registry."""

    def __init__(self, registry: HandlerRegistry):
        self.registry = registry
        self.logger = get_logger(__name__)

    async def process_webhook(
        self, field: str, payload: str | bytes | None, timestamp: int | None = None
    ) -> dict[str, str]:
        """
        Process one webhook delivery.

        Args:
            field: Webhook field key selecting the handler (e.g. "messages")
            payload: Request body as received
            timestamp: Provider delivery timestamp, if supplied

        Returns:
            Dict with status confirmation

        Raises:
            HTTPException: 404 for an unregistered field, 500 when the handler
                reports a fatal failure
        """
        clear_delivery_context()
        delivery = WebhookDelivery(payload=payload, timestamp=timestamp)

        try:
            await self.registry.dispatch(field, delivery)
        except UnrecognizedEventTypeError as e:
            self.logger.warning(f"No handler for webhook field '{field}': {e}")
            raise HTTPException(
                status_code=404, detail=f"Unsupported webhook field: {field}"
            ) from e
        except WebhookProcessingError as e:
            self.logger.error(f"Webhook '{field}' failed and will need redelivery: {e}")
            raise HTTPException(
                status_code=500, detail="Internal server error processing webhook"
            ) from e

        return {"status": "accepted"}

    def get_health_status(self) -> dict[str, object]:
        return {
            "registered_event_types": [
                event_type.value for event_type in self.registry.registered_event_types
            ],
            "complete": self.registry.is_complete,
        }
