"""
Webhook routes.

The body is handed to the controller as raw bytes; decoding and parsing
belong to the event handlers.
"""

from fastapi import APIRouter, Query, Request

from waba_webhooks.api.controllers.webhook_controller import WebhookController
from waba_webhooks.core.events.handler_registry import HandlerRegistry


def create_webhook_router(registry: HandlerRegistry) -> APIRouter:
    """
    Create webhook router with controller delegation.

    Args:
        registry: Handler registry with a handler per event type

    Returns:
        APIRouter configured with webhook endpoints
    """
    webhook_controller = WebhookController(registry)

    router = APIRouter(
        prefix="/webhook",
        tags=["Webhooks"],
        responses={
            404: {"description": "Not Found - No handler for the webhook field"},
            500: {"description": "Internal Server Error - Delivery must be retried"},
        },
    )

    @router.post("/{field}")
    async def process_webhook(
        request: Request,
        field: str,
        timestamp: int | None = Query(None, description="Provider delivery timestamp"),
    ):
        """
        Process one webhook delivery for the given change field.

        Args:
            request: FastAPI request object
            field: Webhook change field, e.g. "messages"
            timestamp: Optional delivery-level timestamp (epoch seconds)

        Returns:
            Dict with status confirmation
        """
        body = await request.body()

        return await webhook_controller.process_webhook(
            field=field, payload=body or None, timestamp=timestamp
        )

    @router.get("/status")
    async def webhook_status():
        """Report which event types have a registered handler."""
        return {"status": "active", **webhook_controller.get_health_status()}

    return router
