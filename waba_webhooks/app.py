"""
FastAPI application factory for the WABA webhook service.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from waba_webhooks.api.routes import health
from waba_webhooks.api.routes.webhooks import create_webhook_router
from waba_webhooks.core.config.settings import Settings, settings as default_settings
from waba_webhooks.core.logging.logger import get_app_logger, setup_app_logging
from waba_webhooks.handlers import create_default_registry
from waba_webhooks.messaging.queue.producers import EventProducer, create_event_producer
from waba_webhooks.processors.message_dispatcher import MessageKindDispatcher


def create_app(
    app_settings: Settings | None = None,
    producer: EventProducer | None = None,
    dispatcher: MessageKindDispatcher | None = None,
) -> FastAPI:
    """
    Build the application with its handler registry.

    Args:
        app_settings: Settings to use (defaults to the environment settings)
        producer: Queue producer; created from settings when omitted and then
            closed on shutdown
        dispatcher: Custom message dispatcher for inbound messages
    """
    app_settings = app_settings or default_settings
    owns_producer = producer is None
    producer = producer or create_event_producer(app_settings)

    registry = create_default_registry(
        app_settings.pipeline_settings(), producer, dispatcher=dispatcher
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_app_logging()
        logger = get_app_logger()
        logger.info(
            f"WABA webhook service {app_settings.version} starting - handlers: "
            f"{[event_type.value for event_type in registry.registered_event_types]}"
        )
        yield
        if owns_producer:
            await producer.close()
        logger.info("WABA webhook service stopped")

    app = FastAPI(
        title="WABA Webhooks",
        version=app_settings.version,
        lifespan=lifespan,
    )
    app.state.registry = registry
    app.state.producer = producer
    app.include_router(health.router)
    app.include_router(create_webhook_router(registry))
    return app
