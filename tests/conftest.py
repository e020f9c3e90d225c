"""
Pytest configuration and common fixtures for waba_webhooks tests.

Provides payload builders, an in-memory producer and a registry wired to it.
"""

import json
from typing import Any

import pytest

from waba_webhooks.core.config.settings import PipelineSettings
from waba_webhooks.core.logging.context import clear_delivery_context
from waba_webhooks.handlers import create_default_registry
from waba_webhooks.messaging.queue.producers import InMemoryEventProducer
from waba_webhooks.schemas.events import WebhookDelivery

QUALITY_QUEUE = "test-quality-update-queue"


def quality_change(
    template_id: str = "T1",
    previous: str | None = "GREEN",
    new: str | None = "RED",
    **extra: Any,
) -> dict[str, Any]:
    """One message_template_quality_update change, internal camelCase shape."""
    value = {
        "previousQualityScore": previous,
        "newQualityScore": new,
        "messageTemplateId": template_id,
        "messageTemplateName": "promo",
        "messageTemplateLanguage": "en_US",
        **extra,
    }
    return {"field": "message_template_quality_update", "value": value}


def envelope(*entries: dict[str, Any]) -> dict[str, Any]:
    return {"object": "whatsapp_business_account", "entry": list(entries)}


def entry(waba_id: str = "W1", time: int | None = 1000, changes=None) -> dict[str, Any]:
    data: dict[str, Any] = {"id": waba_id, "changes": changes or [quality_change()]}
    if time is not None:
        data["time"] = time
    return data


def messages_event(*messages: Any, **overrides: Any) -> dict[str, Any]:
    """A MESSAGES canonical-event body."""
    body = {
        "wabaId": "W1",
        "webhookTriggeredTimestamp": "1700000000",
        "type": "MESSAGES",
        "messagesDetails": {
            "businessPhoneNumberId": "PHONE1",
            "messages": list(messages),
        },
    }
    body.update(overrides)
    return body


def delivery(body: Any, timestamp: int | None = None) -> WebhookDelivery:
    raw = body is None or isinstance(body, (str, bytes))
    payload = body if raw else json.dumps(body)
    return WebhookDelivery(payload=payload, timestamp=timestamp)


@pytest.fixture
def producer() -> InMemoryEventProducer:
    return InMemoryEventProducer()


@pytest.fixture
def pipeline_settings() -> PipelineSettings:
    return PipelineSettings(quality_update_queue_name=QUALITY_QUEUE)


@pytest.fixture
def registry(pipeline_settings, producer):
    return create_default_registry(pipeline_settings, producer)


@pytest.fixture(autouse=True)
def reset_delivery_context():
    """Keep delivery context from leaking between tests."""
    clear_delivery_context()
    yield
    clear_delivery_context()


@pytest.fixture(autouse=True)
def setup_test_env(monkeypatch):
    """Set up test environment variables."""
    monkeypatch.setenv("ENVIRONMENT", "DEV")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.delenv("REDIS_URL", raising=False)
