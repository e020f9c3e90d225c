"""Event handling contract and handler registry."""

from .event_handler import WebhookEventHandler
from .handler_registry import HandlerRegistry

__all__ = ["HandlerRegistry", "WebhookEventHandler"]
