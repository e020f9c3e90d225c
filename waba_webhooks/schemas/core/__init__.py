"""Core schema types shared across envelope and canonical event models."""

from .base_model import WebhookModel
from .types import ErrorCode, EventType, MessageType

__all__ = ["ErrorCode", "EventType", "MessageType", "WebhookModel"]
