"""
Webhook processors: envelope parsing, per-event normalization and
message-kind dispatch.
"""

from .envelope_parser import EnvelopeParser
from .message_dispatcher import DispatchSummary, MessageKindDispatcher
from .messages_processor import MessagesNormalizer
from .quality_update_processor import QualityUpdateNormalizer
from .timestamps import resolve_triggered_timestamp

__all__ = [
    "DispatchSummary",
    "EnvelopeParser",
    "MessageKindDispatcher",
    "MessagesNormalizer",
    "QualityUpdateNormalizer",
    "resolve_triggered_timestamp",
]
