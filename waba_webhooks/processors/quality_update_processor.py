"""
Normalizer for message_template_quality_update changes.

Every (entry, change) pair with the quality-update field becomes one
CanonicalEvent; a delivery with N entries of M such changes yields N x M
events. Score and template fields that the provider did not send stay unset
on the canonical event rather than being defaulted.
"""

from waba_webhooks.core.logging.logger import ContextLogger, get_logger
from waba_webhooks.processors.timestamps import resolve_triggered_timestamp
from waba_webhooks.schemas.core.types import EventType
from waba_webhooks.schemas.envelope import Change, Entry, QualityUpdateValue, WebhookEnvelope
from waba_webhooks.schemas.events import CanonicalEvent, QualityUpdate, TemplateInfo

# value field -> canonical field
_QUALITY_FIELDS = {
    "previous_quality_score": "previous_quality_score",
    "new_quality_score": "new_quality_score",
}
_TEMPLATE_FIELDS = {
    "message_template_id": "template_id",
    "message_template_name": "template_name",
    "message_template_language": "template_language",
}


def _renamed(value: QualityUpdateValue, mapping: dict[str, str]) -> dict:
    present = value.present_fields(*mapping)
    return {mapping[name]: field_value for name, field_value in present.items()}


class QualityUpdateNormalizer:
    """Builds canonical quality-update events from a parsed envelope."""

    event_type = EventType.MESSAGE_TEMPLATE_QUALITY_UPDATE

    def __init__(self, logger: ContextLogger | None = None):
        self.logger = logger or get_logger(__name__)

    def normalize(
        self, envelope: WebhookEnvelope, delivery_timestamp: int | None = None
    ) -> list[CanonicalEvent]:
        """
        Flat-map the envelope into one event per quality-update change.

        Args:
            envelope: Parsed webhook envelope
            delivery_timestamp: Provider timestamp of the delivery, if any

        Returns:
            Events in entry order, then change order
        """
        events = []
        for entry in envelope.entry:
            for change in entry.changes:
                if change.field != self.event_type.field:
                    self.logger.debug(
                        f"Skipping change field '{change.field}' in entry {entry.id}"
                    )
                    continue
                events.append(self.build_event(entry, change, delivery_timestamp))

        self.logger.debug(f"Normalized {len(events)} {self.event_type.value} event(s)")
        return events

    def build_event(
        self, entry: Entry, change: Change, delivery_timestamp: int | None = None
    ) -> CanonicalEvent:
        """Build the canonical event for one quality-update change."""
        value = change.value
        if not isinstance(value, QualityUpdateValue):
            value = QualityUpdateValue()

        quality_update = QualityUpdate(**_renamed(value, _QUALITY_FIELDS))
        template_info = TemplateInfo(
            **_renamed(value, _TEMPLATE_FIELDS), quality_update=quality_update
        )

        event_fields = {
            "waba_id": entry.id,
            "type": self.event_type,
            "template_info": template_info,
        }
        timestamp = resolve_triggered_timestamp(delivery_timestamp, entry.time)
        if timestamp is not None:
            event_fields["webhook_triggered_timestamp"] = timestamp

        event = CanonicalEvent(**event_fields)
        self.logger.debug(
            f"Built {self.event_type.value} event: wabaId={event.waba_id}, "
            f"templateId={template_info.template_id}, "
            f"timestamp={event.webhook_triggered_timestamp}"
        )
        return event
