"""
Tests for QualityUpdateNormalizer and timestamp resolution.
"""

import json

import pytest

from waba_webhooks.processors import EnvelopeParser, QualityUpdateNormalizer
from waba_webhooks.processors.timestamps import resolve_triggered_timestamp
from waba_webhooks.schemas.core.types import EventType

from conftest import entry, envelope, quality_change


@pytest.fixture
def normalizer():
    return QualityUpdateNormalizer()


def parsed(body):
    return EnvelopeParser().parse(json.dumps(body))


class TestResolveTriggeredTimestamp:
    @pytest.mark.parametrize(
        "delivery_ts,fallback,expected",
        [
            (2000, 1000, "2000"),
            (None, 1000, "1000"),
            (2000, None, "2000"),
            (None, None, None),
            (0, 1000, "0"),
            (None, "1700000000", "1700000000"),
        ],
    )
    def test_delivery_timestamp_wins(self, delivery_ts, fallback, expected):
        assert resolve_triggered_timestamp(delivery_ts, fallback) == expected


class TestQualityUpdateNormalizer:
    def test_one_event_per_entry_and_change(self, normalizer):
        body = envelope(
            entry("W1", 1000, [quality_change("T1"), quality_change("T2")]),
            entry("W2", 2000, [quality_change("T3"), quality_change("T4")]),
            entry("W3", 3000, [quality_change("T5"), quality_change("T6")]),
        )

        events = normalizer.normalize(parsed(body))

        assert len(events) == 6
        assert [e.template_info.template_id for e in events] == [
            "T1", "T2", "T3", "T4", "T5", "T6"
        ]
        assert [e.waba_id for e in events] == ["W1", "W1", "W2", "W2", "W3", "W3"]
        assert all(e.type is EventType.MESSAGE_TEMPLATE_QUALITY_UPDATE for e in events)

    def test_maps_template_and_scores(self, normalizer):
        events = normalizer.normalize(parsed(envelope(entry())))

        template_info = events[0].template_info
        assert template_info.template_id == "T1"
        assert template_info.template_name == "promo"
        assert template_info.template_language == "en_US"
        assert template_info.quality_update.previous_quality_score == "GREEN"
        assert template_info.quality_update.new_quality_score == "RED"
        assert events[0].messages_details is None

    def test_entry_time_used_without_delivery_timestamp(self, normalizer):
        events = normalizer.normalize(parsed(envelope(entry(time=1000))))

        assert events[0].webhook_triggered_timestamp == "1000"

    def test_delivery_timestamp_overrides_entry_time(self, normalizer):
        events = normalizer.normalize(parsed(envelope(entry(time=1000))), 2000)

        assert events[0].webhook_triggered_timestamp == "2000"

    def test_no_timestamp_leaves_field_unset(self, normalizer):
        events = normalizer.normalize(parsed(envelope(entry(time=None))))

        assert events[0].webhook_triggered_timestamp is None
        assert "webhookTriggeredTimestamp" not in json.loads(events[0].to_queue_json())

    def test_absent_value_fields_stay_unset(self, normalizer):
        change = {"field": "message_template_quality_update", "value": {"newQualityScore": "RED"}}

        event = normalizer.normalize(parsed(envelope(entry(changes=[change]))))[0]

        assert json.loads(event.to_queue_json())["templateInfo"] == {
            "qualityUpdate": {"newQualityScore": "RED"}
        }

    def test_null_value_fields_are_kept(self, normalizer):
        change = quality_change("T1", previous=None)

        event = normalizer.normalize(parsed(envelope(entry(changes=[change]))))[0]

        quality_update = json.loads(event.to_queue_json())["templateInfo"]["qualityUpdate"]
        assert quality_update == {"previousQualityScore": None, "newQualityScore": "RED"}

    def test_whitespace_in_values_is_preserved(self, normalizer):
        change = {
            "field": "message_template_quality_update",
            "value": {"messageTemplateId": " T1 ", "messageTemplateName": "  promo  "},
        }

        event = normalizer.normalize(parsed(envelope(entry(changes=[change]))))[0]

        template_info = json.loads(event.to_queue_json())["templateInfo"]
        assert template_info["templateId"] == " T1 "
        assert template_info["templateName"] == "  promo  "

    def test_null_value_builds_empty_quality_update(self, normalizer):
        change = {"field": "message_template_quality_update", "value": None}

        event = normalizer.normalize(parsed(envelope(entry(changes=[change]))))[0]

        assert event.template_info.template_id is None
        assert event.template_info.quality_update.new_quality_score is None

    def test_other_fields_are_skipped(self, normalizer):
        changes = [
            {"field": "account_update", "value": {"event": "VERIFIED_ACCOUNT"}},
            quality_change("T1"),
        ]

        events = normalizer.normalize(parsed(envelope(entry(changes=changes))))

        assert [e.template_info.template_id for e in events] == ["T1"]

    def test_empty_entry_list(self, normalizer):
        assert normalizer.normalize(parsed({"entry": []})) == []
