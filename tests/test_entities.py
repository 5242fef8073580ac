"""Tests for metric events and the in-memory metric store."""

from datetime import date, datetime, timezone

import pytest

from kpi_engine.core import MetricEvent, parse_timestamp
from kpi_engine.errors import ValidationError
from kpi_engine.store import InMemoryMetricStore, MetricStore


class TestTimestamps:
    """UTC normalization of timestamps."""

    def test_naive_taken_as_utc(self):
        parsed = parse_timestamp("2024-03-10T09:00:00")
        assert parsed == datetime(2024, 3, 10, 9, tzinfo=timezone.utc)

    def test_zulu_suffix(self):
        assert parse_timestamp("2024-03-10T09:00:00Z").tzinfo is not None

    def test_offset_normalized(self):
        # 23:30 at -05:00 is the next day in UTC
        event = MetricEvent("a", "aht", 20, "2024-03-10T23:30:00-05:00")
        assert event.day == date(2024, 3, 11)

    def test_date_only(self):
        assert MetricEvent("a", "aht", 20, "2024-03-10").day == date(2024, 3, 10)

    @pytest.mark.parametrize("bad", ["yesterday", "2024-13-01T00:00:00", 12345])
    def test_malformed(self, bad):
        with pytest.raises(ValidationError):
            parse_timestamp(bad)


class TestMetricEvent:
    """Construction and serialization."""

    def test_immutable(self):
        event = MetricEvent("a", "aht", 20, "2024-03-10T09:00:00")
        with pytest.raises(AttributeError):
            event.value = 30

    def test_non_numeric_value(self):
        with pytest.raises(ValidationError):
            MetricEvent("a", "aht", "fast", "2024-03-10T09:00:00")

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf"), -1])
    def test_rejects_non_finite_or_negative(self, value):
        with pytest.raises(ValidationError):
            MetricEvent("a", "nrpc", value, "2024-03-10T09:00:00")

    def test_zero_value_allowed(self):
        assert MetricEvent("a", "nrpc", 0, "2024-03-10T09:00:00").value == 0

    @pytest.mark.parametrize("raw", ["NaN", "inf", "-1"])
    def test_from_dict_rejects_non_finite_or_negative(self, raw):
        with pytest.raises(ValidationError):
            MetricEvent.from_dict({
                "agent_id": "a",
                "metric_key": "nrpc",
                "value": raw,
                "timestamp": "2024-03-10T09:00:00"
            })

    def test_from_dict_legacy_fields(self):
        event = MetricEvent.from_dict({
            "user_id": "u-7",
            "metric_key": "nps",
            "value": "71.5",
            "date": "2024-03-10T09:00:00Z"
        })
        assert event.agent_id == "u-7"
        assert event.value == 71.5
        assert event.day == date(2024, 3, 10)

    def test_from_dict_incomplete(self):
        with pytest.raises(ValidationError):
            MetricEvent.from_dict({"agent_id": "a", "value": 1})

    def test_to_dict(self):
        data = MetricEvent("a", "aht", 20, "2024-03-10T09:00:00").to_dict()
        assert data == {
            "agent_id": "a",
            "metric_key": "aht",
            "value": 20,
            "timestamp": "2024-03-10T09:00:00+00:00"
        }


class TestInMemoryMetricStore:
    """Agent-filtered queries."""

    def test_is_metric_store(self, store):
        assert isinstance(store, MetricStore)

    def test_query_filters_by_agent(self, store, make_event):
        store.add(make_event("aht", 20, "2024-03-10T09:00:00", agent_id="a"))
        store.add(make_event("aht", 25, "2024-03-10T09:00:00", agent_id="b"))
        store.add(make_event("nps", 70, "2024-03-11T09:00:00", agent_id="a"))

        assert [e.value for e in store.query("a")] == [20, 70]
        assert store.query("nobody") == []
        assert store.agents() == ["a", "b"]
        assert len(store) == 3

    def test_load_records_rejects_nan_before_scoring(self):
        store = InMemoryMetricStore()
        with pytest.raises(ValidationError):
            store.load_records([
                {"agent_id": "a", "metric_key": "aht", "value": "NaN", "timestamp": "2024-03-10T09:00:00"}
            ])
        assert store.query("a") == []

    def test_load_records(self):
        store = InMemoryMetricStore()
        added = store.load_records([
            {"agent_id": "a", "metric_key": "aht", "value": 21, "timestamp": "2024-03-10T09:00:00"},
            {"user_id": "a", "metric_key": "nps", "value": 66, "date": "2024-03-10T10:00:00"}
        ])
        assert added == 2
        assert len(store.query("a")) == 2
