"""Shared fixtures: default registry, settings and an in-memory store."""

from datetime import date

import pytest

from kpi_engine.aggregation import TemporalAggregator
from kpi_engine.config import EngineSettings, RewardDefaults
from kpi_engine.core import MetricEvent
from kpi_engine.registry import KpiRegistry, default_definitions
from kpi_engine.store import InMemoryMetricStore

# A Wednesday
TODAY = date(2024, 3, 13)


@pytest.fixture
def settings():
    return EngineSettings(rewards=RewardDefaults())


@pytest.fixture
def registry(settings):
    return KpiRegistry(default_definitions(settings.rewards))


@pytest.fixture
def store():
    return InMemoryMetricStore()


@pytest.fixture
def aggregator(store, registry, settings):
    return TemporalAggregator(store, registry, settings, clock=lambda: TODAY)


@pytest.fixture
def make_event():
    def _make(key, value, timestamp, agent_id="agent-1"):
        return MetricEvent(agent_id=agent_id, metric_key=key, value=value, timestamp=timestamp)
    return _make
