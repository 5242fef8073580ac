"""
Metric Store Adapter

The engine reads raw metric events through the MetricStore interface and
never writes to it. Production deployments wrap their own storage; the
in-memory store backs the demo and the tests.
"""

import logging
from abc import ABC, abstractmethod
from typing import Iterable, Sequence

from ..core.entities import MetricEvent

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


class MetricStore(ABC):
    """Read access to raw metric events."""

    @abstractmethod
    def query(self, agent_id: str) -> Sequence[MetricEvent]:
        """All events for an agent, in any order."""
        pass


class InMemoryMetricStore(MetricStore):
    """
    Append-only in-memory event store indexed by agent.

    In production this would be backed by the metrics database.
    """

    def __init__(self, events: Iterable[MetricEvent] = None):
        self._events: list[MetricEvent] = []
        self._index_by_agent: dict[str, list[int]] = {}
        if events:
            self.extend(events)

    def add(self, event: MetricEvent) -> None:
        """Append an event (immutable)."""
        idx = len(self._events)
        self._events.append(event)
        self._index_by_agent.setdefault(event.agent_id, []).append(idx)

    def extend(self, events: Iterable[MetricEvent]) -> None:
        for event in events:
            self.add(event)

    def load_records(self, records: Iterable[dict]) -> int:
        """Load raw store records; returns the number of events added."""
        count = 0
        for record in records:
            self.add(MetricEvent.from_dict(record))
            count += 1
        logger.debug("Loaded %d metric records", count)
        return count

    def query(self, agent_id: str) -> list[MetricEvent]:
        indices = self._index_by_agent.get(agent_id, [])
        return [self._events[i] for i in indices]

    def agents(self) -> list[str]:
        return sorted(self._index_by_agent)

    def __len__(self) -> int:
        return len(self._events)
