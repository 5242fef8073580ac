"""
Daily Resolver

Partitions an agent's raw events by calendar day and collapses repeated
readings of the same metric within a day to the latest one.
"""

from collections import defaultdict
from datetime import date
from typing import Iterable

from ..core.entities import MetricEvent

ResolvedDayMetrics = dict[str, MetricEvent]


def group_by_calendar_day(events: Iterable[MetricEvent]) -> dict[date, list[MetricEvent]]:
    """
    Group events by the UTC calendar date of their timestamp.

    Input order is preserved within each day.
    """
    by_day: dict[date, list[MetricEvent]] = defaultdict(list)
    for event in events:
        by_day[event.day].append(event)
    return dict(by_day)


def resolve_day(events: Iterable[MetricEvent]) -> ResolvedDayMetrics:
    """
    Keep the latest event per metric key.

    On equal timestamps the event seen first wins.
    """
    resolved: ResolvedDayMetrics = {}
    for event in events:
        current = resolved.get(event.metric_key)
        if current is None or event.timestamp > current.timestamp:
            resolved[event.metric_key] = event
    return resolved


def distinct_dates(events: Iterable[MetricEvent]) -> list[date]:
    """Distinct calendar dates present in the events, oldest first."""
    return sorted({event.day for event in events})
