"""
Core Entities

This module defines the raw input of the engine and the enums shared by
the scoring and aggregation layers.

Entities:
- MetricEvent: one reading of one metric for one agent, produced by an
  external metric store and never mutated by the engine
- KpiDirection: whether lower or higher values are better
- KpiStatus: classification of a raw score
"""

import math
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Union

from ..errors import ValidationError


class KpiDirection(Enum):
    """Which way a KPI value has to move to improve."""
    LOWER_IS_BETTER = "lower_better"
    HIGHER_IS_BETTER = "higher_better"


class KpiStatus(Enum):
    """
    Status of a KPI for one day, derived from its raw score.

    Thresholds:
    - excellent: raw score >= 95
    - on-track:  80 <= raw score < 95
    - at-risk:   60 <= raw score < 80
    - critical:  raw score < 60
    """
    EXCELLENT = "excellent"
    ON_TRACK = "on-track"
    AT_RISK = "at-risk"
    CRITICAL = "critical"


def parse_timestamp(value: Union[str, datetime]) -> datetime:
    """
    Parse an ISO-8601 timestamp and normalize it to UTC.

    Naive timestamps are taken to be UTC already. A trailing "Z" is accepted.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError as exc:
            raise ValidationError(f"Malformed timestamp: {value!r}") from exc
    else:
        raise ValidationError(f"Malformed timestamp: {value!r}")

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


@dataclass(frozen=True)
class MetricEvent:
    """
    A single raw metric reading for an agent.

    The engine imposes its own ordering; events may arrive in any order
    and several readings of the same key may exist for one day.
    """
    agent_id: str
    metric_key: str
    value: float
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        object.__setattr__(self, "timestamp", parse_timestamp(self.timestamp))
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise ValidationError(
                f"Metric value for {self.metric_key!r} must be numeric, got {self.value!r}"
            )
        if not math.isfinite(self.value) or self.value < 0:
            raise ValidationError(
                f"Metric value for {self.metric_key!r} must be finite and non-negative, got {self.value!r}"
            )

    @property
    def day(self) -> date:
        """Calendar day of the event (UTC)."""
        return self.timestamp.date()

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "agent_id": self.agent_id,
            "metric_key": self.metric_key,
            "value": self.value,
            "timestamp": self.timestamp.isoformat()
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MetricEvent":
        """
        Create an event from a metric store record.

        Accepts both the engine's field names and the store's legacy ones
        (user_id for agent_id, date for timestamp).
        """
        agent_id = data.get("agent_id", data.get("user_id"))
        metric_key = data.get("metric_key")
        timestamp = data.get("timestamp", data.get("date"))

        if agent_id is None or metric_key is None or timestamp is None:
            raise ValidationError(f"Incomplete metric record: {data!r}")

        value = data.get("value")
        if isinstance(value, str):
            try:
                value = float(value)
            except ValueError as exc:
                raise ValidationError(f"Non-numeric metric value: {value!r}") from exc

        return cls(
            agent_id=str(agent_id),
            metric_key=str(metric_key),
            value=value,
            timestamp=parse_timestamp(timestamp)
        )
