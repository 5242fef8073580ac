"""
Score Evaluator

Applies the KPI registry to one agent-day of resolved metrics:
- Raw score per KPI (unclamped, may exceed 100)
- Clamped percentage, achievement flag and status
- XP and points, scaled by the raw score so overachievement pays more
"""

import logging
import math
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..core.entities import KpiStatus
from ..registry.kpis import KpiDefinition, KpiRegistry, get_registry
from .resolver import ResolvedDayMetrics

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards +infinity."""
    whole = math.floor(value)
    if value - whole >= 0.5:
        return int(whole) + 1
    return int(whole)


def classify_status(raw_score: float) -> KpiStatus:
    """Map a raw score to its status band."""
    if raw_score >= 95:
        return KpiStatus.EXCELLENT
    elif raw_score >= 80:
        return KpiStatus.ON_TRACK
    elif raw_score >= 60:
        return KpiStatus.AT_RISK
    else:
        return KpiStatus.CRITICAL


@dataclass
class KpiResult:
    """Score of one KPI for one agent-day."""
    key: str
    name: str
    value: float
    target: float
    unit: str
    raw_score: float
    clamped_percentage: float
    achieved: bool
    status: KpiStatus
    xp: int = 0
    points: int = 0

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "name": self.name,
            "value": self.value,
            "target": self.target,
            "unit": self.unit,
            "raw_score": self.raw_score,
            "percentage": self.clamped_percentage,
            "achieved": self.achieved,
            "status": self.status.value,
            "xp": self.xp,
            "points": self.points
        }


@dataclass
class DaySummary:
    """Scored, reward-computed result for one agent on one calendar day."""
    date: Optional[date] = None
    kpi_results: list[KpiResult] = field(default_factory=list)
    xp_earned: int = 0
    points_earned: int = 0

    # Resolved events the day was scored from, unknown keys included
    metrics: ResolvedDayMetrics = field(default_factory=dict)

    @property
    def has_data(self) -> bool:
        return bool(self.kpi_results)

    def to_dict(self) -> dict:
        return {
            "date": self.date.isoformat() if self.date else None,
            "kpi_results": [r.to_dict() for r in self.kpi_results],
            "xp_earned": self.xp_earned,
            "points_earned": self.points_earned,
            "metrics": {k: e.to_dict() for k, e in self.metrics.items()}
        }


class ScoreEvaluator:
    """Scores resolved day metrics against a KPI registry."""

    def __init__(self, registry: KpiRegistry = None):
        self._registry = registry or get_registry()

    @property
    def registry(self) -> KpiRegistry:
        return self._registry

    def score_kpi(self, definition: KpiDefinition, value: float) -> KpiResult:
        """Score a single value for a KPI."""
        raw_score = definition.score(value)

        return KpiResult(
            key=definition.key,
            name=definition.name,
            value=value,
            target=definition.target,
            unit=definition.unit,
            raw_score=raw_score,
            clamped_percentage=min(raw_score, 100.0),
            achieved=raw_score >= 100,
            status=classify_status(raw_score),
            # Not clamped: 150% of target earns 1.5x the base rate
            xp=round_half_up(raw_score / 100 * definition.xp_rate),
            points=round_half_up(raw_score / 100 * definition.points_rate)
        )

    def score_day(self, resolved: ResolvedDayMetrics, day: Optional[date] = None) -> DaySummary:
        """
        Score one agent-day.

        KPIs without a reading are left out entirely; keys unknown to the
        registry are ignored.
        """
        results = []
        for definition in self._registry:
            event = resolved.get(definition.key)
            if event is None:
                continue
            results.append(self.score_kpi(definition, event.value))

        unknown = [key for key in resolved if key not in self._registry]
        if unknown:
            logger.debug("Ignoring unknown metric keys for %s: %s", day, ", ".join(sorted(unknown)))

        return DaySummary(
            date=day,
            kpi_results=results,
            xp_earned=sum(r.xp for r in results),
            points_earned=sum(r.points for r in results),
            metrics=dict(resolved)
        )

    def day_xp(self, resolved: ResolvedDayMetrics) -> int:
        return self.score_day(resolved).xp_earned

    def day_points(self, resolved: ResolvedDayMetrics) -> int:
        return self.score_day(resolved).points_earned
