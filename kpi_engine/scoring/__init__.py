"""
Daily scoring: resolve one agent-day's readings, then score them
against the KPI registry.
"""

from .resolver import (
    ResolvedDayMetrics,
    distinct_dates,
    group_by_calendar_day,
    resolve_day
)
from .evaluator import (
    DaySummary,
    KpiResult,
    ScoreEvaluator,
    classify_status,
    round_half_up
)

__all__ = [
    "ResolvedDayMetrics",
    "distinct_dates",
    "group_by_calendar_day",
    "resolve_day",
    "DaySummary",
    "KpiResult",
    "ScoreEvaluator",
    "classify_status",
    "round_half_up"
]
