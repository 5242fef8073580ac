"""
Temporal Aggregation

Rolls per-day scores into windows:
- last N days and window summaries
- daily XP trend
- weekly points trajectory
- week/month activity per KPI
- presentation-ready performance reports
"""

from .summaries import (
    DailyTrendPoint,
    KpiDataPoint,
    KpiSeries,
    PeriodActivity,
    WeeklyBucket,
    WindowSummary
)
from .aggregator import TemporalAggregator, period_start
from .report import PerformanceReport

__all__ = [
    "DailyTrendPoint",
    "KpiDataPoint",
    "KpiSeries",
    "PeriodActivity",
    "WeeklyBucket",
    "WindowSummary",
    "TemporalAggregator",
    "period_start",
    "PerformanceReport"
]
