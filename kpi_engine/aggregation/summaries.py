"""
Window Result Types

Plain result containers returned by the temporal aggregator. Every type
exposes to_dict() producing JSON-ready data.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..scoring.evaluator import DaySummary


@dataclass
class WindowSummary:
    """Daily summaries for a window plus totals and per-day averages."""
    days: list[DaySummary] = field(default_factory=list)
    total_xp: int = 0
    total_points: int = 0
    average_daily_xp: int = 0
    average_daily_points: int = 0
    days_with_data: int = 0

    @property
    def total_days_tracked(self) -> int:
        return len(self.days)

    def to_dict(self) -> dict:
        return {
            "days": [d.to_dict() for d in self.days],
            "totals": {"xp": self.total_xp, "points": self.total_points},
            "averages": {
                "xp_per_day": self.average_daily_xp,
                "points_per_day": self.average_daily_points
            },
            "days_with_data": self.days_with_data,
            "total_days_tracked": self.total_days_tracked
        }


@dataclass
class DailyTrendPoint:
    """XP earned on one day against the daily XP target."""
    date: date
    xp_earned: int
    target: int
    percentage: float
    display: str

    def to_dict(self) -> dict:
        return {
            "date": self.date.isoformat(),
            "xp_earned": self.xp_earned,
            "target": self.target,
            "percentage": self.percentage,
            "display": self.display
        }


@dataclass
class WeeklyBucket:
    """Points earned over one bucket of consecutive tracked dates."""
    week: int
    label: str
    points_earned: int = 0
    days_in_week: int = 0
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    def to_dict(self) -> dict:
        return {
            "week": self.week,
            "label": self.label,
            "points_earned": self.points_earned,
            "days_in_week": self.days_in_week,
            "start_date": self.start_date.isoformat() if self.start_date else None,
            "end_date": self.end_date.isoformat() if self.end_date else None
        }


@dataclass
class KpiDataPoint:
    date: date
    value: float
    target: float

    def to_dict(self) -> dict:
        return {"date": self.date.isoformat(), "value": self.value, "target": self.target}


@dataclass
class KpiSeries:
    """Daily values of one KPI over a period, for graphing."""
    key: str
    name: str
    unit: str
    data_points: list[KpiDataPoint] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "name": self.name,
            "unit": self.unit,
            "data_points": [p.to_dict() for p in self.data_points]
        }


@dataclass
class PeriodActivity:
    """Per-KPI series and total points since the start of a week or month."""
    period: str
    start_date: date
    kpi_series: list[KpiSeries] = field(default_factory=list)
    total_points: int = 0

    def to_dict(self) -> dict:
        return {
            "period": self.period,
            "start_date": self.start_date.isoformat(),
            "kpi_metrics": [s.to_dict() for s in self.kpi_series],
            "total_points": self.total_points
        }
