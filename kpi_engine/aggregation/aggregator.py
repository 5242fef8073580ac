"""
Temporal Aggregator

Composes the daily resolver and the score evaluator over windows of an
agent's history:
- last N tracked days (newest first) and their window summary
- daily XP trend for charting (oldest first)
- four-week points trajectory
- per-KPI activity since the start of the current week or month

Every call reads the store once and recomputes from scratch; nothing is
cached between calls.
"""

import logging
from datetime import date, datetime, timedelta, timezone
from typing import Callable, Iterable, Optional

from ..config.settings import EngineSettings, get_settings
from ..core.entities import MetricEvent
from ..errors import InvalidPeriodError, ValidationError
from ..registry.kpis import KpiRegistry
from ..scoring.evaluator import DaySummary, ScoreEvaluator, round_half_up
from ..scoring.resolver import distinct_dates, group_by_calendar_day, resolve_day
from ..store.metric_store import MetricStore
from .summaries import (
    DailyTrendPoint,
    KpiDataPoint,
    KpiSeries,
    PeriodActivity,
    WeeklyBucket,
    WindowSummary
)

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

PERIODS = ("week", "month")


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def period_start(period: str, today: date) -> date:
    """
    First day of the current period.

    Weeks start on Sunday; months on day 1.
    """
    if period == "week":
        # date.weekday() is Monday=0; shift so Sunday=0
        return today - timedelta(days=(today.weekday() + 1) % 7)
    elif period == "month":
        return today.replace(day=1)
    raise InvalidPeriodError(period, PERIODS)


def _safe_average(total: int, count: int) -> int:
    if count == 0:
        return 0
    return round_half_up(total / count)


class TemporalAggregator:
    """Rolls daily KPI scores for an agent into windows."""

    def __init__(
        self,
        store: MetricStore,
        registry: KpiRegistry = None,
        settings: EngineSettings = None,
        clock: Callable[[], date] = None
    ):
        self._store = store
        self._settings = settings or get_settings()
        self._evaluator = ScoreEvaluator(registry)
        self._clock = clock or utc_today

    @property
    def evaluator(self) -> ScoreEvaluator:
        return self._evaluator

    @property
    def settings(self) -> EngineSettings:
        return self._settings

    def _summarize_days(
        self,
        events: Iterable[MetricEvent],
        dates: Iterable[date]
    ) -> list[DaySummary]:
        by_day = group_by_calendar_day(events)
        return [
            self._evaluator.score_day(resolve_day(by_day.get(day, [])), day)
            for day in dates
        ]

    def _window_size(self, n: Optional[int], default: int) -> int:
        if n is None:
            return default
        if isinstance(n, bool) or not isinstance(n, int) or n < 1:
            raise ValidationError(f"Window size must be a positive integer, got {n!r}")
        return n

    def last_n_days(self, agent_id: str, n: int = None) -> list[DaySummary]:
        """
        Day summaries for the agent's N most recent tracked dates.

        Newest first. Dates are the days with at least one event, not
        consecutive calendar days.
        """
        n = self._window_size(n, self._settings.default_window_days)
        events = self._store.query(agent_id)
        if not events:
            return []

        dates = sorted(distinct_dates(events), reverse=True)[:n]
        return self._summarize_days(events, dates)

    def window_summary(self, agent_id: str, n: int = None) -> WindowSummary:
        """Last N days with totals, per-day averages and days with KPI data."""
        days = self.last_n_days(agent_id, n)

        total_xp = sum(d.xp_earned for d in days)
        total_points = sum(d.points_earned for d in days)

        summary = WindowSummary(
            days=days,
            total_xp=total_xp,
            total_points=total_points,
            average_daily_xp=_safe_average(total_xp, len(days)),
            average_daily_points=_safe_average(total_points, len(days)),
            days_with_data=sum(1 for d in days if d.has_data)
        )
        logger.debug(
            "Window summary for %s: %d days, %d XP, %d points",
            agent_id, len(days), total_xp, total_points
        )
        return summary

    def daily_trend(self, agent_id: str, n: int = None) -> list[DailyTrendPoint]:
        """XP per day against the daily target, oldest first."""
        n = self._window_size(n, self._settings.trend_days)
        target = self._settings.daily_xp_target

        points = [
            DailyTrendPoint(
                date=day.date,
                xp_earned=day.xp_earned,
                target=target,
                percentage=min(day.xp_earned / target * 100, 100.0),
                display=f"{day.xp_earned}/{target}"
            )
            for day in self.last_n_days(agent_id, n)
        ]
        points.reverse()
        return points

    def weekly_trajectory(self, agent_id: str) -> list[WeeklyBucket]:
        """
        Points over the most recent tracked dates, bucketed by week.

        Takes the last weeks x days_per_week distinct dates in ascending
        order and cuts them into contiguous buckets, oldest bucket first.
        Always returns one bucket per week; short history leaves the later
        buckets partial or empty.
        """
        weeks = self._settings.trajectory_weeks
        per_week = self._settings.days_per_week

        events = self._store.query(agent_id)
        dates = distinct_dates(events)[-self._settings.trajectory_days:]
        summaries = {d.date: d for d in self._summarize_days(events, dates)}

        buckets = []
        for i in range(weeks):
            week_dates = dates[i * per_week:(i + 1) * per_week]
            buckets.append(WeeklyBucket(
                week=i + 1,
                label=f"Week {i + 1}",
                points_earned=sum(summaries[d].points_earned for d in week_dates),
                days_in_week=len(week_dates),
                start_date=week_dates[0] if week_dates else None,
                end_date=week_dates[-1] if week_dates else None
            ))
        return buckets

    def period_activity(
        self,
        agent_id: str,
        period: str = "week",
        today: Optional[date] = None
    ) -> PeriodActivity:
        """
        Per-KPI daily series and total points since the period start.

        Days on which a KPI has no reading are absent from its series.
        """
        start = period_start(period, today or self._clock())

        events = [e for e in self._store.query(agent_id) if e.day >= start]
        dates = distinct_dates(events)
        registry = self._evaluator.registry

        series: dict[str, KpiSeries] = {}
        total_points = 0
        for day in self._summarize_days(events, dates):
            total_points += day.points_earned
            for result in day.kpi_results:
                if result.key not in series:
                    definition = registry.require(result.key)
                    series[result.key] = KpiSeries(
                        key=definition.key,
                        name=definition.name,
                        unit=definition.unit
                    )
                series[result.key].data_points.append(
                    KpiDataPoint(date=day.date, value=result.value, target=result.target)
                )

        return PeriodActivity(
            period=period,
            start_date=start,
            kpi_series=list(series.values()),
            total_points=total_points
        )
