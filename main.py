#!/usr/bin/env python3
"""
Agent KPI Engine - Demo

Seeds an in-memory metric store with five weeks of synthetic readings for
one agent and prints:
1. The last-5-days performance summary
2. The daily XP trend
3. The four-week points trajectory
4. This week's and this month's KPI activity
"""

import logging
import random
from datetime import datetime, time, timedelta, timezone

from kpi_engine.aggregation import PerformanceReport, TemporalAggregator
from kpi_engine.config import configure_logging, get_settings
from kpi_engine.core import MetricEvent
from kpi_engine.registry import get_registry
from kpi_engine.store import InMemoryMetricStore

logger = logging.getLogger("kpi_engine.demo")

AGENT_ID = "agent-001"

# Typical spread of daily readings per KPI: (low, high)
SAMPLE_RANGES = {
    "new_refund_pct": (4.0, 14.0),
    "new_conversion_pct": (12.0, 30.0),
    "nrpc": (30.0, 70.0),
    "aht": (18.0, 32.0),
    "nps": (45.0, 80.0),
    "qa_score": (60.0, 95.0),
    "aos": (60.0, 140.0),
    "revenue": (250.0, 800.0),
}


def seed_store(days: int = 35, random_seed: int = 42) -> InMemoryMetricStore:
    """Generate synthetic readings, including same-day corrections."""
    rng = random.Random(random_seed)
    store = InMemoryMetricStore()
    today = datetime.now(timezone.utc).date()

    for offset in range(days):
        day = today - timedelta(days=offset)
        if rng.random() < 0.15:
            continue  # day off

        for key, (low, high) in SAMPLE_RANGES.items():
            if rng.random() < 0.1:
                continue
            morning = datetime.combine(day, time(9, 0), tzinfo=timezone.utc)
            store.add(MetricEvent(AGENT_ID, key, round(rng.uniform(low, high), 1), morning))

            if rng.random() < 0.3:
                evening = morning + timedelta(hours=8)
                store.add(MetricEvent(AGENT_ID, key, round(rng.uniform(low, high), 1), evening))

        # Telemetry the registry does not know about
        store.add(MetricEvent(AGENT_ID, "calls_handled", rng.randint(20, 60),
                              datetime.combine(day, time(18, 0), tzinfo=timezone.utc)))

    return store


def run_report_demo(aggregator: TemporalAggregator):
    print("=" * 60)
    print("LAST 5 DAYS")
    print("=" * 60)
    report = PerformanceReport(aggregator)
    print(report.format_summary(report.summarize(AGENT_ID, 5)))
    print()


def run_trend_demo(aggregator: TemporalAggregator):
    print("=" * 60)
    print("DAILY XP TREND")
    print("=" * 60)
    for point in aggregator.daily_trend(AGENT_ID):
        bar = "#" * int(point.percentage / 5)
        print(f"{point.date.isoformat()}  {point.display:>8}  {bar}")
    print()

    print("=" * 60)
    print("WEEKLY POINTS TRAJECTORY")
    print("=" * 60)
    for bucket in aggregator.weekly_trajectory(AGENT_ID):
        print(f"{bucket.label:<8} {bucket.points_earned:>6} points over {bucket.days_in_week} days")
    print()


def run_activity_demo(aggregator: TemporalAggregator):
    for period in ("week", "month"):
        activity = aggregator.period_activity(AGENT_ID, period)
        print("=" * 60)
        print(f"ACTIVITY THIS {period.upper()} (since {activity.start_date.isoformat()})")
        print("=" * 60)
        for series in activity.kpi_series:
            values = ", ".join(f"{p.value:g}" for p in series.data_points)
            print(f"  {series.name:<22} [{values}]")
        print(f"  Total points: {activity.total_points}")
        print()


def main():
    """Main entry point."""
    settings = get_settings()
    configure_logging(settings)

    store = seed_store()
    logger.info("Seeded %d events for %s", len(store), AGENT_ID)

    aggregator = TemporalAggregator(store, get_registry(), settings)

    run_report_demo(aggregator)
    run_trend_demo(aggregator)
    run_activity_demo(aggregator)


if __name__ == "__main__":
    main()
