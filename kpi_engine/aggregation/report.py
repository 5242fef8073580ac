"""
Performance Report

Presentation-ready view of an agent's recent window: formatted values
and targets per KPI, daily progress against the XP target, aggregated
stats and a plain-text summary.
"""

from typing import Optional

from ..scoring.evaluator import DaySummary, KpiResult, round_half_up
from .aggregator import TemporalAggregator


def format_number(value: float) -> str:
    """Render a number without a trailing '.0' when it is integral."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_with_unit(value: float, unit: str) -> str:
    return f"{format_number(value)}{unit}"


class PerformanceReport:
    """Builds performance summaries from a temporal aggregator."""

    def __init__(self, aggregator: TemporalAggregator):
        self._aggregator = aggregator

    def summarize(self, agent_id: str, n: Optional[int] = None) -> dict:
        """Summary of the agent's last N tracked days, newest first."""
        window = self._aggregator.window_summary(agent_id, n)

        return {
            "agent_id": agent_id,
            "total_days_tracked": window.total_days_tracked,
            "days": [self._day_entry(day) for day in window.days],
            "aggregated_stats": {
                "total_xp": window.total_xp,
                "total_points": window.total_points,
                "average_daily_xp": window.average_daily_xp,
                "average_daily_points": window.average_daily_points,
                "days_with_data": window.days_with_data
            }
        }

    def _day_entry(self, day: DaySummary) -> dict:
        target = self._aggregator.settings.daily_xp_target
        return {
            "date": day.date.isoformat(),
            "daily_stats": {
                "xp_earned": day.xp_earned,
                "points_earned": day.points_earned,
                "progress_percentage": round_half_up(day.xp_earned / target * 100)
            },
            "kpi_achievements": [self._achievement(r) for r in day.kpi_results]
        }

    @staticmethod
    def _achievement(result: KpiResult) -> dict:
        return {
            "key": result.key,
            "name": result.name,
            "value": format_with_unit(result.value, result.unit),
            "target": format_with_unit(result.target, result.unit),
            "achieved": result.achieved,
            "percentage": result.clamped_percentage,
            "status": result.status.value
        }

    def format_summary(self, report: dict) -> str:
        """Format a summary as text."""
        stats = report["aggregated_stats"]
        lines = [
            f"Performance Summary: {report['agent_id']}",
            f"Days tracked: {report['total_days_tracked']} "
            f"({stats['days_with_data']} with KPI data)",
            f"Total: {stats['total_xp']} XP, {stats['total_points']} points "
            f"(avg {stats['average_daily_xp']} XP/day, "
            f"{stats['average_daily_points']} points/day)"
        ]

        for day in report["days"]:
            daily = day["daily_stats"]
            lines.extend([
                "",
                f"{day['date']}: {daily['xp_earned']} XP, {daily['points_earned']} points "
                f"({daily['progress_percentage']}% of daily goal)"
            ])
            for kpi in day["kpi_achievements"]:
                mark = "✓" if kpi["achieved"] else "✗"
                lines.append(
                    f"  {mark} {kpi['name']}: {kpi['value']} / {kpi['target']} "
                    f"[{kpi['status']}]"
                )

        return "\n".join(lines)
