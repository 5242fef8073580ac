"""Tests for the presentation-ready performance report."""

from datetime import date

import pytest

from kpi_engine.aggregation import PerformanceReport
from kpi_engine.aggregation.report import format_number, format_with_unit

AGENT = "agent-1"


@pytest.fixture
def report(aggregator):
    return PerformanceReport(aggregator)


def seed(store, make_event):
    store.add(make_event("aht", 23, "2024-03-11T09:00:00", agent_id=AGENT))
    store.add(make_event("new_refund_pct", 12.0, "2024-03-11T09:00:00", agent_id=AGENT))
    store.add(make_event("nrpc", 62.5, "2024-03-12T09:00:00", agent_id=AGENT))


class TestFormatting:

    @pytest.mark.parametrize("value,text", [
        (8.0, "8"),
        (23, "23"),
        (12.5, "12.5"),
        (0.0, "0")
    ])
    def test_format_number(self, value, text):
        assert format_number(value) == text

    def test_format_with_unit(self):
        assert format_with_unit(8.0, "%") == "8%"
        assert format_with_unit(65, "") == "65"


class TestPerformanceReport:
    """Summary of the last N tracked days."""

    def test_no_data(self, report):
        summary = report.summarize(AGENT)
        assert summary["total_days_tracked"] == 0
        assert summary["days"] == []
        assert summary["aggregated_stats"] == {
            "total_xp": 0,
            "total_points": 0,
            "average_daily_xp": 0,
            "average_daily_points": 0,
            "days_with_data": 0
        }

    def test_days_newest_first(self, report, store, make_event):
        seed(store, make_event)
        summary = report.summarize(AGENT, 5)
        assert [d["date"] for d in summary["days"]] == ["2024-03-12", "2024-03-11"]

    def test_daily_stats(self, report, store, make_event):
        seed(store, make_event)
        older = report.summarize(AGENT, 5)["days"][1]
        # aht 100 -> 10 XP; refund 75 -> 7.5 -> 8 XP
        assert older["daily_stats"] == {
            "xp_earned": 18,
            "points_earned": 175,
            "progress_percentage": 18
        }

    def test_kpi_achievements(self, report, store, make_event):
        seed(store, make_event)
        older = report.summarize(AGENT, 5)["days"][1]
        refund = older["kpi_achievements"][0]
        assert refund == {
            "key": "new_refund_pct",
            "name": "New Refund %",
            "value": "12%",
            "target": "8%",
            "achieved": False,
            "percentage": 75,
            "status": "at-risk"
        }
        aht = older["kpi_achievements"][1]
        assert aht["value"] == "23min"
        assert aht["achieved"] is True

    def test_aggregated_stats(self, report, store, make_event):
        seed(store, make_event)
        stats = report.summarize(AGENT, 5)["aggregated_stats"]
        # nrpc 62.5 -> 125 -> 12.5 -> 13 XP, 125 points
        assert stats["total_xp"] == 31
        assert stats["total_points"] == 300
        assert stats["average_daily_xp"] == 16
        assert stats["average_daily_points"] == 150
        assert stats["days_with_data"] == 2

    def test_window_limit(self, report, store, make_event):
        seed(store, make_event)
        assert report.summarize(AGENT, 1)["total_days_tracked"] == 1

    def test_format_summary(self, report, store, make_event):
        seed(store, make_event)
        text = report.format_summary(report.summarize(AGENT, 5))
        assert "Performance Summary: agent-1" in text
        assert "Days tracked: 2 (2 with KPI data)" in text
        assert "New Refund %: 12% / 8% [at-risk]" in text
        assert text.index("2024-03-12") < text.index("2024-03-11")
