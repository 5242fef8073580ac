"""
Core domain models: raw metric events and the shared KPI enums.
"""

from .entities import KpiDirection, KpiStatus, MetricEvent, parse_timestamp

__all__ = [
    "KpiDirection",
    "KpiStatus",
    "MetricEvent",
    "parse_timestamp"
]
