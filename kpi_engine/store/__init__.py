"""
Metric store boundary: the interface the engine reads from and an
in-memory implementation.
"""

from .metric_store import InMemoryMetricStore, MetricStore

__all__ = [
    "InMemoryMetricStore",
    "MetricStore"
]
