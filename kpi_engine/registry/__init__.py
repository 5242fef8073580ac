"""
KPI Registry

Declarative mapping from metric keys to targets, reward rates and
scoring formulas.
"""

from .formulas import (
    ScoreFn,
    higher_is_better_bonus,
    higher_is_better_floor,
    lower_is_better_penalty
)
from .kpis import KpiDefinition, KpiRegistry, default_definitions, get_registry

__all__ = [
    "ScoreFn",
    "higher_is_better_bonus",
    "higher_is_better_floor",
    "lower_is_better_penalty",
    "KpiDefinition",
    "KpiRegistry",
    "default_definitions",
    "get_registry"
]
