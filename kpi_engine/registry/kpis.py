"""
KPI Registry

Static table of KPI definitions keyed by metric key. The registry is
built once per process and is read-only afterwards; iteration order is
the declaration order.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Iterator, Optional

from ..config.settings import RewardDefaults, get_settings
from ..core.entities import KpiDirection
from ..errors import UnknownKpiError, ValidationError
from .formulas import (
    ScoreFn,
    higher_is_better_bonus,
    higher_is_better_floor,
    lower_is_better_penalty
)

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


@dataclass(frozen=True)
class KpiDefinition:
    """Definition of a KPI: target, direction, rewards and scoring formula."""
    key: str
    name: str
    target: float
    direction: KpiDirection
    score_fn: ScoreFn
    weight: float = 0.0  # advisory, 0 = tracked but not weighted
    unit: str = ""
    max_points: float = 100.0
    xp_rate: float = 10.0
    points_rate: float = 100.0

    def __post_init__(self):
        """Validate definition."""
        if not self.key:
            raise ValidationError("KPI key must not be empty")
        if self.target <= 0:
            raise ValidationError(f"Target for {self.key!r} must be positive, got {self.target}")
        if self.weight < 0:
            raise ValidationError(f"Weight for {self.key!r} must be non-negative")
        if self.xp_rate < 0 or self.points_rate < 0:
            raise ValidationError(f"Reward rates for {self.key!r} must be non-negative")
        if not callable(self.score_fn):
            raise ValidationError(f"Scoring formula for {self.key!r} is not callable")

    def score(self, value: float) -> float:
        """Raw (unclamped) score of a value against this KPI's target."""
        return self.score_fn(value, self.target)

    def to_dict(self) -> dict:
        """Convert to dictionary format."""
        return {
            "key": self.key,
            "name": self.name,
            "weight": self.weight,
            "target": self.target,
            "direction": self.direction.value,
            "unit": self.unit,
            "max_points": self.max_points,
            "xp_rate": self.xp_rate,
            "points_rate": self.points_rate
        }


class KpiRegistry:
    """Immutable, ordered collection of KPI definitions."""

    def __init__(self, definitions: Iterable[KpiDefinition]):
        ordered = tuple(definitions)
        by_key: dict[str, KpiDefinition] = {}
        for definition in ordered:
            if definition.key in by_key:
                raise ValidationError(f"Duplicate KPI key: {definition.key}")
            by_key[definition.key] = definition
        self._definitions = ordered
        self._by_key = by_key

    def get(self, key: str) -> Optional[KpiDefinition]:
        """Get definition for a KPI, or None when the key is unknown."""
        return self._by_key.get(key)

    def require(self, key: str) -> KpiDefinition:
        """Get definition for a KPI, raising UnknownKpiError when absent."""
        definition = self._by_key.get(key)
        if definition is None:
            raise UnknownKpiError(key)
        return definition

    def all(self) -> tuple[KpiDefinition, ...]:
        return self._definitions

    def keys(self) -> tuple[str, ...]:
        return tuple(d.key for d in self._definitions)

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    def __iter__(self) -> Iterator[KpiDefinition]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __repr__(self) -> str:
        return f"KpiRegistry({', '.join(self.keys())})"


def default_definitions(rewards: Optional[RewardDefaults] = None) -> list[KpiDefinition]:
    """The agent KPI set tracked in production."""
    rewards = rewards or get_settings().rewards
    common = {
        "max_points": rewards.max_points,
        "xp_rate": rewards.xp_rate,
        "points_rate": rewards.points_rate
    }
    lower = KpiDirection.LOWER_IS_BETTER
    higher = KpiDirection.HIGHER_IS_BETTER

    return [
        KpiDefinition(
            key="new_refund_pct", name="New Refund %", weight=10, target=8.0,
            direction=lower, unit="%", score_fn=lower_is_better_penalty, **common
        ),
        KpiDefinition(
            key="new_conversion_pct", name="New Conversion %", weight=20, target=20.0,
            direction=higher, unit="%", score_fn=higher_is_better_bonus, **common
        ),
        KpiDefinition(
            key="nrpc", name="NRPC", weight=25, target=50.0,
            direction=higher, unit="$", score_fn=higher_is_better_bonus, **common
        ),
        KpiDefinition(
            key="aht", name="Average Handle Time", weight=20, target=23,
            direction=lower, unit="min", score_fn=lower_is_better_penalty, **common
        ),
        KpiDefinition(
            key="nps", name="Net Promoter Score", weight=15, target=65,
            direction=higher, unit="", score_fn=higher_is_better_floor, **common
        ),
        KpiDefinition(
            key="qa_score", name="QA Score", weight=10, target=80,
            direction=higher, unit="%", score_fn=higher_is_better_floor, **common
        ),
        KpiDefinition(
            key="aos", name="Average Order Size", weight=0, target=100,
            direction=higher, unit="$", score_fn=higher_is_better_bonus, **common
        ),
        KpiDefinition(
            key="revenue", name="Revenue", weight=0, target=500,
            direction=higher, unit="$", score_fn=higher_is_better_bonus, **common
        )
    ]


@lru_cache()
def get_registry() -> KpiRegistry:
    """Get the cached process-wide registry."""
    registry = KpiRegistry(default_definitions())
    logger.debug("KPI registry initialized: %s", ", ".join(registry.keys()))
    return registry
