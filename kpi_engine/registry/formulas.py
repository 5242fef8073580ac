"""
Scoring Formulas

Each formula maps (value, target) to an unclamped raw score where 100
means "target met". Targets are guaranteed positive by KpiDefinition.
"""

from typing import Callable

ScoreFn = Callable[[float, float], float]

PENALTY_CAP = 50.0
BONUS_CAP = 150.0


def lower_is_better_penalty(value: float, target: float) -> float:
    """
    Full marks at or below target.

    Overshoot is penalized linearly, 50 points per 100% over target,
    capped at 50 points and never below 0.
    """
    if value <= target:
        return 100.0
    penalty = min((value - target) / target * 50, PENALTY_CAP)
    return max(100.0 - penalty, 0.0)


def higher_is_better_bonus(value: float, target: float) -> float:
    """Linear credit for target attainment, capped at 150."""
    return min(value / target * 100, BONUS_CAP)


def higher_is_better_floor(value: float, target: float) -> float:
    """Linear credit below target; overshoot earns no bonus."""
    if value >= target:
        return 100.0
    return max(value / target * 100, 0.0)
