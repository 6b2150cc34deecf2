# -*- coding: utf-8 -*-
"""Goal progress and remaining-to-goal figures."""

from __future__ import annotations

from typing import Dict

from ..errors import InvalidMetricError
from .models import GoalProgress, NutritionTotals


def goal_progress(total: float, goal: float) -> GoalProgress:
    if total < 0:
        raise InvalidMetricError(f"total cannot be negative (got {total})")
    if goal == 0:
        percent = 0.0
    else:
        percent = round(total / goal * 100, 2)
    return GoalProgress(percent=percent, reached=total >= goal)


def remaining(totals: NutritionTotals, goals: NutritionTotals) -> NutritionTotals:
    """Per-field ``max(0, goal - total)``; going over a goal leaves 0, never a negative surplus."""
    values: Dict[str, float] = {}
    for name in NutritionTotals.FIELDS:
        total = getattr(totals, name)
        if total < 0:
            raise InvalidMetricError(f"{name} cannot be negative (got {total})")
        values[name] = max(0.0, getattr(goals, name) - total)
    return NutritionTotals(**values)


def progress_by_field(totals: NutritionTotals, goals: NutritionTotals) -> Dict[str, GoalProgress]:
    return {
        name: goal_progress(getattr(totals, name), getattr(goals, name))
        for name in NutritionTotals.FIELDS
    }
