# -*- coding: utf-8 -*-
"""SQLite-backed providers for the aggregation engine."""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from .config import settings
from .engine.models import DailyRecord, Goal, StepGoal
from .engine.providers import NUTRITION, STEPS
from .engine.service import NutritionAnalytics, StepsAnalytics
from .meals.storage import list_nutrition_records
from .nutrition.storage import default_goals, get_nutrition_goals
from .steps.storage import get_step_goal, list_steps_records


class SqliteHistoryProvider:
    def fetch(self, user_id: str, domain: str, start: date, end: date) -> List[DailyRecord]:
        if domain == STEPS:
            return list(list_steps_records(user_id, start, end))
        if domain == NUTRITION:
            return list(list_nutrition_records(user_id, start, end))
        raise ValueError(f"unknown domain: {domain}")


class SqliteGoalProvider:
    def get(self, user_id: str, domain: str) -> Optional[Goal]:
        if domain == STEPS:
            daily_steps = get_step_goal(user_id)
            return StepGoal(daily_steps=daily_steps) if daily_steps is not None else None
        if domain == NUTRITION:
            return get_nutrition_goals(user_id)
        raise ValueError(f"unknown domain: {domain}")


def steps_analytics() -> StepsAnalytics:
    return StepsAnalytics(
        history=SqliteHistoryProvider(),
        goals=SqliteGoalProvider(),
        default_goal=settings.default_step_goal,
    )


def nutrition_analytics() -> NutritionAnalytics:
    return NutritionAnalytics(
        history=SqliteHistoryProvider(),
        goals=SqliteGoalProvider(),
        default_goal=default_goals(),
    )
