# -*- coding: utf-8 -*-
"""Temporal aggregation engine.

Pure functions over daily record snapshots: window resolution, gap filling,
streaks, period statistics and goal progress. No I/O happens in here; the
services in ``service.py`` call injected providers for data.
"""

from .aggregate import aggregate_meals, aggregate_steps, summarize_history
from .dates import parse_day, period_window, resolve, resolve_meal_history, resolve_steps_history
from .gaps import fill_gaps
from .goals import goal_progress, remaining
from .models import DateWindow, NutritionRecord, StepsRecord
from .service import NutritionAnalytics, StepsAnalytics
from .streaks import current_streak

__all__ = [
    "DateWindow",
    "NutritionAnalytics",
    "NutritionRecord",
    "StepsAnalytics",
    "StepsRecord",
    "aggregate_meals",
    "aggregate_steps",
    "current_streak",
    "fill_gaps",
    "goal_progress",
    "parse_day",
    "period_window",
    "remaining",
    "resolve",
    "resolve_meal_history",
    "resolve_steps_history",
    "summarize_history",
]
