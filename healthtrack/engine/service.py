# -*- coding: utf-8 -*-
"""History, stats and today views for the steps and nutrition domains.

The services only orchestrate: window resolution, a provider fetch, then the
pure engine functions. They hold no state besides the injected providers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Dict, List, Optional, Union

from .aggregate import NUTRITION_FIELDS, aggregate_meals, aggregate_steps, summarize_history
from .dates import (
    DayInput,
    STEPS_HISTORY_DEFAULT_LIMIT,
    STEPS_HISTORY_MAX_LIMIT,
    period_window,
    resolve_meal_history,
    resolve_steps_history,
    streak_window,
    today_utc,
)
from .gaps import fill_gaps
from .goals import goal_progress, progress_by_field, remaining
from .models import (
    DateWindow,
    GoalProgress,
    MealStats,
    NutritionGoal,
    NutritionHistory,
    NutritionRecord,
    NutritionTotals,
    StepGoal,
    StepsHistory,
    StepsRecord,
    StepsStats,
)
from .providers import NUTRITION, STEPS, GoalProvider, HistoryProvider
from .streaks import current_streak

logger = logging.getLogger(__name__)

DEFAULT_STEP_GOAL = 10000
DEFAULT_NUTRITION_GOAL = NutritionGoal(
    daily_calories=2000.0,
    daily_protein=150.0,
    daily_carbs=250.0,
    daily_fat=65.0,
)


@dataclass(frozen=True)
class PeriodStats:
    period: str
    window: DateWindow
    stats: Union[StepsStats, MealStats]


@dataclass(frozen=True)
class StepsToday:
    entry: StepsRecord
    goal_steps: int
    progress: GoalProgress


@dataclass(frozen=True)
class NutritionToday:
    day: date
    meal_count: int
    totals: NutritionTotals
    goals: NutritionTotals
    remaining: NutritionTotals
    progress: Dict[str, GoalProgress] = field(default_factory=dict)


@dataclass
class StepsAnalytics:
    history: HistoryProvider
    goals: GoalProvider
    default_goal: int = DEFAULT_STEP_GOAL
    clock: Callable[[], date] = today_utc

    def goal_steps(self, user_id: str) -> int:
        goal = self.goals.get(user_id, STEPS)
        if isinstance(goal, StepGoal):
            return goal.daily_steps
        return self.default_goal

    def _fetch(self, user_id: str, window: DateWindow) -> List[StepsRecord]:
        return [
            r for r in self.history.fetch(user_id, STEPS, window.start, window.end)
            if isinstance(r, StepsRecord)
        ]

    def get_history(
        self,
        user_id: str,
        start: DayInput = None,
        end: DayInput = None,
        limit: int = STEPS_HISTORY_DEFAULT_LIMIT,
    ) -> StepsHistory:
        window = resolve_steps_history(start, end, limit=limit, today=self.clock())
        filled = fill_gaps(self._fetch(user_id, window), window, user_id)
        entries = filled[: min(limit, STEPS_HISTORY_MAX_LIMIT)]
        summary = summarize_history(entries, ("steps",), len(entries))
        logger.debug("steps history user=%s window=%s..%s entries=%d", user_id, window.start, window.end, len(entries))
        return StepsHistory(
            window=window,
            entries=entries,
            total_days=summary.total_days,
            total_steps=int(summary.totals["steps"]),
            average_steps=summary.averages["steps"],
        )

    def get_stats(self, user_id: str, period: str = "week") -> PeriodStats:
        today = self.clock()
        window = period_window(period, today=today)
        series = fill_gaps(self._fetch(user_id, window), window, user_id)

        # Streaks walk a gap-filled 90-day lookback whatever the period.
        lookback = streak_window(today=today)
        streak_series = fill_gaps(self._fetch(user_id, lookback), lookback, user_id)
        streak = current_streak(streak_series, today)

        stats = aggregate_steps(
            series,
            period_days=window.days,
            goal_steps=self.goal_steps(user_id),
            current_streak=streak,
        )
        return PeriodStats(period=period, window=window, stats=stats)

    def get_today(self, user_id: str) -> StepsToday:
        today = self.clock()
        window = DateWindow(start=today, end=today)
        entry = fill_gaps(self._fetch(user_id, window), window, user_id)[0]
        goal = self.goal_steps(user_id)
        return StepsToday(entry=entry, goal_steps=goal, progress=goal_progress(entry.steps, goal))


@dataclass
class NutritionAnalytics:
    history: HistoryProvider
    goals: GoalProvider
    default_goal: NutritionGoal = DEFAULT_NUTRITION_GOAL
    clock: Callable[[], date] = today_utc

    def goal_values(self, user_id: str) -> NutritionGoal:
        goal = self.goals.get(user_id, NUTRITION)
        if isinstance(goal, NutritionGoal):
            return goal
        return self.default_goal

    def _fetch(self, user_id: str, window: DateWindow) -> List[NutritionRecord]:
        return [
            r for r in self.history.fetch(user_id, NUTRITION, window.start, window.end)
            if isinstance(r, NutritionRecord)
        ]

    def get_history(self, user_id: str, start: DayInput = None, end: DayInput = None) -> NutritionHistory:
        window = resolve_meal_history(start, end, today=self.clock())
        days = sorted(self._fetch(user_id, window), key=lambda r: r.day, reverse=True)
        summary = summarize_history(days, NUTRITION_FIELDS, len(days))
        return NutritionHistory(window=window, days=days, summary=summary)

    def get_stats(self, user_id: str, period: str = "week") -> PeriodStats:
        window = period_window(period, today=self.clock())
        stats = aggregate_meals(self._fetch(user_id, window))
        return PeriodStats(period=period, window=window, stats=stats)

    def get_today(self, user_id: str) -> NutritionToday:
        today = self.clock()
        records = self._fetch(user_id, DateWindow(start=today, end=today))
        record: Optional[NutritionRecord] = records[0] if records else None
        totals = record.totals() if record else NutritionTotals()
        goals = self.goal_values(user_id).as_totals()
        return NutritionToday(
            day=today,
            meal_count=record.meal_count if record else 0,
            totals=totals,
            goals=goals,
            remaining=remaining(totals, goals),
            progress=progress_by_field(totals, goals),
        )
