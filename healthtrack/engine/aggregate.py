# -*- coding: utf-8 -*-
"""Period statistics over daily series.

Denominators differ by domain: steps averages divide by the nominal period
length (7/30/365), nutrition averages divide by the number of days that have
at least one logged meal. Best/worst day ties keep the earliest day.
"""

from __future__ import annotations

import math
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..errors import InvalidMetricError
from .models import DayValue, HistorySummary, MealStats, NutritionRecord, StepsRecord, StepsStats

STEPS_FIELDS = ("steps", "distance_km", "calories_burned")
NUTRITION_FIELDS = ("calories", "protein", "carbs", "fat")


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def average(total: float, denominator: int) -> int:
    if denominator <= 0:
        return 0
    return round_half_up(total / denominator)


def check_non_negative(records: Iterable[object], fields: Sequence[str]) -> None:
    for record in records:
        for name in fields:
            value = getattr(record, name)
            if value < 0:
                raise InvalidMetricError(f"{name} cannot be negative (got {value} on {record.day})")


def _ascending(records: Iterable) -> List:
    # sorted() is stable, so equal days keep their input order.
    return sorted(records, key=lambda r: r.day)


def _extremes(pairs: Iterable[Tuple[object, float]]) -> Tuple[Optional[DayValue], Optional[DayValue]]:
    """Highest and lowest value; on ties the first pair seen wins."""
    highest: Optional[DayValue] = None
    lowest: Optional[DayValue] = None
    for day, value in pairs:
        if highest is None or value > highest.value:
            highest = DayValue(day=day, value=value)
        if lowest is None or value < lowest.value:
            lowest = DayValue(day=day, value=value)
    return highest, lowest


def summarize_history(records: Sequence[object], fields: Sequence[str], denominator: int) -> HistorySummary:
    check_non_negative(records, fields)
    totals: Dict[str, float] = {name: 0 for name in fields}
    for record in records:
        for name in fields:
            totals[name] += getattr(record, name)
    averages = {name: average(totals[name], denominator) for name in fields}
    return HistorySummary(total_days=len(records), totals=totals, averages=averages)


def aggregate_steps(
    series: Sequence[StepsRecord],
    *,
    period_days: int,
    goal_steps: int,
    current_streak: int = 0,
) -> StepsStats:
    """Statistics for a steps period; ``series`` may be sparse or gap-filled."""
    check_non_negative(series, STEPS_FIELDS)

    total_steps = 0
    total_distance = 0.0
    total_calories = 0.0
    days_with_activity = 0
    goal_reached_days = 0
    best_day: Optional[DayValue] = None
    real_days: List[Tuple[object, float]] = []

    for record in _ascending(series):
        total_steps += record.steps
        total_distance += record.distance_km
        total_calories += record.calories_burned
        if record.steps > 0:
            days_with_activity += 1
            if best_day is None or record.steps > best_day.value:
                best_day = DayValue(day=record.day, value=record.steps)
        if record.is_synthetic:
            continue
        real_days.append((record.day, record.steps))
        if record.steps >= goal_steps:
            goal_reached_days += 1

    _, worst_day = _extremes(real_days)

    return StepsStats(
        total_steps=int(total_steps),
        average_steps=average(total_steps, period_days),
        total_distance_km=round(total_distance, 2),
        average_distance_km=round(total_distance / period_days, 2) if period_days > 0 else 0.0,
        total_calories=round_half_up(total_calories),
        average_calories=average(total_calories, period_days),
        best_day=best_day,
        worst_day=worst_day,
        current_streak=current_streak,
        days_with_activity=days_with_activity,
        goal_reached_days=goal_reached_days,
        goal_steps=goal_steps,
    )


def aggregate_meals(days: Sequence[NutritionRecord]) -> MealStats:
    """Statistics over per-day nutrition totals (one record per logged day)."""
    check_non_negative(days, NUTRITION_FIELDS + ("meal_count",))

    ordered = _ascending(days)
    days_logged = len({r.day for r in ordered})
    totals = {name: 0.0 for name in NUTRITION_FIELDS}
    total_meals = 0
    for record in ordered:
        for name in NUTRITION_FIELDS:
            totals[name] += getattr(record, name)
        total_meals += record.meal_count

    highest, lowest = _extremes((r.day, r.calories) for r in ordered)

    def _rounded(value: Optional[DayValue]) -> Optional[DayValue]:
        if value is None:
            return None
        return DayValue(day=value.day, value=round_half_up(value.value))

    return MealStats(
        total_calories=round_half_up(totals["calories"]),
        average_calories=average(totals["calories"], days_logged),
        total_protein=round_half_up(totals["protein"]),
        average_protein=average(totals["protein"], days_logged),
        total_carbs=round_half_up(totals["carbs"]),
        average_carbs=average(totals["carbs"], days_logged),
        total_fat=round_half_up(totals["fat"]),
        average_fat=average(totals["fat"], days_logged),
        days_logged=days_logged,
        total_meals=total_meals,
        average_meals_per_day=average(total_meals, days_logged),
        highest_calorie_day=_rounded(highest),
        lowest_calorie_day=_rounded(lowest),
    )
