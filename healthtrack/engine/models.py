# -*- coding: utf-8 -*-
"""Engine value types.

Every type here is a snapshot: the engine reads them, derives new values and
never mutates or persists them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Dict, Iterator, List, Optional, Union


@dataclass(frozen=True)
class StepsRecord:
    """One UTC calendar day of step activity for one user."""

    user_id: str
    day: date
    steps: int = 0
    distance_km: float = 0.0
    calories_burned: float = 0.0
    id: Optional[str] = None

    @property
    def is_synthetic(self) -> bool:
        return self.id is None


@dataclass(frozen=True)
class NutritionRecord:
    """One UTC calendar day of nutrition, pre-summed from that day's meals."""

    user_id: str
    day: date
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    meal_count: int = 0
    id: Optional[str] = None

    @property
    def is_synthetic(self) -> bool:
        return self.id is None

    def totals(self) -> "NutritionTotals":
        return NutritionTotals(
            calories=self.calories,
            protein=self.protein,
            carbs=self.carbs,
            fat=self.fat,
        )


DailyRecord = Union[StepsRecord, NutritionRecord]


@dataclass(frozen=True)
class DateWindow:
    """Inclusive ``[start, end]`` range of calendar days."""

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"window start {self.start} is after end {self.end}")

    @property
    def span_days(self) -> int:
        return (self.end - self.start).days

    @property
    def days(self) -> int:
        return self.span_days + 1

    def iter_days(self) -> Iterator[date]:
        """Ascending calendar days from ``start`` to ``end``."""
        current = self.start
        while current <= self.end:
            yield current
            current = current + timedelta(days=1)


@dataclass(frozen=True)
class NutritionTotals:
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0

    FIELDS = ("calories", "protein", "carbs", "fat")

    def as_dict(self) -> Dict[str, float]:
        return {name: getattr(self, name) for name in self.FIELDS}


@dataclass(frozen=True)
class StepGoal:
    daily_steps: int


@dataclass(frozen=True)
class NutritionGoal:
    daily_calories: float
    daily_protein: float
    daily_carbs: float
    daily_fat: float

    def as_totals(self) -> NutritionTotals:
        return NutritionTotals(
            calories=self.daily_calories,
            protein=self.daily_protein,
            carbs=self.daily_carbs,
            fat=self.daily_fat,
        )


Goal = Union[StepGoal, NutritionGoal]


@dataclass(frozen=True)
class DayValue:
    """A (day, value) pair used for best/worst day results."""

    day: date
    value: float


@dataclass(frozen=True)
class HistorySummary:
    total_days: int
    totals: Dict[str, float]
    averages: Dict[str, float]


@dataclass(frozen=True)
class StepsStats:
    total_steps: int
    average_steps: int
    total_distance_km: float
    average_distance_km: float
    total_calories: int
    average_calories: int
    best_day: Optional[DayValue]
    worst_day: Optional[DayValue]
    current_streak: int
    days_with_activity: int
    goal_reached_days: int
    goal_steps: int


@dataclass(frozen=True)
class MealStats:
    total_calories: int
    average_calories: int
    total_protein: int
    average_protein: int
    total_carbs: int
    average_carbs: int
    total_fat: int
    average_fat: int
    days_logged: int
    total_meals: int
    average_meals_per_day: int
    highest_calorie_day: Optional[DayValue]
    lowest_calorie_day: Optional[DayValue]


@dataclass(frozen=True)
class GoalProgress:
    percent: float
    reached: bool


@dataclass
class StepsHistory:
    window: DateWindow
    entries: List[StepsRecord] = field(default_factory=list)
    total_days: int = 0
    total_steps: int = 0
    average_steps: int = 0


@dataclass
class NutritionHistory:
    window: DateWindow
    days: List[NutritionRecord] = field(default_factory=list)
    summary: Optional[HistorySummary] = None
