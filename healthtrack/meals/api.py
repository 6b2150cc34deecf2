# -*- coding: utf-8 -*-
"""Meals: API endpoints."""

from __future__ import annotations

from collections import defaultdict
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from ..engine.aggregate import round_half_up
from ..engine.models import DayValue, NutritionTotals as EngineTotals
from ..engine.service import NutritionAnalytics
from ..identity import get_current_user_id
from ..providers import nutrition_analytics
from .models import (
    CalorieDay,
    GoalProgressModel,
    LogMealRequest,
    Meal,
    MealHistoryDay,
    MealHistoryResponse,
    MealPeriodStats,
    MealStatsModel,
    MealStatsResponse,
    NutritionTotals,
    TodayMealsResponse,
    UpdateMealRequest,
)
from .storage import create_meal, delete_meal, get_meal, list_meals, update_meal

router = APIRouter(prefix="/api/meals", tags=["Meals"])


def _totals(totals: EngineTotals) -> NutritionTotals:
    return NutritionTotals(**totals.as_dict())


def _calorie_day(value: Optional[DayValue]) -> Optional[CalorieDay]:
    if value is None:
        return None
    return CalorieDay(date=value.day.isoformat(), calories=int(value.value))


@router.post("", response_model=Meal, summary="Log a meal")
def log_meal(request: LogMealRequest, user_id: str = Depends(get_current_user_id)):
    meal = create_meal(
        user_id=user_id,
        meal_type=request.meal_type.value,
        day=request.date,
        foods=[f.model_dump() for f in request.foods],
        notes=request.notes,
    )
    return Meal.model_validate(meal)


@router.get("/today", response_model=TodayMealsResponse, summary="Today's meals, totals and remaining goals")
def today(
    user_id: str = Depends(get_current_user_id),
    analytics: NutritionAnalytics = Depends(nutrition_analytics),
):
    result = analytics.get_today(user_id)
    meals = list_meals(user_id, result.day, result.day)
    return TodayMealsResponse(
        date=result.day.isoformat(),
        meals=[Meal.model_validate(m) for m in meals],
        totals=_totals(result.totals),
        goals=_totals(result.goals),
        remaining=_totals(result.remaining),
        progress={
            name: GoalProgressModel(percent=p.percent, reached=p.reached)
            for name, p in result.progress.items()
        },
    )


@router.get("/history", response_model=MealHistoryResponse, summary="Meals grouped by day, latest first")
def history(
    start: Optional[str] = Query(default=None, description="YYYY-MM-DD"),
    end: Optional[str] = Query(default=None, description="YYYY-MM-DD"),
    user_id: str = Depends(get_current_user_id),
    analytics: NutritionAnalytics = Depends(nutrition_analytics),
):
    result = analytics.get_history(user_id, start=start, end=end)
    by_day: Dict[str, List[Dict[str, Any]]] = defaultdict(list)
    for meal in list_meals(user_id, result.window.start, result.window.end):
        by_day[meal["date"]].append(meal)

    summary = result.summary
    return MealHistoryResponse(
        start=result.window.start.isoformat(),
        end=result.window.end.isoformat(),
        history=[
            MealHistoryDay(
                date=day.day.isoformat(),
                meals=[Meal.model_validate(m) for m in by_day.get(day.day.isoformat(), [])],
                totals=_totals(day.totals()),
            )
            for day in result.days
        ],
        period_stats=MealPeriodStats(
            total_days=summary.total_days,
            average_calories=summary.averages["calories"],
            average_protein=summary.averages["protein"],
            average_carbs=summary.averages["carbs"],
            average_fat=summary.averages["fat"],
            total_calories=round_half_up(summary.totals["calories"]),
        ),
    )


@router.get("/stats", response_model=MealStatsResponse, summary="Nutrition statistics for a period")
def stats(
    period: str = Query(default="week", pattern="^(week|month|year)$"),
    user_id: str = Depends(get_current_user_id),
    analytics: NutritionAnalytics = Depends(nutrition_analytics),
):
    result = analytics.get_stats(user_id, period)
    s = result.stats
    return MealStatsResponse(
        period=period,
        start=result.window.start.isoformat(),
        end=result.window.end.isoformat(),
        stats=MealStatsModel(
            total_calories=s.total_calories,
            average_calories=s.average_calories,
            total_protein=s.total_protein,
            average_protein=s.average_protein,
            total_carbs=s.total_carbs,
            average_carbs=s.average_carbs,
            total_fat=s.total_fat,
            average_fat=s.average_fat,
            days_logged=s.days_logged,
            total_meals=s.total_meals,
            average_meals_per_day=s.average_meals_per_day,
            highest_calorie_day=_calorie_day(s.highest_calorie_day),
            lowest_calorie_day=_calorie_day(s.lowest_calorie_day),
        ),
    )


@router.get("/{meal_id}", response_model=Meal, summary="Get a meal")
def read_meal(meal_id: str, user_id: str = Depends(get_current_user_id)):
    return Meal.model_validate(get_meal(user_id=user_id, meal_id=meal_id))


@router.patch("/{meal_id}", response_model=Meal, summary="Update a meal")
def patch_meal(meal_id: str, request: UpdateMealRequest, user_id: str = Depends(get_current_user_id)):
    meal = update_meal(
        user_id=user_id,
        meal_id=meal_id,
        meal_type=request.meal_type.value if request.meal_type else None,
        foods=[f.model_dump() for f in request.foods] if request.foods else None,
        notes=request.notes,
        notes_set="notes" in request.model_fields_set,
    )
    return Meal.model_validate(meal)


@router.delete("/{meal_id}", summary="Delete a meal")
def remove_meal(meal_id: str, user_id: str = Depends(get_current_user_id)):
    delete_meal(user_id=user_id, meal_id=meal_id)
    return {"status": "ok"}
