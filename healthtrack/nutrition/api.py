# -*- coding: utf-8 -*-
"""Nutrition goals: API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ..engine.models import NutritionGoal
from ..identity import get_current_user_id
from .models import NutritionGoalsRequest, NutritionGoalsResponse
from .storage import default_goals, get_nutrition_goals, set_nutrition_goals

router = APIRouter(prefix="/api/nutrition", tags=["Nutrition"])


def _response(goals: NutritionGoal, *, is_default: bool = False) -> NutritionGoalsResponse:
    return NutritionGoalsResponse(
        daily_calories=goals.daily_calories,
        daily_protein=goals.daily_protein,
        daily_carbs=goals.daily_carbs,
        daily_fat=goals.daily_fat,
        is_default=is_default,
    )


@router.get("/goals", response_model=NutritionGoalsResponse, summary="Daily nutrition goals (defaults when unset)")
def read_goals(user_id: str = Depends(get_current_user_id)):
    goals = get_nutrition_goals(user_id)
    if goals is None:
        return _response(default_goals(), is_default=True)
    return _response(goals)


@router.put("/goals", response_model=NutritionGoalsResponse, summary="Set daily nutrition goals")
def write_goals(request: NutritionGoalsRequest, user_id: str = Depends(get_current_user_id)):
    goals = set_nutrition_goals(
        user_id=user_id,
        goals=NutritionGoal(
            daily_calories=request.daily_calories,
            daily_protein=request.daily_protein,
            daily_carbs=request.daily_carbs,
            daily_fat=request.daily_fat,
        ),
    )
    return _response(goals)
