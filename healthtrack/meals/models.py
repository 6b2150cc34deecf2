# -*- coding: utf-8 -*-
"""Meals: Pydantic models."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field, model_validator


class MealType(str, Enum):
    breakfast = "breakfast"
    lunch = "lunch"
    dinner = "dinner"
    snack = "snack"


class NutritionTotals(BaseModel):
    calories: float = Field(0.0, ge=0)
    protein: float = Field(0.0, ge=0)
    carbs: float = Field(0.0, ge=0)
    fat: float = Field(0.0, ge=0)


class FoodItem(BaseModel):
    food_id: Optional[str] = None
    food_name: str = Field(..., min_length=1)
    brand_name: Optional[str] = None
    serving_size: float = Field(..., gt=0)
    serving_unit: str = Field(..., min_length=1)
    calories: float = Field(..., ge=0)
    protein: float = Field(..., ge=0)
    carbs: float = Field(..., ge=0)
    fat: float = Field(..., ge=0)


class LogMealRequest(BaseModel):
    meal_type: MealType
    date: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$", description="YYYY-MM-DD")
    foods: List[FoodItem] = Field(..., min_length=1)
    notes: Optional[str] = Field(None, max_length=500)


class UpdateMealRequest(BaseModel):
    meal_type: Optional[MealType] = None
    foods: Optional[List[FoodItem]] = Field(None, min_length=1)
    notes: Optional[str] = Field(None, max_length=500)

    @model_validator(mode="after")
    def _at_least_one_field(self) -> "UpdateMealRequest":
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided for update")
        return self


class Meal(BaseModel):
    id: str
    meal_type: MealType
    date: str
    totals: NutritionTotals
    notes: Optional[str] = None
    foods: List[FoodItem] = []
    created_at: str
    updated_at: str


class MealHistoryDay(BaseModel):
    date: str
    meals: List[Meal] = []
    totals: NutritionTotals


class MealPeriodStats(BaseModel):
    total_days: int
    average_calories: int
    average_protein: int
    average_carbs: int
    average_fat: int
    total_calories: int


class MealHistoryResponse(BaseModel):
    start: str
    end: str
    history: List[MealHistoryDay]
    period_stats: MealPeriodStats


class CalorieDay(BaseModel):
    date: str
    calories: int


class MealStatsModel(BaseModel):
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
    highest_calorie_day: Optional[CalorieDay] = None
    lowest_calorie_day: Optional[CalorieDay] = None


class MealStatsResponse(BaseModel):
    period: Literal["week", "month", "year"]
    start: str
    end: str
    stats: MealStatsModel


class GoalProgressModel(BaseModel):
    percent: float
    reached: bool


class TodayMealsResponse(BaseModel):
    date: str
    meals: List[Meal]
    totals: NutritionTotals
    goals: NutritionTotals
    remaining: NutritionTotals
    progress: Dict[str, GoalProgressModel] = Field(default_factory=dict)
