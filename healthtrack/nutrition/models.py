# -*- coding: utf-8 -*-
"""Nutrition goals: Pydantic models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class NutritionGoalsRequest(BaseModel):
    daily_calories: float = Field(..., ge=1000, le=5000)
    daily_protein: float = Field(..., ge=0, le=500)
    daily_carbs: float = Field(..., ge=0, le=1000)
    daily_fat: float = Field(..., ge=0, le=300)


class NutritionGoalsResponse(NutritionGoalsRequest):
    is_default: bool = False
