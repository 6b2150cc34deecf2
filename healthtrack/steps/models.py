# -*- coding: utf-8 -*-
"""Steps: Pydantic models."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, model_validator

StatsPeriod = Literal["week", "month", "year"]


class LogStepsRequest(BaseModel):
    date: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$", description="YYYY-MM-DD")
    steps: int = Field(..., ge=0, le=100000)
    distance_km: Optional[float] = Field(None, ge=0, le=200)
    calories_burned: Optional[float] = Field(None, ge=0, le=10000)


class UpdateStepsRequest(BaseModel):
    steps: Optional[int] = Field(None, ge=0, le=100000)
    distance_km: Optional[float] = Field(None, ge=0, le=200)
    calories_burned: Optional[float] = Field(None, ge=0, le=10000)

    @model_validator(mode="after")
    def _at_least_one_field(self) -> "UpdateStepsRequest":
        if self.steps is None and self.distance_km is None and self.calories_burned is None:
            raise ValueError("At least one field must be provided for update")
        return self


class StepsEntry(BaseModel):
    id: Optional[str] = Field(None, description="Absent for days without a logged entry")
    date: str = Field(..., description="YYYY-MM-DD")
    steps: int = Field(0, ge=0)
    distance_km: float = Field(0.0, ge=0)
    calories_burned: float = Field(0.0, ge=0)


class StepsHistoryResponse(BaseModel):
    start: str
    end: str
    history: List[StepsEntry]
    total_days: int
    total_steps: int
    average_steps: int


class DayValueModel(BaseModel):
    date: str
    steps: int


class StepsStatsModel(BaseModel):
    total_steps: int
    average_steps: int
    total_distance_km: float
    average_distance_km: float
    total_calories: int
    average_calories: int
    best_day: Optional[DayValueModel] = None
    worst_day: Optional[DayValueModel] = None
    current_streak: int
    days_with_activity: int
    goal_reached_days: int
    goal_steps: int


class StepsStatsResponse(BaseModel):
    period: StatsPeriod
    start: str
    end: str
    stats: StepsStatsModel


class StepsTodayResponse(StepsEntry):
    goal_steps: int
    goal_progress: float
    goal_reached: bool


class StepGoalRequest(BaseModel):
    daily_steps: int = Field(..., ge=1, le=100000)


class StepGoalResponse(BaseModel):
    daily_steps: int
    is_default: bool = False
