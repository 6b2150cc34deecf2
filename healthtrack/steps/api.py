# -*- coding: utf-8 -*-
"""Steps: API endpoints."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query

from ..engine.models import DayValue, StepsRecord
from ..engine.service import StepsAnalytics
from ..identity import get_current_user_id
from ..providers import steps_analytics
from .models import (
    DayValueModel,
    LogStepsRequest,
    StatsPeriod,
    StepGoalRequest,
    StepGoalResponse,
    StepsEntry,
    StepsHistoryResponse,
    StepsStatsModel,
    StepsStatsResponse,
    StepsTodayResponse,
    UpdateStepsRequest,
)
from .storage import delete_steps, get_step_goal, log_steps, set_step_goal, update_steps

router = APIRouter(prefix="/api/steps", tags=["Steps"])


def _entry(record: StepsRecord) -> StepsEntry:
    # Gap-filled days carry no id.
    return StepsEntry(
        id=record.id,
        date=record.day.isoformat(),
        steps=record.steps,
        distance_km=record.distance_km,
        calories_burned=record.calories_burned,
    )


def _entry_from_row(row: Dict[str, Any]) -> StepsEntry:
    return StepsEntry(
        id=row["id"],
        date=row["date"],
        steps=row["steps"],
        distance_km=row["distance_km"],
        calories_burned=row["calories_burned"],
    )


def _day(value: Optional[DayValue]) -> Optional[DayValueModel]:
    if value is None:
        return None
    return DayValueModel(date=value.day.isoformat(), steps=int(value.value))


@router.post("", response_model=StepsEntry, summary="Log steps for a day (one entry per day)")
def create_steps(request: LogStepsRequest, user_id: str = Depends(get_current_user_id)):
    row = log_steps(
        user_id=user_id,
        day=request.date,
        steps=request.steps,
        distance_km=request.distance_km,
        calories_burned=request.calories_burned,
    )
    return _entry_from_row(row)


@router.get("/today", response_model=StepsTodayResponse, summary="Today's steps and goal progress")
def today(
    user_id: str = Depends(get_current_user_id),
    analytics: StepsAnalytics = Depends(steps_analytics),
):
    result = analytics.get_today(user_id)
    entry = _entry(result.entry)
    return StepsTodayResponse(
        **entry.model_dump(),
        goal_steps=result.goal_steps,
        goal_progress=result.progress.percent,
        goal_reached=result.progress.reached,
    )


@router.get("/history", response_model=StepsHistoryResponse, summary="Day-by-day steps history, latest first")
def history(
    start: Optional[str] = Query(default=None, description="YYYY-MM-DD"),
    end: Optional[str] = Query(default=None, description="YYYY-MM-DD"),
    limit: int = Query(default=30, ge=1, le=90),
    user_id: str = Depends(get_current_user_id),
    analytics: StepsAnalytics = Depends(steps_analytics),
):
    result = analytics.get_history(user_id, start=start, end=end, limit=limit)
    return StepsHistoryResponse(
        start=result.window.start.isoformat(),
        end=result.window.end.isoformat(),
        history=[_entry(r) for r in result.entries],
        total_days=result.total_days,
        total_steps=result.total_steps,
        average_steps=result.average_steps,
    )


@router.get("/stats", response_model=StepsStatsResponse, summary="Steps statistics for a period")
def stats(
    period: StatsPeriod = Query(default="week"),
    user_id: str = Depends(get_current_user_id),
    analytics: StepsAnalytics = Depends(steps_analytics),
):
    result = analytics.get_stats(user_id, period)
    s = result.stats
    return StepsStatsResponse(
        period=period,
        start=result.window.start.isoformat(),
        end=result.window.end.isoformat(),
        stats=StepsStatsModel(
            total_steps=s.total_steps,
            average_steps=s.average_steps,
            total_distance_km=s.total_distance_km,
            average_distance_km=s.average_distance_km,
            total_calories=s.total_calories,
            average_calories=s.average_calories,
            best_day=_day(s.best_day),
            worst_day=_day(s.worst_day),
            current_streak=s.current_streak,
            days_with_activity=s.days_with_activity,
            goal_reached_days=s.goal_reached_days,
            goal_steps=s.goal_steps,
        ),
    )


@router.get("/goal", response_model=StepGoalResponse, summary="Daily step goal")
def get_goal(
    user_id: str = Depends(get_current_user_id),
    analytics: StepsAnalytics = Depends(steps_analytics),
):
    daily_steps = get_step_goal(user_id)
    if daily_steps is None:
        return StepGoalResponse(daily_steps=analytics.default_goal, is_default=True)
    return StepGoalResponse(daily_steps=daily_steps)


@router.put("/goal", response_model=StepGoalResponse, summary="Set the daily step goal")
def put_goal(request: StepGoalRequest, user_id: str = Depends(get_current_user_id)):
    return StepGoalResponse(daily_steps=set_step_goal(user_id=user_id, daily_steps=request.daily_steps))


@router.patch("/{entry_id}", response_model=StepsEntry, summary="Update a steps entry")
def patch_steps(entry_id: str, request: UpdateStepsRequest, user_id: str = Depends(get_current_user_id)):
    row = update_steps(
        user_id=user_id,
        entry_id=entry_id,
        steps=request.steps,
        distance_km=request.distance_km,
        calories_burned=request.calories_burned,
    )
    return _entry_from_row(row)


@router.delete("/{entry_id}", summary="Delete a steps entry")
def remove_steps(entry_id: str, user_id: str = Depends(get_current_user_id)):
    delete_steps(user_id=user_id, entry_id=entry_id)
    return {"status": "ok"}
