# -*- coding: utf-8 -*-
"""Nutrition goals: DB storage helpers."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from ..app_db import db_conn
from ..config import settings
from ..engine.models import NutritionGoal


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def default_goals() -> NutritionGoal:
    return NutritionGoal(
        daily_calories=settings.default_daily_calories,
        daily_protein=settings.default_daily_protein,
        daily_carbs=settings.default_daily_carbs,
        daily_fat=settings.default_daily_fat,
    )


def get_nutrition_goals(user_id: str) -> Optional[NutritionGoal]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute(
            "SELECT daily_calories, daily_protein, daily_carbs, daily_fat FROM nutrition_goals WHERE user_id = ?",
            (user_id,),
        ).fetchone()
        if not row:
            return None
        return NutritionGoal(
            daily_calories=float(row["daily_calories"]),
            daily_protein=float(row["daily_protein"]),
            daily_carbs=float(row["daily_carbs"]),
            daily_fat=float(row["daily_fat"]),
        )


def set_nutrition_goals(*, user_id: str, goals: NutritionGoal) -> NutritionGoal:
    now = _utc_now()
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO nutrition_goals (user_id, daily_calories, daily_protein, daily_carbs, daily_fat, created_at, updated_at)
            VALUES (?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT(user_id) DO UPDATE SET
                daily_calories = excluded.daily_calories,
                daily_protein = excluded.daily_protein,
                daily_carbs = excluded.daily_carbs,
                daily_fat = excluded.daily_fat,
                updated_at = excluded.updated_at
            """,
            (user_id, goals.daily_calories, goals.daily_protein, goals.daily_carbs, goals.daily_fat, now, now),
        )
    return goals
