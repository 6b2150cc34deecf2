# -*- coding: utf-8 -*-
"""Meals: DB storage helpers."""

from __future__ import annotations

import logging
import sqlite3
from datetime import date, datetime, timezone
from typing import Any, Dict, Iterable, List, Optional
from uuid import uuid4

from ..app_db import db_conn
from ..config import settings
from ..engine.dates import validate_log_day
from ..engine.models import NutritionRecord
from ..errors import InvalidMealDataError, NotFoundError

logger = logging.getLogger(__name__)

MEAL_TYPES = ("breakfast", "lunch", "dinner", "snack")


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def compute_totals(foods: Iterable[Dict[str, Any]]) -> Dict[str, float]:
    calories = 0.0
    protein = 0.0
    carbs = 0.0
    fat = 0.0
    for food in foods:
        calories += float(food.get("calories") or 0.0)
        protein += float(food.get("protein") or 0.0)
        carbs += float(food.get("carbs") or 0.0)
        fat += float(food.get("fat") or 0.0)
    return {"calories": calories, "protein": protein, "carbs": carbs, "fat": fat}


def _check_meal_type(meal_type: str) -> None:
    if meal_type not in MEAL_TYPES:
        raise InvalidMealDataError("Invalid meal type")


def _insert_foods(conn: sqlite3.Connection, meal_id: str, foods: List[Dict[str, Any]], now: str) -> None:
    for position, food in enumerate(foods):
        conn.execute(
            """
            INSERT INTO meal_foods (
                id, meal_id, food_id, food_name, brand_name, serving_size, serving_unit,
                calories, protein, carbs, fat, position, created_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                str(uuid4()),
                meal_id,
                food.get("food_id"),
                food["food_name"],
                food.get("brand_name"),
                float(food["serving_size"]),
                food["serving_unit"],
                float(food.get("calories") or 0.0),
                float(food.get("protein") or 0.0),
                float(food.get("carbs") or 0.0),
                float(food.get("fat") or 0.0),
                position,
                now,
            ),
        )


def _row_to_meal(row: Dict[str, Any], foods: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {
        "id": row["id"],
        "meal_type": row["meal_type"],
        "date": row["date"],
        "totals": {
            "calories": row["total_calories"],
            "protein": row["total_protein"],
            "carbs": row["total_carbs"],
            "fat": row["total_fat"],
        },
        "notes": row["notes"],
        "foods": foods,
        "created_at": row["created_at"],
        "updated_at": row["updated_at"],
    }


def _load_meals(conn: sqlite3.Connection, rows: List[sqlite3.Row]) -> List[Dict[str, Any]]:
    meals: List[Dict[str, Any]] = []
    for row in rows:
        food_rows = conn.execute(
            """
            SELECT food_id, food_name, brand_name, serving_size, serving_unit, calories, protein, carbs, fat
            FROM meal_foods WHERE meal_id = ? ORDER BY position ASC
            """,
            (row["id"],),
        ).fetchall()
        meals.append(_row_to_meal(dict(row), [dict(f) for f in food_rows]))
    return meals


def create_meal(
    *,
    user_id: str,
    meal_type: str,
    day: str,
    foods: List[Dict[str, Any]],
    notes: Optional[str] = None,
    today: Optional[date] = None,
) -> Dict[str, Any]:
    _check_meal_type(meal_type)
    if not foods:
        raise InvalidMealDataError("Meal must contain at least one food")
    meal_day = validate_log_day(day, max_age_days=settings.max_log_age_days, today=today).isoformat()

    totals = compute_totals(foods)
    meal_id = str(uuid4())
    now = _utc_now()
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO meals (
                id, user_id, meal_type, date, total_calories, total_protein, total_carbs, total_fat,
                notes, created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                meal_id,
                user_id,
                meal_type,
                meal_day,
                totals["calories"],
                totals["protein"],
                totals["carbs"],
                totals["fat"],
                notes,
                now,
                now,
            ),
        )
        _insert_foods(conn, meal_id, foods, now)
    logger.info("Logged %s meal %s for user=%s on %s", meal_type, meal_id, user_id, meal_day)
    return get_meal(user_id=user_id, meal_id=meal_id)


def get_meal(*, user_id: str, meal_id: str) -> Dict[str, Any]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute(
            "SELECT * FROM meals WHERE id = ? AND user_id = ?",
            (meal_id, user_id),
        ).fetchone()
        if not row:
            raise NotFoundError("Meal not found")
        return _load_meals(conn, [row])[0]


def list_meals(user_id: str, start: date, end: date) -> List[Dict[str, Any]]:
    """Meals inside ``[start, end]``, latest day first and in logging order within a day."""
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            """
            SELECT * FROM meals
            WHERE user_id = ? AND date >= ? AND date <= ?
            ORDER BY date DESC, created_at ASC
            """,
            (user_id, start.isoformat(), end.isoformat()),
        ).fetchall()
        return _load_meals(conn, rows)


def update_meal(
    *,
    user_id: str,
    meal_id: str,
    meal_type: Optional[str] = None,
    foods: Optional[List[Dict[str, Any]]] = None,
    notes: Optional[str] = None,
    notes_set: bool = False,
) -> Dict[str, Any]:
    existing = get_meal(user_id=user_id, meal_id=meal_id)
    if meal_type is not None:
        _check_meal_type(meal_type)

    now = _utc_now()
    with db_conn(settings.app_db_path) as conn:
        if meal_type is not None:
            conn.execute("UPDATE meals SET meal_type = ? WHERE id = ?", (meal_type, meal_id))
        if notes_set:
            conn.execute("UPDATE meals SET notes = ? WHERE id = ?", (notes, meal_id))
        if foods:
            # New foods replace the old list and the meal totals follow them.
            totals = compute_totals(foods)
            conn.execute("DELETE FROM meal_foods WHERE meal_id = ?", (meal_id,))
            _insert_foods(conn, meal_id, foods, now)
            conn.execute(
                """
                UPDATE meals
                SET total_calories = ?, total_protein = ?, total_carbs = ?, total_fat = ?
                WHERE id = ?
                """,
                (totals["calories"], totals["protein"], totals["carbs"], totals["fat"], meal_id),
            )
        conn.execute("UPDATE meals SET updated_at = ? WHERE id = ?", (now, existing["id"]))
    return get_meal(user_id=user_id, meal_id=meal_id)


def delete_meal(*, user_id: str, meal_id: str) -> None:
    with db_conn(settings.app_db_path) as conn:
        cur = conn.execute("DELETE FROM meals WHERE id = ? AND user_id = ?", (meal_id, user_id))
        if cur.rowcount == 0:
            raise NotFoundError("Meal not found")
    logger.info("Deleted meal %s for user=%s", meal_id, user_id)


def list_nutrition_records(user_id: str, start: date, end: date) -> List[NutritionRecord]:
    """One record per day that has at least one meal, with that day's totals summed."""
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            """
            SELECT date,
                   SUM(total_calories) AS calories,
                   SUM(total_protein) AS protein,
                   SUM(total_carbs) AS carbs,
                   SUM(total_fat) AS fat,
                   COUNT(*) AS meal_count
            FROM meals
            WHERE user_id = ? AND date >= ? AND date <= ?
            GROUP BY date
            ORDER BY date DESC
            """,
            (user_id, start.isoformat(), end.isoformat()),
        ).fetchall()
    return [
        NutritionRecord(
            user_id=user_id,
            day=date.fromisoformat(r["date"]),
            calories=float(r["calories"] or 0.0),
            protein=float(r["protein"] or 0.0),
            carbs=float(r["carbs"] or 0.0),
            fat=float(r["fat"] or 0.0),
            meal_count=int(r["meal_count"]),
            id=r["date"],
        )
        for r in rows
    ]
