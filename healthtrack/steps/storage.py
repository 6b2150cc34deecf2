# -*- coding: utf-8 -*-
"""Steps: DB storage helpers."""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import uuid4

from ..app_db import db_conn
from ..config import settings
from ..engine.dates import validate_log_day
from ..engine.models import StepsRecord
from ..errors import NotFoundError

logger = logging.getLogger(__name__)

# Average stride ~0.8 m and ~0.04 kcal per step.
_KM_PER_STEP = 0.0008
_KCAL_PER_STEP = 0.04


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def calculate_distance(steps: int) -> float:
    return round(steps * _KM_PER_STEP, 2)


def calculate_calories(steps: int) -> float:
    return float(round(steps * _KCAL_PER_STEP))


def row_to_record(row: Dict[str, Any]) -> StepsRecord:
    return StepsRecord(
        user_id=row["user_id"],
        day=date.fromisoformat(row["date"]),
        steps=int(row["steps"]),
        distance_km=float(row["distance_km"] or 0.0),
        calories_burned=float(row["calories_burned"] or 0.0),
        id=row["id"],
    )


def log_steps(
    *,
    user_id: str,
    day: str,
    steps: int,
    distance_km: Optional[float] = None,
    calories_burned: Optional[float] = None,
    today: Optional[date] = None,
) -> Dict[str, Any]:
    """Create or replace the entry for ``day``; one entry per user per day."""
    log_day = validate_log_day(day, max_age_days=settings.max_log_age_days, today=today).isoformat()
    if distance_km is None:
        distance_km = calculate_distance(steps)
    if calories_burned is None:
        calories_burned = calculate_calories(steps)

    now = _utc_now()
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO daily_steps (id, user_id, date, steps, distance_km, calories_burned, created_at, updated_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT(user_id, date) DO UPDATE SET
                steps = excluded.steps,
                distance_km = excluded.distance_km,
                calories_burned = excluded.calories_burned,
                updated_at = excluded.updated_at
            """,
            (str(uuid4()), user_id, log_day, steps, distance_km, calories_burned, now, now),
        )
        row = conn.execute(
            "SELECT * FROM daily_steps WHERE user_id = ? AND date = ?",
            (user_id, log_day),
        ).fetchone()
    logger.info("Logged %s steps for user=%s on %s", steps, user_id, log_day)
    return dict(row)


def get_steps(*, user_id: str, entry_id: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute(
            "SELECT * FROM daily_steps WHERE id = ? AND user_id = ?",
            (entry_id, user_id),
        ).fetchone()
        return dict(row) if row else None


def update_steps(
    *,
    user_id: str,
    entry_id: str,
    steps: Optional[int] = None,
    distance_km: Optional[float] = None,
    calories_burned: Optional[float] = None,
) -> Dict[str, Any]:
    existing = get_steps(user_id=user_id, entry_id=entry_id)
    if not existing:
        raise NotFoundError("Steps entry not found")

    # A new step count refreshes whichever derived values the caller left out.
    if steps is not None:
        if distance_km is None:
            distance_km = calculate_distance(steps)
        if calories_burned is None:
            calories_burned = calculate_calories(steps)

    merged = {
        "steps": existing["steps"] if steps is None else steps,
        "distance_km": existing["distance_km"] if distance_km is None else distance_km,
        "calories_burned": existing["calories_burned"] if calories_burned is None else calories_burned,
    }
    now = _utc_now()
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            UPDATE daily_steps
            SET steps = ?, distance_km = ?, calories_burned = ?, updated_at = ?
            WHERE id = ? AND user_id = ?
            """,
            (merged["steps"], merged["distance_km"], merged["calories_burned"], now, entry_id, user_id),
        )
    existing.update(merged, updated_at=now)
    return existing


def delete_steps(*, user_id: str, entry_id: str) -> None:
    with db_conn(settings.app_db_path) as conn:
        cur = conn.execute(
            "DELETE FROM daily_steps WHERE id = ? AND user_id = ?",
            (entry_id, user_id),
        )
        if cur.rowcount == 0:
            raise NotFoundError("Steps entry not found")
    logger.info("Deleted steps entry %s for user=%s", entry_id, user_id)


def list_steps_records(user_id: str, start: date, end: date) -> List[StepsRecord]:
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            """
            SELECT * FROM daily_steps
            WHERE user_id = ? AND date >= ? AND date <= ?
            ORDER BY date DESC
            """,
            (user_id, start.isoformat(), end.isoformat()),
        ).fetchall()
        return [row_to_record(dict(r)) for r in rows]


def get_step_goal(user_id: str) -> Optional[int]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute("SELECT daily_steps FROM step_goals WHERE user_id = ?", (user_id,)).fetchone()
        return int(row["daily_steps"]) if row else None


def set_step_goal(*, user_id: str, daily_steps: int) -> int:
    now = _utc_now()
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO step_goals (user_id, daily_steps, created_at, updated_at)
            VALUES (?, ?, ?, ?)
            ON CONFLICT(user_id) DO UPDATE SET
                daily_steps = excluded.daily_steps,
                updated_at = excluded.updated_at
            """,
            (user_id, daily_steps, now, now),
        )
    return daily_steps
