# -*- coding: utf-8 -*-
"""App database (steps/meals/goals): SQLite helpers."""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator


def connect(db_path: Path) -> sqlite3.Connection:
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path), check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON;")
    return conn


def init_app_db(db_path: Path) -> None:
    conn = connect(db_path)
    try:
        cur = conn.cursor()
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS daily_steps (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                date TEXT NOT NULL,
                steps INTEGER NOT NULL,
                distance_km REAL NOT NULL DEFAULT 0,
                calories_burned REAL NOT NULL DEFAULT 0,
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL,
                UNIQUE (user_id, date)
            );
            """
        )
        cur.execute(
            "CREATE INDEX IF NOT EXISTS idx_daily_steps_user_date ON daily_steps(user_id, date DESC);"
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS meals (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                meal_type TEXT NOT NULL,
                date TEXT NOT NULL,
                total_calories REAL NOT NULL DEFAULT 0,
                total_protein REAL NOT NULL DEFAULT 0,
                total_carbs REAL NOT NULL DEFAULT 0,
                total_fat REAL NOT NULL DEFAULT 0,
                notes TEXT,
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL
            );
            """
        )
        cur.execute("CREATE INDEX IF NOT EXISTS idx_meals_user_date ON meals(user_id, date DESC);")
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS meal_foods (
                id TEXT PRIMARY KEY,
                meal_id TEXT NOT NULL,
                food_id TEXT,
                food_name TEXT NOT NULL,
                brand_name TEXT,
                serving_size REAL NOT NULL,
                serving_unit TEXT NOT NULL,
                calories REAL NOT NULL,
                protein REAL NOT NULL,
                carbs REAL NOT NULL,
                fat REAL NOT NULL,
                position INTEGER NOT NULL DEFAULT 0,
                created_at TEXT NOT NULL,
                FOREIGN KEY(meal_id) REFERENCES meals(id) ON DELETE CASCADE
            );
            """
        )
        cur.execute("CREATE INDEX IF NOT EXISTS idx_meal_foods_meal ON meal_foods(meal_id, position ASC);")
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS nutrition_goals (
                user_id TEXT PRIMARY KEY,
                daily_calories REAL NOT NULL,
                daily_protein REAL NOT NULL,
                daily_carbs REAL NOT NULL,
                daily_fat REAL NOT NULL,
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL
            );
            """
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS step_goals (
                user_id TEXT PRIMARY KEY,
                daily_steps INTEGER NOT NULL,
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL
            );
            """
        )
        conn.commit()
    finally:
        conn.close()


@contextmanager
def db_conn(db_path: Path) -> Iterator[sqlite3.Connection]:
    conn = connect(db_path)
    try:
        yield conn
        conn.commit()
    finally:
        conn.close()
