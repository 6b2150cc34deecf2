# -*- coding: utf-8 -*-

from __future__ import annotations

import os
import shutil
import sys
import tempfile
import unittest
from datetime import datetime, timedelta, timezone
from pathlib import Path

from fastapi.testclient import TestClient


def _iso(days_ago: int) -> str:
    return (datetime.now(timezone.utc).date() - timedelta(days=days_ago)).isoformat()


class TestHealthTrackApi(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls._tmp = Path(tempfile.mkdtemp(prefix="healthtrack-test-"))
        data_root = cls._tmp / "data"
        os.environ["HEALTHTRACK_DATA_ROOT"] = str(data_root)
        os.environ["HEALTHTRACK_DB_PATH"] = str(data_root / "healthtrack.db")

        # Ensure settings/app reflect the env vars above.
        for name in list(sys.modules.keys()):
            if name.startswith("healthtrack."):
                sys.modules.pop(name, None)

        from healthtrack.api import app  # noqa: WPS433 (import inside test for env control)

        cls.client = TestClient(app)

    @classmethod
    def tearDownClass(cls) -> None:
        cls.client.close()
        shutil.rmtree(cls._tmp, ignore_errors=True)

    def _headers(self, user: str) -> dict:
        return {"X-User-Id": user}

    def test_health(self) -> None:
        resp = self.client.get("/api/health")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"ok": True})

    def test_auth_required(self) -> None:
        resp = self.client.get("/api/steps/today")
        self.assertEqual(resp.status_code, 401)

    def test_steps_flow(self) -> None:
        h = self._headers("steps-user")

        resp = self.client.post("/api/steps", json={"date": _iso(1), "steps": 5000}, headers=h)
        self.assertEqual(resp.status_code, 200)
        entry = resp.json()
        self.assertEqual(entry["distance_km"], 4.0)
        self.assertEqual(entry["calories_burned"], 200.0)

        # Logging the same day again replaces the entry.
        resp = self.client.post("/api/steps", json={"date": _iso(1), "steps": 7000}, headers=h)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["id"], entry["id"])
        self.assertEqual(resp.json()["steps"], 7000)

        resp = self.client.post("/api/steps", json={"date": _iso(0), "steps": 12000}, headers=h)
        self.assertEqual(resp.status_code, 200)

        resp = self.client.get("/api/steps/history", headers=h)
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["total_days"], 8)
        self.assertEqual([d["date"] for d in body["history"][:3]], [_iso(0), _iso(1), _iso(2)])
        self.assertEqual(body["history"][2]["steps"], 0)
        self.assertIsNone(body["history"][2]["id"])
        self.assertEqual(body["total_steps"], 19000)
        self.assertEqual(body["average_steps"], 2375)

        resp = self.client.get("/api/steps/stats?period=week", headers=h)
        self.assertEqual(resp.status_code, 200)
        stats = resp.json()["stats"]
        self.assertEqual(stats["total_steps"], 19000)
        self.assertEqual(stats["average_steps"], 2714)
        self.assertEqual(stats["current_streak"], 2)
        self.assertEqual(stats["goal_reached_days"], 1)
        self.assertEqual(stats["best_day"], {"date": _iso(0), "steps": 12000})

        resp = self.client.get("/api/steps/today", headers=h)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["goal_progress"], 120.0)
        self.assertTrue(resp.json()["goal_reached"])

        resp = self.client.patch(f"/api/steps/{entry['id']}", json={"steps": 1000}, headers=h)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["distance_km"], 0.8)

        resp = self.client.delete(f"/api/steps/{entry['id']}", headers=h)
        self.assertEqual(resp.status_code, 200)
        resp = self.client.delete(f"/api/steps/{entry['id']}", headers=h)
        self.assertEqual(resp.status_code, 404)

    def test_steps_date_rules(self) -> None:
        h = self._headers("rules-user")
        resp = self.client.post("/api/steps", json={"date": _iso(-1), "steps": 10}, headers=h)
        self.assertEqual(resp.status_code, 400)
        resp = self.client.post("/api/steps", json={"date": _iso(8), "steps": 10}, headers=h)
        self.assertEqual(resp.status_code, 400)
        self.assertIn("older than 7 days", resp.json()["detail"])

        resp = self.client.get("/api/steps/history?start=2024-02-10&end=2024-02-01", headers=h)
        self.assertEqual(resp.status_code, 400)
        resp = self.client.get("/api/steps/stats?period=decade", headers=h)
        self.assertEqual(resp.status_code, 422)

    def test_step_goal(self) -> None:
        h = self._headers("goal-user")
        resp = self.client.get("/api/steps/goal", headers=h)
        self.assertEqual(resp.json(), {"daily_steps": 10000, "is_default": True})

        resp = self.client.put("/api/steps/goal", json={"daily_steps": 8000}, headers=h)
        self.assertEqual(resp.status_code, 200)
        resp = self.client.get("/api/steps/goal", headers=h)
        self.assertEqual(resp.json(), {"daily_steps": 8000, "is_default": False})

        resp = self.client.put("/api/steps/goal", json={"daily_steps": 0}, headers=h)
        self.assertEqual(resp.status_code, 422)

    def _food(self, calories: float, protein: float = 10, carbs: float = 20, fat: float = 5) -> dict:
        return {
            "food_name": "oats",
            "serving_size": 100,
            "serving_unit": "g",
            "calories": calories,
            "protein": protein,
            "carbs": carbs,
            "fat": fat,
        }

    def test_meals_flow(self) -> None:
        h = self._headers("meal-user")

        resp = self.client.post(
            "/api/meals",
            json={"meal_type": "breakfast", "date": _iso(0), "foods": [self._food(400), self._food(100)]},
            headers=h,
        )
        self.assertEqual(resp.status_code, 200)
        meal = resp.json()
        self.assertEqual(meal["totals"]["calories"], 500.0)
        self.assertEqual(len(meal["foods"]), 2)

        resp = self.client.post(
            "/api/meals",
            json={"meal_type": "dinner", "date": _iso(0), "foods": [self._food(1500)]},
            headers=h,
        )
        self.assertEqual(resp.status_code, 200)
        resp = self.client.post(
            "/api/meals",
            json={"meal_type": "lunch", "date": _iso(2), "foods": [self._food(2000)]},
            headers=h,
        )
        self.assertEqual(resp.status_code, 200)

        resp = self.client.get("/api/meals/today", headers=h)
        self.assertEqual(resp.status_code, 200)
        today = resp.json()
        self.assertEqual(len(today["meals"]), 2)
        self.assertEqual(today["totals"]["calories"], 2000.0)
        self.assertEqual(today["remaining"]["calories"], 0.0)
        self.assertTrue(today["progress"]["calories"]["reached"])

        resp = self.client.get("/api/meals/history", headers=h)
        self.assertEqual(resp.status_code, 200)
        history = resp.json()
        self.assertEqual([d["date"] for d in history["history"]], [_iso(0), _iso(2)])
        self.assertEqual(history["period_stats"]["total_days"], 2)
        self.assertEqual(history["period_stats"]["average_calories"], 2000)
        self.assertEqual(history["period_stats"]["total_calories"], 4000)

        resp = self.client.get("/api/meals/stats?period=week", headers=h)
        self.assertEqual(resp.status_code, 200)
        stats = resp.json()["stats"]
        self.assertEqual(stats["days_logged"], 2)
        self.assertEqual(stats["total_meals"], 3)
        self.assertEqual(stats["average_calories"], 2000)

        resp = self.client.patch(f"/api/meals/{meal['id']}", json={"foods": [self._food(250)]}, headers=h)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["totals"]["calories"], 250.0)
        self.assertEqual(resp.json()["meal_type"], "breakfast")

        resp = self.client.delete(f"/api/meals/{meal['id']}", headers=h)
        self.assertEqual(resp.status_code, 200)
        resp = self.client.get(f"/api/meals/{meal['id']}", headers=h)
        self.assertEqual(resp.status_code, 404)

    def test_meal_history_range_too_large(self) -> None:
        h = self._headers("meal-range-user")
        resp = self.client.get("/api/meals/history?start=2023-01-01&end=2024-01-01", headers=h)
        self.assertEqual(resp.status_code, 400)
        self.assertIn("90 days", resp.json()["detail"])

    def test_meals_are_scoped_per_user(self) -> None:
        resp = self.client.post(
            "/api/meals",
            json={"meal_type": "snack", "date": _iso(0), "foods": [self._food(100)]},
            headers=self._headers("owner"),
        )
        meal_id = resp.json()["id"]
        resp = self.client.get(f"/api/meals/{meal_id}", headers=self._headers("someone-else"))
        self.assertEqual(resp.status_code, 404)

    def test_nutrition_goals(self) -> None:
        h = self._headers("nutrition-user")
        resp = self.client.get("/api/nutrition/goals", headers=h)
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.json()["is_default"])
        self.assertEqual(resp.json()["daily_calories"], 2000.0)

        goals = {"daily_calories": 1800, "daily_protein": 120, "daily_carbs": 200, "daily_fat": 60}
        resp = self.client.put("/api/nutrition/goals", json=goals, headers=h)
        self.assertEqual(resp.status_code, 200)
        self.assertFalse(resp.json()["is_default"])

        resp = self.client.get("/api/meals/today", headers=h)
        self.assertEqual(resp.json()["goals"]["calories"], 1800.0)

        resp = self.client.put("/api/nutrition/goals", json={**goals, "daily_calories": 500}, headers=h)
        self.assertEqual(resp.status_code, 422)


if __name__ == "__main__":
    unittest.main()
