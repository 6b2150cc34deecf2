from __future__ import annotations

import os
from pathlib import Path
from typing import List


class Settings:
    """Centralized configuration for the health tracking backend."""

    def __init__(self) -> None:
        base_dir = Path(__file__).resolve().parent
        repo_root = base_dir.parent
        data_root_default = repo_root / "data"

        self.data_root: Path = Path(
            os.environ.get("HEALTHTRACK_DATA_ROOT") or data_root_default
        ).expanduser()
        self.app_db_path: Path = Path(
            os.environ.get("HEALTHTRACK_DB_PATH") or (self.data_root / "healthtrack.db")
        ).expanduser()
        self.log_level: str = (os.environ.get("HEALTHTRACK_LOG_LEVEL") or "INFO").upper()

        # Fallback goals when a user has not set their own.
        self.default_step_goal: int = int(os.environ.get("HEALTHTRACK_DEFAULT_STEP_GOAL") or "10000")
        self.default_daily_calories: float = 2000.0
        self.default_daily_protein: float = 150.0
        self.default_daily_carbs: float = 250.0
        self.default_daily_fat: float = 65.0

        # Logging rules for new entries.
        self.max_log_age_days: int = int(os.environ.get("HEALTHTRACK_MAX_LOG_AGE_DAYS") or "7")

        cors = os.environ.get("HEALTHTRACK_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]


settings = Settings()
