# -*- coding: utf-8 -*-
"""Read capabilities the engine depends on.

Any store (SQLite, in-memory, a test double) satisfies these by duck typing.
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional, Protocol

from .models import DailyRecord, Goal

STEPS = "steps"
NUTRITION = "nutrition"


class HistoryProvider(Protocol):
    def fetch(self, user_id: str, domain: str, start: date, end: date) -> List[DailyRecord]:
        """Return the persisted daily records inside ``[start, end]``, in any order."""


class GoalProvider(Protocol):
    def get(self, user_id: str, domain: str) -> Optional[Goal]:
        """Return the user's goal for ``domain`` or ``None`` when unset."""
