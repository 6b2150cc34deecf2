# -*- coding: utf-8 -*-
"""Current activity streak."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Sequence

from .models import StepsRecord


def current_streak(history: Sequence[StepsRecord], reference_day: date) -> int:
    """Count consecutive active days (steps > 0) walking back from ``reference_day``.

    The walk takes at most ``len(history) - 1`` backward steps. A single
    inactive day right before an inactive ``reference_day`` is skipped; any
    other inactive day ends the walk.
    """
    if not history:
        return 0

    active_days = {r.day for r in history if r.steps > 0}
    reference_active = reference_day in active_days
    streak = 1 if reference_active else 0

    for i in range(1, len(history)):
        day = reference_day - timedelta(days=i)
        if day in active_days:
            streak += 1
        elif i == 1 and not reference_active:
            continue
        else:
            break

    return streak
