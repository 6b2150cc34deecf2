# -*- coding: utf-8 -*-
"""Gap filling for the steps domain."""

from __future__ import annotations

from datetime import date
from typing import Dict, Iterable, List

from .models import DateWindow, StepsRecord


def fill_gaps(records: Iterable[StepsRecord], window: DateWindow, user_id: str) -> List[StepsRecord]:
    """Return exactly one record per day in ``window``, most recent day first.

    Real records pass through unchanged; days without one get a synthetic
    zero record (``id is None``). Records outside the window are ignored.
    """
    by_day: Dict[date, StepsRecord] = {r.day: r for r in records}
    filled: List[StepsRecord] = []
    for day in window.iter_days():
        record = by_day.get(day)
        if record is None:
            record = StepsRecord(user_id=user_id, day=day)
        filled.append(record)
    filled.reverse()
    return filled
