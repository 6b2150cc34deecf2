# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest
from datetime import date, timedelta

from healthtrack.engine.gaps import fill_gaps
from healthtrack.engine.models import DateWindow, StepsRecord
from healthtrack.engine.streaks import current_streak

TODAY = date(2024, 3, 15)
USER = "u1"


def _day(offset: int) -> date:
    return TODAY - timedelta(days=offset)


def _series(*steps: int) -> list:
    """Descending series: ``steps[0]`` is today, ``steps[1]`` yesterday, ..."""
    return [
        StepsRecord(user_id=USER, day=_day(i), steps=value, id=f"s{i}")
        for i, value in enumerate(steps)
    ]


class TestFillGaps(unittest.TestCase):
    def test_one_record_per_day_latest_first(self) -> None:
        window = DateWindow(start=_day(4), end=TODAY)
        records = [
            StepsRecord(user_id=USER, day=_day(1), steps=1200, id="a"),
            StepsRecord(user_id=USER, day=_day(3), steps=800, id="b"),
        ]
        filled = fill_gaps(records, window, USER)

        self.assertEqual([r.day for r in filled], [_day(i) for i in range(5)])
        self.assertEqual([r.steps for r in filled], [0, 1200, 0, 800, 0])
        self.assertEqual([r.is_synthetic for r in filled], [True, False, True, False, True])
        # Real records pass through untouched.
        self.assertIs(filled[1], records[0])

    def test_records_outside_window_are_dropped(self) -> None:
        window = DateWindow(start=_day(1), end=TODAY)
        records = [StepsRecord(user_id=USER, day=_day(5), steps=999, id="old")]
        filled = fill_gaps(records, window, USER)
        self.assertEqual(len(filled), 2)
        self.assertTrue(all(r.steps == 0 for r in filled))

    def test_empty_input(self) -> None:
        window = DateWindow(start=_day(6), end=TODAY)
        filled = fill_gaps([], window, USER)
        self.assertEqual(len(filled), 7)
        self.assertEqual(filled[0].day, TODAY)
        self.assertEqual(filled[-1].day, _day(6))

    def test_filling_dense_series_is_idempotent(self) -> None:
        window = DateWindow(start=_day(6), end=TODAY)
        records = [
            StepsRecord(user_id=USER, day=_day(0), steps=4000, id="a"),
            StepsRecord(user_id=USER, day=_day(2), steps=2500, id="b"),
            StepsRecord(user_id=USER, day=_day(5), steps=900, id="c"),
        ]
        once = fill_gaps(records, window, USER)
        self.assertEqual(fill_gaps(once, window, USER), once)

    def test_sum_preserved(self) -> None:
        window = DateWindow(start=_day(6), end=TODAY)
        records = [
            StepsRecord(user_id=USER, day=_day(1), steps=3100, id="a"),
            StepsRecord(user_id=USER, day=_day(4), steps=6400, id="b"),
        ]
        filled = fill_gaps(records, window, USER)
        self.assertEqual(sum(r.steps for r in filled), sum(r.steps for r in records))
        self.assertEqual(sum(1 for r in filled if r.is_synthetic), 5)


class TestCurrentStreak(unittest.TestCase):
    def test_empty_history(self) -> None:
        self.assertEqual(current_streak([], TODAY), 0)

    def test_ten_consecutive_days_ending_today(self) -> None:
        window = DateWindow(start=_day(90), end=TODAY)
        records = [StepsRecord(user_id=USER, day=_day(i), steps=5000, id=str(i)) for i in range(10)]
        history = fill_gaps(records, window, USER)
        self.assertEqual(current_streak(history, TODAY), 10)

    def test_inactive_today_then_active_yesterday(self) -> None:
        # Today has no steps yet: yesterday still counts, the day before ends it.
        self.assertEqual(current_streak(_series(0, 500, 0), TODAY), 1)

    def test_one_inactive_day_is_tolerated_only_before_inactive_today(self) -> None:
        self.assertEqual(current_streak(_series(0, 0, 300, 300), TODAY), 2)

    def test_gap_after_active_today_ends_the_walk(self) -> None:
        self.assertEqual(current_streak(_series(100, 0, 300, 300), TODAY), 1)

    def test_walk_is_bounded_by_history_length(self) -> None:
        # Only three records supplied, so at most two steps back are taken.
        self.assertEqual(current_streak(_series(100, 100, 100), TODAY), 3)

    def test_no_activity(self) -> None:
        self.assertEqual(current_streak(_series(0, 0, 0, 0), TODAY), 0)

    def test_sparse_and_dense_inputs_differ(self) -> None:
        # Active on the five days before an inactive today. A sparse history
        # of five records allows four steps back; the dense window allows more.
        records = [StepsRecord(user_id=USER, day=_day(i), steps=2000, id=str(i)) for i in range(1, 6)]
        self.assertEqual(current_streak(records, TODAY), 4)
        dense = fill_gaps(records, DateWindow(start=_day(90), end=TODAY), USER)
        self.assertEqual(current_streak(dense, TODAY), 5)


if __name__ == "__main__":
    unittest.main()
