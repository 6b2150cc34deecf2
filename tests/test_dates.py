# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest
from datetime import date, datetime, timedelta, timezone

from healthtrack.engine.dates import (
    parse_day,
    period_window,
    resolve,
    resolve_meal_history,
    resolve_steps_history,
    streak_window,
    validate_log_day,
)
from healthtrack.errors import (
    DateTooOldError,
    FutureDateError,
    InvalidDateError,
    InvalidLimitError,
    InvalidPeriodError,
    RangeTooLargeError,
)

TODAY = date(2024, 3, 15)


class TestParseDay(unittest.TestCase):
    def test_plain_date_string(self) -> None:
        self.assertEqual(parse_day("2024-03-01"), date(2024, 3, 1))

    def test_timestamp_is_truncated_to_utc_day(self) -> None:
        self.assertEqual(parse_day("2024-03-01T23:30:00Z"), date(2024, 3, 1))
        # 23:30 at -05:00 is already the next day in UTC.
        self.assertEqual(parse_day("2024-03-01T23:30:00-05:00"), date(2024, 3, 2))

    def test_aware_datetime(self) -> None:
        value = datetime(2024, 3, 1, 1, 0, tzinfo=timezone(timedelta(hours=3)))
        self.assertEqual(parse_day(value), date(2024, 2, 29))

    def test_invalid_values(self) -> None:
        for raw in ("", "not-a-date", "2024-13-01", "2024-02-30"):
            with self.subTest(raw=raw):
                with self.assertRaises(InvalidDateError):
                    parse_day(raw)


class TestResolve(unittest.TestCase):
    def test_defaults(self) -> None:
        window = resolve(default_lookback_days=7, today=TODAY)
        self.assertEqual(window.end, TODAY)
        self.assertEqual(window.start, date(2024, 3, 8))
        self.assertEqual(window.days, 8)

    def test_start_after_end_rejected(self) -> None:
        with self.assertRaises(InvalidDateError) as ctx:
            resolve("2024-03-10", "2024-03-09", default_lookback_days=7, today=TODAY)
        self.assertIn("before or equal", ctx.exception.message)

    def test_single_day_window(self) -> None:
        window = resolve("2024-03-10", "2024-03-10", default_lookback_days=7, today=TODAY)
        self.assertEqual(window.days, 1)


class TestSpanPolicies(unittest.TestCase):
    def test_steps_history_is_clamped(self) -> None:
        window = resolve_steps_history("2023-01-01", "2024-03-15", limit=30, today=TODAY)
        self.assertEqual(window.end, TODAY)
        self.assertEqual(window.start, TODAY - timedelta(days=30))

    def test_steps_history_limit_capped_at_90(self) -> None:
        window = resolve_steps_history("2023-01-01", "2024-03-15", limit=500, today=TODAY)
        self.assertEqual(window.span_days, 90)

    def test_steps_history_limit_must_be_positive(self) -> None:
        with self.assertRaises(InvalidLimitError) as ctx:
            resolve_steps_history(limit=0, today=TODAY)
        self.assertNotIsInstance(ctx.exception, InvalidDateError)
        self.assertEqual(ctx.exception.message, "Limit must be at least 1")
        self.assertEqual(ctx.exception.status_code, 400)

    def test_meal_history_rejects_large_span(self) -> None:
        with self.assertRaises(RangeTooLargeError):
            resolve_meal_history("2023-01-01", "2024-03-15", today=TODAY)

    def test_meal_history_accepts_90_days(self) -> None:
        end = date(2024, 3, 15)
        window = resolve_meal_history(end - timedelta(days=90), end, today=TODAY)
        self.assertEqual(window.span_days, 90)


class TestPeriods(unittest.TestCase):
    def test_week_includes_today(self) -> None:
        window = period_window("week", today=TODAY)
        self.assertEqual(window.start, date(2024, 3, 9))
        self.assertEqual(window.end, TODAY)
        self.assertEqual(window.days, 7)

    def test_month_and_year_lengths(self) -> None:
        self.assertEqual(period_window("month", today=TODAY).days, 30)
        self.assertEqual(period_window("year", today=TODAY).days, 365)

    def test_unknown_period(self) -> None:
        with self.assertRaises(InvalidPeriodError):
            period_window("fortnight", today=TODAY)

    def test_streak_window_reaches_back_90_days(self) -> None:
        window = streak_window(today=TODAY)
        self.assertEqual(window.days, 91)


class TestValidateLogDay(unittest.TestCase):
    def test_today_and_last_week_allowed(self) -> None:
        self.assertEqual(validate_log_day("2024-03-15", today=TODAY), TODAY)
        self.assertEqual(validate_log_day("2024-03-08", today=TODAY), date(2024, 3, 8))

    def test_future_rejected(self) -> None:
        with self.assertRaises(FutureDateError):
            validate_log_day("2024-03-16", today=TODAY)

    def test_too_old_rejected(self) -> None:
        with self.assertRaises(DateTooOldError):
            validate_log_day("2024-03-07", today=TODAY)


if __name__ == "__main__":
    unittest.main()
