# -*- coding: utf-8 -*-
"""Calendar-day parsing and window resolution.

All days are UTC calendar days. Two span policies exist on purpose: the steps
history clamps an oversized range, the meal history rejects it.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Optional, Union

from ..errors import (
    DateTooOldError,
    FutureDateError,
    InvalidDateError,
    InvalidLimitError,
    InvalidPeriodError,
    RangeTooLargeError,
)
from .models import DateWindow

DayInput = Union[date, datetime, str, None]

PERIOD_DAYS = {"week": 7, "month": 30, "year": 365}

STEPS_HISTORY_LOOKBACK_DAYS = 7
STEPS_HISTORY_DEFAULT_LIMIT = 30
STEPS_HISTORY_MAX_LIMIT = 90
MEAL_HISTORY_LOOKBACK_DAYS = 7
MEAL_HISTORY_MAX_SPAN_DAYS = 90
STREAK_LOOKBACK_DAYS = 90


def today_utc() -> date:
    return datetime.now(timezone.utc).date()


def parse_day(value: Union[date, datetime, str]) -> date:
    """Normalize a date, datetime or ISO8601 string to a UTC calendar day."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise InvalidDateError()
    raw = value.strip()
    try:
        if len(raw) == 10:
            return date.fromisoformat(raw)
        # Python < 3.11 does not accept a trailing "Z".
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        return parse_day(datetime.fromisoformat(raw))
    except ValueError as exc:
        raise InvalidDateError() from exc


def resolve(
    start: DayInput = None,
    end: DayInput = None,
    *,
    default_lookback_days: int,
    today: Optional[date] = None,
) -> DateWindow:
    """Resolve optional bounds into a validated inclusive window.

    ``end`` defaults to today and ``start`` to ``end - default_lookback_days``.
    No span limit is applied here; see the per-domain helpers below.
    """
    end_day = parse_day(end) if end is not None else (today or today_utc())
    start_day = parse_day(start) if start is not None else end_day - timedelta(days=default_lookback_days)
    if start_day > end_day:
        raise InvalidDateError("Start date must be before or equal to end date")
    return DateWindow(start=start_day, end=end_day)


def resolve_steps_history(
    start: DayInput = None,
    end: DayInput = None,
    *,
    limit: int = STEPS_HISTORY_DEFAULT_LIMIT,
    today: Optional[date] = None,
) -> DateWindow:
    """Window for the steps history: oversized ranges are clamped to ``limit`` days back from ``end``."""
    if limit < 1:
        raise InvalidLimitError()
    limit = min(limit, STEPS_HISTORY_MAX_LIMIT)
    window = resolve(start, end, default_lookback_days=STEPS_HISTORY_LOOKBACK_DAYS, today=today)
    if window.span_days > limit:
        return DateWindow(start=window.end - timedelta(days=limit), end=window.end)
    return window


def resolve_meal_history(
    start: DayInput = None,
    end: DayInput = None,
    *,
    today: Optional[date] = None,
) -> DateWindow:
    """Window for the meal history: oversized ranges are an error, never clamped."""
    window = resolve(start, end, default_lookback_days=MEAL_HISTORY_LOOKBACK_DAYS, today=today)
    if window.span_days > MEAL_HISTORY_MAX_SPAN_DAYS:
        raise RangeTooLargeError(f"Date range cannot exceed {MEAL_HISTORY_MAX_SPAN_DAYS} days")
    return window


def period_days(period: str) -> int:
    try:
        return PERIOD_DAYS[period]
    except KeyError as exc:
        raise InvalidPeriodError() from exc


def period_window(period: str, *, today: Optional[date] = None) -> DateWindow:
    """Named period ending today, counted inclusive of today ("week" is today plus the 6 days before)."""
    end_day = today or today_utc()
    return DateWindow(start=end_day - timedelta(days=period_days(period) - 1), end=end_day)


def streak_window(*, today: Optional[date] = None) -> DateWindow:
    end_day = today or today_utc()
    return DateWindow(start=end_day - timedelta(days=STREAK_LOOKBACK_DAYS), end=end_day)


def is_future(day: date, *, today: Optional[date] = None) -> bool:
    return day > (today or today_utc())


def is_too_old(day: date, max_days: int = 7, *, today: Optional[date] = None) -> bool:
    return abs(((today or today_utc()) - day).days) > max_days


def validate_log_day(value: Union[date, datetime, str], *, max_age_days: int = 7, today: Optional[date] = None) -> date:
    """Parse the day of a new log entry; it may be neither in the future nor older than ``max_age_days``."""
    day = parse_day(value)
    today = today or today_utc()
    if is_future(day, today=today):
        raise FutureDateError()
    if is_too_old(day, max_age_days, today=today):
        raise DateTooOldError(f"Cannot log entries older than {max_age_days} days")
    return day
