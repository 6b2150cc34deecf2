# -*- coding: utf-8 -*-
"""Domain errors shared by the engine, storage and HTTP layers."""

from __future__ import annotations


class HealthTrackError(Exception):
    """Base class; ``status_code`` is what the HTTP layer answers with."""

    status_code = 400
    default_message = "Bad request"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidDateError(HealthTrackError):
    default_message = "Invalid date format"


class InvalidPeriodError(HealthTrackError):
    default_message = "Period must be one of: week, month, year"


class RangeTooLargeError(HealthTrackError):
    default_message = "Date range cannot exceed 90 days"


class InvalidMetricError(HealthTrackError):
    default_message = "Metric values cannot be negative"


class FutureDateError(HealthTrackError):
    default_message = "Cannot log entries for a future date"


class DateTooOldError(HealthTrackError):
    default_message = "Cannot log entries older than 7 days"


class InvalidMealDataError(HealthTrackError):
    default_message = "Invalid meal data"


class NotFoundError(HealthTrackError):
    status_code = 404
    default_message = "Resource not found"


class InvalidLimitError(HealthTrackError):
    default_message = "Limit must be at least 1"
