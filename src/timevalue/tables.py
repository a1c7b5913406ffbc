"""Reference tables and work-calendar constants for timevalue."""
from __future__ import annotations

from typing import NamedTuple, Tuple

# 8 hours per day * 250 work days per year
WORK_HOURS_PER_YEAR = 8 * 250
WORK_DAYS_PER_YEAR = 250


class FrequencyItem(NamedTuple):
    label: str
    multiplier: float


class DurationItem(NamedTuple):
    label: str
    seconds: float


# Columns: how often the task is done, as occurrences per year.
# Multipliers assume 250 working days (Mon-Fri with two weeks of holiday).
FREQUENCIES: Tuple[FrequencyItem, ...] = (
    FrequencyItem("50/day", 50 * WORK_DAYS_PER_YEAR),
    FrequencyItem("5/day", 5 * WORK_DAYS_PER_YEAR),
    FrequencyItem("Daily", WORK_DAYS_PER_YEAR),
    FrequencyItem("Weekly", 50),
    FrequencyItem("Monthly", 12),
    FrequencyItem("Yearly", 1),
)

# Rows: time saved per occurrence.
DURATIONS: Tuple[DurationItem, ...] = (
    DurationItem("1 second", 1),
    DurationItem("5 seconds", 5),
    DurationItem("30 seconds", 30),
    DurationItem("1 minute", 60),
    DurationItem("5 minutes", 5 * 60),
    DurationItem("30 minutes", 30 * 60),
    DurationItem("1 hour", 60 * 60),
    DurationItem("4 hours", 4 * 60 * 60),
    DurationItem("1 day", 8 * 60 * 60),  # one 8-hour working day
)


__all__ = [
    "DURATIONS",
    "DurationItem",
    "FREQUENCIES",
    "FrequencyItem",
    "WORK_DAYS_PER_YEAR",
    "WORK_HOURS_PER_YEAR",
]
