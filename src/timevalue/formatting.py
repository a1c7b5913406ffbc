"""Compact currency and duration strings for grid cells."""
from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal

from .tables import WORK_DAYS_PER_YEAR

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY = 8 * SECONDS_PER_HOUR  # 8-hour working day
SECONDS_PER_WEEK = 5 * SECONDS_PER_DAY  # 5 working days
SECONDS_PER_YEAR = WORK_DAYS_PER_YEAR * SECONDS_PER_DAY

_TRAILING_ZERO = re.compile(r"\.0$")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward +infinity."""

    return int(math.floor(value + 0.5))


def to_fixed(value: float, digits: int) -> str:
    """Fixed-point string of the exact binary value, ties rounded up."""

    quantum = Decimal(1).scaleb(-digits)
    return format(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP), "f")


def format_currency(value: float, symbol: str = "$") -> str:
    """Format a monetary value with a magnitude suffix.

    The 1M-10M and 1k-10k bands keep one more significant figure (fixed-point,
    trailing ``.0`` dropped) than the bands above them.
    """

    if value >= 1_000_000_000:
        return f"{symbol}{round_half_up(value / 1_000_000_000)}B"
    if value >= 10_000_000:
        return f"{symbol}{round_half_up(value / 1_000_000)}M"
    if value >= 1_000_000:
        return symbol + _TRAILING_ZERO.sub("", to_fixed(value / 1_000_000, 0)) + "M"
    if value >= 10_000:
        return f"{symbol}{round_half_up(value / 1000)}k"
    if value >= 1_000:
        return symbol + _TRAILING_ZERO.sub("", to_fixed(value / 1000, 1)) + "k"
    if value >= 1:
        return f"{symbol}{round_half_up(value)}"
    if value >= 0.1:
        return symbol + to_fixed(value, 2)
    return symbol + "0"


def format_time(total_seconds: float) -> str:
    """Format seconds on a work calendar (8h days, 5-day weeks, 250-day years).

    Each unit takes over once the value is comfortably inside its range, and
    the single-unit bands avoid outputs such as ``0d``. Order matters.
    """

    if total_seconds < 1:
        return "<1s"
    if total_seconds >= SECONDS_PER_YEAR * 0.75:
        return f"{round_half_up(total_seconds / SECONDS_PER_YEAR)}y"
    if total_seconds >= SECONDS_PER_DAY * 4:
        return f"{round_half_up(total_seconds / SECONDS_PER_WEEK)}w"
    if total_seconds >= SECONDS_PER_DAY * 1.5:
        return f"{round_half_up(total_seconds / SECONDS_PER_DAY)}d"
    if total_seconds >= SECONDS_PER_DAY * 0.75:
        return "1d"
    if total_seconds >= SECONDS_PER_HOUR * 2:
        return f"{round_half_up(total_seconds / SECONDS_PER_HOUR)}h"
    if total_seconds >= SECONDS_PER_HOUR * 0.75:
        return "1h"
    if total_seconds >= SECONDS_PER_MINUTE * 2:
        return f"{round_half_up(total_seconds / SECONDS_PER_MINUTE)}m"
    if total_seconds >= SECONDS_PER_MINUTE * 0.75:
        return "1m"
    return f"{round_half_up(total_seconds)}s"


__all__ = [
    "SECONDS_PER_DAY",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_WEEK",
    "SECONDS_PER_YEAR",
    "format_currency",
    "format_time",
    "round_half_up",
    "to_fixed",
]
