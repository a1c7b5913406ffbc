"""Tier and opacity classifiers used for heatmap-style grids."""
from __future__ import annotations

import math

OPACITY_MIN = 0.2
OPACITY_MAX = 1.0


def _clamp_opacity(raw: float) -> float:
    return min(OPACITY_MAX, max(OPACITY_MIN, raw))


def get_currency_tier(value: float, salary: float) -> str:
    """Return the colour tier for a value relative to salary.

    Tier levels are normalised to a 100k salary. ``salary`` must be non-zero.
    """

    ratio = 100000 * (value / salary)
    if ratio < 10:
        return "tier-1"
    if ratio < 100:
        return "tier-2"
    if ratio < 1000:
        return "tier-3"
    if ratio < 10000:
        return "tier-4"
    return "tier-5"


# Legacy alias
get_tier = get_currency_tier


def get_time_tier(display_seconds: float) -> str:
    """Colour tier for a time value: s=grey, m=green, h=blue, d=purple, w/y=red."""

    seconds_per_minute = 60
    seconds_per_hour = 3600
    seconds_per_day = 28800

    if display_seconds < seconds_per_minute * 0.75:
        return "tier-1"
    if display_seconds < seconds_per_hour * 0.75:
        return "tier-2"
    if display_seconds < seconds_per_day * 0.75:
        return "tier-3"
    if display_seconds < seconds_per_day * 4:
        return "tier-4"
    return "tier-5"


def get_currency_opacity(value: float, salary: float) -> float:
    """Fade very high and very low monetary values.

    High values fade on a log scale from 5% of salary (opaque) to 200% of
    salary (floor); values under 5 fade linearly down to the floor at 1.
    Both ``value`` and ``salary`` must be positive.
    """

    if value <= 0 or salary <= 0:
        raise ValueError(
            f"Currency opacity needs positive value and salary (got {value!r}, {salary!r})"
        )

    high_fade_start = salary * 0.05
    high_fade_end = salary * 2.00
    high_raw = 1 - (math.log(value) - math.log(high_fade_start)) / (
        math.log(high_fade_end) - math.log(high_fade_start)
    )
    high_opacity = _clamp_opacity(high_raw)

    low_fade_start = 5
    low_fade_end = 1
    low_opacity = OPACITY_MAX
    if value < low_fade_start:
        low_raw = (value - low_fade_end) / (low_fade_start - low_fade_end)
        low_opacity = _clamp_opacity(low_raw)

    return min(high_opacity, low_opacity)


def get_time_opacity(seconds: float) -> float:
    """Fade very short and unrealistically long time savings."""

    seconds_per_day = 28800
    seconds_per_week = seconds_per_day * 5
    seconds_per_year = seconds_per_day * 250

    # under a minute
    low_fade_start = 60
    low_fade_end = 1
    low_opacity = OPACITY_MAX
    if seconds < low_fade_start:
        low_raw = (seconds - low_fade_end) / (low_fade_start - low_fade_end)
        low_opacity = _clamp_opacity(low_raw)

    # from about a month (4 weeks) to a year
    high_fade_start = seconds_per_week * 4
    high_fade_end = seconds_per_year
    high_opacity = OPACITY_MAX
    if seconds > high_fade_start:
        high_raw = 1 - (math.log(seconds) - math.log(high_fade_start)) / (
            math.log(high_fade_end) - math.log(high_fade_start)
        )
        high_opacity = _clamp_opacity(high_raw)

    return min(low_opacity, high_opacity)


__all__ = [
    "OPACITY_MAX",
    "OPACITY_MIN",
    "get_currency_opacity",
    "get_currency_tier",
    "get_tier",
    "get_time_opacity",
    "get_time_tier",
]
