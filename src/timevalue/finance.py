"""Value-of-time calculations for timevalue."""
from __future__ import annotations

from typing import List, Sequence

try:  # Optional NumPy support for whole-grid calculations
    import numpy as _np  # type: ignore
except Exception:  # pragma: no cover - NumPy is optional at runtime
    _np = None

from .tables import DURATIONS, FREQUENCIES, WORK_HOURS_PER_YEAR, DurationItem, FrequencyItem

HAS_NUMPY = _np is not None

SECONDS_PER_HOUR = 3600
MONTHS_PER_YEAR = 12

PERIODS = ("annual", "monthly")


def resolve_period(period: str) -> str:
    """Return the normalized period name (annual/monthly)."""

    normalized = period.lower()
    if normalized not in PERIODS:
        raise ValueError(f"Unknown period '{period}' (expected annual/monthly)")
    return normalized


def _period_divisor(period: str) -> int:
    return MONTHS_PER_YEAR if resolve_period(period) == "monthly" else 1


def calculate_cell_value(
    salary: float,
    freq_multiplier: float,
    time_seconds: float,
    period: str,
) -> float:
    """Monetary value of the time saved, per year or per month.

    The hourly rate assumes ``WORK_HOURS_PER_YEAR`` paid hours. No bounds
    checking is done: a non-positive salary gives a zero or negative value and
    the caller decides how to display it.
    """

    hourly_rate = salary / WORK_HOURS_PER_YEAR
    raw_seconds_per_year = freq_multiplier * time_seconds
    annual_value = hourly_rate * (raw_seconds_per_year / SECONDS_PER_HOUR)
    return annual_value / _period_divisor(period)


def calculate_time_value(freq_multiplier: float, time_seconds: float, period: str) -> float:
    """Seconds saved per year or per month."""

    raw_seconds_per_year = freq_multiplier * time_seconds
    return raw_seconds_per_year / _period_divisor(period)


def value_grid_py(
    salary: float,
    period: str,
    frequencies: Sequence[FrequencyItem] = FREQUENCIES,
    durations: Sequence[DurationItem] = DURATIONS,
) -> List[List[float]]:
    """Pure-Python money grid, one row per duration and one column per frequency."""

    return [
        [calculate_cell_value(salary, f.multiplier, d.seconds, period) for f in frequencies]
        for d in durations
    ]


def value_grid_np(
    salary: float,
    period: str,
    frequencies: Sequence[FrequencyItem] = FREQUENCIES,
    durations: Sequence[DurationItem] = DURATIONS,
) -> List[List[float]]:
    """Vectorized money grid (requires NumPy)."""

    if not HAS_NUMPY:
        return value_grid_py(salary, period, frequencies, durations)

    assert _np is not None  # for type checkers
    divisor = _period_divisor(period)
    hourly_rate = salary / WORK_HOURS_PER_YEAR
    seconds = _np.array([d.seconds for d in durations], dtype=_np.float64)
    multipliers = _np.array([f.multiplier for f in frequencies], dtype=_np.float64)
    raw = _np.outer(seconds, multipliers)
    values = hourly_rate * (raw / SECONDS_PER_HOUR) / divisor
    return [[float(v) for v in row] for row in values]


def time_grid_py(
    period: str,
    frequencies: Sequence[FrequencyItem] = FREQUENCIES,
    durations: Sequence[DurationItem] = DURATIONS,
) -> List[List[float]]:
    """Pure-Python grid of seconds saved."""

    return [
        [calculate_time_value(f.multiplier, d.seconds, period) for f in frequencies]
        for d in durations
    ]


def time_grid_np(
    period: str,
    frequencies: Sequence[FrequencyItem] = FREQUENCIES,
    durations: Sequence[DurationItem] = DURATIONS,
) -> List[List[float]]:
    """Vectorized grid of seconds saved (requires NumPy)."""

    if not HAS_NUMPY:
        return time_grid_py(period, frequencies, durations)

    assert _np is not None
    divisor = _period_divisor(period)
    seconds = _np.array([d.seconds for d in durations], dtype=_np.float64)
    multipliers = _np.array([f.multiplier for f in frequencies], dtype=_np.float64)
    values = _np.outer(seconds, multipliers) / divisor
    return [[float(v) for v in row] for row in values]


def value_grid(salary, period, use_numpy=True):
    if use_numpy and HAS_NUMPY:
        return value_grid_np(salary, period)
    return value_grid_py(salary, period)


def time_grid(period, use_numpy=True):
    if use_numpy and HAS_NUMPY:
        return time_grid_np(period)
    return time_grid_py(period)


__all__ = [
    "HAS_NUMPY",
    "PERIODS",
    "calculate_cell_value",
    "calculate_time_value",
    "resolve_period",
    "time_grid",
    "time_grid_np",
    "time_grid_py",
    "value_grid",
    "value_grid_np",
    "value_grid_py",
]
