"""Whole-grid computation helpers."""
from __future__ import annotations

from typing import List, Tuple

from .display import CellDisplayResult, get_cell_display, resolve_mode
from .finance import HAS_NUMPY, resolve_period, time_grid, value_grid
from .tables import DURATIONS, FREQUENCIES, DurationItem

GridRow = Tuple[DurationItem, List[CellDisplayResult]]


def resolve_use_numpy(engine: str) -> bool:
    """Return True if the NumPy engine should be used for grid values."""

    normalized = engine.lower()
    if normalized not in {"auto", "numpy", "python"}:
        raise ValueError(f"Unknown engine '{engine}' (expected auto/numpy/python)")
    if normalized == "numpy":
        if not HAS_NUMPY:
            raise RuntimeError("NumPy requested but not installed.")
        return True
    if normalized == "python":
        return False
    return HAS_NUMPY


def raw_grid(salary: float, period: str, mode: str, use_numpy: bool = True) -> List[List[float]]:
    """Unformatted grid values: money per period, or seconds per period."""

    if resolve_mode(mode) == "money":
        return value_grid(salary, resolve_period(period), use_numpy)
    return time_grid(resolve_period(period), use_numpy)


def build_grid(
    salary: float,
    period: str,
    mode: str,
    currency_symbol: str = "$",
) -> List[GridRow]:
    """Display values for every (duration, frequency) cell, rows in duration order."""

    return [
        (
            duration,
            [
                get_cell_display(
                    salary, freq.multiplier, duration.seconds, period, mode, currency_symbol
                )
                for freq in FREQUENCIES
            ],
        )
        for duration in DURATIONS
    ]


__all__ = [
    "GridRow",
    "build_grid",
    "raw_grid",
    "resolve_mode",
    "resolve_period",
    "resolve_use_numpy",
]
