"""Per-cell display values for the time-saved grid."""
from __future__ import annotations

from typing import NamedTuple

from .finance import calculate_cell_value, calculate_time_value, resolve_period
from .formatting import format_currency, format_time
from .tiers import (
    OPACITY_MIN,
    get_currency_opacity,
    get_currency_tier,
    get_time_opacity,
    get_time_tier,
)

MODES = ("money", "time")
PLACEHOLDER = "—"


class CellDisplayResult(NamedTuple):
    """Everything needed to render one cell."""

    text: str
    opacity: float
    tier: str


def resolve_mode(mode: str) -> str:
    """Return the normalized display mode (money/time)."""

    normalized = mode.lower()
    if normalized not in MODES:
        raise ValueError(f"Unknown display mode '{mode}' (expected money/time)")
    return normalized


def get_cell_display(
    salary: float,
    freq_multiplier: float,
    time_seconds: float,
    period: str,
    mode: str,
    currency_symbol: str = "$",
) -> CellDisplayResult:
    """Return text, opacity and tier for one grid cell.

    Money tiers and opacity always use the annual value so that switching the
    period does not recolour the grid. A non-positive salary shows a
    placeholder at full opacity with no tier.
    """

    period = resolve_period(period)
    mode = resolve_mode(mode)

    if mode == "money":
        display_money = calculate_cell_value(salary, freq_multiplier, time_seconds, period)
        annual_value = calculate_cell_value(salary, freq_multiplier, time_seconds, "annual")
        if salary <= 0:
            return CellDisplayResult(PLACEHOLDER, 1.0, "")
        if annual_value <= 0:
            return CellDisplayResult(
                format_currency(display_money, currency_symbol), OPACITY_MIN, ""
            )
        return CellDisplayResult(
            format_currency(display_money, currency_symbol),
            get_currency_opacity(annual_value, salary),
            get_currency_tier(annual_value, salary),
        )

    display_seconds = calculate_time_value(freq_multiplier, time_seconds, period)
    return CellDisplayResult(
        format_time(display_seconds),
        get_time_opacity(display_seconds),
        get_time_tier(display_seconds),
    )


__all__ = ["CellDisplayResult", "MODES", "PLACEHOLDER", "get_cell_display", "resolve_mode"]
