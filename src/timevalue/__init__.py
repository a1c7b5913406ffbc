"""timevalue package entry points."""
from __future__ import annotations

from .cli import build_parser, run_cli
from .computation import build_grid
from .display import CellDisplayResult, get_cell_display
from .finance import calculate_cell_value, calculate_time_value
from .formatting import format_currency, format_time
from .tables import (
    DURATIONS,
    FREQUENCIES,
    WORK_DAYS_PER_YEAR,
    WORK_HOURS_PER_YEAR,
    DurationItem,
    FrequencyItem,
)
from .tiers import (
    get_currency_opacity,
    get_currency_tier,
    get_tier,
    get_time_opacity,
    get_time_tier,
)

__all__ = [
    "CellDisplayResult",
    "DURATIONS",
    "DurationItem",
    "FREQUENCIES",
    "FrequencyItem",
    "WORK_DAYS_PER_YEAR",
    "WORK_HOURS_PER_YEAR",
    "build_grid",
    "build_parser",
    "calculate_cell_value",
    "calculate_time_value",
    "format_currency",
    "format_time",
    "get_cell_display",
    "get_currency_opacity",
    "get_currency_tier",
    "get_tier",
    "get_time_opacity",
    "get_time_tier",
    "main",
    "run_cli",
]


def main(argv=None) -> None:
    """Console entry point."""

    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        run_cli(args)
    except ValueError as exc:
        parser.error(str(exc))
