"""Command-line interface for timevalue."""
from __future__ import annotations

import argparse
import sys
from typing import Sequence

import matplotlib.pyplot as plt
from matplotlib import colors as mcolors

from .computation import GridRow, build_grid, raw_grid, resolve_use_numpy
from .display import MODES
from .finance import PERIODS
from .parsing import parse_currency_symbol, parse_salary
from .reporting import export_csv, grid_header, grid_table
from .tables import DURATIONS, FREQUENCIES

# s=grey, m=green, h=blue, d=purple, w/y=red
TIER_COLORS = {
    "tier-1": "#9E9E9E",
    "tier-2": "#59A14F",
    "tier-3": "#4E79A7",
    "tier-4": "#B07AA1",
    "tier-5": "#E15759",
}
UNTIERED_COLOR = "#D9D9D9"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="timevalue",
        description="How much is the time you save worth?",
    )
    parser.add_argument("--salary", default="100000", help="Annual salary (e.g., '100000', '85k', '$85,000')")
    parser.add_argument("--period", choices=list(PERIODS), default="annual", help="Show values per year or per month")
    parser.add_argument("--mode", choices=list(MODES), default="money", help="Show money value or time saved")
    parser.add_argument("--currency", default="$", help="Currency symbol used in money mode")
    parser.add_argument(
        "--engine",
        choices=["auto", "numpy", "python"],
        default="auto",
        help="Computation engine for raw values: auto prefers NumPy when available",
    )
    parser.add_argument("--csv", default="", help="Export raw grid values to this CSV path")
    parser.add_argument("--plot", action="store_true", help="Show the grid as a heatmap")
    return parser


def _plot_grid(grid: Sequence[GridRow], title: str) -> None:
    """Heatmap with one colour per tier, faded by cell opacity."""

    rgba = [
        [mcolors.to_rgba(TIER_COLORS.get(cell.tier, UNTIERED_COLOR), alpha=cell.opacity) for cell in cells]
        for _, cells in grid
    ]
    fig, ax = plt.subplots(figsize=(10, 6))
    ax.imshow(rgba, aspect="auto")
    for row_idx, (_, cells) in enumerate(grid):
        for col_idx, cell in enumerate(cells):
            ax.text(col_idx, row_idx, cell.text, ha="center", va="center", fontsize=9)
    ax.set_xticks(range(len(FREQUENCIES)))
    ax.set_xticklabels([f.label for f in FREQUENCIES])
    ax.set_yticks(range(len(DURATIONS)))
    ax.set_yticklabels([d.label for d in DURATIONS])
    ax.set_xlabel("How often you do the task")
    ax.set_ylabel("Time saved per occurrence")
    ax.set_title(title)
    fig.tight_layout()


def run_cli(args: argparse.Namespace) -> None:
    salary = parse_salary(args.salary)
    currency = parse_currency_symbol(args.currency)
    period = args.period
    mode = args.mode

    if mode == "money" and salary <= 0:
        print("Note: salary is not positive; money values are hidden.", file=sys.stderr)

    grid = build_grid(salary, period, mode, currency)
    header, rows = grid_table(grid)
    print(f"\nTIME SAVED ({mode}, {period})")
    print(" | ".join(header))
    for row in rows:
        print(" | ".join(row))

    if args.csv:
        try:
            use_numpy = resolve_use_numpy(args.engine)
        except RuntimeError as exc:
            print(f"Warning: {exc} Falling back to pure Python engine.", file=sys.stderr)
            use_numpy = False
        values = raw_grid(salary, period, mode, use_numpy)
        export_csv(
            args.csv,
            grid_header(),
            [[d.label] + row for d, row in zip(DURATIONS, values)],
        )
        print(f"\nSaved raw values to {args.csv}")

    if args.plot:
        _plot_grid(grid, f"Value of time saved ({mode}, {period})")
        plt.show()


__all__ = ["build_parser", "run_cli"]
