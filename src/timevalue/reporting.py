"""Reporting helpers such as CSV export."""
from __future__ import annotations

import csv
import numbers
from typing import Iterable, List, Sequence, Tuple

from .computation import GridRow
from .tables import FREQUENCIES


def export_csv(path: str, header: Sequence[str], rows: Iterable[Sequence], decimals: int = 2):
    """Write header/row data to a CSV file."""

    def _format_cell(value: object) -> str:
        if isinstance(value, numbers.Real) and not isinstance(value, bool):
            return format(value, f".{decimals}f")
        return str(value)

    with open(path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow([_format_cell(h) for h in header])
        for row in rows:
            writer.writerow([_format_cell(cell) for cell in row])


def grid_header() -> List[str]:
    return ["Time saved"] + [f.label for f in FREQUENCIES]


def grid_table(grid: Sequence[GridRow]) -> Tuple[List[str], List[List[str]]]:
    """Header and cell-text rows for a built grid."""

    rows = [[duration.label] + [cell.text for cell in cells] for duration, cells in grid]
    return grid_header(), rows


__all__ = ["export_csv", "grid_header", "grid_table"]
