"""Input parsing helpers for timevalue."""
from __future__ import annotations

import re

_SALARY_RE = re.compile(r"^(?P<number>\d+(?:\.\d+)?)(?P<suffix>[kKmM]?)$")
_SUFFIXES = {"": 1, "k": 1_000, "m": 1_000_000}


def parse_salary(text: str) -> float:
    """Parse a salary such as "100000", "$85,000", "100k" or "1.2m"."""

    cleaned = text.strip().replace(",", "").replace("_", "")
    cleaned = cleaned.lstrip("$€£¥ ")
    if not cleaned:
        return 0.0
    match = _SALARY_RE.match(cleaned)
    if match is None:
        raise ValueError(f"Salary '{text}' must be a number, optionally with a k/m suffix")
    return float(match.group("number")) * _SUFFIXES[match.group("suffix").lower()]


def parse_currency_symbol(text: str) -> str:
    """Return the stripped currency symbol, defaulting to "$"."""

    return text.strip() or "$"


__all__ = ["parse_currency_symbol", "parse_salary"]
