"""Frequency tables, per-period rates, calendar stepping and currency rounding."""

from __future__ import annotations

import math
from datetime import date
from typing import Dict

from dateutil.relativedelta import relativedelta

# contribution frequencies that compound every period
PERIODS_PER_YEAR: Dict[str, int] = {
    "daily": 365,
    "weekly": 52,
    "monthly": 12,
}

# divisor applied to an annual rate for each projection frequency
RATE_DIVISORS: Dict[str, int] = {
    "yearly": 1,
    "monthly": 12,
    "weekly": 52,
    "daily": 365,
}

DEFAULT_PROJECTION_DURATIONS: Dict[str, int] = {
    "yearly": 10,
    "monthly": 12,
    "weekly": 4,
    "daily": 30,
}


def per_period_rate(annual_rate: float, frequency: str) -> float:
    """Split an annual rate (decimal) evenly across the periods of a year.

    Unknown frequencies fall back to the annual rate itself.
    """
    return annual_rate / RATE_DIVISORS.get(frequency, 1)


def add_periods(start: date, count: int, frequency: str) -> date:
    """Step `count` periods of `frequency` forward from `start`.

    Months use calendar arithmetic, so Jan 31 + 1 month lands on Feb 28/29.
    """
    if frequency == "daily":
        return start + relativedelta(days=count)
    if frequency == "weekly":
        return start + relativedelta(weeks=count)
    if frequency == "yearly":
        return start + relativedelta(years=count)
    return start + relativedelta(months=count)


def round_currency(value: float) -> float:
    """Round half-up to whole currency units (2.5 -> 3, -2.5 -> -2); inf/nan pass through."""
    if not math.isfinite(value):
        return value
    return float(math.floor(value + 0.5))


def format_currency(value: float) -> str:
    """The one display format: `$1,234` (negatives as `$-1,234`)."""
    return f"${round_currency(value):,.0f}"
