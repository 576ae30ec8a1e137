"""Closed-form solver for the constant per-period contribution that reaches a target."""

from __future__ import annotations

import logging
import math

from investcalc.core.periods import per_period_rate

logger = logging.getLogger(__name__)


def annuity_payment(start_balance: float, target_amount: float, periods: int, rate: float) -> float:
    """
    Per-period cash flow C such that compounding `start_balance` for `periods`
    periods at `rate`, with C added at the end of every period, lands on
    `target_amount`:

        FV = P * (1+r)^n + C * ((1+r)^n - 1) / r

    A negative result is a withdrawal of that size each period.
    Returns 0 when there is nothing to project (no periods or no balance).
    """
    if periods <= 0 or start_balance <= 0:
        return 0.0
    if rate == 0:
        return (target_amount - start_balance) / periods

    growth_factor = (1 + rate) ** periods
    amount_needed = target_amount - start_balance * growth_factor
    annuity_factor = (growth_factor - 1) / rate
    return amount_needed / annuity_factor


def solve_per_period_amount(
    start_balance: float,
    target_amount: float,
    periods: int,
    annual_rate: float,
    frequency: str,
) -> float:
    """Same as `annuity_payment`, taking an annual rate (decimal) and a projection frequency."""
    amount = annuity_payment(start_balance, target_amount, periods, per_period_rate(annual_rate, frequency))
    logger.debug(
        "solved per-period amount %.4f (start=%s target=%s periods=%s frequency=%s)",
        amount,
        start_balance,
        target_amount,
        periods,
        frequency,
    )
    return amount


def percent_of_balance(amount: float, start_balance: float) -> float:
    """Express a per-period amount as a percentage of the starting balance (one decimal)."""
    if start_balance <= 0:
        return 0.0
    return math.floor(amount / start_balance * 1000 + 0.5) / 10
