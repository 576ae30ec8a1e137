"""Historical ("current") growth series for a lump-sum or recurring investment."""

from __future__ import annotations

import logging
from typing import List

from investcalc.core.periods import PERIODS_PER_YEAR, add_periods, round_currency
from investcalc.schemas.growth import GrowthConfig, GrowthPoint, GrowthSummary

logger = logging.getLogger(__name__)


def _make_point(config: GrowthConfig, period: int, step_frequency: str, invested: float, value: float) -> GrowthPoint:
    total_invested = round_currency(invested)
    current_value = round_currency(value)
    profit = current_value - total_invested
    return GrowthPoint(
        period=period,
        date=add_periods(config.startDate, period, step_frequency),
        totalInvested=total_invested,
        currentValue=current_value,
        profit=profit,
        displayValue=current_value if config.showTotal else profit,
    )


def _lump_sum_series(config: GrowthConfig) -> List[GrowthPoint]:
    """
    One-time investment, one point per elapsed month.

    Growth is simple interest on elapsed time, not compounded:
        value(i) = principal * (1 + rate * i/12) * (1 - inflation * i/12)
    with the inflation factor only applied when inflation is enabled.
    """
    principal = config.investmentAmount
    rows: List[GrowthPoint] = []
    for month in range(config.duration + 1):
        elapsed_years = month / 12
        if month == 0:
            value = principal
        else:
            inflation_adjustment = (
                1 - config.annual_inflation * elapsed_years if config.enableInflation else 1.0
            )
            value = principal * (1 + config.annual_rate * elapsed_years) * inflation_adjustment
        rows.append(_make_point(config, month, "monthly", principal, value))
    return rows


def _recurring_series(config: GrowthConfig) -> List[GrowthPoint]:
    """
    Fixed contribution every period, compounded per period.

    Order of operations (per period after period 0):
      1) Add the contribution.
      2) Grow the balance by one period's rate.
      3) Deflate by one period's inflation (when enabled).
    """
    periods_per_year = PERIODS_PER_YEAR[config.frequency]
    # floor(duration/12 * periods_per_year), kept in integers
    total_periods = config.duration * periods_per_year // 12
    rate_per_period = config.annual_rate / periods_per_year
    inflation_per_period = config.annual_inflation / periods_per_year

    invested = 0.0
    value = 0.0
    rows: List[GrowthPoint] = []
    for period in range(total_periods + 1):
        if period > 0:
            invested += config.investmentAmount
            value = (value + config.investmentAmount) * (1 + rate_per_period)
            if config.enableInflation:
                value /= 1 + inflation_per_period
        rows.append(_make_point(config, period, config.frequency, invested, value))
    return rows


def generate_growth_series(config: GrowthConfig) -> List[GrowthPoint]:
    """Build the full period-0..end series for `config`."""
    if config.frequency == "once":
        rows = _lump_sum_series(config)
    else:
        rows = _recurring_series(config)
    logger.debug("growth series: frequency=%s points=%d", config.frequency, len(rows))
    return rows


def summarize_growth(series: List[GrowthPoint]) -> GrowthSummary:
    final = series[-1]
    total_return = round(final.profit / final.totalInvested * 100, 2) if final.totalInvested else 0.0
    return GrowthSummary(
        totalInvested=final.totalInvested,
        currentValue=final.currentValue,
        profit=final.profit,
        totalReturn=total_return,
    )
