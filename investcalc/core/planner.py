"""Two-stage plan: historical growth series, then a strategy-driven forward projection."""

from __future__ import annotations

import logging

from investcalc.core.growth import generate_growth_series, summarize_growth
from investcalc.core.periods import DEFAULT_PROJECTION_DURATIONS, per_period_rate
from investcalc.core.projection import custom_per_period_amount, project_forward, summarize_projection
from investcalc.core.strategies import describe_strategy
from investcalc.schemas.growth import GrowthConfig
from investcalc.schemas.projection import PlanResponse, ProjectionSettings

logger = logging.getLogger(__name__)


def projection_periods(settings: ProjectionSettings) -> int:
    if settings.duration is not None:
        return settings.duration
    return DEFAULT_PROJECTION_DURATIONS[settings.frequency]


def run_plan(config: GrowthConfig, settings: ProjectionSettings) -> PlanResponse:
    """
    Compute the historical series for `config` and extend it with `settings`.

    Period 1 of the projection cashes in the original investment amount,
    while the custom strategy solves from the final (rounded) value of the
    historical series. Both numbers are returned so callers can see which
    one fed which stage.
    """
    series = generate_growth_series(config)
    summary = summarize_growth(series)

    periods = projection_periods(settings)
    rate = per_period_rate(config.annual_rate, settings.frequency)
    # shield-value always tracks the configured inflation, toggle or not
    shield_inflation = per_period_rate(config.annual_inflation, settings.frequency)

    starting_balance = config.investmentAmount
    reference_balance = series[-1].currentValue
    strategy = settings.strategy

    per_period_amount = None
    if strategy.strategy == "custom":
        per_period_amount = custom_per_period_amount(strategy, reference_balance, periods, rate)

    projections = project_forward(
        starting_balance=starting_balance,
        original_principal=config.investmentAmount,
        strategy=strategy,
        per_period_rate=rate,
        shield_inflation_rate=shield_inflation,
        periods=periods,
        reference_balance=reference_balance,
        custom_amount=per_period_amount,
    )

    description = describe_strategy(
        strategy,
        balance=summary.currentValue,
        principal=config.investmentAmount,
        profit=summary.profit,
        inflation_rate=config.inflationRate,
        per_period_amount=per_period_amount or 0.0,
        periods=periods,
    )

    logger.info(
        "plan computed: %d growth points, %d projection periods, strategy=%s",
        len(series),
        len(projections),
        strategy.strategy,
    )

    return PlanResponse(
        series=series,
        summary=summary,
        startingBalance=starting_balance,
        referenceBalance=reference_balance,
        projections=projections,
        projectionSummary=summarize_projection(projections),
        perPeriodAmount=per_period_amount,
        description=description,
    )
