from __future__ import annotations

from math import isclose

import pytest

from investcalc.core.periods import round_currency
from investcalc.core.planner import projection_periods, run_plan
from investcalc.core.solver import annuity_payment
from investcalc.schemas.growth import GrowthConfig
from investcalc.schemas.projection import (
    AllInStrategy,
    CustomStrategy,
    ProjectionSettings,
    ShieldValueStrategy,
)


def lump_sum() -> GrowthConfig:
    return GrowthConfig(investmentAmount=1000, roiPercentage=10, duration=12, frequency="once")


def test_bootstrap_uses_principal_while_custom_solves_from_final_value():
    """
    Period 1 cashes in the $1000 principal, but the custom strategy solves
    from the $1100 the historical series ended at. Both are observable.
    """
    settings = ProjectionSettings(
        frequency="yearly", duration=5, strategy=CustomStrategy(targetAmount=5000)
    )

    result = run_plan(lump_sum(), settings)

    assert result.startingBalance == 1000
    assert result.referenceBalance == 1100 == result.series[-1].currentValue
    assert result.projections[0].newCash == 1000
    assert isclose(result.perPeriodAmount, annuity_payment(1100.0, 5000.0, 5, 0.10))
    # the reported amount is the one every custom period actually used
    assert all(row.newCash == round_currency(result.perPeriodAmount) for row in result.projections[1:])


def test_all_in_plan_matches_yearly_compounding():
    result = run_plan(lump_sum(), ProjectionSettings(frequency="yearly", duration=2, strategy=AllInStrategy()))

    assert [row.endValue for row in result.projections] == [1100.0, 1210.0]
    assert result.projectionSummary.finalValue == 1210
    assert result.perPeriodAmount is None
    assert result.description == "Just let it grow. $1,100 stays in, no extra cash needed, no withdrawals."


def test_shield_value_ignores_the_inflation_toggle():
    config = GrowthConfig(
        investmentAmount=1000,
        roiPercentage=10,
        duration=12,
        frequency="once",
        enableInflation=False,
        inflationRate=3,
    )

    result = run_plan(config, ProjectionSettings(frequency="yearly", duration=2, strategy=ShieldValueStrategy()))

    assert result.projections[1].newCash == 33  # 1100 * 3%


def test_projection_rate_follows_projection_frequency():
    result = run_plan(lump_sum(), ProjectionSettings(frequency="monthly", duration=1))

    first = result.projections[0]
    assert first.profit == 8  # 1000 * 10% / 12
    assert first.endValue == 1008


@pytest.mark.parametrize(
    "frequency, expected",
    [("yearly", 10), ("monthly", 12), ("weekly", 4), ("daily", 30)],
)
def test_default_projection_durations(frequency, expected):
    settings = ProjectionSettings(frequency=frequency)

    assert projection_periods(settings) == expected
    assert len(run_plan(lump_sum(), settings).projections) == expected


def test_explicit_duration_wins_over_default():
    assert projection_periods(ProjectionSettings(frequency="daily", duration=3)) == 3
