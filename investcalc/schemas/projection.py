"""Data contracts for the forward strategy projection."""

from __future__ import annotations

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from investcalc.schemas.growth import GrowthConfig, GrowthPoint, GrowthSummary

ProjectionFrequency = Literal["yearly", "monthly", "weekly", "daily"]


# -----------------------------
# Strategy variants
# -----------------------------


class _Strategy(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class DoubleStrategy(_Strategy):
    strategy: Literal["2x"] = "2x"


class RepeatStrategy(_Strategy):
    strategy: Literal["repeat"] = "repeat"


class AllInStrategy(_Strategy):
    strategy: Literal["all-in"] = "all-in"


class DoubleDownStrategy(_Strategy):
    strategy: Literal["double-down"] = "double-down"


class ShieldValueStrategy(_Strategy):
    strategy: Literal["shield-value"] = "shield-value"


class LevelUpStrategy(_Strategy):
    strategy: Literal["level-up"] = "level-up"
    levelUpAmount: float = Field(50.0, description="Fixed cash added every period.")


class PayYourselfStrategy(_Strategy):
    strategy: Literal["pay-yourself"] = "pay-yourself"


class CapitalProtectStrategy(_Strategy):
    strategy: Literal["capital-protect"] = "capital-protect"


class TakeSalaryStrategy(_Strategy):
    strategy: Literal["take-salary"] = "take-salary"
    salaryAmount: float = Field(100.0, description="Fixed withdrawal taken every period.")


class CustomStrategy(_Strategy):
    strategy: Literal["custom"] = "custom"
    targetAmount: float = Field(50000.0, description="Balance to reach by the last period.")


StrategyConfig = Annotated[
    Union[
        DoubleStrategy,
        RepeatStrategy,
        AllInStrategy,
        DoubleDownStrategy,
        ShieldValueStrategy,
        LevelUpStrategy,
        PayYourselfStrategy,
        CapitalProtectStrategy,
        TakeSalaryStrategy,
        CustomStrategy,
    ],
    Field(discriminator="strategy"),
]


# -----------------------------
# Projection records
# -----------------------------


class ProjectionSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    frequency: ProjectionFrequency = "yearly"
    # None => default duration for the chosen frequency
    duration: Optional[int] = Field(default=None, ge=0)
    strategy: StrategyConfig = Field(default_factory=AllInStrategy)


class ProjectionPoint(BaseModel):
    """One period of the forward projection (values rounded for output)."""

    model_config = ConfigDict(frozen=True)

    period: int = Field(..., ge=1)
    startValue: float
    newCash: float
    totalInvested: float  # start + cash in, before growth
    profit: float  # growth earned this period
    afterGrowth: float  # value after growth, before cash out
    cashOut: float
    endValue: float


class ProjectionSummary(BaseModel):
    totalCashOut: float
    totalNewCash: float
    totalProfit: float
    finalValue: float
    netCashFlow: float


class PlanRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    growth: GrowthConfig = Field(default_factory=GrowthConfig)
    projection: ProjectionSettings = Field(default_factory=ProjectionSettings)


class PlanResponse(BaseModel):
    series: List[GrowthPoint]
    summary: GrowthSummary
    # bootstrap cash injected in period 1 vs. balance the custom solver starts from
    startingBalance: float
    referenceBalance: float
    projections: List[ProjectionPoint]
    projectionSummary: ProjectionSummary
    perPeriodAmount: Optional[float] = None
    description: str
