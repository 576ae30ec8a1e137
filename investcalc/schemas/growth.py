"""Data contracts for the historical growth series."""

from __future__ import annotations

import datetime
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field

Frequency = Literal["once", "daily", "weekly", "monthly"]


class GrowthConfig(BaseModel):
    """Inputs describing a lump-sum or recurring investment."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    investmentAmount: float = Field(1000.0, description="Principal (once) or per-period contribution.")
    roiPercentage: float = Field(10.0, description="Annual rate of return in percent, e.g. 10 for 10%.")
    duration: int = Field(12, ge=0, description="Investment duration in months.")
    frequency: Frequency = "monthly"
    startDate: datetime.date = datetime.date(2026, 1, 1)
    showTotal: bool = Field(True, description="displayValue mirrors currentValue when true, profit otherwise.")
    enableInflation: bool = False
    inflationRate: float = Field(3.0, description="Annual inflation in percent.")

    @property
    def annual_rate(self) -> float:
        return self.roiPercentage / 100

    @property
    def annual_inflation(self) -> float:
        return self.inflationRate / 100


class GrowthPoint(BaseModel):
    """Single row of the historical growth series."""

    model_config = ConfigDict(frozen=True)

    period: int = Field(..., ge=0)
    date: datetime.date
    totalInvested: float
    currentValue: float
    profit: float
    displayValue: float


class GrowthSummary(BaseModel):
    totalInvested: float
    currentValue: float
    profit: float
    totalReturn: float = Field(..., description="Profit as a percentage of total invested.")


class GrowthResponse(BaseModel):
    series: List[GrowthPoint]
    summary: GrowthSummary
