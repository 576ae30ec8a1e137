"""Data contracts for the per-period contribution solver."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from investcalc.schemas.projection import ProjectionFrequency


class SolveRequest(BaseModel):
    """Inputs for "what contribution hits this target" queries."""

    model_config = ConfigDict(extra="forbid")

    startBalance: float
    targetAmount: float
    periods: int
    roiPercentage: float = Field(..., description="Annual rate of return in percent.")
    frequency: ProjectionFrequency = "yearly"


class SolveResponse(BaseModel):
    amount: float = Field(..., description="Signed per-period amount; negative means withdraw.")
    direction: Literal["invest", "withdraw"]
    totalAmount: float = Field(..., description="Magnitude summed over all periods.")
    percentOfBalance: float
