"""Data contracts for the projection endpoints."""

from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from zinsrechner.core.calculator import Projection
from zinsrechner.core.inputs import (
    MAX_AMOUNT,
    MAX_INTEREST_RATE,
    MAX_YEARS,
    MIN_AMOUNT,
    MIN_INTEREST_RATE,
    MIN_YEARS,
)
from zinsrechner.core.projection import ScenarioInputs


class ScenarioPayload(BaseModel):
    """Scenario as the form submits it, checked against the slider ranges."""

    model_config = ConfigDict(extra="forbid")

    initialCapital: float = Field(..., ge=MIN_AMOUNT, le=MAX_AMOUNT, allow_inf_nan=False)
    monthlyContribution: float = Field(..., ge=MIN_AMOUNT, le=MAX_AMOUNT, allow_inf_nan=False)
    years: int = Field(..., ge=MIN_YEARS, le=MAX_YEARS)
    interestRate: float = Field(
        ...,
        ge=MIN_INTEREST_RATE,
        le=MAX_INTEREST_RATE,
        allow_inf_nan=False,
        description="Annual nominal rate in percent (8.6 for 8.6%).",
    )

    def to_inputs(self) -> ScenarioInputs:
        return ScenarioInputs(
            initial_capital=self.initialCapital,
            monthly_contribution=self.monthlyContribution,
            years=self.years,
            interest_rate=self.interestRate,
        )


class ProjectionRequest(ScenarioPayload):
    locale: Optional[Literal["de", "en"]] = None


class EditRequest(BaseModel):
    """One form edit applied on top of the last valid scenario."""

    model_config = ConfigDict(extra="forbid")

    scenario: ScenarioPayload
    field: str
    value: Any = None
    locale: Optional[Literal["de", "en"]] = None


class EditResponse(BaseModel):
    accepted: bool
    projection: Projection


class TickIntervalResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    years: int
    tick_interval: int = Field(alias="tickInterval")


class DefaultsResponse(BaseModel):
    scenario: ScenarioPayload
    locale: str
    locales: List[str]
