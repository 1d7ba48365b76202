from __future__ import annotations

import logging
import math
from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field


logger = logging.getLogger(__name__)


class ScenarioInputs(BaseModel):
    """The four values a projection is computed from.

    No range checks here: clamping to the UI ranges is the caller's job
    (see ``core.inputs`` and the request schemas).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    initial_capital: float = Field(alias="initialCapital")
    monthly_contribution: float = Field(alias="monthlyContribution")
    years: int
    interest_rate: float = Field(alias="interestRate")  # percent, 8.6 == 8.6%


class YearlyDatum(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    year: int
    # float only when the inputs overflow (inf or nan)
    total_amount: Union[int, float] = Field(alias="totalAmount")
    contributions: Union[int, float]
    interest: Union[int, float]


def round_half_up(value: float) -> Union[int, float]:
    """Round to the nearest whole unit, halves toward +inf (not banker's rounding).

    Non-finite values come back unchanged.
    """
    if not math.isfinite(value):
        return value
    return int(math.floor(value + 0.5))


def compound_factor(rate: float, year: int) -> float:
    """(1 + rate) ** year, saturating to +-inf instead of raising OverflowError."""
    base = 1 + rate
    try:
        return base ** year
    except OverflowError:
        return -math.inf if base < 0 and year % 2 else math.inf


def project(
    initial_capital: float,
    monthly_contribution: float,
    years: int,
    interest_rate: float,
) -> List[YearlyDatum]:
    """
    Year-by-year compound growth for year 0..years (inclusive).

    Per year:
      1) principal compounded annually: P * (1 + r)^year
      2) contributions as an ordinary annuity paid at year end:
         C * ((1 + r)^year - 1) / r, or C * year when r == 0
      3) round the sum once; interest is total minus rounded contributions
    """
    r = interest_rate / 100
    annual_contribution = monthly_contribution * 12

    rows: List[YearlyDatum] = []
    for year in range(0, max(years, 0) + 1):
        growth = compound_factor(r, year)
        principal_with_interest = initial_capital * growth

        contribution_with_interest = 0.0
        if year > 0:
            if r == 0:
                contribution_with_interest = annual_contribution * year
            else:
                contribution_with_interest = annual_contribution * ((growth - 1) / r)

        total_amount = round_half_up(principal_with_interest + contribution_with_interest)
        contributions = round_half_up(initial_capital + year * annual_contribution)

        rows.append(
            YearlyDatum(
                year=year,
                total_amount=total_amount,
                contributions=contributions,
                interest=total_amount - contributions,
            )
        )

    logger.debug(
        "projected %d years at %s%% (final total %s)",
        years,
        interest_rate,
        rows[-1].total_amount,
    )
    return rows


def project_scenario(inputs: ScenarioInputs) -> List[YearlyDatum]:
    return project(
        initial_capital=inputs.initial_capital,
        monthly_contribution=inputs.monthly_contribution,
        years=inputs.years,
        interest_rate=inputs.interest_rate,
    )


def tick_interval(years: int) -> int:
    """Spacing, in years, between labelled points on the chart's time axis."""
    if years <= 10:
        return 1
    if years <= 20:
        return 2
    if years <= 50:
        return 5
    if years <= 100:
        return 10
    return 20


__all__ = [
    "ScenarioInputs",
    "YearlyDatum",
    "round_half_up",
    "compound_factor",
    "project",
    "project_scenario",
    "tick_interval",
]
