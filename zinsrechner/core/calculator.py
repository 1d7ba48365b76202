from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from zinsrechner.core.chart import ChartData, ChartKind, build_chart
from zinsrechner.core.formatting import Locale, format_currency, format_rate
from zinsrechner.core.projection import (
    ScenarioInputs,
    YearlyDatum,
    project_scenario,
    tick_interval,
)


class Projection(BaseModel):
    """Everything the frontend renders for one scenario."""

    model_config = ConfigDict(populate_by_name=True)

    scenario: ScenarioInputs
    data: List[YearlyDatum]
    final: YearlyDatum
    summary: str
    tick_interval: int = Field(alias="tickInterval")
    charts: List[ChartData]


def summarize(scenario: ScenarioInputs, final_datum: YearlyDatum, locale: Locale = "de") -> str:
    monthly = format_currency(scenario.monthly_contribution, locale)
    rate = format_rate(scenario.interest_rate, locale)
    total = format_currency(final_datum.total_amount, locale)
    contributions = format_currency(final_datum.contributions, locale)
    interest = format_currency(final_datum.interest, locale)

    if locale == "en":
        return (
            f"If you invest {monthly} a month for {scenario.years} years at {rate}%, "
            f"you end up with a final capital of {total}. "
            f"That is made up of {contributions} in contributions "
            f"and {interest} in interest or investment income."
        )

    return (
        f"Wenn du über {scenario.years} Jahre, monatlich {monthly} zu {rate}% investierst, "
        f"kommst du am Ende auf ein Endkapital von {total}. "
        f"Diese setzen sich zusammen aus {contributions} Einzahlungen "
        f"und {interest} an Zinsen oder Kapitalerträgen."
    )


def build_projection(scenario: ScenarioInputs, locale: Locale = "de") -> Projection:
    """Recompute the whole projection from scratch and derive the summary and chart data."""
    data = project_scenario(scenario)
    final = data[-1]
    return Projection(
        scenario=scenario,
        data=data,
        final=final,
        summary=summarize(scenario, final, locale),
        tick_interval=tick_interval(scenario.years),
        charts=[build_chart(data, scenario.years, kind, locale) for kind in ChartKind],
    )
