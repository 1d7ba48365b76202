"""Helpers for the chart layer: which rows to draw, which years to label, axis and tooltip text."""

from __future__ import annotations

import math
from enum import Enum
from typing import List, Sequence

from pydantic import BaseModel, ConfigDict, Field

from zinsrechner.core.formatting import Locale, format_currency
from zinsrechner.core.projection import YearlyDatum, tick_interval

# y-axis values per chart, spread evenly from 0 to the largest value
Y_AXIS_TICK_COUNT = 5

_TOOLTIP_WORDS = {
    "de": {
        "year": "Jahr",
        "contributions": "Einzahlungen",
        "interest": "Zinsen",
        "total": "Gesamt",
        "capital": "Gesamtkapital",
    },
    "en": {
        "year": "Year",
        "contributions": "Contributions",
        "interest": "Interest",
        "total": "Total",
        "capital": "Total capital",
    },
}


class ChartKind(str, Enum):
    BAR = "bar"
    LINE = "line"


class AxisLabel(BaseModel):
    value: float
    label: str


class ChartData(BaseModel):
    """One chart tab: its rows, labelled years, y-axis labels and per-row tooltip lines."""

    model_config = ConfigDict(populate_by_name=True)

    kind: ChartKind
    data: List[YearlyDatum]
    ticks: List[int]
    y_axis: List[AxisLabel] = Field(alias="yAxis")
    tooltips: List[List[str]]


def axis_ticks(years: int, include_zero: bool = True) -> List[int]:
    """Years that get a label: multiples of the tick interval, plus the last year."""
    interval = tick_interval(years)
    ticks = []
    for year in range(0, max(years, 0) + 1):
        if year == 0 and not include_zero:
            continue
        if year % interval == 0 or year == years:
            ticks.append(year)
    return ticks


def chart_series(data: Sequence[YearlyDatum], kind: ChartKind) -> List[YearlyDatum]:
    # the stacked bar chart has nothing to stack in year 0
    if kind == ChartKind.BAR:
        return [row for row in data if row.year > 0]
    return list(data)


def format_axis_label(value: float, kind: ChartKind) -> str:
    if kind == ChartKind.BAR:
        if value >= 1e6:
            return f"{value / 1e6:.0f} Mio."
        if value >= 1e3:
            return f"{value / 1e3:.0f} Tsd."
        return f"{value:g}"

    if value >= 1e12:
        return f"{value / 1e12:.1f}B"
    if value >= 1e9:
        return f"{value / 1e9:.1f}Mrd"
    if value >= 1e6:
        return f"{value / 1e6:.1f}Mio"
    if value >= 1e3:
        return f"{value / 1e3:.1f}k"
    return f"{value:g}"


def y_axis_labels(data: Sequence[YearlyDatum], kind: ChartKind) -> List[AxisLabel]:
    values = [max(row.total_amount, row.contributions) for row in data]
    top = max((v for v in values if math.isfinite(v)), default=0)
    if top <= 0:
        return [AxisLabel(value=0, label=format_axis_label(0, kind))]

    step = top / (Y_AXIS_TICK_COUNT - 1)
    labels = []
    for index in range(Y_AXIS_TICK_COUNT):
        value = step * index
        labels.append(AxisLabel(value=value, label=format_axis_label(value, kind)))
    return labels


def tooltip_lines(row: YearlyDatum, kind: ChartKind, locale: Locale = "de") -> List[str]:
    """Hover text for one year, in the order the chart shows its series."""
    words = _TOOLTIP_WORDS[locale]
    lines = [
        f"{words['year']} {row.year}",
        f"{words['contributions']}: {format_currency(row.contributions, locale)}",
    ]
    if kind == ChartKind.BAR:
        lines.append(f"{words['interest']}: {format_currency(row.interest, locale)}")
        lines.append(f"{words['total']}: {format_currency(row.contributions + row.interest, locale)}")
    else:
        lines.append(f"{words['capital']}: {format_currency(row.total_amount, locale)}")
        lines.append(f"{words['interest']}: {format_currency(row.interest, locale)}")
    return lines


def build_chart(data: Sequence[YearlyDatum], years: int, kind: ChartKind, locale: Locale = "de") -> ChartData:
    rows = chart_series(data, kind)
    return ChartData(
        kind=kind,
        data=rows,
        ticks=axis_ticks(years, include_zero=kind == ChartKind.LINE),
        y_axis=y_axis_labels(rows, kind),
        tooltips=[tooltip_lines(row, kind, locale) for row in rows],
    )
