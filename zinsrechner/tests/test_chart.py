from __future__ import annotations

import pytest

from zinsrechner.core.chart import (
    ChartKind,
    axis_ticks,
    build_chart,
    chart_series,
    format_axis_label,
    tooltip_lines,
    y_axis_labels,
)
from zinsrechner.core.projection import project


def test_line_ticks_include_zero_and_last_year():
    assert axis_ticks(30) == [0, 5, 10, 15, 20, 25, 30]
    assert axis_ticks(7) == [0, 1, 2, 3, 4, 5, 6, 7]


def test_bar_ticks_skip_year_zero():
    assert axis_ticks(30, include_zero=False) == [5, 10, 15, 20, 25, 30]


def test_last_year_is_labelled_even_off_interval():
    assert axis_ticks(23) == [0, 5, 10, 15, 20, 23]
    assert axis_ticks(122, include_zero=False) == [20, 40, 60, 80, 100, 120, 122]


def test_bar_series_drops_year_zero():
    rows = project(10000, 250, 5, 3)

    bar = chart_series(rows, ChartKind.BAR)
    line = chart_series(rows, ChartKind.LINE)

    assert [row.year for row in bar] == [1, 2, 3, 4, 5]
    assert line == rows


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "0"),
        (999, "999"),
        (25_000, "25 Tsd."),
        (3_000_000, "3 Mio."),
    ],
)
def test_bar_axis_labels(value, expected):
    assert format_axis_label(value, ChartKind.BAR) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (500, "500"),
        (12_300, "12.3k"),
        (4_200_000, "4.2Mio"),
        (7_700_000_000, "7.7Mrd"),
        (1.5e12, "1.5B"),
    ],
)
def test_line_axis_labels(value, expected):
    assert format_axis_label(value, ChartKind.LINE) == expected


def test_bar_tooltip_matches_stacked_total():
    row = project(10000, 250, 30, 8.6)[30]

    assert tooltip_lines(row, ChartKind.BAR) == [
        "Jahr 30",
        "Einzahlungen: 100.000,00 €",
        "Zinsen: 398.431,00 €",
        "Gesamt: 498.431,00 €",
    ]


def test_line_tooltip_lists_total_capital():
    row = project(10000, 250, 30, 8.6)[30]

    assert tooltip_lines(row, ChartKind.LINE, "en") == [
        "Year 30",
        "Contributions: €100,000.00",
        "Total capital: €498,431.00",
        "Interest: €398,431.00",
    ]


def test_y_axis_spreads_evenly_up_to_largest_value():
    rows = project(0, 1000, 10, 0)

    labels = y_axis_labels(rows, ChartKind.BAR)

    assert [label.value for label in labels] == [0, 30000, 60000, 90000, 120000]
    assert [label.label for label in labels] == ["0", "30 Tsd.", "60 Tsd.", "90 Tsd.", "120 Tsd."]


def test_y_axis_for_empty_or_zero_data():
    assert [label.label for label in y_axis_labels([], ChartKind.LINE)] == ["0"]
    assert [label.value for label in y_axis_labels(project(0, 0, 5, 5), ChartKind.LINE)] == [0]


def test_build_chart_bundles_rows_ticks_and_tooltips():
    rows = project(10000, 250, 12, 5)

    bar = build_chart(rows, 12, ChartKind.BAR)
    line = build_chart(rows, 12, ChartKind.LINE)

    assert [row.year for row in bar.data] == list(range(1, 13))
    assert bar.ticks == [2, 4, 6, 8, 10, 12]
    assert len(bar.tooltips) == len(bar.data)
    assert line.ticks == [0, 2, 4, 6, 8, 10, 12]
    assert line.tooltips[0][0] == "Jahr 0"
