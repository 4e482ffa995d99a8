import math

import pandas as pd
import pytest

from disaster_core.analysis.aggregate import by_category, by_region, by_year
from disaster_core.charts.bar import bar_chart
from disaster_core.charts.colors import PALETTE, ColorRegistry
from disaster_core.charts.layout import FRAME_HEIGHT, FRAME_WIDTH, HEIGHT, WIDTH, title_with_year
from disaster_core.charts.line import line_chart
from disaster_core.charts.pie import pie_chart, slice_labels, truncate_label
from disaster_core.state import get_filtered_records

from conftest import make_records


def _agg(pairs):
    return pd.DataFrame(pairs, columns=["key", "count"])


def test_frame_geometry():
    assert (WIDTH, HEIGHT) == (850, 380)
    assert (FRAME_WIDTH, FRAME_HEIGHT) == (960, 500)


def test_title_with_year():
    assert title_with_year("Chart", "all") == "Chart"
    assert title_with_year("Chart", 2020) == "Chart (2020)"


# Bar

def test_bar_chart_axes_and_hover(scenario_records):
    fig = bar_chart(by_region(scenario_records), ColorRegistry())
    bar = fig.data[0]

    assert list(bar.x) == ["TX", "CA"]
    assert list(bar.y) == [2, 1]
    assert tuple(fig.layout.yaxis.range) == (0, 2)
    assert fig.layout.xaxis.tickangle == -65
    assert fig.layout.xaxis.title.text == "States"
    assert fig.layout.yaxis.title.text == "Number of Disasters"
    assert "Disasters: %{y}" in bar.hovertemplate
    assert fig.layout.title.text == "<b>Top 20 States by Number of Disasters</b>"
    assert (fig.layout.width, fig.layout.height) == (960, 500)


def test_bar_chart_title_shows_selected_year(scenario_records):
    fig = bar_chart(by_region(get_filtered_records(scenario_records, 2020)), ColorRegistry(), 2020)
    assert fig.layout.title.text.endswith("(2020)</b>")


def test_bar_colors_follow_registry(scenario_records):
    reg = ColorRegistry()
    reg.color_for("CA")  # seen first in an earlier pass
    fig = bar_chart(by_region(scenario_records), reg)
    assert list(fig.data[0].marker.color) == [PALETTE[1], PALETTE[0]]


def test_bar_chart_empty_is_valid():
    fig = bar_chart(_agg([]), ColorRegistry(), 2099)
    assert len(fig.data[0].x or ()) == 0
    assert tuple(fig.layout.yaxis.range) == (0, 1)
    assert fig.layout.xaxis.title.text == "States"


# Line

def test_line_chart_curve_dots_and_ranges():
    recs = make_records([("TX", 2018, "Flood")] * 3 + [("TX", 2019, "Fire")] * 47 + [("CA", 2021, "Fire")] * 10)
    fig = line_chart(by_year(recs))

    curve, dots = fig.data
    assert curve.mode == "lines"
    assert list(dots.x) == [2018, 2019, 2021]
    assert list(dots.y) == [3, 47, 10]
    assert dots.marker.size == 10
    assert tuple(fig.layout.xaxis.range) == (2018, 2021)
    assert fig.layout.xaxis.tickformat == "d"
    assert tuple(fig.layout.yaxis.range) == (0, 50)
    assert fig.layout.xaxis.title.text == "Year"
    assert fig.layout.title.text == "<b>Disasters Over Time</b>"


def test_line_chart_highlights_selected_year(scenario_records):
    fig = line_chart(by_year(scenario_records), "2021")
    assert len(fig.data) == 3
    ring = fig.data[2]
    assert list(ring.x) == [2021]
    assert list(ring.y) == [1]
    assert ring.marker.symbol == "circle-open"
    assert ring.marker.size == 20


def test_line_chart_no_ring_for_year_without_data(scenario_records):
    fig = line_chart(by_year(scenario_records), 2099)
    assert len(fig.data) == 2


def test_line_chart_same_data_for_any_year(scenario_records):
    agg = by_year(scenario_records)
    a = line_chart(agg, "all")
    b = line_chart(agg, 2020)
    assert list(a.data[1].x) == list(b.data[1].x)
    assert list(a.data[1].y) == list(b.data[1].y)


def test_line_chart_empty_is_valid():
    fig = line_chart(_agg([]), "all")
    assert all(len(t.x or ()) == 0 for t in fig.data)
    assert tuple(fig.layout.yaxis.range) == (0, 1)


# Pie

def test_truncate_label():
    assert truncate_label("Flood") == "Flood"
    assert truncate_label("Severe Storm(s)") == "Severe Storm..."
    assert truncate_label("x" * 12) == "x" * 12


def test_pie_chart_wedges_in_aggregate_order():
    agg = _agg([("Severe Storm(s)", 6), ("Flood", 3), ("Fire", 1)])
    fig = pie_chart(agg, ColorRegistry())
    pie = fig.data[0]

    assert list(pie.labels) == ["Severe Storm(s)", "Flood", "Fire"]
    assert list(pie.values) == [6, 3, 1]
    assert pie.sort is False
    assert pie.direction == "clockwise"
    assert list(pie.customdata) == [60, 30, 10]
    assert "Count: %{value}" in pie.hovertemplate

    texts = [a.text for a in fig.layout.annotations]
    assert texts[0].startswith("<b>Severe Storm...</b>")
    assert "60%" in texts[0]
    assert len(fig.layout.shapes) == 3


def test_pie_label_anchor_by_mid_angle():
    # first wedge spans [0, pi) -> right side; second spans [pi, 2pi) -> left side
    labels = slice_labels(_agg([("Flood", 1), ("Fire", 1)]))
    assert labels[0].mid_angle == pytest.approx(math.pi / 2)
    assert labels[0].anchor == "left"
    assert labels[1].anchor == "right"
    assert labels[0].points[-1][0] > WIDTH / 2 > labels[1].points[-1][0]


def test_pie_slice_domain_matches_radius():
    fig = pie_chart(_agg([("Flood", 1)]), ColorRegistry())
    dx = fig.data[0].domain.x
    dy = fig.data[0].domain.y
    # radius = min(850, 380) / 2 * 0.8 = 152
    assert (dx[1] - dx[0]) * WIDTH == pytest.approx(304)
    assert (dy[1] - dy[0]) * HEIGHT == pytest.approx(304)


def test_pie_percentages_close_to_100(scenario_records):
    labels = slice_labels(by_category(scenario_records))
    assert abs(sum(s.percent for s in labels) - 100) <= len(labels)


def test_pie_chart_empty_is_valid():
    fig = pie_chart(_agg([]), ColorRegistry(), 2099)
    assert len(fig.data) == 0
    assert len(fig.layout.annotations) == 0
    assert fig.layout.title.text == "<b>Distribution of Disaster Types (2099)</b>"


def test_pie_wedges_drawn_semi_transparent():
    fig = pie_chart(_agg([("Flood", 2), ("Fire", 1)]), ColorRegistry())
    assert fig.data[0].opacity == 0.7
