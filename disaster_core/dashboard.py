# disaster_core/dashboard.py
from __future__ import annotations

import logging

import pandas as pd
import plotly.graph_objects as go

from disaster_core.analysis.aggregate import by_category, by_region, by_year
from disaster_core.charts.bar import bar_chart
from disaster_core.charts.line import line_chart
from disaster_core.charts.pie import pie_chart
from disaster_core.loaders.disasters import observed_years
from disaster_core.state import ALL_YEARS, AppState

logger = logging.getLogger(__name__)

CHART_LABELS = {
    "bar": "Bar Chart (Top States)",
    "line": "Line Chart (Over Time)",
    "pie": "Pie Chart (Disaster Types)",
}


def year_options(records: pd.DataFrame) -> list:
    return [ALL_YEARS] + observed_years(records)


def year_label(option) -> str:
    return "All years" if option == ALL_YEARS else str(option)


def render_chart(state: AppState, *, top_n: int = 20) -> go.Figure:
    """
    Build a fresh figure for the current filter state.
    The line view always aggregates the full record set; the other two use the filtered rows.
    """
    kind = state.filters.chart_kind
    year = state.filters.year
    logger.debug("Rendering %s chart for year=%s", kind, year)

    if kind == "bar":
        return bar_chart(by_region(state.filtered_records(), top_n=top_n), state.colors, year, top_n=top_n)
    if kind == "line":
        return line_chart(by_year(state.records), year)
    if kind == "pie":
        return pie_chart(by_category(state.filtered_records()), state.colors, year)
    raise ValueError(f"Unknown chart kind: {kind!r}")
