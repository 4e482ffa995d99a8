from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from disaster_core.analysis.scales import monotone_curve, nice_upper_bound
from disaster_core.charts.layout import (
    ACCENT,
    AXIS_TITLE_COUNT,
    HIGHLIGHT_COLOR,
    LINE_COLOR,
    base_figure,
)
from disaster_core.state import ALL_YEARS, coerce_year

LINE_TITLE = "Disasters Over Time"
DOT_RADIUS = 5
RING_RADIUS = 10


def line_chart(agg: pd.DataFrame, year=ALL_YEARS) -> go.Figure:
    """
    Disasters per year (agg from by_year over all records).
    A selected year gets an extra ring around its point when it has data.
    """
    fig = base_figure(LINE_TITLE)

    years = [int(k) for k in agg["key"]]
    counts = [int(c) for c in agg["count"]]

    cx, cy = monotone_curve(years, counts)
    fig.add_trace(
        go.Scatter(
            x=cx,
            y=cy,
            mode="lines",
            line=dict(color=LINE_COLOR, width=2),
            hoverinfo="skip",
            name="trend",
        )
    )
    fig.add_trace(
        go.Scatter(
            x=years,
            y=counts,
            mode="markers",
            marker=dict(size=2 * DOT_RADIUS, color=LINE_COLOR),
            hovertemplate="<b>Year:</b> %{x}<br><b>Disasters:</b> %{y}<extra></extra>",
            hoverlabel=dict(bgcolor=ACCENT),
            name="Disasters",
        )
    )

    selected = coerce_year(year)
    if selected != ALL_YEARS and selected in years:
        i = years.index(selected)
        fig.add_trace(
            go.Scatter(
                x=[years[i]],
                y=[counts[i]],
                mode="markers",
                marker=dict(
                    symbol="circle-open",
                    size=2 * RING_RADIUS,
                    color=HIGHLIGHT_COLOR,
                    line=dict(width=2, color=HIGHLIGHT_COLOR),
                ),
                hoverinfo="skip",
                name="selected year",
            )
        )

    if years:
        lo, hi = min(years), max(years)
        if lo == hi:
            lo, hi = lo - 1, hi + 1
        fig.update_xaxes(range=[lo, hi])
    fig.update_xaxes(tickformat="d", title_text="Year", showgrid=False)
    y_max = nice_upper_bound(max(counts)) if counts else 1
    fig.update_yaxes(range=[0, y_max], title_text=AXIS_TITLE_COUNT)
    return fig
