from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from disaster_core.charts.colors import ColorRegistry
from disaster_core.charts.layout import AXIS_TITLE_COUNT, base_figure, title_with_year

BAR_TITLE = "Top {n} States by Number of Disasters"


def bar_chart(agg: pd.DataFrame, colors: ColorRegistry, year="all", *, top_n: int = 20) -> go.Figure:
    """Bars per region (agg from by_region), y axis from 0 to the exact max count."""
    fig = base_figure(title_with_year(BAR_TITLE.format(n=top_n), year))

    keys = [str(k) for k in agg["key"]]
    counts = [int(c) for c in agg["count"]]
    y_max = max(counts) if counts else 1

    fig.add_trace(
        go.Bar(
            x=keys,
            y=counts,
            marker=dict(color=colors.colors_for(keys)),
            hovertemplate="<b>%{x}</b><br>Disasters: %{y}<extra></extra>",
            name="Disasters",
        )
    )
    fig.update_layout(bargap=0.2)
    fig.update_xaxes(
        type="category",
        categoryorder="array",
        categoryarray=keys,
        tickangle=-65,
        title_text="States",
        showgrid=False,
    )
    fig.update_yaxes(range=[0, y_max], title_text=AXIS_TITLE_COUNT, rangemode="tozero")
    return fig
