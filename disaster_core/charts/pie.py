from __future__ import annotations

import math
from dataclasses import dataclass

import pandas as pd
import plotly.graph_objects as go

from disaster_core.analysis.aggregate import percent_labels
from disaster_core.charts.colors import ColorRegistry
from disaster_core.charts.layout import HEIGHT, WIDTH, base_figure, title_with_year, to_paper

PIE_TITLE = "Distribution of Disaster Types"
MAX_LABEL_CHARS = 12

RADIUS = min(WIDTH, HEIGHT) / 2
SLICE_RADIUS = RADIUS * 0.8
LABEL_RING = RADIUS * 0.9
LABEL_X = RADIUS * 0.95
CENTER = (WIDTH / 2, HEIGHT / 2)


@dataclass(frozen=True)
class SliceLabel:
    key: str
    text: str
    percent: int
    mid_angle: float
    anchor: str                           # "left" | "right"
    points: list[tuple[float, float]]     # connector in content px: arc centroid, label ring, label


def truncate_label(text: str, n: int = MAX_LABEL_CHARS) -> str:
    return text if len(text) <= n else text[:n] + "..."


def _polar(angle: float, r: float) -> tuple[float, float]:
    # angle clockwise from 12 o'clock, y grows downward
    return CENTER[0] + r * math.sin(angle), CENTER[1] - r * math.cos(angle)


def slice_labels(agg: pd.DataFrame) -> list[SliceLabel]:
    """Label text, anchor side and connector geometry per wedge, in aggregate order."""
    keys = [str(k) for k in agg["key"]]
    counts = [int(c) for c in agg["count"]]
    total = sum(counts)
    if total <= 0:
        return []
    pcts = percent_labels(counts)

    out: list[SliceLabel] = []
    start = 0.0
    for key, count, pct in zip(keys, counts, pcts):
        end = start + 2 * math.pi * count / total
        mid = start + (end - start) / 2
        right = mid < math.pi
        ring = _polar(mid, LABEL_RING)
        label_pt = (CENTER[0] + (LABEL_X if right else -LABEL_X), ring[1])
        out.append(
            SliceLabel(
                key=key,
                text=truncate_label(key),
                percent=pct,
                mid_angle=mid,
                anchor="left" if right else "right",
                points=[_polar(mid, SLICE_RADIUS / 2), ring, label_pt],
            )
        )
        start = end
    return out


def pie_chart(agg: pd.DataFrame, colors: ColorRegistry, year="all") -> go.Figure:
    """Wedges per category (agg from by_category) with outside labels and connectors."""
    fig = base_figure(title_with_year(PIE_TITLE, year))
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)

    labels = slice_labels(agg)
    if not labels:
        return fig

    keys = [s.key for s in labels]
    x0, y1 = to_paper(CENTER[0] - SLICE_RADIUS, CENTER[1] - SLICE_RADIUS)
    x1, y0 = to_paper(CENTER[0] + SLICE_RADIUS, CENTER[1] + SLICE_RADIUS)
    fig.add_trace(
        go.Pie(
            labels=keys,
            values=[int(c) for c in agg["count"]],
            customdata=[s.percent for s in labels],
            sort=False,
            direction="clockwise",
            rotation=0,
            textinfo="none",
            opacity=0.7,
            marker=dict(colors=colors.colors_for(keys), line=dict(color="white", width=2)),
            hovertemplate="<b>%{label}</b><br>Count: %{value}<br>%{customdata}%<extra></extra>",
            domain=dict(x=[x0, x1], y=[y0, y1]),
            name="Disaster types",
        )
    )

    for s in labels:
        pts = [to_paper(x, y) for x, y in s.points]
        path = "M " + " L ".join(f"{px:.5f},{py:.5f}" for px, py in pts)
        fig.add_shape(
            type="path",
            path=path,
            xref="paper",
            yref="paper",
            line=dict(color="black", width=1),
            opacity=0.5,
        )
        lx, ly = pts[-1]
        fig.add_annotation(
            x=lx,
            y=ly,
            xref="paper",
            yref="paper",
            xanchor=s.anchor,
            yanchor="middle",
            align=s.anchor,
            showarrow=False,
            text=f"<b>{s.text}</b><br><span style='font-size:10px'>{s.percent}%</span>",
            font=dict(size=12),
        )
    return fig
