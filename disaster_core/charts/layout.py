from __future__ import annotations

import plotly.graph_objects as go

FRAME_WIDTH = 960
FRAME_HEIGHT = 500
MARGIN = {"t": 40, "r": 30, "b": 80, "l": 80}
WIDTH = FRAME_WIDTH - MARGIN["l"] - MARGIN["r"]    # 850
HEIGHT = FRAME_HEIGHT - MARGIN["t"] - MARGIN["b"]  # 380
TRANSITION_MS = 750

AXIS_TITLE_COUNT = "Number of Disasters"
ACCENT = "orange"
LINE_COLOR = "steelblue"
HIGHLIGHT_COLOR = "red"


def title_with_year(text: str, year) -> str:
    if year is None or str(year) == "all":
        return text
    return f"{text} ({year})"


def base_figure(title: str) -> go.Figure:
    """Empty fixed-size drawing surface shared by every chart kind."""
    fig = go.Figure()
    fig.update_layout(
        template="plotly_white",
        width=FRAME_WIDTH,
        height=FRAME_HEIGHT,
        autosize=False,
        margin=dict(MARGIN, pad=0),
        title=dict(text=f"<b>{title}</b>", x=0.5, xanchor="center", y=1.0, yanchor="top", font=dict(size=16)),
        showlegend=False,
        hovermode="closest",
        transition=dict(duration=TRANSITION_MS, easing="cubic-in-out"),
    )
    return fig


def to_paper(x_px: float, y_px: float) -> tuple[float, float]:
    """Content-area pixels (origin top-left, y down) -> plotly paper coordinates."""
    return x_px / WIDTH, 1.0 - y_px / HEIGHT
