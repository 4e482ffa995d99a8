# pages/10_Disaster_Charts.py
import streamlit as st

from disaster_core.config import get_settings
from disaster_core.dashboard import CHART_LABELS, render_chart, year_label, year_options
from disaster_core.loaders.disasters import LoadError, load_disasters
from disaster_core.state import CHART_KINDS, AppState

settings = get_settings()


@st.cache_data(show_spinner=False, ttl=settings.cache_ttl)
def cached_disasters(url: str, timeout: int):
    return load_disasters(url, timeout=timeout)


st.title("FEMA Disaster Declarations")
st.caption("Choose a chart type and a year; every change redraws the chart from scratch.")

left, right = st.columns([1, 1])
viz = st.empty()

with st.spinner("Loading disaster declarations…"):
    try:
        records = cached_disasters(settings.data_url, settings.request_timeout)
    except LoadError as e:
        viz.error(f"### Error loading data\n\n{e.message}")
        st.stop()

# one AppState per browser session; the colour registry survives reruns
state = st.session_state.get("disaster_app_state")
if state is None:
    state = AppState(records=records)
    st.session_state["disaster_app_state"] = state
else:
    state.records = records


def _on_kind_change():
    state.set_chart_kind(st.session_state["sel_chart_kind"])


def _on_year_change():
    state.set_year(st.session_state["sel_year"])


years = year_options(records)
if state.filters.year not in years:
    state.set_year("all")

with left:
    st.selectbox(
        "Visualization",
        CHART_KINDS,
        index=CHART_KINDS.index(state.filters.chart_kind),
        format_func=CHART_LABELS.get,
        key="sel_chart_kind",
        on_change=_on_kind_change,
    )

with right:
    st.selectbox(
        "Year",
        years,
        index=years.index(state.filters.year),
        format_func=year_label,
        key="sel_year",
        on_change=_on_year_change,
    )

fig = render_chart(state, top_n=settings.top_n_regions)
viz.plotly_chart(fig, use_container_width=False)

st.caption(
    f"{len(state.filtered_records()):,} of {len(records):,} declarations in view. "
    "The line chart always shows every year; the selected year is circled."
)
