# pages/99_About.py
import streamlit as st

st.title("About this app")

st.markdown(
    """
This app explores **FEMA disaster declarations** with three interactive Plotly views.
The year selection applies to the bar and pie charts; the line chart always shows the full
trend and highlights the selected year.
"""
)

st.divider()

st.subheader("Controls")
st.markdown(
    """
- **Visualization**: bar (top 20 states), line (declarations per year) or pie (incident types).
- **Year**: *All years* or one of the years present in the data.
"""
)

st.subheader("Configuration")
st.markdown(
    """
Environment variables (all optional):

| Variable | Meaning | Default |
|---|---|---|
| `DISASTERS_CSV_URL` | CSV location | FEMA project CSV on GitHub |
| `DISASTERS_TIMEOUT` | HTTP timeout (s) | 60 |
| `DISASTERS_CACHE_TTL` | cache lifetime (s) | 21600 |
| `DISASTERS_TOP_N` | states in the bar chart | 20 |
| `DISASTERS_LOG_LEVEL` | log level | INFO |
"""
)

st.caption("Built with Streamlit + Plotly. Years are taken from UTC declaration dates.")
