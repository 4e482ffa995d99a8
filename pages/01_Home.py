# pages/01_Home.py
import streamlit as st

from disaster_core.config import get_settings

st.title("FEMA Disaster Dashboard")
st.caption("Interactive bar, line and pie views of U.S. federal disaster declarations.")

st.divider()
st.page_link("pages/10_Disaster_Charts.py", label="Open the disaster charts", icon=":material/bar_chart:")
st.divider()

st.markdown(
    """
### What this app helps you do
- **Rank** the 20 states with the most declarations (bar chart).
- **Follow** the number of declarations per year across the whole dataset (line chart).
- **Compare** incident types such as floods, fires and hurricanes (pie chart).
- **Filter** bar and pie views to a single year; the line chart circles that year.
"""
)

with st.expander("Quick start", expanded=True):
    st.markdown(
        """
1) Open **Disaster Charts**.
2) Pick a chart in **Visualization**.
3) Pick a **Year** (or *All years*). Hover bars, dots or wedges for exact counts.
        """
    )

st.markdown(
    f"""
### Data & assumptions
- **Source:** `{get_settings().data_url}` (fetched once, then cached).
- **Kept rows:** state, declaration date and incident type must all be present.
- **Years:** calendar year of the declaration date in UTC.
"""
)
