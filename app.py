# app.py
from pathlib import Path
import streamlit as st

from disaster_core.config import configure_logging, get_settings

st.set_page_config(page_title="FEMA Disaster Dashboard", page_icon="🌪️", layout="wide")
configure_logging(get_settings().log_level)

pages: dict[str, list] = {}

# Helper to add pages
def add(section: str, path: str, title: str, icon: str):
    if Path(path).exists():
        pages.setdefault(section, []).append(st.Page(path, title=title, icon=icon))


# Overview
add("Overview", "pages/01_Home.py", "Home", ":material/home:")
add("Overview", "pages/99_About.py", "About", ":material/info:")

# Exploration
add("Exploration", "pages/10_Disaster_Charts.py", "Disaster Charts", ":material/bar_chart:")


pg = st.navigation(pages, position="sidebar", expanded=True)
pg.run()
