import os
import streamlit as st
from covidtracker.config import DashboardConfig, configure_logging
from covidtracker.controller import Dashboard
from covidtracker.data import map_frame, table_frame
from covidtracker.errors import DataSourceError
from covidtracker.models import WORLDWIDE, today, total
from covidtracker.plots import bubble_map, line_graph
from covidtracker.utils import compact, pretty_print_stat

st.set_page_config(page_title="COVID-19 Tracker", layout="wide")

INFO_BOXES = [("cases", "COVID-19 Cases"), ("recovered", "Recoveries"), ("deaths", "Deaths")]

def get_dashboard() -> Dashboard:
    if "dashboard" not in st.session_state:
        path = os.environ.get("COVIDTRACKER_CONFIG")
        cfg = DashboardConfig.load(path)
        configure_logging(cfg.log_level)
        dash = Dashboard.from_config(cfg)
        dash.start()
        dash.wait(timeout=cfg.timeout)
        st.session_state["dashboard"] = dash
    return st.session_state["dashboard"]

@st.cache_data(ttl=600)
def load_history(kind: str):
    return get_dashboard().history(kind)

dash = get_dashboard()

left, right = st.columns((2, 1))
with left:
    head, pick = st.columns((2, 1))
    head.title("COVID-19 TRACKER")
    state = dash.state
    names = {WORLDWIDE: "Worldwide"}
    names.update({o.value: o.name for o in state.options})
    region = pick.selectbox("Region", list(names), index=list(names).index(state.region), format_func=names.get)
    if region != state.region:
        dash.choose_region(region)
        dash.wait(timeout=dash.store.config.timeout)

    state = dash.state
    if state.stale:
        st.warning(f"Showing stale data: {state.last_error}")

    cols = st.columns(3)
    for col, (kind, title) in zip(cols, INFO_BOXES):
        snap = state.snapshot
        col.metric(
            title,
            compact(total(snap, kind)) if snap else "n/a",
            pretty_print_stat(today(snap, kind)) if snap else None,
            delta_color="off" if kind == "recovered" else "inverse",
        )
        if col.button("Show" if kind != state.statistic else "Showing", key=f"kind-{kind}", disabled=kind == state.statistic):
            dash.choose_statistic(kind)
            st.rerun()

    if state.countries:
        fig = bubble_map(map_frame(state.countries, state.statistic), state.statistic, state.map_view, world_zoom=dash.store.config.world_zoom)
        st.plotly_chart(fig, use_container_width=True)
    else:
        st.info("Country data is not available yet.")

with right:
    st.subheader("Live Cases by Country")
    st.dataframe(table_frame(state.table), hide_index=True, use_container_width=True, height=420)
    try:
        st.plotly_chart(line_graph(load_history(state.statistic), state.statistic), use_container_width=True)
    except DataSourceError as e:
        st.warning(f"Could not load history: {e}")
