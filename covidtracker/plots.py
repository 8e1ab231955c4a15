from __future__ import annotations
import pandas as pd
import plotly.express as px
from .data import CASES_TYPE_COLORS
from .models import MapView, check_kind

def _projection_scale(zoom: int, world_zoom: int) -> float:
    return float(2 ** max(zoom - world_zoom, 0))

def bubble_map(df: pd.DataFrame, kind: str, view: MapView, world_zoom: int = 3):
    check_kind(kind)
    color = CASES_TYPE_COLORS[kind]["hex"]
    fig = px.scatter_geo(
        df,
        lat="lat",
        lon="long",
        size="radius",
        hover_name="country",
        hover_data={kind: ":,", "lat": False, "long": False, "radius": False},
        color_discrete_sequence=[color],
        size_max=40,
        projection="natural earth",
    )
    fig.update_traces(marker=dict(opacity=0.5, line=dict(color=color, width=1)))
    fig.update_geos(
        center=dict(lat=view.center[0], lon=view.center[1]),
        projection_scale=_projection_scale(view.zoom, world_zoom),
        showcountries=True,
    )
    fig.update_layout(margin=dict(l=0, r=0, t=0, b=0))
    return fig

def choropleth(df: pd.DataFrame, kind: str):
    check_kind(kind)
    d = df.dropna(subset=["iso3"])
    fig = px.choropleth(
        d,
        locations="iso3",
        color=kind,
        hover_name="country",
        color_continuous_scale="Reds",
        projection="natural earth",
    )
    fig.update_layout(title=f"{kind} by country")
    return fig

def line_graph(df: pd.DataFrame, kind: str, title: str = ""):
    check_kind(kind)
    fig = px.area(df, x="date", y="new", title=title or f"Worldwide new {kind}")
    fig.update_traces(line_color=CASES_TYPE_COLORS[kind]["hex"])
    fig.update_layout(xaxis_title=None, yaxis_title=None)
    return fig
