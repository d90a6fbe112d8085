"""
Plotly figure builders for the landing page.

Pure functions from engine output to go.Figure objects, so pages stay thin
and the figures can be checked without a running Streamlit server.
"""

import plotly.graph_objects as go

from footprint.config import (
    ACCENT_BLUE,
    BORDER_GRAY,
    MAP_BACKGROUND,
    SAVILLS_YELLOW,
)
from footprint.heatmap import rgb_string


def _map_layout(height=420):
    """Standard world map layout."""
    return dict(
        geo=dict(
            projection_type="natural earth",
            center=dict(lon=10, lat=20),
            showland=True, landcolor=MAP_BACKGROUND,
            showcountries=True, countrycolor=BORDER_GRAY,
            showocean=False, showframe=False,
            lataxis=dict(showgrid=True, gridcolor="#e2e8f0"),
            lonaxis=dict(showgrid=True, gridcolor="#e2e8f0"),
        ),
        height=height,
        margin=dict(l=0, r=0, t=10, b=0),
        showlegend=True,
        legend=dict(
            yanchor="bottom", y=0.01,
            xanchor="left", x=0.01,
            bgcolor="rgba(255,255,255,0.8)",
        ),
    )


def _hover_text(name, pct):
    if pct is None:
        return f"<b>{name}</b>"
    return f"<b>{name}</b><br>{pct:g}% of employees"


def build_map_figure(model, feature_collection, height=420):
    """Heatmap choropleth + connector lines + distribution centre beacons."""
    fig = go.Figure()

    # ── Country fills ──
    # Choropleth maps z through a colorscale, so each distinct fill gets its
    # own single-color trace. Keeps the engine's exact RGB values.
    by_color = {}
    for name, color in model.fills.items():
        by_color.setdefault(color, []).append(name)

    for color, names in by_color.items():
        fill = rgb_string(color)
        fig.add_trace(go.Choropleth(
            geojson=feature_collection,
            featureidkey="properties.name",
            locations=names,
            z=[1] * len(names),
            colorscale=[[0, fill], [1, fill]],
            showscale=False,
            marker_line_color=BORDER_GRAY,
            marker_line_width=0.5,
            text=[_hover_text(n, model.percents.get(n)) for n in names],
            hoverinfo="text",
            showlegend=False,
        ))

    # ── Connector lines (one trace, segments split by None) ──
    if model.connectors:
        lons, lats = [], []
        for conn in model.connectors:
            lons += [conn.origin[0], conn.destination[0], None]
            lats += [conn.origin[1], conn.destination[1], None]
        fig.add_trace(go.Scattergeo(
            lon=lons, lat=lats,
            mode="lines",
            line=dict(width=0.8, color=ACCENT_BLUE),
            opacity=0.35,
            hoverinfo="skip",
            name="Connections",
            showlegend=False,
        ))

    # ── Distribution centre beacons: soft halo under a solid dot ──
    if model.centers:
        lons = [c.lon for c in model.centers]
        lats = [c.lat for c in model.centers]
        fig.add_trace(go.Scattergeo(
            lon=lons, lat=lats,
            mode="markers",
            marker=dict(size=12, color=ACCENT_BLUE, opacity=0.35),
            hoverinfo="skip",
            showlegend=False,
        ))
        fig.add_trace(go.Scattergeo(
            lon=lons, lat=lats,
            mode="markers",
            marker=dict(size=6, color=ACCENT_BLUE, line=dict(width=0.8, color="#fff")),
            text=[f"<b>{c.name}</b><br>{c.country}" for c in model.centers],
            hoverinfo="text",
            name="Distribution Centres",
        ))

    fig.update_layout(**_map_layout(height))
    return fig


def build_pie_figure(impact):
    rows = impact.pie_data()
    fig = go.Figure(go.Pie(
        labels=[r["name"] for r in rows],
        values=[r["value"] for r in rows],
        marker=dict(colors=["#e2e8f0", SAVILLS_YELLOW]),
        sort=False,
    ))
    fig.update_layout(height=260, margin=dict(l=0, r=0, t=10, b=0))
    return fig


def build_bar_figure(impact):
    rows = impact.bar_data()
    fig = go.Figure(go.Bar(
        x=[r["name"] for r in rows],
        y=[r["value"] for r in rows],
        marker_color=SAVILLS_YELLOW,
        name="value",
    ))
    fig.update_layout(height=260, margin=dict(l=0, r=0, t=10, b=0), showlegend=True)
    return fig
