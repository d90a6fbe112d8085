"""
Coverage page — which office countries each distribution centre serves.

Runs the same engine as the landing page and loads its connectors into a
NetworkX graph (footprint/network.py) to answer coverage questions:

  1. Centre Load — bar chart and table of office countries per centre,
     with idle centres (nobody's nearest) called out.
  2. Centre Detail — pick a centre to list the countries it serves and
     draw just those connectors on the map.
  3. Longest Hauls — the connectors with the largest great-circle distance.

Data flow: FootprintData + world atlas → build_map_model → FootprintGraph
          → graph queries → Plotly / Streamlit tables
"""

from dataclasses import replace

import httpx
import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from footprint.charts import build_map_figure
from footprint.config import ACCENT_BLUE, COMPANY, GEO_URL
from footprint.data_loader import FootprintData
from footprint.engine import build_map_model
from footprint.geography import decode_topojson, fetch_topology, to_feature_collection
from footprint.network import FootprintGraph


@st.cache_resource
def load_data():
    return FootprintData()


@st.cache_data(ttl=3600)
def load_topology():
    return fetch_topology(GEO_URL)


st.set_page_config(
    page_title=f"Coverage — {COMPANY['name']} Global Footprint", layout="wide"
)

st.title("Distribution Centre Coverage")
st.caption(
    "Each office country is linked to its nearest distribution centre by "
    "great-circle distance from the country's centroid."
)

data = load_data()

try:
    shapes = decode_topojson(load_topology())
except (httpx.HTTPError, ValueError) as exc:
    st.error(f"Could not load the world map: {exc}")
    st.stop()

model = build_map_model(shapes, data)
graph = FootprintGraph(model)
fc = to_feature_collection(shapes, model.display_names)

c1, c2, c3, c4 = st.columns(4)
c1.metric("Distribution Centres", len(model.centers))
c2.metric("Office Countries Anchored", len(model.centroids))
c3.metric("Connectors", len(model.connectors))
c4.metric("Idle Centres", len(graph.idle_centres()))

tab1, tab2, tab3 = st.tabs(["Centre Load", "Centre Detail", "Longest Hauls"])

# ═══════════════════════════════════════════════════════════════════════════════
# TAB 1: CENTRE LOAD
# ═══════════════════════════════════════════════════════════════════════════════
with tab1:
    load = pd.DataFrame(
        [{"centre": name, "countries_served": n} for name, n in graph.centre_load().items()]
    ).sort_values("countries_served", ascending=False)

    fig = go.Figure(go.Bar(
        x=load["centre"], y=load["countries_served"], marker_color=ACCENT_BLUE,
    ))
    fig.update_layout(height=380, margin=dict(l=0, r=0, t=10, b=0),
                      yaxis_title="Office countries served")
    st.plotly_chart(fig, use_container_width=True)

    st.caption(
        f"{len(model.centers)} centres across {len(data.centre_countries())} countries, "
        f"serving {len(data.office_names())} office countries on file."
    )

    idle = graph.idle_centres()
    if idle:
        st.info(f"Not the nearest centre for any office country: {', '.join(idle)}")

    st.dataframe(load, use_container_width=True, hide_index=True)

# ═══════════════════════════════════════════════════════════════════════════════
# TAB 2: CENTRE DETAIL
# ═══════════════════════════════════════════════════════════════════════════════
with tab2:
    centre_name = st.selectbox("Distribution centre", [c.name for c in model.centers])
    served = graph.countries_served_by(centre_name)

    if served:
        rows = []
        for country in served:
            conn = model.connector_for(country)
            rows.append({
                "country": country,
                "employees_pct": model.percents.get(country),
                "distance_km": round(conn.distance_km, 1),
            })
        st.dataframe(pd.DataFrame(rows).sort_values("distance_km"),
                     use_container_width=True, hide_index=True)
    else:
        st.warning(f"{centre_name} is not the nearest centre for any office country.")

    # Same map as the landing page, restricted to this centre's connectors
    focused = replace(
        model,
        connectors=tuple(c for c in model.connectors if c.center.name == centre_name),
    )
    st.plotly_chart(build_map_figure(focused, fc, height=500), use_container_width=True)

# ═══════════════════════════════════════════════════════════════════════════════
# TAB 3: LONGEST HAULS
# ═══════════════════════════════════════════════════════════════════════════════
with tab3:
    n = st.slider("Show top", min_value=3, max_value=20, value=10)
    st.dataframe(pd.DataFrame(graph.longest_connections(n)),
                 use_container_width=True, hide_index=True)
