"""
Global Footprint — Landing Page (Streamlit entry point).

This is the page visitors see first. It provides:
  1. Header with company logo and delivery SLA
  2. Hero copy next to the world map: office heatmap, connector lines from
     each office country to its nearest distribution centre, centre beacons
  3. A KPI strip (offices, employees, SLA, UK share)
  4. Digital experience (DEX) impact cards with a pie and a bar chart
  5. Footer

Run: streamlit run app.py

Multipage app (sidebar order determined by numeric filename prefix):
  - pages/1_Coverage.py → which office countries each distribution centre serves
"""

import logging
from datetime import date

import httpx
import streamlit as st

from footprint.charts import build_bar_figure, build_map_figure, build_pie_figure
from footprint.config import ACCENT_BLUE, COMPANY, GEO_URL, SAVILLS_YELLOW
from footprint.data_loader import FootprintData
from footprint.engine import build_map_model
from footprint.geography import decode_topojson, fetch_topology, to_feature_collection
from footprint.impact import DexImpact

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@st.cache_resource
def load_data():
    return FootprintData()


@st.cache_data(ttl=3600)
def load_topology():
    """Fetch the world atlas TopoJSON (cached 1 hour)."""
    return fetch_topology(GEO_URL)


st.set_page_config(
    page_title=f"{COMPANY['name']} – Global Footprint",
    layout="wide",
)

data = load_data()
impact = DexImpact.for_headcount(COMPANY["employees"])

# ── Header ───────────────────────────────────────────────────────────────────
logo_col, title_col, sla_col = st.columns([1, 8, 2])
with logo_col:
    st.image(COMPANY["logo"], width=48)
with title_col:
    st.markdown(f"### {COMPANY['name']}")
    st.caption(COMPANY["domain"])
with sla_col:
    st.markdown(
        f"<span style='background:{SAVILLS_YELLOW};border-radius:999px;"
        f"padding:4px 12px;font-weight:600;font-size:0.8rem'>"
        f"SLA: {COMPANY['sla_days']} Days</span>",
        unsafe_allow_html=True,
    )

st.divider()

# ── Hero + Map ───────────────────────────────────────────────────────────────
hero_col, map_col = st.columns(2)

with hero_col:
    st.title("Global real estate expertise, visualised.")
    st.markdown(
        f"Explore {COMPANY['name']}'s worldwide footprint and how Viadex "
        "Distribution Centres connect every office to resilient supply chains."
    )
    st.markdown(
        f"<span style='color:{SAVILLS_YELLOW}'>●</span> {COMPANY['name']} Offices Heatmap"
        f"&nbsp;&nbsp;&nbsp;<span style='color:{ACCENT_BLUE}'>●</span> "
        "Viadex Distribution Centres",
        unsafe_allow_html=True,
    )

with map_col:
    try:
        shapes = decode_topojson(load_topology())
    except (httpx.HTTPError, ValueError) as exc:
        logger.warning("World atlas unavailable: %s", exc)
        st.error(f"Could not load the world map: {exc}")
        shapes = None

    if shapes is not None:
        model = build_map_model(shapes, data)
        fc = to_feature_collection(shapes, model.display_names)
        st.plotly_chart(build_map_figure(model, fc), use_container_width=True)

st.divider()

# ── KPI Strip ────────────────────────────────────────────────────────────────
uk_share = data.percent_for("United Kingdom")
k1, k2, k3, k4 = st.columns(4)
k1.metric("Global Offices", f">{COMPANY['offices_total']}", help="across 70+ countries")
k2.metric("Employees", f"{COMPANY['employees']:,}", help="worldwide team")
k3.metric("SLA", f"{COMPANY['sla_days']} days", help="standard delivery")
k4.metric("UK Share", f"{uk_share:g}%" if uk_share is not None else "n/a",
          help="employee distribution")

st.divider()

# ── Insights & Charts ────────────────────────────────────────────────────────
insight_col, why_col = st.columns([2, 1])

with insight_col:
    st.subheader(f"Digital Experience (DEX) impact at {COMPANY['name']}")
    st.markdown(
        "Based on industry studies (Microsoft/Techaisle; Nexthink), older devices "
        "and IT interruptions can erode productivity. Here's what that looks like "
        f"for a team of {impact.employees:,}."
    )
    pie_col, bar_col = st.columns(2)
    with pie_col:
        st.caption("Annual hours at risk")
        st.markdown(f"**{impact.hours_at_risk:,} hrs**")
        st.plotly_chart(build_pie_figure(impact), use_container_width=True)
    with bar_col:
        st.caption("Modeled annual cost impact")
        st.markdown(f"**£{round(impact.cost_gbp):,}**")
        st.caption("@ £25/hour fully-loaded; 50 hours/employee/year")
        st.plotly_chart(build_bar_figure(impact), use_container_width=True)

    st.markdown(
        """
        - **2.7×** higher repair likelihood for PCs older than 4 years (Microsoft/Techaisle).
        - ~**112 hours** of lost productivity per affected old device annually.
        - Need-based refresh can **defer spend 1–2 years** while reducing downtime risk.
        - Only ~55% of IT issues are reported; unreported issues can nearly **double** the impact (Nexthink).
        """
    )

with why_col:
    st.subheader("Why this matters")
    st.markdown(
        f"**Every 1,000 employees** ≈ £{impact.cost_per_1000_gbp / 1_000_000:.2f}M/year "
        "in lost productivity."
    )
    st.markdown(
        f"At {COMPANY['name']} scale ({impact.employees:,} employees), that's roughly "
        f"**£{round(impact.cost_gbp / 1_000_000)}M** per year."
    )
    st.markdown(
        "Alternative model (Nexthink): about "
        f"**${round(impact.nexthink_usd / 1_000_000)}M** per year in losses."
    )
    st.info(f"**SLA**: Standard delivery target: **{COMPANY['sla_days']} days**.")

# ── Footer ───────────────────────────────────────────────────────────────────
st.divider()
st.caption(f"© {date.today().year} {COMPANY['name']}. All rights reserved.  ·  Privacy  ·  Terms  ·  Contact")
