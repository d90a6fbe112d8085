"""
Static settings for the footprint landing page.

Brand colors, company profile, geography source and the colorizer
endpoints. The office, heatmap and distribution-centre tables live in
data/ as CSVs (written by scripts/generate_data.py), not here.
"""

import os

# TopoJSON world atlas (110m). Lightweight enough for a landing page map.
GEO_URL = "https://unpkg.com/world-atlas@2/countries-110m.json"
GEO_OBJECT = "countries"

DATA_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "data")

# ── Brand palette ────────────────────────────────────────────────────────────
SAVILLS_YELLOW = "#ffe600"
SAVILLS_YELLOW_DARK = "#e6cf00"
ACCENT_BLUE = "#2563eb"      # distribution centre beacons + connector lines
ACCENT_SLATE = "#0f172a"     # headings
MAP_BACKGROUND = "#f8fafc"
BORDER_GRAY = "#e5e7eb"

# ── Heatmap colorizer ────────────────────────────────────────────────────────
# Percentages are clamped into [HEATMAP_MIN_PCT, HEATMAP_MAX_PCT] before
# interpolating between the two endpoint colors.
HEATMAP_MIN_PCT = 1
HEATMAP_MAX_PCT = 25
HEATMAP_LIGHT = (255, 247, 161)    # #fff7a1
HEATMAP_DARK = (230, 207, 0)       # #e6cf00
NO_DATA_COLOR = (255, 251, 230)    # #fffbe6

EARTH_RADIUS_KM = 6371.0

# ── Company profile ──────────────────────────────────────────────────────────
COMPANY = {
    "name": "Savills",
    "domain": "savills.com",
    "logo": "https://s3.amazonaws.com/media.mixrank.com/hero-img/c06042b477148f1ad3fc06c738c6e82c",
    "employees": 40267,
    "offices_total": 700,
    "sla_days": 2,
}

# Digital experience (DEX) model inputs
HOURS_LOST_PER_EMPLOYEE = 50        # hours/year lost to IT interruptions
COST_PER_HOUR_GBP = 25              # fully-loaded hourly cost
WORKING_HOURS_PER_YEAR = 2080
NEXTHINK_USD_PER_10K = 25_000_000   # $25M per 10k employees
