"""
Footprint Data Generator
========================
Writes the reference tables behind the landing page map to CSV:

  heatmap_percent.csv       country_name → share of employees (%)
  distribution_centres.csv  centre beacons with (lon, lat) coordinates
  office_countries.csv      office locations as named in the client brief

The heatmap table is manually curated and illustrative: it does not sum
to 100 and some keys (e.g. "Dubai, United Arab Emirates") never match a
map polygon. That is expected; unmatched countries render as "no data".

Produces 3 CSV files in the data/ directory.

Usage: python scripts/generate_data.py
"""

import os

import pandas as pd

OUTPUT_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "data")
os.makedirs(OUTPUT_DIR, exist_ok=True)

# ═══════════════════════════════════════════════════════════════════════════════
# 1. REFERENCE DATA
# ═══════════════════════════════════════════════════════════════════════════════

# ── Office locations (spelling from the client brief) ────────────────────────
OFFICE_COUNTRIES = [
    "Abu Dhabi", "Antigua", "Australia", "Austria", "The Bahamas", "Bahrain",
    "Barbados", "Belgium", "Botswana", "Bulgaria", "Canada", "The Cayman Islands",
    "China", "Croatia", "Cyprus", "Czech Republic", "Denmark", "Dubai", "Egypt",
    "Estonia", "Finland", "France", "Germany", "Gibraltar", "Greece", "Guernsey",
    "Hong Kong SAR", "Hungary", "India", "Indonesia", "Ireland", "Israel", "Italy",
    "Japan", "Jersey", "Kenya", "Korea", "Latvia", "Lithuania", "Luxembourg",
    "Macao SAR", "Malaysia", "Mauritius", "Mexico", "Monaco", "Montenegro",
    "Mozambique", "Namibia", "The Netherlands", "New Zealand", "Norway", "Oman",
    "Pakistan", "The Philippines", "Poland", "Portugal", "Puerto Rico", "Romania",
    "Saudi Arabia", "Serbia", "The Seychelles", "Sharjah", "Singapore",
    "South Africa", "Spain", "St Kitts & Nevis", "Sweden", "Switzerland",
    "Taiwan, China", "Thailand", "Turks & Caicos", "UAE", "United Kingdom",
    "United States", "Vietnam", "Zambia", "Zimbabwe",
]

# ── Heatmap: canonical country name → % of employees ─────────────────────────
HEATMAP_PERCENT = {
    "Abu Dhabi, United Arab Emirates": 1, "Antigua and Barbuda": 1,
    "Australia": 7, "Austria": 1, "The Bahamas": 1, "Bahrain": 1,
    "Barbados": 1, "Belgium": 1, "Botswana": 1, "Bulgaria": 1, "Canada": 1,
    "The Cayman Islands": 1, "China": 10, "Croatia": 1, "Cyprus": 1,
    "Czech Republic": 1, "Denmark": 1, "Dubai, United Arab Emirates": 1,
    "Egypt": 1, "Estonia": 1, "Finland": 1, "France": 3, "Germany": 3,
    "Gibraltar": 1, "Greece": 1, "Guernsey": 1, "Hong Kong SAR": 6,
    "Hungary": 1, "India": 3, "Indonesia": 1, "Ireland": 2, "Israel": 1,
    "Italy": 2, "Japan": 2, "Jersey": 1, "Kenya": 1, "South Korea": 1,
    "Latvia": 1, "Lithuania": 1, "Luxembourg": 1, "Macao SAR, China": 1,
    "Malaysia": 1, "Mauritius": 1, "Mexico": 1, "Monaco": 1, "Montenegro": 1,
    "Mozambique": 1, "Namibia": 1, "Netherlands": 2, "New Zealand": 1,
    "Norway": 1, "Oman": 1, "Pakistan": 1, "Philippines": 1, "Poland": 1,
    "Portugal": 1, "Puerto Rico": 1, "Romania": 1, "Saudi Arabia": 1,
    "Serbia": 1, "Seychelles": 1, "Sharjah, United Arab Emirates": 1,
    "Singapore": 3, "South Africa": 2, "Spain": 2, "Saint Kitts and Nevis": 1,
    "Sweden": 1, "Switzerland": 1, "Taiwan": 1, "Thailand": 1,
    "Turks and Caicos Islands": 1, "United Arab Emirates": 2,
    "United Kingdom": 25, "United States": 4, "Vietnam": 1, "Zambia": 1,
    "Zimbabwe": 1,
}

# ── Distribution centres: (name, country, lon, lat) ──────────────────────────
# Order matters: the nearest-centre scan breaks ties toward earlier rows.
DISTRIBUTION_CENTRES = [
    ("Montreal", "Canada", -73.5673, 45.5017),
    ("Houston", "USA", -95.3698, 29.7604),
    ("San Luis Potosi", "Mexico", -100.9855, 22.1565),
    ("Barranquilla", "Colombia", -74.8069, 10.9639),
    ("Santiago", "Chile", -70.6693, -33.4489),
    ("Sao Paulo", "Brazil", -46.6333, -23.5505),
    ("Buenos Aires", "Argentina", -58.3816, -34.6037),
    ("Malmo", "Sweden", 13.0038, 55.6050),
    ("Villejust", "France", 2.2137, 48.6866),
    ("Basingstoke", "United Kingdom", -1.0876, 51.2665),
    ("Schlieren", "Switzerland", 8.4477, 47.3962),
    ("Rho", "Italy", 9.0360, 45.5235),
    ("Prague", "Czech Republic", 14.4378, 50.0755),
    ("Bielany Wroclawskie", "Poland", 16.9700, 51.0300),
    ("Budapest", "Hungary", 19.0402, 47.4979),
    ("Cluj-Napoca", "Romania", 23.5940, 46.7712),
    ("Istanbul", "Turkey", 28.9784, 41.0082),
    ("Athens", "Greece", 23.7275, 37.9838),
    ("Kigali", "Rwanda", 30.0588, -1.9441),
    ("Midrand", "South Africa", 28.1272, -25.9992),
    ("Abu Dhabi", "UAE", 54.3773, 24.4539),
    ("Gazipur", "Bangladesh", 90.4203, 23.9999),
    ("Bangalore", "India", 77.5946, 12.9716),
    ("Petaling Jaya", "Malaysia", 101.6517, 3.1073),
    ("Singapore", "Singapore", 103.8198, 1.3521),
    ("Jakarta", "Indonesia", 106.8456, -6.2088),
    ("Makati", "Philippines", 121.0244, 14.5547),
    ("Yagoona", "Australia", 151.0195, -33.9020),
    ("Hong Kong", "Hong Kong", 114.1694, 22.3193),
    ("Shenzhen", "China", 114.0579, 22.5431),
    ("Hanoi", "Vietnam", 105.8342, 21.0278),
    ("Samut Prakan", "Thailand", 100.5980, 13.5991),
    ("Busan", "South Korea", 129.0756, 35.1796),
    ("Tokyo", "Japan", 139.6917, 35.6895),
]


# ═══════════════════════════════════════════════════════════════════════════════
# 2. VALIDATION
# ═══════════════════════════════════════════════════════════════════════════════

def validate_data(heatmap, centres, offices):
    """Run sanity checks and print summary."""
    print("\n" + "=" * 70)
    print("VALIDATION REPORT")
    print("=" * 70)

    print("\n-- Heatmap --")
    print(f"  Entries:            {len(heatmap)}")
    print(f"  Sum of percentages: {heatmap['percent'].sum()} (illustrative, not normalized)")
    out_of_range = heatmap[(heatmap["percent"] < 0) | (heatmap["percent"] > 100)]
    if out_of_range.empty:
        print("  PASS: all percentages within [0, 100]")
    else:
        for _, row in out_of_range.iterrows():
            print(f"  FAIL: {row['country_name']} = {row['percent']}")

    print("\n-- Distribution Centres --")
    print(f"  Centres: {len(centres)}")
    bad = centres[(centres["lon"].abs() > 180) | (centres["lat"].abs() > 90)]
    if bad.empty:
        print("  PASS: all coordinates within lon [-180, 180], lat [-90, 90]")
    else:
        for _, row in bad.iterrows():
            print(f"  FAIL: {row['centre_name']} ({row['lon']}, {row['lat']})")
    dupes = centres[centres.duplicated(subset=["centre_name"])]
    if not dupes.empty:
        print(f"  WARN: duplicate centre names {list(dupes['centre_name'])}")

    print("\n-- Offices --")
    print(f"  Office locations: {len(offices)}")
    unmatched = sorted(set(offices["office_name"]) - set(heatmap["country_name"]))
    print(f"  Not a heatmap key ({len(unmatched)}): {', '.join(unmatched)}")

    print("\n" + "=" * 70)


# ═══════════════════════════════════════════════════════════════════════════════
# 3. CSV OUTPUT
# ═══════════════════════════════════════════════════════════════════════════════

def write_csv(data, filename, columns=None):
    """Write list of dicts to CSV."""
    df = pd.DataFrame(data)
    if columns:
        df = df[columns]
    path = os.path.join(OUTPUT_DIR, filename)
    df.to_csv(path, index=False)
    print(f"  {filename:<45s} {len(df):>8,} rows")
    return df


# ═══════════════════════════════════════════════════════════════════════════════
# MAIN
# ═══════════════════════════════════════════════════════════════════════════════

def main():
    print("Footprint Data Generator")
    print("=" * 70)
    print(f"Output directory: {OUTPUT_DIR}")

    print("\nWriting CSV files...")
    heatmap = write_csv(
        [{"country_name": k, "percent": v} for k, v in HEATMAP_PERCENT.items()],
        "heatmap_percent.csv", ["country_name", "percent"],
    )
    centres = write_csv(
        [{"centre_name": n, "country": c, "lon": lon, "lat": lat}
         for n, c, lon, lat in DISTRIBUTION_CENTRES],
        "distribution_centres.csv", ["centre_name", "country", "lon", "lat"],
    )
    offices = write_csv(
        [{"office_name": name} for name in OFFICE_COUNTRIES],
        "office_countries.csv", ["office_name"],
    )

    validate_data(heatmap, centres, offices)

    print("\nDone!")


if __name__ == "__main__":
    main()
