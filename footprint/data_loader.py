"""
Load the footprint reference tables and provide lookup methods for the engine.

Loads 3 CSV files from data/ into pandas DataFrames (heatmap percentages,
distribution centres, office countries) and builds dictionary lookups so
the per-country work during a render is O(1).
"""

import logging
import os

import pandas as pd

from footprint.config import DATA_DIR
from footprint.connectors import make_center

logger = logging.getLogger(__name__)


class FootprintData:
    """Loads all CSVs from data/ and provides query methods."""

    def __init__(self, data_dir=None):
        self._dir = data_dir or DATA_DIR
        self._load()

    def _load(self):
        # ── Load CSV files ────────────────────────────────────────────────
        self.heatmap = pd.read_csv(os.path.join(self._dir, "heatmap_percent.csv"))
        self.distribution_centres = pd.read_csv(
            os.path.join(self._dir, "distribution_centres.csv")
        )
        self.offices = pd.read_csv(os.path.join(self._dir, "office_countries.csv"))

        # ── Build lookup dictionaries ─────────────────────────────────────
        # Heatmap keys are canonical names (the Normalizer's output), so a
        # lookup miss just means "no data" for that country.
        self._percent = dict(zip(self.heatmap["country_name"], self.heatmap["percent"]))
        self._office_names = set(self.offices["office_name"])

        # Centre order is significant: ties in the nearest-centre scan go to
        # whichever centre comes first in this list.
        self._centers = tuple(
            make_center(row["centre_name"], row["country"], row["lon"], row["lat"])
            for _, row in self.distribution_centres.iterrows()
        )

        logger.info(
            "Loaded %d heatmap entries, %d distribution centres, %d office locations from %s",
            len(self._percent), len(self._centers), len(self._office_names), self._dir,
        )

    # ── Query methods ────────────────────────────────────────────────────────

    def percent_for(self, name):
        """Heatmap percentage for a canonical country name, or None."""
        pct = self._percent.get(name)
        return None if pct is None else float(pct)

    def centers(self) -> tuple:
        """All distribution centres, in file order."""
        return self._centers

    def has_office(self, name, raw_name=None) -> bool:
        """True if the country counts as an office location.

        A country qualifies if its canonical name is a heatmap key, or if
        either its canonical or raw name appears in the office list (which
        keeps the client brief's spelling, e.g. "UAE", "Korea")."""
        return (
            name in self._percent
            or name in self._office_names
            or (raw_name is not None and raw_name in self._office_names)
        )

    def office_names(self) -> list:
        return list(self.offices["office_name"])

    def heatmap_total(self) -> float:
        """Sum of all heatmap percentages. Not expected to equal 100."""
        return float(self.heatmap["percent"].sum())

    def centre_countries(self) -> list:
        """Unique countries hosting a centre, in file order."""
        return list(dict.fromkeys(self.distribution_centres["country"]))
