"""
Map engine: geography + reference tables → everything a page needs to draw.

One call per render. The pipeline runs in two phases so nothing is
computed as a side effect of drawing:
  1. Normalize every label, look up its heatmap percentage and fill, and
     compute centroids for office countries into a read-only mapping.
  2. Resolve each centroid's nearest distribution centre into Connectors.

Any number of pages can consume the resulting MapModel.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from footprint.connectors import resolve_connectors
from footprint.data_loader import FootprintData
from footprint.geometry import compute_centroids
from footprint.heatmap import yellow_scale
from footprint.normalize import normalize_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MapModel:
    """Container for one render's engine output."""
    display_names: Mapping = field(default_factory=dict)   # raw label → canonical name
    percents: Mapping = field(default_factory=dict)        # canonical name → pct or None
    fills: Mapping = field(default_factory=dict)           # canonical name → (r, g, b)
    centroids: Mapping = field(default_factory=dict)       # canonical name → (lon, lat)
    connectors: tuple = ()
    centers: tuple = ()

    def connector_for(self, country):
        for c in self.connectors:
            if c.country == country:
                return c
        return None


def build_map_model(shapes, data: FootprintData) -> MapModel:
    """
    Run the full engine over a list of CountryShapes.

    Args:
        shapes: CountryShapes from the geography source.
        data: Loaded heatmap, office and distribution centre tables.

    Returns:
        MapModel with fills and display names for every shape, and one
        connector per office country that has a usable centroid.
    """
    shapes = list(shapes)

    # ── 1. Names, percentages, fills ─────────────────────────────────────
    display_names = {}
    percents = {}
    fills = {}
    for shape in shapes:
        name = normalize_name(shape.raw_name)
        display_names[shape.raw_name] = name
        if name not in percents:
            pct = data.percent_for(name)
            percents[name] = pct
            fills[name] = yellow_scale(pct)

    # ── 2. Centroids, then connectors ────────────────────────────────────
    centroids = compute_centroids(shapes, include=data.has_office)
    centers = data.centers()
    connectors = resolve_connectors(centroids, centers)

    logger.info(
        "Map model: %d shapes, %d with heatmap data, %d anchored, %d connectors",
        len(shapes),
        sum(1 for p in percents.values() if p is not None),
        len(centroids),
        len(connectors),
    )

    return MapModel(
        display_names=MappingProxyType(display_names),
        percents=MappingProxyType(percents),
        fills=MappingProxyType(fills),
        centroids=centroids,
        connectors=connectors,
        centers=tuple(centers),
    )
