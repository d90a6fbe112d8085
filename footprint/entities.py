"""
Typed domain entities for the footprint map.

Frozen dataclasses for the three things the engine passes around:
country polygons from the geography source, the fixed distribution
centres, and the connector edges drawn between them. Coordinates are
always (longitude, latitude) in degrees, the order GeoJSON uses.
"""

from dataclasses import dataclass
from typing import Optional


# ═══════════════════════════════════════════════════════════════════════════════
# ENTITY DATACLASSES
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class DistributionCenter:
    """A distribution centre beacon at a fixed coordinate."""
    name: str
    country: str
    coord: tuple   # (lon, lat)

    @property
    def lon(self) -> float:
        return self.coord[0]

    @property
    def lat(self) -> float:
        return self.coord[1]


@dataclass(frozen=True)
class CountryShape:
    """One polygon record from the geography source.

    `coordinates` follows GeoJSON nesting: a Polygon is a list of rings,
    a MultiPolygon a list of polygons. `bbox` is (min_x, min_y, max_x,
    max_y) when the source provides one.
    """
    raw_name: str
    geometry_type: str
    coordinates: tuple
    bbox: Optional[tuple] = None

    @classmethod
    def from_feature(cls, feature: dict) -> "CountryShape":
        """Build a shape from a GeoJSON Feature dict."""
        props = feature.get("properties") or {}
        geometry = feature.get("geometry") or {}
        bbox = feature.get("bbox") or geometry.get("bbox")
        return cls(
            raw_name=str(props.get("name") or ""),
            geometry_type=geometry.get("type") or "",
            coordinates=geometry.get("coordinates") or (),
            bbox=tuple(bbox) if bbox else None,
        )

    def to_feature(self, name: Optional[str] = None) -> dict:
        """GeoJSON Feature for this shape; `name` overrides the raw label."""
        feature = {
            "type": "Feature",
            "properties": {"name": name if name is not None else self.raw_name},
            "geometry": {"type": self.geometry_type, "coordinates": self.coordinates},
        }
        if self.bbox:
            feature["bbox"] = list(self.bbox)
        return feature


@dataclass(frozen=True)
class Connector:
    """Edge from a country's centroid to its nearest distribution centre."""
    country: str
    origin: tuple        # (lon, lat) centroid
    destination: tuple   # (lon, lat) of the centre
    center: DistributionCenter
    distance_km: float
