"""
Geography source: fetch the world atlas and turn it into CountryShapes.

The world-atlas package ships TopoJSON, which stores shared borders once
as quantized, delta-encoded arcs. Rings reference arcs by index; a
negative index (~i) means arc i traversed backwards. Decoding stitches
the arcs back into GeoJSON-style rings of (lon, lat) points.
"""

import logging

import httpx

from footprint.config import GEO_OBJECT, GEO_URL
from footprint.entities import CountryShape

logger = logging.getLogger(__name__)


def fetch_topology(url: str = GEO_URL, timeout: float = 30) -> dict:
    """Download a TopoJSON topology. Raises httpx.HTTPError on failure."""
    resp = httpx.get(url, timeout=timeout, follow_redirects=True)
    resp.raise_for_status()
    return resp.json()


def _decode_arcs(topology: dict) -> list:
    """Absolute (lon, lat) points for every arc in the topology."""
    transform = topology.get("transform")
    decoded = []
    for arc in topology.get("arcs", []):
        if transform:
            (sx, sy), (tx, ty) = transform["scale"], transform["translate"]
            x = y = 0
            pts = []
            for dx, dy in arc:
                x += dx
                y += dy
                pts.append((x * sx + tx, y * sy + ty))
        else:
            pts = [(p[0], p[1]) for p in arc]
        decoded.append(pts)
    return decoded


def _ring(arc_indexes, arcs) -> list:
    points = []
    for idx in arc_indexes:
        pts = arcs[idx] if idx >= 0 else list(reversed(arcs[~idx]))
        # Consecutive arcs share an endpoint; keep it once
        points.extend(pts[1:] if points else pts)
    return [list(p) for p in points]


def decode_topojson(topology: dict, object_name: str = GEO_OBJECT) -> list:
    """Decode one named object of a topology into CountryShapes."""
    try:
        geometries = topology["objects"][object_name]["geometries"]
    except (KeyError, TypeError) as exc:
        raise ValueError(f"Topology has no '{object_name}' geometry collection") from exc

    arcs = _decode_arcs(topology)
    shapes = []
    for geom in geometries:
        gtype = geom.get("type")
        props = geom.get("properties") or {}
        if gtype == "Polygon":
            coords = [_ring(r, arcs) for r in geom.get("arcs", [])]
        elif gtype == "MultiPolygon":
            coords = [[_ring(r, arcs) for r in poly] for poly in geom.get("arcs", [])]
        else:
            # Null geometry: keep the name, no outline
            logger.debug("Geometry %r has type %r, no coordinates", props.get("name"), gtype)
            coords = []
        shapes.append(CountryShape(
            raw_name=str(props.get("name") or ""),
            geometry_type=gtype or "",
            coordinates=coords,
            bbox=tuple(geom["bbox"]) if geom.get("bbox") else None,
        ))

    logger.info("Decoded %d shapes from topology object '%s'", len(shapes), object_name)
    return shapes


def shapes_from_geojson(feature_collection: dict) -> list:
    """CountryShapes from a GeoJSON FeatureCollection."""
    return [CountryShape.from_feature(f) for f in feature_collection.get("features", [])]


def to_feature_collection(shapes, names=None) -> dict:
    """GeoJSON FeatureCollection for Plotly, keyed on properties.name.

    `names` maps raw labels to display names (the engine's display_names),
    so the choropleth locations line up with canonical country names.
    """
    names = names or {}
    return {
        "type": "FeatureCollection",
        "features": [s.to_feature(names.get(s.raw_name, s.raw_name)) for s in shapes],
    }
