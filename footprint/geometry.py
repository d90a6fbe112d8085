"""
Geometry helpers: great-circle distance and approximate country centroids.

Centroids here are line-drawing anchors, not area centroids. A bounding
box midpoint is used when the source supplies one; otherwise the plain
mean of the outer-ring vertices. Both are deterministic and never raise.
"""

import logging
import math
from numbers import Real
from types import MappingProxyType

from footprint.config import EARTH_RADIUS_KM
from footprint.normalize import normalize_name

logger = logging.getLogger(__name__)


def haversine_km(a, b) -> float:
    """Great-circle distance in km between two (lon, lat) points in degrees."""
    lon1, lat1 = a[0], a[1]
    lon2, lat2 = b[0], b[1]
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlam = math.radians(lon2 - lon1)
    h = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlam / 2) ** 2
    # Rounding can push h a hair above 1 for antipodal points
    return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(min(1.0, h)))


def _is_number(x) -> bool:
    """Finite real number, bools excluded."""
    if not isinstance(x, Real) or isinstance(x, bool):
        return False
    try:
        return math.isfinite(x)
    except OverflowError:
        return False


def _valid_bbox(bbox) -> bool:
    return (
        isinstance(bbox, (list, tuple))
        and len(bbox) == 4
        and all(_is_number(v) for v in bbox)
    )


def _outer_rings(geometry_type, coordinates):
    """Yield the first ring of each polygon in the geometry."""
    if not (coordinates and isinstance(coordinates, (list, tuple))):
        return
    if geometry_type == "Polygon":
        polygons = [coordinates]
    elif geometry_type == "MultiPolygon":
        polygons = coordinates
    else:
        return
    for polygon in polygons:
        if polygon and isinstance(polygon, (list, tuple)):
            ring = polygon[0]
            if isinstance(ring, (list, tuple)):
                yield ring


def geo_centroid(shape) -> tuple:
    """Approximate (lon, lat) centroid of a CountryShape."""
    if _valid_bbox(shape.bbox):
        min_x, min_y, max_x, max_y = shape.bbox
        return ((min_x + max_x) / 2, (min_y + max_y) / 2)

    sum_x = sum_y = 0.0
    count = 0
    for ring in _outer_rings(shape.geometry_type, shape.coordinates):
        for pt in ring:
            try:
                x, y = pt[0], pt[1]
            except (TypeError, IndexError, KeyError):
                continue
            if not (_is_number(x) and _is_number(y)):
                continue
            sum_x += x
            sum_y += y
            count += 1

    if count == 0:
        return (0.0, 0.0)
    return (sum_x / count, sum_y / count)


def compute_centroids(shapes, include=None):
    """Phase one of a map render: canonical name → centroid, read-only.

    `include(name, raw_name)` selects which shapes get an anchor (office
    countries, normally). The first shape seen for a canonical name wins.
    Centroids with a zero longitude or latitude are dropped; that also
    drops the (0, 0) fallback for shapes with no usable points.
    """
    centroids = {}
    for shape in shapes:
        name = normalize_name(shape.raw_name)
        if name in centroids:
            continue
        if include is not None and not include(name, shape.raw_name):
            continue
        cx, cy = geo_centroid(shape)
        if not (cx and cy):
            logger.debug("No usable centroid for %s", name)
            continue
        centroids[name] = (cx, cy)
    return MappingProxyType(centroids)
