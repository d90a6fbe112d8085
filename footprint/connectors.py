"""
Nearest distribution centre resolution.

For every country centroid, scan the full centre list and keep the one
with the smallest great-circle distance. With ~80 countries and 34
centres a linear scan is plenty. Ties go to the centre listed first: the
running best is only replaced on a strictly smaller distance.
"""

from typing import Optional

from footprint.entities import Connector, DistributionCenter
from footprint.geometry import haversine_km


def nearest_center(point, centers) -> Optional[tuple]:
    """Return (center, distance_km) for the closest centre, or None if there are none."""
    best = None
    best_km = None
    for center in centers:
        km = haversine_km(point, center.coord)
        if best is None or km < best_km:
            best, best_km = center, km
    if best is None:
        return None
    return best, best_km


def resolve_connectors(centroids, centers) -> tuple:
    """Phase two of a map render: one Connector per country centroid.

    Countries are visited in the mapping's order. An empty centre list
    yields no connectors at all.
    """
    centers = list(centers)
    lines = []
    for country, centroid in centroids.items():
        match = nearest_center(centroid, centers)
        if match is None:
            continue
        center, km = match
        lines.append(Connector(
            country=country,
            origin=(centroid[0], centroid[1]),
            destination=center.coord,
            center=center,
            distance_km=km,
        ))
    return tuple(lines)


def make_center(name: str, country: str, lon: float, lat: float) -> DistributionCenter:
    return DistributionCenter(name=name, country=country, coord=(float(lon), float(lat)))
