"""
Approximate parcel area

Shoelace formula over an equirectangular projection centred on each ring's
mean latitude. Good for parcel-sized polygons only: there is no geodesic
correction, and rings crossing the antimeridian or reaching the poles give
meaningless (but finite, non-negative) results.
"""

import math
from typing import List

from ..models import GeoJSONPolygon, Geometry, Ring

METERS_PER_DEGREE = 111320
MIN_RING_POSITIONS = 4


def ring_area(ring: Ring) -> float:
    """Calculate the unsigned area of a closed ring in square meters"""
    if len(ring) < MIN_RING_POSITIONS:
        return 0.0
    
    # Mean latitude includes the duplicated closing vertex
    center_lat = sum(pos[1] for pos in ring) / len(ring)
    
    m_per_deg_lat = METERS_PER_DEGREE
    m_per_deg_lon = METERS_PER_DEGREE * math.cos(math.radians(center_lat))
    
    # The ring is closed, so consecutive pairs already wrap last -> first
    area = 0.0
    for i in range(len(ring) - 1):
        x1 = ring[i][0] * m_per_deg_lon
        y1 = ring[i][1] * m_per_deg_lat
        x2 = ring[i + 1][0] * m_per_deg_lon
        y2 = ring[i + 1][1] * m_per_deg_lat
        area += x1 * y2 - x2 * y1
    
    return abs(area) / 2.0


def polygon_area(rings: List[Ring]) -> float:
    """Outer ring minus holes, never below zero"""
    if not rings:
        return 0.0
    
    area = ring_area(rings[0])
    for hole in rings[1:]:
        area -= ring_area(hole)
    
    return max(0.0, area)


def compute_area(geometry: Geometry) -> float:
    """
    Approximate area of a validated geometry in square meters
    
    Polygon: outer ring minus holes.
    MultiPolygon: sum of each polygon's area.
    """
    if isinstance(geometry, GeoJSONPolygon):
        return polygon_area(geometry.coordinates)
    
    return sum((polygon_area(rings) for rings in geometry.coordinates), 0.0)
