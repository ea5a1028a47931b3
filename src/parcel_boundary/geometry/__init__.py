"""
Parcel geometry: validation, area and coordinate keys
"""

from .area import compute_area, polygon_area, ring_area, METERS_PER_DEGREE
from .coordinates import (
    build_coordinate_set,
    extract_coordinate_keys,
    iter_rings,
    position_key,
)
from .validator import parse_geometry, validate_geometry

__all__ = [
    "compute_area",
    "polygon_area",
    "ring_area",
    "METERS_PER_DEGREE",
    "build_coordinate_set",
    "extract_coordinate_keys",
    "iter_rings",
    "position_key",
    "parse_geometry",
    "validate_geometry",
]
