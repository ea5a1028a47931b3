"""
Coordinate serialization helpers

Positions are reduced to "lon,lat" string keys for O(1) set lookups.
Keys use the default string form of each number, so 3 and 3.0 produce
different keys. Exact-match only; no rounding or tolerance is applied.
"""

from typing import Iterator, List, Sequence, Set

from ..models import GeoJSONPolygon, Geometry, Ring


def position_key(position: Sequence) -> str:
    """Serialize a position as "lon,lat" (any altitude member is ignored)"""
    return f"{position[0]},{position[1]}"


def iter_rings(geometry: Geometry) -> Iterator[Ring]:
    """Yield every ring of the geometry, across all polygons of a MultiPolygon"""
    if isinstance(geometry, GeoJSONPolygon):
        yield from geometry.coordinates
        return
    
    for polygon in geometry.coordinates:
        yield from polygon


def extract_coordinate_keys(geometry: Geometry) -> List[str]:
    """Flatten all positions in the geometry to "lon,lat" keys, duplicates included"""
    return [position_key(pos) for ring in iter_rings(geometry) for pos in ring]


def build_coordinate_set(geometry: Geometry) -> Set[str]:
    """Distinct "lon,lat" keys of all positions in the geometry"""
    return set(extract_coordinate_keys(geometry))
