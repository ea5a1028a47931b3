"""
Vertex-sharing overlap heuristic

Two parcels are reported as potentially overlapping when they share at least
one exact "lon,lat" vertex. This is not a geometric intersection test:
parcels that overlap without a common vertex are missed, and parcels that
only touch at a corner are reported like any other match.
"""

from typing import Iterable, List

from loguru import logger

from .geometry.coordinates import build_coordinate_set
from .models import BoundaryRecord, Geometry, OverlapResult


def count_shared_vertices(source_keys: set, geometry: Geometry) -> int:
    """Number of distinct vertices of ``geometry`` present in ``source_keys``"""
    return len(build_coordinate_set(geometry) & source_keys)


def rank_overlaps(
    source_geometry: Geometry,
    candidates: Iterable[BoundaryRecord]
) -> List[OverlapResult]:
    """
    Rank candidate boundaries by the number of vertices they share with the source
    
    Candidates sharing nothing are dropped. Results are sorted by shared count,
    highest first; ties keep candidate order. Each distinct vertex counts once,
    so the repeated closing vertex of a ring is not counted twice.
    """
    source_keys = build_coordinate_set(source_geometry)
    
    overlaps = []
    checked = 0
    for candidate in candidates:
        checked += 1
        shared = count_shared_vertices(source_keys, candidate.geometry)
        if shared > 0:
            overlaps.append(OverlapResult(
                parcel_id=candidate.parcel_id,
                shared_vertex_count=shared
            ))
    
    logger.debug(
        f"Overlap check: {len(source_keys)} source vertices, "
        f"{checked} candidates, {len(overlaps)} sharing vertices"
    )
    
    # list.sort is stable
    overlaps.sort(key=lambda o: o.shared_vertex_count, reverse=True)
    return overlaps
