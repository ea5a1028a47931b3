"""
Parcel boundary service

Validates and stores parcel boundaries, and looks for parcels that may
overlap by sharing exact vertices.

  save:     validate -> compute area -> store upsert
  overlaps: store lookup of source + all others -> rank by shared vertices
"""

from typing import Any, List
from loguru import logger

from .errors import BoundaryNotFoundError, InvalidGeometryError, InvalidParcelIdError
from .geometry import compute_area, parse_geometry, validate_geometry
from .models import BoundaryRecord, OverlapResult
from .overlap import rank_overlaps
from .store import BoundaryStore


class ParcelBoundaryService:
    """
    Boundary operations on top of an injected BoundaryStore
    
    Usage:
        service = ParcelBoundaryService(InMemoryBoundaryStore())
        record = service.save_boundary("PARCEL-001", geojson)
        overlaps = service.find_potential_overlaps("PARCEL-001")
    
    The service holds no state of its own. Concurrent saves for the same
    parcel are last-write-wins unless the store makes upsert atomic.
    """
    
    def __init__(self, store: BoundaryStore):
        self.store = store
    
    @staticmethod
    def _check_parcel_id(parcel_id: Any) -> None:
        if not isinstance(parcel_id, str) or not parcel_id:
            raise InvalidParcelIdError(parcel_id)
    
    def validate_geometry(self, raw_geometry: Any) -> bool:
        """True when the input is a structurally valid Polygon or MultiPolygon"""
        return validate_geometry(raw_geometry)
    
    def save_boundary(self, parcel_id: str, raw_geometry: Any) -> BoundaryRecord:
        """
        Validate and store a GeoJSON boundary for the parcel
        
        An existing boundary for the parcel is overwritten in place.
        
        Raises:
            InvalidParcelIdError: parcel_id is not a non-empty string
            InvalidGeometryError: raw_geometry is not an acceptable Polygon/MultiPolygon
        """
        self._check_parcel_id(parcel_id)
        
        try:
            geometry = parse_geometry(raw_geometry)
        except InvalidGeometryError as e:
            logger.warning(f"Rejected boundary for parcel {parcel_id}: {e.reason}")
            raise
        
        area_sqm = compute_area(geometry)
        record = self.store.upsert(parcel_id, geometry, area_sqm)
        
        logger.info(f"Saved boundary for parcel {parcel_id}: {geometry.type}, {area_sqm:.2f} m²")
        return record
    
    def get_boundary(self, parcel_id: str) -> BoundaryRecord:
        """
        Return the stored boundary for a parcel
        
        Raises:
            BoundaryNotFoundError: nothing is stored for parcel_id
        """
        self._check_parcel_id(parcel_id)
        
        boundary = self.store.get(parcel_id)
        if boundary is None:
            raise BoundaryNotFoundError(parcel_id)
        return boundary
    
    def find_potential_overlaps(self, parcel_id: str) -> List[OverlapResult]:
        """
        Other parcels sharing at least one exact vertex with this parcel
        
        Sorted by shared vertex count, highest first. All other boundaries
        are loaded into memory for the comparison.
        
        Raises:
            BoundaryNotFoundError: nothing is stored for parcel_id
        """
        source = self.get_boundary(parcel_id)
        others = self.store.get_all_except(parcel_id)
        
        overlaps = rank_overlaps(source.geometry, others)
        logger.info(f"Parcel {parcel_id}: {len(overlaps)} potential overlaps among {len(others)} parcels")
        return overlaps
