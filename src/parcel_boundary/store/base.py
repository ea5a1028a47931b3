"""
Boundary store interface

The engine only reads and writes boundaries through this interface; the
backing storage is supplied by the caller.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models import BoundaryRecord, Geometry


class BoundaryStore(ABC):
    """Keyed storage holding at most one BoundaryRecord per parcel ID"""
    
    @abstractmethod
    def get(self, parcel_id: str) -> Optional[BoundaryRecord]:
        """Return the record for ``parcel_id`` or None"""
    
    @abstractmethod
    def get_all_except(self, parcel_id: str) -> List[BoundaryRecord]:
        """Return every stored record except the one for ``parcel_id``"""
    
    @abstractmethod
    def upsert(self, parcel_id: str, geometry: Geometry, area_sqm: float) -> BoundaryRecord:
        """
        Create the record for ``parcel_id`` or overwrite its geometry and area
        
        An overwrite keeps the record's id and created_at.
        """
    
    @abstractmethod
    def list_all(self) -> List[BoundaryRecord]:
        """Return every stored record"""
    
    def count(self) -> int:
        return len(self.list_all())
