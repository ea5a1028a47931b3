"""
In-memory boundary store
"""

import threading
from typing import Dict, List, Optional

from ..models import BoundaryRecord, Geometry, utcnow
from .base import BoundaryStore


class InMemoryBoundaryStore(BoundaryStore):
    """Dict-backed store; upserts are serialized by a lock"""
    
    def __init__(self):
        self._records: Dict[str, BoundaryRecord] = {}
        self._lock = threading.Lock()
    
    def get(self, parcel_id: str) -> Optional[BoundaryRecord]:
        return self._records.get(parcel_id)
    
    def get_all_except(self, parcel_id: str) -> List[BoundaryRecord]:
        return [r for pid, r in list(self._records.items()) if pid != parcel_id]
    
    def list_all(self) -> List[BoundaryRecord]:
        return list(self._records.values())
    
    def count(self) -> int:
        return len(self._records)
    
    def upsert(self, parcel_id: str, geometry: Geometry, area_sqm: float) -> BoundaryRecord:
        with self._lock:
            existing = self._records.get(parcel_id)
            if existing:
                record = existing.model_copy(update={
                    "geometry": geometry,
                    "area_sqm": area_sqm,
                    "updated_at": utcnow(),
                })
            else:
                record = BoundaryRecord(parcel_id=parcel_id, geometry=geometry, area_sqm=area_sqm)
            self._records[parcel_id] = record
            return record
