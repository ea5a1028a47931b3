"""
JSON file boundary store

Persists each parcel boundary as its own JSON document on disk
"""

import os
import json
import hashlib
import tempfile
import threading
from typing import List, Optional
from loguru import logger

from ..models import BoundaryRecord, Geometry, utcnow
from .base import BoundaryStore


class JsonFileBoundaryStore(BoundaryStore):
    """
    Stores one ``boundary_<hash>.json`` file per parcel in ``store_dir``
    
    Writes go to a temporary file that atomically replaces the target, so a
    reader never sees a half-written record. Unreadable or corrupt files are
    not skipped; the error reaches the caller.
    """
    
    def __init__(self, store_dir: str):
        self.store_dir = store_dir
        self._lock = threading.Lock()
        os.makedirs(store_dir, exist_ok=True)
    
    def get_record_path(self, parcel_id: str) -> str:
        """Get file path for a parcel's boundary record"""
        parcel_hash = hashlib.md5(parcel_id.encode("utf-8")).hexdigest()
        return os.path.join(self.store_dir, f"boundary_{parcel_hash}.json")
    
    def load(self, path: str) -> BoundaryRecord:
        """Load a boundary record from disk"""
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        return BoundaryRecord.model_validate(data)
    
    def save(self, record: BoundaryRecord) -> str:
        """Write a boundary record to disk"""
        path = self.get_record_path(record.parcel_id)
        fd, tmp_path = tempfile.mkstemp(dir=self.store_dir, suffix=".tmp")
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(record.model_dump(mode="json"), f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, path)
        except BaseException:
            os.unlink(tmp_path)
            raise
        logger.debug(f"Saved boundary for parcel {record.parcel_id} to {path}")
        return path
    
    def get(self, parcel_id: str) -> Optional[BoundaryRecord]:
        path = self.get_record_path(parcel_id)
        if not os.path.exists(path):
            return None
        return self.load(path)
    
    def list_all(self) -> List[BoundaryRecord]:
        records = []
        for name in os.listdir(self.store_dir):
            if name.startswith("boundary_") and name.endswith(".json"):
                records.append(self.load(os.path.join(self.store_dir, name)))
        
        # Directory order is arbitrary; keep results in creation order
        records.sort(key=lambda r: (r.created_at, r.parcel_id))
        return records
    
    def get_all_except(self, parcel_id: str) -> List[BoundaryRecord]:
        return [r for r in self.list_all() if r.parcel_id != parcel_id]
    
    def upsert(self, parcel_id: str, geometry: Geometry, area_sqm: float) -> BoundaryRecord:
        with self._lock:
            existing = self.get(parcel_id)
            if existing:
                record = existing.model_copy(update={
                    "geometry": geometry,
                    "area_sqm": area_sqm,
                    "updated_at": utcnow(),
                })
            else:
                record = BoundaryRecord(parcel_id=parcel_id, geometry=geometry, area_sqm=area_sqm)
            self.save(record)
            return record
