"""
Parcel boundary geometry engine

Validates GeoJSON parcel footprints, computes their approximate area and
flags parcels that share exact vertices.
"""

from .config import EngineConfig, get_config, load_config_from_env, validate_config
from .errors import (
    ParcelBoundaryError,
    InvalidGeometryError,
    InvalidParcelIdError,
    BoundaryNotFoundError,
)
from .models import BoundaryRecord, GeoJSONMultiPolygon, GeoJSONPolygon, OverlapResult
from .service import ParcelBoundaryService
from .store import BoundaryStore, InMemoryBoundaryStore, JsonFileBoundaryStore, create_store

__version__ = "1.0.0"

__all__ = [
    "EngineConfig",
    "get_config",
    "load_config_from_env",
    "validate_config",
    "ParcelBoundaryError",
    "InvalidGeometryError",
    "InvalidParcelIdError",
    "BoundaryNotFoundError",
    "BoundaryRecord",
    "GeoJSONPolygon",
    "GeoJSONMultiPolygon",
    "OverlapResult",
    "ParcelBoundaryService",
    "BoundaryStore",
    "InMemoryBoundaryStore",
    "JsonFileBoundaryStore",
    "create_store",
]
