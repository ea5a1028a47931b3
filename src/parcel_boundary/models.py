"""
Pydantic models for parcel boundary records
Geometry follows GeoJSON: positions are [longitude, latitude]
"""

from datetime import datetime, timezone
from typing import Annotated, List, Dict, Any, Literal, Union
from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt
import uuid


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ============================================================
# GeoJSON Types
# ============================================================

# Strict so that 3 and 3.0 survive as written; position keys depend on it
Number = Union[StrictInt, StrictFloat]
Position = List[Number]  # [longitude, latitude, ...]
Ring = List[Position]


class GeoJSONPolygon(BaseModel):
    model_config = ConfigDict(extra="allow")
    
    type: Literal["Polygon"] = "Polygon"
    coordinates: List[Ring]  # outer ring first, then holes


class GeoJSONMultiPolygon(BaseModel):
    model_config = ConfigDict(extra="allow")
    
    type: Literal["MultiPolygon"] = "MultiPolygon"
    coordinates: List[List[Ring]]


Geometry = Annotated[Union[GeoJSONPolygon, GeoJSONMultiPolygon], Field(discriminator="type")]


# ============================================================
# Boundary Models
# ============================================================

class BoundaryRecord(BaseModel):
    """
    Stored boundary of a single parcel
    
    area_sqm is always derived from the geometry, never taken from the caller.
    created_at is set when the parcel is first saved and kept on overwrite.
    """
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    parcel_id: str
    geometry: Geometry
    area_sqm: float = Field(ge=0)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
    
    def to_geojson(self) -> Dict[str, Any]:
        """Convert to a GeoJSON Feature"""
        return {
            "type": "Feature",
            "id": self.id,
            "geometry": self.geometry.model_dump(),
            "properties": {
                "parcel_id": self.parcel_id,
                "area_sqm": self.area_sqm,
                "created_at": self.created_at.isoformat(),
                "updated_at": self.updated_at.isoformat(),
            }
        }


class OverlapResult(BaseModel):
    """Another parcel sharing at least one exact vertex with the source parcel"""
    parcel_id: str
    shared_vertex_count: int = Field(gt=0)
