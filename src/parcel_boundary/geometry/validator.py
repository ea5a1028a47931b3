"""
GeoJSON Polygon / MultiPolygon validation

Turns an untyped, JSON-like value into a typed geometry or rejects it.

Polygon rules:
  - coordinates is a non-empty list of rings
  - every ring has at least 4 positions
  - every position is a list of at least 2 numbers
  - every ring is closed: the "lon,lat" key of the first and last position
    match exactly. There is no tolerance, so a ring that is only closed up
    to floating point rounding is rejected.

MultiPolygon rules:
  - coordinates is a non-empty list of polygons, each following the
    Polygon rules above
"""

import math
from typing import Any, Type

from pydantic import ValidationError

from ..errors import InvalidGeometryError
from ..models import GeoJSONMultiPolygon, GeoJSONPolygon, Geometry
from .area import MIN_RING_POSITIONS
from .coordinates import position_key


def _is_number(value: Any) -> bool:
    # bool is an int subclass but not a coordinate
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    # NaN and Infinity are accepted by json.load but have no position
    return isinstance(value, int) or math.isfinite(value)


def _is_position(value: Any) -> bool:
    return (
        isinstance(value, list)
        and len(value) >= 2
        and _is_number(value[0])
        and _is_number(value[1])
    )


def _check_polygon_coords(rings: Any, where: str) -> None:
    if not isinstance(rings, list) or not rings:
        raise InvalidGeometryError(f"{where} must be a non-empty list of rings")
    
    for i, ring in enumerate(rings):
        if not isinstance(ring, list):
            raise InvalidGeometryError(f"ring {i} of {where} is not a list")
        if len(ring) < MIN_RING_POSITIONS:
            raise InvalidGeometryError(
                f"ring {i} of {where} has {len(ring)} positions, "
                f"at least {MIN_RING_POSITIONS} are required"
            )
        for j, pos in enumerate(ring):
            if not _is_position(pos):
                raise InvalidGeometryError(
                    f"position {j} of ring {i} of {where} is not a numeric [lon, lat] pair"
                )
        if position_key(ring[0]) != position_key(ring[-1]):
            raise InvalidGeometryError(f"ring {i} of {where} is not closed")


def _build(model: Type[Any], raw: dict) -> Geometry:
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        # e.g. a non-numeric altitude member
        raise InvalidGeometryError(
            f"coordinates do not match {raw['type']}: {e.error_count()} error(s)"
        ) from e


def parse_geometry(raw: Any) -> Geometry:
    """
    Parse an untyped value into a GeoJSONPolygon or GeoJSONMultiPolygon.
    
    Raises:
        InvalidGeometryError: naming the first structural problem found
    """
    if not isinstance(raw, dict):
        raise InvalidGeometryError("geometry must be an object")
    
    geom_type = raw.get("type")
    coords = raw.get("coordinates")
    
    if not isinstance(coords, list):
        raise InvalidGeometryError("coordinates must be a list")
    
    if geom_type == "Polygon":
        _check_polygon_coords(coords, "the polygon")
        return _build(GeoJSONPolygon, raw)
    
    if geom_type == "MultiPolygon":
        if not coords:
            raise InvalidGeometryError("a MultiPolygon needs at least one polygon")
        for i, polygon in enumerate(coords):
            _check_polygon_coords(polygon, f"polygon {i}")
        return _build(GeoJSONMultiPolygon, raw)
    
    raise InvalidGeometryError(f"unsupported geometry type {geom_type!r}")


def validate_geometry(raw: Any) -> bool:
    """True when ``raw`` is a structurally valid Polygon or MultiPolygon"""
    try:
        parse_geometry(raw)
    except InvalidGeometryError:
        return False
    return True
