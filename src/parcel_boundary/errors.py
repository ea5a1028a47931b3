"""
Errors raised by the parcel boundary engine

Store failures are deliberately absent: whatever the store raises reaches
the caller unchanged.
"""


class ParcelBoundaryError(Exception):
    """Base class for engine errors"""


class InvalidGeometryError(ParcelBoundaryError, ValueError):
    """The supplied structure is not an acceptable Polygon/MultiPolygon"""
    
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(
            "Invalid GeoJSON: must be a Polygon or MultiPolygon with closed rings "
            f"of at least 4 positions ({reason})"
        )


class InvalidParcelIdError(ParcelBoundaryError, ValueError):
    """Parcel IDs must be non-empty strings"""
    
    def __init__(self, parcel_id: object):
        self.parcel_id = parcel_id
        super().__init__(f"Parcel ID must be a non-empty string, got {parcel_id!r}")


class BoundaryNotFoundError(ParcelBoundaryError, LookupError):
    """No boundary record is stored for the parcel"""
    
    def __init__(self, parcel_id: str):
        self.parcel_id = parcel_id
        super().__init__(f'No boundary found for parcel ID "{parcel_id}"')
