"""
Shared fixtures for parcel boundary tests
"""

import pytest
from loguru import logger

from parcel_boundary import InMemoryBoundaryStore, ParcelBoundaryService


def square(x0, y0, size=1):
    """Closed counter-clockwise square ring with its corner at (x0, y0)"""
    return [
        [x0, y0],
        [x0 + size, y0],
        [x0 + size, y0 + size],
        [x0, y0 + size],
        [x0, y0],
    ]


def polygon(*rings):
    return {"type": "Polygon", "coordinates": list(rings)}


@pytest.fixture
def store():
    return InMemoryBoundaryStore()


@pytest.fixture
def service(store):
    return ParcelBoundaryService(store)


@pytest.fixture
def unit_square():
    return polygon(square(0, 0))


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during the test"""
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
