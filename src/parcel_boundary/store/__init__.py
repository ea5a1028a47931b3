"""
Boundary storage backends
"""

from .base import BoundaryStore
from .memory import InMemoryBoundaryStore
from .json_file import JsonFileBoundaryStore
from ..config import EngineConfig


def create_store(config: EngineConfig) -> BoundaryStore:
    """Build the store selected by ``config.store_backend``"""
    if config.store_backend == "memory":
        return InMemoryBoundaryStore()
    return JsonFileBoundaryStore(config.store_dir)


__all__ = [
    "BoundaryStore",
    "InMemoryBoundaryStore",
    "JsonFileBoundaryStore",
    "create_store",
]
