"""
Mapping store layer.

The shortener service depends only on MappingStore; concrete backends
are chosen at wiring time.
"""

from app.store.base import Mapping, MappingStore
from app.store.exceptions import StoreError, UniquenessViolation
from app.store.memory import InMemoryMappingStore
from app.store.sql import SqlAlchemyMappingStore

__all__ = [
    "Mapping",
    "MappingStore",
    "InMemoryMappingStore",
    "SqlAlchemyMappingStore",
    "StoreError",
    "UniquenessViolation",
]
