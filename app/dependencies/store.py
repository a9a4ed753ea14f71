"""
Store dependency injection for FastAPI.

This module provides FastAPI dependency functions for injecting the
mapping store and the shortener service into endpoints.
"""
from functools import lru_cache

from fastapi import Depends

from app.config import settings
from app.database import SessionLocal
from app.services.shortener import Shortener
from app.store.base import MappingStore
from app.store.memory import InMemoryMappingStore
from app.store.sql import SqlAlchemyMappingStore


@lru_cache
def get_store() -> MappingStore:
    """
    Return the mapping store selected by configuration.

    Cached so the whole process shares one store (and, for the memory
    backend, one set of indexes).

    Returns:
        MappingStore instance (sql or memory)

    Raises:
        ValueError: If STORE_BACKEND is not supported
    """
    if settings.STORE_BACKEND == "sql":
        return SqlAlchemyMappingStore(SessionLocal)

    if settings.STORE_BACKEND == "memory":
        return InMemoryMappingStore()

    raise ValueError(f"Unknown store backend: {settings.STORE_BACKEND}")


def get_shortener(store: MappingStore = Depends(get_store)) -> Shortener:
    return Shortener(store)
