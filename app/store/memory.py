"""
In-memory mapping store.

Keeps both unique indexes in dicts guarded by a single lock. Nothing
survives a restart, so this backend is meant for development and tests.
"""
import threading

from app.store.base import Mapping, MappingStore
from app.store.exceptions import UniquenessViolation


class InMemoryMappingStore(MappingStore):
    def __init__(self):
        self._by_long: dict[str, Mapping] = {}
        self._by_short: dict[str, Mapping] = {}
        self._lock = threading.Lock()

    def find_by_long(self, long_url: str) -> Mapping | None:
        with self._lock:
            return self._by_long.get(long_url)

    def find_by_short(self, short_token: str) -> Mapping | None:
        with self._lock:
            return self._by_short.get(short_token)

    def insert(self, long_url: str, short_token: str) -> Mapping:
        with self._lock:
            if long_url in self._by_long or short_token in self._by_short:
                raise UniquenessViolation(long_url, short_token)

            mapping = Mapping(long_url=long_url, short_token=short_token)
            self._by_long[long_url] = mapping
            self._by_short[short_token] = mapping
            return mapping

    def count(self) -> int:
        with self._lock:
            return len(self._by_long)
