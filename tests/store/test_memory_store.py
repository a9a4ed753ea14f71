"""
Unit tests for InMemoryMappingStore.
"""
from concurrent.futures import ThreadPoolExecutor

import pytest

from app.store.exceptions import UniquenessViolation
from app.store.memory import InMemoryMappingStore


def test_insert_and_find():
    store = InMemoryMappingStore()
    created = store.insert("https://example.com/", "aaaaaaaaaa")

    assert store.find_by_long("https://example.com/") == created
    assert store.find_by_short("aaaaaaaaaa") == created
    assert store.count() == 1


def test_violations_on_either_column():
    """Test both constraints are enforced and nothing is half-written."""
    store = InMemoryMappingStore()
    store.insert("https://example.com/", "aaaaaaaaaa")

    with pytest.raises(UniquenessViolation):
        store.insert("https://example.com/", "bbbbbbbbbb")
    with pytest.raises(UniquenessViolation):
        store.insert("https://example.org/", "aaaaaaaaaa")

    assert store.find_by_short("bbbbbbbbbb") is None
    assert store.find_by_long("https://example.org/") is None
    assert store.count() == 1


def test_concurrent_inserts_same_token():
    """Test only one of many concurrent inserts for one token succeeds."""
    store = InMemoryMappingStore()

    def attempt(i: int) -> bool:
        try:
            store.insert(f"https://example.com/{i}", "samesamesa")
        except UniquenessViolation:
            return False
        return True

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(attempt, range(32)))

    assert results.count(True) == 1
    assert store.count() == 1
