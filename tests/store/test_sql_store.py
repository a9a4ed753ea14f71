"""
Tests for the SQLAlchemy mapping store against the migrated schema.
"""
import pytest

from app.store.base import Mapping
from app.store.exceptions import UniquenessViolation


class TestSqlAlchemyMappingStore:
    """Test suite for SqlAlchemyMappingStore"""

    def test_insert_and_find(self, store):
        """Verify an inserted mapping is found by both columns."""
        created = store.insert("https://example.com/a", "abcdeFGHIJ")

        assert created == Mapping(long_url="https://example.com/a", short_token="abcdeFGHIJ")
        assert store.find_by_long("https://example.com/a") == created
        assert store.find_by_short("abcdeFGHIJ") == created
        assert store.count() == 1

    def test_find_missing_returns_none(self, store):
        assert store.find_by_long("https://example.com/missing") is None
        assert store.find_by_short("nonexisten") is None

    def test_duplicate_long_url_violates(self, store):
        """Verify the long URL column is unique."""
        store.insert("https://example.com/a", "aaaaaaaaaa")

        with pytest.raises(UniquenessViolation) as exc:
            store.insert("https://example.com/a", "bbbbbbbbbb")

        assert exc.value.long_url == "https://example.com/a"
        assert exc.value.short_token == "bbbbbbbbbb"
        assert store.count() == 1

    def test_duplicate_token_violates(self, store):
        """Verify the token column is unique."""
        store.insert("https://example.com/a", "aaaaaaaaaa")

        with pytest.raises(UniquenessViolation):
            store.insert("https://example.com/b", "aaaaaaaaaa")

        assert store.find_by_long("https://example.com/b") is None
        assert store.count() == 1

    def test_store_usable_after_violation(self, store):
        """Verify a failed insert leaves no half-open transaction behind."""
        store.insert("https://example.com/a", "aaaaaaaaaa")
        with pytest.raises(UniquenessViolation):
            store.insert("https://example.com/b", "aaaaaaaaaa")

        store.insert("https://example.com/b", "bbbbbbbbbb")
        assert store.count() == 2

    def test_token_lookup_is_case_sensitive(self, store):
        """Verify tokens differing only by case are distinct."""
        store.insert("https://example.com/lower", "abcdefghij")
        store.insert("https://example.com/upper", "ABCDEFGHIJ")

        assert store.find_by_short("abcdefghij").long_url == "https://example.com/lower"
        assert store.find_by_short("ABCDEFGHIJ").long_url == "https://example.com/upper"
        assert store.find_by_short("Abcdefghij") is None

    def test_mappings_are_immutable(self, store):
        created = store.insert("https://example.com/a", "aaaaaaaaaa")

        with pytest.raises(AttributeError):
            created.short_token = "bbbbbbbbbb"
