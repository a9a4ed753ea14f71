"""
Abstract base class for mapping stores.

This module defines the interface the shortener service depends on. The
store owns every persisted mapping; the service keeps no copies between
calls.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Mapping:
    """A long URL paired with its short token. Immutable once created."""

    long_url: str
    short_token: str


class MappingStore(ABC):
    """
    Abstract base class for mapping stores.

    Both columns are independently unique. Implementations must make
    `insert` atomic: two concurrent inserts sharing a long URL or a token
    cannot both succeed.
    """

    @abstractmethod
    def find_by_long(self, long_url: str) -> Mapping | None:
        """
        Exact-match lookup on the long URL.

        Args:
            long_url: Long URL as submitted

        Returns:
            Mapping if present, None otherwise
        """
        pass

    @abstractmethod
    def find_by_short(self, short_token: str) -> Mapping | None:
        """
        Exact, case-sensitive lookup on the token.

        Args:
            short_token: Token to resolve

        Returns:
            Mapping if present, None otherwise
        """
        pass

    @abstractmethod
    def insert(self, long_url: str, short_token: str) -> Mapping:
        """
        Atomically persist a new mapping.

        Args:
            long_url: Long URL, not yet mapped
            short_token: Candidate token

        Returns:
            The created Mapping

        Raises:
            UniquenessViolation: If either the long URL or the token is taken

        Other backend failures (e.g. SQLAlchemy connection errors) propagate
        unchanged.
        """
        pass

    @abstractmethod
    def count(self) -> int:
        """Return the number of persisted mappings."""
        pass
