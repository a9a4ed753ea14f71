"""
Store-specific exceptions.

UniquenessViolation is an internal signal between the store and the
shortener service. It never reaches HTTP clients.
"""


class StoreError(Exception):
    """Base exception for mapping store operations."""

    pass


class UniquenessViolation(StoreError):
    """Raised when an insert would break the long URL or token uniqueness."""

    def __init__(self, long_url: str, short_token: str):
        self.long_url = long_url
        self.short_token = short_token
        super().__init__(
            f"Mapping {short_token} -> {long_url} conflicts with an existing mapping"
        )
