"""
Shortener domain exceptions.

These are the failures the HTTP layer translates into responses.
"""


class ShortenerError(Exception):
    """Base exception for shortener operations."""

    pass


class InvalidUrlError(ShortenerError):
    """Raised when a long URL fails URI syntax validation."""

    def __init__(self, url: str, reason: str = "not an absolute URI"):
        self.url = url
        self.reason = reason
        super().__init__(f"Bad url [ {url} ]: {reason}")


class NonUniqueShortError(ShortenerError):
    """Raised when no free token could be allocated within the attempt limit."""

    def __init__(self, url: str, attempts: int):
        self.url = url
        self.attempts = attempts
        super().__init__(
            f"Unable to generate unique short sequence for [ {url} ] after {attempts} attempts"
        )


class UrlNotFoundError(ShortenerError):
    """Raised when a token has no mapping."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Given url wasn't found: {token}")
