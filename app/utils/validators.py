import re
from urllib.parse import urlsplit

from app.services.exceptions import InvalidUrlError

# Matches the width of the long_url column
MAX_URL_LENGTH = 4096

_FORBIDDEN_CHARS = re.compile(r"[\s\x00-\x1f\x7f]")


def validate_long_url(url: str) -> None:
    """
    Validate that a long URL is a well-formed absolute URI.

    Rules:
    - Non-empty, encodable as UTF-8, at most 4096 bytes once encoded
    - No whitespace or control characters
    - A scheme, followed by an authority or a path
    - A numeric port when one is given

    Raises:
        InvalidUrlError: When the URL does not meet requirements
    """
    if not url:
        raise InvalidUrlError(url, "empty url")

    try:
        encoded = url.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidUrlError(url, "not valid UTF-8") from e

    if len(encoded) > MAX_URL_LENGTH:
        raise InvalidUrlError(url, f"longer than {MAX_URL_LENGTH} bytes")

    if _FORBIDDEN_CHARS.search(url):
        raise InvalidUrlError(url, "contains whitespace or control characters")

    try:
        parts = urlsplit(url)
        # Accessing .port validates the authority's port component
        parts.port
    except ValueError as e:
        raise InvalidUrlError(url, str(e)) from e

    if not parts.scheme:
        raise InvalidUrlError(url, "missing scheme")

    if not parts.netloc and not parts.path:
        raise InvalidUrlError(url, "missing authority and path")
