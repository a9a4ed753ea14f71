"""
URL shortening service.

Ties token generation to the mapping store. The service is stateless
between calls: every shorten and lookup goes to the store, and conflict
detection is left entirely to the store's atomic insert.
"""
from app.logging_config import setup_logging
from app.services.exceptions import NonUniqueShortError, UrlNotFoundError
from app.store.base import Mapping, MappingStore
from app.store.exceptions import UniquenessViolation
from app.utils.tokens import TokenGenerator, default_generator
from app.utils.validators import validate_long_url

logger = setup_logging()

MAX_ATTEMPTS = 3


class Shortener:
    """
    Idempotent shorten and exact lookup on top of a MappingStore.

    Example:
        >>> shortener = Shortener(InMemoryMappingStore())
        >>> first = shortener.shorten("https://example.com/path")
        >>> shortener.shorten("https://example.com/path") == first
        True
        >>> shortener.lookup(first.short_token).long_url
        'https://example.com/path'
    """

    def __init__(
        self,
        store: MappingStore,
        generator: TokenGenerator | None = None,
        max_attempts: int = MAX_ATTEMPTS,
    ):
        self.store = store
        self.generator = generator or default_generator
        self.max_attempts = max_attempts

    def shorten(self, long_url: str) -> Mapping:
        """
        Return the mapping for long_url, creating it on first use.

        Every attempt starts by checking for an existing mapping, so a
        concurrent writer that wins the race for the same long URL is
        picked up instead of burning the remaining attempts. Only failed
        inserts consume an attempt.

        Args:
            long_url: Absolute URI to shorten

        Returns:
            Existing or newly created Mapping

        Raises:
            InvalidUrlError: If long_url is not a well-formed absolute URI
            NonUniqueShortError: If every attempt hit a uniqueness violation
        """
        validate_long_url(long_url)

        last_violation: UniquenessViolation | None = None
        for attempt in range(1, self.max_attempts + 1):
            existing = self.store.find_by_long(long_url)
            if existing is not None:
                return existing

            candidate = self.generator.generate()
            try:
                mapping = self.store.insert(long_url, candidate)
            except UniquenessViolation as e:
                logger.warning(
                    f"Uniqueness violation for token {candidate} "
                    f"(attempt {attempt}/{self.max_attempts})"
                )
                last_violation = e
                continue

            logger.info(f"Saved url [{mapping.short_token} -> {mapping.long_url}]")
            return mapping

        logger.error(f"Unable to allocate a unique token for [ {long_url} ]")
        raise NonUniqueShortError(long_url, self.max_attempts) from last_violation

    def lookup(self, short_token: str) -> Mapping:
        """
        Resolve a token to its mapping. Matching is exact and case-sensitive.

        Raises:
            UrlNotFoundError: If no mapping has this token
        """
        mapping = self.store.find_by_short(short_token)
        if mapping is None:
            raise UrlNotFoundError(short_token)
        return mapping
