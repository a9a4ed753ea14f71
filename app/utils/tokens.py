"""
Utility functions for generating short URL tokens.

Tokens are fixed-length random strings drawn from a 63-symbol,
case-sensitive alphabet. The alphabet and length must never change:
previously issued tokens are stored with exactly this shape.
"""
import os
import random
import time

SHORT_LENGTH = 10

# Order matters only for compatibility with the historical generator
SYMBOLS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ1234567890_"


def _process_seed() -> int:
    """Mix OS entropy with the wall clock so restarts never replay a sequence."""
    return int.from_bytes(os.urandom(16), byteorder="big") ^ time.time_ns()


class TokenGenerator:
    """
    Random token generator.

    Not cryptographically secure. Collisions are handled by the caller
    retrying against the store, not by generator strength.
    """

    def __init__(self, rng: random.Random | None = None, length: int = SHORT_LENGTH):
        """
        Args:
            rng: Random source (default: a fresh Random seeded per process)
            length: Number of symbols per token
        """
        self._rng = rng or random.Random(_process_seed())
        self.length = length

    def generate(self) -> str:
        """
        Generate a candidate token.

        Returns:
            Token of `length` characters drawn from SYMBOLS
        """
        return "".join(self._rng.choice(SYMBOLS) for _ in range(self.length))


# Seeded once per process start; shared by every Shortener not given its own
default_generator = TokenGenerator()
