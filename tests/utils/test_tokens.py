import random
import string

from app.services.shortener import Shortener
from app.store.memory import InMemoryMappingStore
from app.utils.tokens import SHORT_LENGTH, SYMBOLS, TokenGenerator, default_generator
from tests.constants import TOKEN_PATTERN


class TestTokenGenerator:
    """Token shape and seeding tests"""

    def test_alphabet_is_letters_digits_underscore(self):
        """Test the alphabet has no duplicates and no extra symbols"""
        assert len(SYMBOLS) == len(set(SYMBOLS))
        assert set(SYMBOLS) == set(string.ascii_letters + string.digits + "_")

    def test_token_shape(self):
        """Test every generated token has the fixed length and alphabet"""
        generator = TokenGenerator()
        for _ in range(500):
            token = generator.generate()
            assert len(token) == SHORT_LENGTH
            assert TOKEN_PATTERN.match(token)

    def test_shortener_uses_process_generator(self):
        """Test a Shortener without an explicit generator shares the process-wide one"""
        first = Shortener(InMemoryMappingStore())
        second = Shortener(InMemoryMappingStore())
        assert first.generator is default_generator
        assert second.generator is default_generator
        assert TOKEN_PATTERN.match(default_generator.generate())

    def test_same_seed_replays_sequence(self):
        """Test an explicit RNG fully determines the output"""
        first = TokenGenerator(random.Random(1234))
        second = TokenGenerator(random.Random(1234))
        assert [first.generate() for _ in range(5)] == [second.generate() for _ in range(5)]

    def test_default_generators_are_independently_seeded(self):
        """Test two default generators do not replay each other"""
        first = [TokenGenerator().generate() for _ in range(3)]
        second = [TokenGenerator().generate() for _ in range(3)]
        assert first != second

    def test_uses_whole_alphabet(self):
        """Test generation eventually covers every symbol"""
        generator = TokenGenerator(random.Random(7))
        seen = set()
        for _ in range(200):
            seen.update(generator.generate())
        assert seen == set(SYMBOLS)
