"""
Haste Store — Key Generator Unit Tests
========================================

What we test:
    ✅ Generated keys have exactly the configured length
    ✅ Every character comes from the a-z alphabet
    ✅ Injected PRNG makes output reproducible
    ✅ Invalid lengths are rejected at construction
"""

import random
import string

import pytest

from haste.services.key_generator import ALPHABET, KeyGenerator


class TestKeyGenerator:
    """Tests for KeyGenerator.generate()."""

    def test_alphabet_is_all_lowercase_letters(self):
        assert ALPHABET == "abcdefghijklmnopqrstuvwxyz"
        assert len(set(ALPHABET)) == 26

    def test_default_length_is_ten(self):
        key = KeyGenerator().generate()
        assert len(key) == 10

    @pytest.mark.parametrize("length", [1, 2, 7, 10, 32, 64])
    def test_length_and_alphabet(self, length):
        generator = KeyGenerator(length=length)
        for _ in range(50):
            key = generator.generate()
            assert len(key) == length
            assert all(ch in ALPHABET for ch in key)

    def test_injected_rng_is_deterministic(self):
        first = KeyGenerator(length=12, rng=random.Random(42))
        second = KeyGenerator(length=12, rng=random.Random(42))
        assert [first.generate() for _ in range(5)] == [second.generate() for _ in range(5)]

    def test_keys_cover_the_alphabet(self, seeded_rng):
        """Over many draws every letter should show up (uniform source)."""
        generator = KeyGenerator(length=10, rng=seeded_rng)
        seen = set()
        for _ in range(500):
            seen.update(generator.generate())
        assert seen == set(string.ascii_lowercase)

    @pytest.mark.parametrize("length", [0, -1])
    def test_invalid_length_rejected(self, length):
        with pytest.raises(ValueError):
            KeyGenerator(length=length)
