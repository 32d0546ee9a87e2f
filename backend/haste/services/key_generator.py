"""
Haste Store — Document Key Generator
======================================

What:  Produces short opaque keys made of lowercase letters.
How:   Each character is drawn independently and uniformly from a-z using a
       non-cryptographic PRNG.

Key space:
    26 ** length keys (10 letters ≈ 1.4e14). Keys are NOT checked for
    uniqueness; a repeated key overwrites the earlier document.
"""

import random
import string
from typing import Optional

ALPHABET = string.ascii_lowercase


class KeyGenerator:
    """Generates fixed-length keys over ALPHABET."""

    def __init__(self, length: int = 10, rng: Optional[random.Random] = None):
        if length < 1:
            raise ValueError(f"Key length must be at least 1, got {length}")
        self.length = length
        self._rng = rng or random.Random()

    def generate(self) -> str:
        return "".join(self._rng.choice(ALPHABET) for _ in range(self.length))
