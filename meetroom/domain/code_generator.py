"""
Short access codes for newly created rooms.
"""

import random
import secrets
from typing import Optional

DEFAULT_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ1234567890"
DEFAULT_LENGTH = 6


class RoomCodeGenerator:
    """
    Generates random room codes from a fixed alphabet.

    Constructed explicitly and handed to the room service, so the alphabet,
    length and randomness source can differ per deployment or per test.
    """

    def __init__(
        self,
        alphabet: str = DEFAULT_ALPHABET,
        length: int = DEFAULT_LENGTH,
        random_source: Optional[random.Random] = None,
    ):
        if not alphabet:
            raise ValueError("alphabet must not be empty")
        if len(set(alphabet)) != len(alphabet):
            raise ValueError(f"alphabet contains repeated characters: {alphabet!r}")
        if length <= 0:
            raise ValueError(f"length must be greater than zero, got {length}")

        self.alphabet = alphabet
        self.length = length
        self._random = random_source or secrets.SystemRandom()

    def generate(self) -> str:
        """Return a new random code."""
        return "".join(self._random.choice(self.alphabet) for _ in range(self.length))

    def __call__(self) -> str:
        return self.generate()
