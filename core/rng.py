"""Pseudo-random source for password generation.

A linear-congruential generator seeded from the nanosecond wall clock.

SECURITY: this generator is predictable. Anyone who can estimate the moment
a password was generated can replay the sequence. It is kept as the entropy
source on purpose; swap in a CSPRNG behind ``generate_password`` if the
passwords must resist prediction.
"""

import time
from typing import Optional

from core.config import LCG_MULTIPLIER, LCG_INCREMENT, LCG_MODULUS


class LinearCongruentialGenerator:
    """Seedable LCG: ``seed = (seed * a + c) mod 2**31``."""

    def __init__(self, seed: Optional[int] = None):
        """Create a generator.

        Args:
            seed: Starting state. Defaults to ``time.time_ns()`` taken now.
        """
        self.seed = time.time_ns() if seed is None else seed

    def next(self) -> int:
        """Advance the state once and return it."""
        self.seed = (self.seed * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        return self.seed

    def choice(self, alphabet: str) -> str:
        """Advance once and pick ``alphabet[state mod len(alphabet)]``.

        Raises:
            ValueError: If alphabet is empty
        """
        if not alphabet:
            raise ValueError("Cannot choose from an empty alphabet.")
        return alphabet[self.next() % len(alphabet)]
