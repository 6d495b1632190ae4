# ABOUTME: Deterministic 32-bit linear congruential generator and Fisher-Yates shuffle
# ABOUTME: Same seed gives the same draws on every platform, which keeps daily sets shared

import random as _entropy
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")

UINT32_MASK = 0xFFFFFFFF
TWO_POW_32 = 2 ** 32

LCG_MULTIPLIER = 1664525
LCG_INCREMENT = 1013904223


class SeededRandom:
    """
    Numerical Recipes LCG: state = (state * 1664525 + 1013904223) mod 2^32.

    Each draw returns state / 2^32, a float in [0, 1). Without a seed one
    is drawn from process entropy, so unseeded instances still expose the
    seed they ended up using.
    """

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = _entropy.randrange(2147483647)
        self.seed = int(seed) & UINT32_MASK
        self._state = self.seed

    def next_uint32(self) -> int:
        self._state = (self._state * LCG_MULTIPLIER + LCG_INCREMENT) & UINT32_MASK
        return self._state

    def random(self) -> float:
        return self.next_uint32() / TWO_POW_32

    def randbelow(self, n: int) -> int:
        """Draw an index in [0, n)."""
        if n <= 0:
            raise ValueError(f"randbelow needs a positive bound, got {n}")
        return int(self.random() * n)

    def shuffle(self, items: Sequence[T]) -> list[T]:
        """Return a shuffled copy; walks from the last index down to 1."""
        shuffled = list(items)
        for i in range(len(shuffled) - 1, 0, -1):
            j = self.randbelow(i + 1)
            shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
        return shuffled
