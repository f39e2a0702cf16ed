"""
rotation/lcg.py — linear congruential generator and seeded permutations.

state' = (A · state + C) mod 2^31,  A = 1103515245, C = 12345

Draws use the high bits of the state (the low bits of a power-of-two LCG
cycle with short periods). Output depends only on the seed, on every
platform and interpreter.
"""

from __future__ import annotations

LCG_MULTIPLIER = 1103515245
LCG_INCREMENT  = 12345
LCG_MODULUS    = 2 ** 31


class LinearCongruential:
    __slots__ = ("state",)

    def __init__(self, seed: int) -> None:
        self.state = seed % LCG_MODULUS

    def next(self) -> int:
        self.state = (LCG_MULTIPLIER * self.state + LCG_INCREMENT) % LCG_MODULUS
        return self.state

    def randbelow(self, n: int) -> int:
        """Integer in [0, n), scaled from the full 31-bit state."""
        if n <= 0:
            raise ValueError(f"n must be positive, got {n}")
        return (self.next() * n) >> 31


def seeded_permutation(size: int, seed: int) -> list[int]:
    """Fisher–Yates shuffle of range(size) driven by LinearCongruential(seed)."""
    rng = LinearCongruential(seed)
    perm = list(range(size))
    for i in range(size - 1, 0, -1):
        j = rng.randbelow(i + 1)
        perm[i], perm[j] = perm[j], perm[i]
    return perm
