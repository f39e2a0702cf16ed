"""
rotation — deterministic daily rotation over the misconception collection.

Public API:
  RotationScheduler(strategy, epoch)   selector (index_for, indices_for_range)
  RotationStrategy                     "simple-hash" | "full-cycle"
  DailyPick                            (day, index)
  simple_hash_index(day, size)         -> int
  full_cycle_index(day, size, epoch)   -> int
  cycle_permutation(cycle, size)       -> list[int]
  distinct_indices(picks)              -> list[int]
  seeded_permutation(size, seed)       -> list[int]
"""

from .lcg import LinearCongruential, seeded_permutation
from .scheduler import (
    EPOCH,
    DailyPick,
    RotationScheduler,
    RotationStrategy,
    cycle_permutation,
    distinct_indices,
    full_cycle_index,
    simple_hash_index,
)

__all__ = [
    "LinearCongruential",
    "seeded_permutation",
    "EPOCH",
    "DailyPick",
    "RotationScheduler",
    "RotationStrategy",
    "cycle_permutation",
    "distinct_indices",
    "full_cycle_index",
    "simple_hash_index",
]
