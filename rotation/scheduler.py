"""
rotation/scheduler.py — which misconception is shown on a given day.

Two strategies, chosen explicitly when the scheduler is built. Switching a
live deployment from one to the other changes what was shown on past days.

  simple-hash  index = LCG32(year·10000 + month0·100 + day) mod size
               month0 counts from zero. Deterministic, roughly uniform,
               repeats are possible within any window.

  full-cycle   d = days since EPOCH, cycle = d // size, position = d mod size
               index = permutation(cycle)[position], where permutation(cycle)
               is a seeded Fisher–Yates shuffle of range(size). Every index
               appears exactly once in each run of `size` days starting at
               EPOCH + cycle·size. Changing `size` reshuffles every cycle.

Both are pure functions of (date, size).

Public API:
  RotationScheduler(strategy, epoch).index_for(day, size)            -> int
  RotationScheduler(strategy, epoch).indices_for_range(start, days, size)
                                                                     -> list[DailyPick]
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import StrEnum

from rotation.lcg import seeded_permutation

EPOCH = date(2024, 1, 1)

_UINT32 = 2 ** 32


class RotationStrategy(StrEnum):
    SIMPLE_HASH = "simple-hash"
    FULL_CYCLE  = "full-cycle"


@dataclass(frozen=True, slots=True)
class DailyPick:
    day: date
    index: int


def _as_date(value: date | datetime) -> date:
    # datetime is a subclass of date
    if isinstance(value, datetime):
        return value.date()
    return value


def _check_size(size: int) -> None:
    if size <= 0:
        raise ValueError(f"collection size must be positive, got {size}")


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

def simple_hash_index(day: date | datetime, size: int) -> int:
    _check_size(size)
    day = _as_date(day)
    seed = day.year * 10000 + (day.month - 1) * 100 + day.day
    # Published selections were computed in double precision and then
    # truncated to an unsigned 32-bit integer; keep that rounding.
    value = float(seed) * 1103515245.0 + 12345.0
    return (int(value) % _UINT32) % size


@functools.lru_cache(maxsize=64)
def _cycle_permutation(cycle: int, size: int) -> tuple[int, ...]:
    return tuple(seeded_permutation(size, cycle))


def cycle_permutation(cycle: int, size: int) -> list[int]:
    """The full-cycle order of indices for one cycle."""
    _check_size(size)
    return list(_cycle_permutation(cycle, size))


def full_cycle_index(day: date | datetime, size: int, epoch: date = EPOCH) -> int:
    _check_size(size)
    d = (_as_date(day) - epoch).days
    cycle, position = divmod(d, size)   # floor semantics: dates before epoch work too
    return _cycle_permutation(cycle, size)[position]


# ---------------------------------------------------------------------------
# Scheduler
# ---------------------------------------------------------------------------

class RotationScheduler:
    """Stateless selector; safe to share between threads."""

    def __init__(
        self,
        strategy: RotationStrategy | str = RotationStrategy.FULL_CYCLE,
        epoch: date = EPOCH,
    ) -> None:
        self.strategy = RotationStrategy(strategy)
        self.epoch = epoch

    def __repr__(self) -> str:
        return f"RotationScheduler(strategy={self.strategy.value!r}, epoch={self.epoch.isoformat()!r})"

    def index_for(self, day: date | datetime, size: int) -> int:
        """Index into a collection of `size` records for `day`; 0 <= index < size."""
        if self.strategy is RotationStrategy.SIMPLE_HASH:
            return simple_hash_index(day, size)
        return full_cycle_index(day, size, self.epoch)

    def today(self, size: int) -> int:
        return self.index_for(date.today(), size)

    def indices_for_range(self, start: date | datetime, days: int, size: int) -> list[DailyPick]:
        """
        Picks for |days| consecutive days starting at `start`, stepping
        forward (days > 0) or backward (days < 0). Always oldest first.
        """
        _check_size(size)
        start = _as_date(start)
        step = 1 if days >= 0 else -1
        span = [start + timedelta(days=step * k) for k in range(abs(days))]
        if step < 0:
            span.reverse()
        return [DailyPick(day=d, index=self.index_for(d, size)) for d in span]


def distinct_indices(picks: list[DailyPick]) -> list[int]:
    """Indices of `picks` without repeats, in order of first appearance."""
    return list(dict.fromkeys(p.index for p in picks))
