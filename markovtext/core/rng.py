from __future__ import annotations
import random
import time
from typing import Iterable, Protocol

from markovtext.core.errors import RandomSourceExhausted


class RandomSource(Protocol):
    def randrange(self, n: int) -> int: ...


def clock_seed() -> int:
    # milliseconds, so two runs in the same second still differ
    return time.time_ns() // 1_000_000


class TimeSeededRandom(random.Random):
    """``random.Random`` seeded once from the clock unless a seed is given."""

    def __init__(self, seed: int | None = None):
        self.initial_seed = clock_seed() if seed is None else seed
        super().__init__(self.initial_seed)


class ScriptedRandom:
    """Replays a fixed list of draws, each reduced modulo the requested bound."""

    def __init__(self, draws: Iterable[int]):
        self._draws = iter(draws)
        self.used = 0

    def randrange(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"empty range for randrange({n})")
        try:
            value = next(self._draws)
        except StopIteration:
            raise RandomSourceExhausted(f"scripted draws ran out after {self.used}") from None
        self.used += 1
        return value % n
