from __future__ import annotations
from typing import Generic, Iterable, TypeVar

from markovtext.core.rng import RandomSource

T = TypeVar("T")


class Reservoir(Generic[T]):
    """Single-slot reservoir: after n offers each item was kept with probability 1/n."""

    def __init__(self, rng: RandomSource, initial: T | None = None):
        self.rng = rng
        self.choice = initial
        self.seen = 0

    def offer(self, item: T) -> bool:
        self.seen += 1
        if self.rng.randrange(self.seen) == 0:
            self.choice = item
            return True
        return False


def reservoir_pick(items: Iterable[T], rng: RandomSource) -> T | None:
    # one draw per item, including the first
    r: Reservoir[T] = Reservoir(rng)
    for item in items:
        r.offer(item)
    return r.choice
