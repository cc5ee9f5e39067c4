from __future__ import annotations
from typing import Iterator

MULTIPLIER = 31
DEFAULT_BUCKETS = 4096
MAX_LOAD = 0.75


class State:
    __slots__ = ("prefix", "suffixes")

    def __init__(self, prefix: tuple[int, ...]):
        self.prefix = prefix
        self.suffixes: list[int] = []

    def __iter__(self) -> Iterator[int]:
        return iter(self.suffixes)

    def __len__(self) -> int:
        return len(self.suffixes)

    def __repr__(self):
        return f"State(prefix={self.prefix!r}, suffixes={self.suffixes!r})"


def prefix_hash(prefix: tuple[int, ...]) -> int:
    h = 0
    for tid in prefix:
        h = (MULTIPLIER * h + tid) & 0xFFFFFFFF
    return h


class StateTable:
    """Chained hash table from prefix (tuple of token ids) to State.

    Buckets are plain lists scanned linearly; the bucket array doubles once the
    number of states passes MAX_LOAD times its size.
    """

    def __init__(self, buckets: int = DEFAULT_BUCKETS):
        if buckets < 1:
            raise ValueError(f"bucket count must be >= 1, got {buckets}")
        self._buckets: list[list[State]] = [[] for _ in range(buckets)]
        self._count = 0
        self.suffix_count = 0

    @property
    def nbuckets(self) -> int:
        return len(self._buckets)

    def bucket_of(self, prefix: tuple[int, ...]) -> int:
        return prefix_hash(prefix) % len(self._buckets)

    def _scan(self, bucket: list[State], prefix: tuple[int, ...]) -> State | None:
        for sp in bucket:
            if sp.prefix == prefix:
                return sp
        return None

    def lookup(self, prefix: tuple[int, ...]) -> State | None:
        return self._scan(self._buckets[self.bucket_of(prefix)], prefix)

    def lookup_or_create(self, prefix: tuple[int, ...]) -> State:
        bucket = self._buckets[self.bucket_of(prefix)]
        sp = self._scan(bucket, prefix)
        if sp is not None:
            return sp
        sp = State(tuple(prefix))
        bucket.append(sp)
        self._count += 1
        if self._count > MAX_LOAD * len(self._buckets):
            self._grow()
        return sp

    def append_suffix(self, state: State, tid: int):
        state.suffixes.append(tid)
        self.suffix_count += 1

    def _grow(self):
        old = self._buckets
        self._buckets = [[] for _ in range(len(old) * 2)]
        for bucket in old:
            for sp in bucket:
                self._buckets[self.bucket_of(sp.prefix)].append(sp)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[State]:
        for bucket in self._buckets:
            yield from bucket
