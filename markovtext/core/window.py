from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator

from markovtext.core.tokens import NONWORD_ID


@dataclass(frozen=True)
class PrefixWindow:
    """The last N token ids seen, oldest first."""
    key: tuple[int, ...]

    @classmethod
    def empty(cls, order: int) -> PrefixWindow:
        if order < 1:
            raise ValueError(f"order must be >= 1, got {order}")
        return cls((NONWORD_ID,) * order)

    def advance(self, tid: int) -> PrefixWindow:
        return PrefixWindow(self.key[1:] + (tid,))

    @property
    def first(self) -> int:
        return self.key[0]

    def __iter__(self) -> Iterator[int]:
        return iter(self.key)

    def __len__(self) -> int:
        return len(self.key)
