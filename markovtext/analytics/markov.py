from __future__ import annotations
import logging
from typing import Iterable, Iterator, Sequence

from markovtext.analytics.sampling import Reservoir, reservoir_pick
from markovtext.analytics.statetable import DEFAULT_BUCKETS, StateTable
from markovtext.core.errors import MissingStateError, ModelStateError, UnknownPrefixError
from markovtext.core.rng import RandomSource, TimeSeededRandom
from markovtext.core.tokens import NONWORD, NONWORD_ID, TokenPool
from markovtext.core.validation import is_sentence_start
from markovtext.core.window import PrefixWindow

logger = logging.getLogger(__name__)


class MarkovEngine:
    """Order-N word chain.

    Build with ``push``/``build_from`` and close the input with ``seal``; only a
    sealed engine generates. The random source is used for the start-prefix
    reservoir during build and for suffix sampling during generation.
    """

    def __init__(self, order: int = 2, rng: RandomSource | None = None,
                 buckets: int = DEFAULT_BUCKETS):
        self.order = order
        self.rng = rng if rng is not None else TimeSeededRandom()
        self.buckets = buckets
        self.reset()

    def reset(self):
        self.pool = TokenPool()
        self.table = StateTable(self.buckets)
        self.window = PrefixWindow.empty(self.order)
        self.starts: Reservoir[PrefixWindow] = Reservoir(self.rng, PrefixWindow.empty(self.order))
        self.ntokens = 0
        self.sealed = False

    @property
    def start(self) -> PrefixWindow:
        return self.starts.choice

    def _add(self, tid: int):
        sp = self.table.lookup_or_create(self.window.key)
        self.table.append_suffix(sp, tid)
        self.window = self.window.advance(tid)

    def push(self, word: str):
        if self.sealed:
            raise ModelStateError("model is sealed; no tokens can be added after build")
        if word == NONWORD:
            raise ValueError("the terminator token cannot be used as a word")
        self._add(self.pool.intern(word))
        self.ntokens += 1
        # prefixes opening with a capital are likely sentence starts
        if is_sentence_start(self.pool.text(self.window.first)):
            self.starts.offer(self.window)

    def seal(self) -> PrefixWindow:
        """Record the terminator after the last token and freeze the model."""
        if self.sealed:
            raise ModelStateError("model is already sealed")
        self._add(NONWORD_ID)
        self.sealed = True
        logger.info("built model: %d tokens, %d states, %d start candidates",
                    self.ntokens, len(self.table), self.starts.seen)
        return self.start

    def build_from(self, words: Iterable[str]) -> PrefixWindow:
        self.reset()
        for w in words:
            self.push(w)
        return self.seal()

    def prefix_of(self, words: Sequence[str]) -> PrefixWindow:
        """Turn N words into a recorded prefix, or raise UnknownPrefixError."""
        if len(words) != self.order:
            raise UnknownPrefixError(words)
        ids = tuple(self.pool.find(w) for w in words)
        if None in ids or self.table.lookup(ids) is None:
            raise UnknownPrefixError(words)
        return PrefixWindow(ids)

    def words(self, prefix: PrefixWindow) -> list[str]:
        return [self.pool.text(t) for t in prefix if t != NONWORD_ID]

    def generate(self, nwords: int, start: PrefixWindow | None = None) -> Iterator[str]:
        """Yield the start prefix words, then up to ``nwords`` sampled words.

        Stops early when the terminator is drawn; the terminator itself is
        never yielded.
        """
        if not self.sealed:
            raise ModelStateError("model must be sealed before generating")
        prefix = self.start if start is None else start
        yield from self.words(prefix)
        for _ in range(nwords):
            sp = self.table.lookup(prefix.key)
            if sp is None:
                raise MissingStateError(self.pool.text(t) for t in prefix)
            tid = reservoir_pick(sp, self.rng)
            if tid == NONWORD_ID:
                break
            yield self.pool.text(tid)
            prefix = prefix.advance(tid)
