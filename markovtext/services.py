import logging
from typing import Iterable, Sequence

from markovtext.analytics.markov import MarkovEngine
from markovtext.analytics.stats import model_stats
from markovtext.config import settings
from markovtext.core.rng import RandomSource, TimeSeededRandom
from markovtext.core.scanner import scan_text, scan_tokens

logger = logging.getLogger(__name__)

SEPARATORS = {'space': ' ', 'newline': '\n'}


def _engine(order: int | None, rng: RandomSource | None) -> MarkovEngine:
    return MarkovEngine(order=settings.order if order is None else order,
                        rng=rng if rng is not None else TimeSeededRandom(),
                        buckets=settings.hash_buckets)


def build_model(lines: Iterable[str], order: int | None = None,
                rng: RandomSource | None = None) -> MarkovEngine:
    mkv = _engine(order, rng)
    mkv.build_from(scan_tokens(lines, max_len=settings.max_token_len))
    return mkv


def build_model_from_text(text: str, order: int | None = None,
                          rng: RandomSource | None = None) -> MarkovEngine:
    mkv = _engine(order, rng)
    mkv.build_from(scan_text(text, max_len=settings.max_token_len))
    return mkv


def clamp_count(count: int) -> int:
    if count > settings.max_words:
        logger.warning("requested %d words, capping at %d", count, settings.max_words)
        return settings.max_words
    return count


def generate_words(mkv: MarkovEngine, count: int, start: Sequence[str] | None = None) -> list[str]:
    prefix = mkv.prefix_of(start) if start else None
    return list(mkv.generate(clamp_count(count), start=prefix))


def render(words: Sequence[str], sep: str = 'space') -> str:
    return SEPARATORS[sep].join(words)


def get_stats(mkv: MarkovEngine) -> dict:
    return model_stats(mkv)


def generate_from_text(text: str, count: int, order: int | None = None, seed: int | None = None,
                       start: Sequence[str] | None = None) -> dict:
    mkv = build_model_from_text(text, order=order, rng=TimeSeededRandom(seed))
    words = generate_words(mkv, count, start=start)
    return {
        'tokens': words,
        'text': render(words),
        'start': list(start) if start else mkv.words(mkv.start),
        'states': len(mkv.table),
    }
