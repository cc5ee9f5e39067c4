from collections import Counter
import math

from markovtext.core.tokens import NONWORD_ID


def suffix_entropy(suffixes) -> float:
    # Shannon entropy in bits of one state's suffix distribution
    counts = Counter(suffixes)
    n = sum(counts.values())
    if n == 0:
        return 0.0
    H = 0.0
    for c in counts.values():
        p = c / n
        H -= p * math.log(p, 2)
    return H


def model_stats(engine) -> dict:
    table = engine.table
    states = len(table)
    fanouts = [len(sp) for sp in table]
    terminal = sum(1 for sp in table if NONWORD_ID in sp.suffixes)
    H = sum(suffix_entropy(sp.suffixes) for sp in table)
    return {
        'order': engine.order,
        'tokens': engine.ntokens,
        'vocabulary': len(engine.pool) - 1,
        'states': states,
        'suffixes': table.suffix_count,
        'max_fanout': max(fanouts, default=0),
        'mean_fanout': (table.suffix_count / states) if states else 0.0,
        'terminal_states': terminal,
        'start_candidates': engine.starts.seen,
        'entropy': (H / states) if states else 0.0,
    }
