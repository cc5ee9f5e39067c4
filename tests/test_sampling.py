import random
import pytest
from markovtext.analytics.sampling import Reservoir, reservoir_pick
from markovtext.core.errors import RandomSourceExhausted
from markovtext.core.rng import ScriptedRandom, TimeSeededRandom

@pytest.mark.parametrize("n", [1, 2, 3, 5])
def test_counting_draws_keep_first(n):
    # draw i at step i+1 is 0 only for i == 0
    rng = ScriptedRandom(range(n))
    assert reservoir_pick(list("abcde")[:n], rng) == "a"
    assert rng.used == n

@pytest.mark.parametrize("draws,expected", [
    ([0], "a"),
    ([0, 0], "b"),
    ([0, 1], "a"),
    ([0, 0, 0], "c"),
    ([0, 1, 0], "c"),
    ([0, 0, 2], "b"),
    ([0, 1, 0, 3, 4], "c"),
    ([0, 0, 2, 1, 0], "e"),
    ([0, 1, 2, 3, 0], "e"),
])
def test_hand_traces(draws, expected):
    items = list("abcde")[:len(draws)]
    assert reservoir_pick(items, ScriptedRandom(draws)) == expected

def test_empty_iterable():
    assert reservoir_pick([], ScriptedRandom([])) is None

def test_does_not_need_len():
    gen = (x for x in "xyz")
    assert reservoir_pick(gen, ScriptedRandom([0, 0, 0])) == "z"

def test_reservoir_offer_counts():
    r = Reservoir(ScriptedRandom([0, 1, 0]), initial="none")
    assert r.choice == "none"
    assert r.offer("a") is True
    assert r.offer("b") is False
    assert r.offer("c") is True
    assert r.choice == "c" and r.seen == 3

def test_scripted_exhausted():
    rng = ScriptedRandom([0])
    rng.randrange(3)
    with pytest.raises(RandomSourceExhausted):
        rng.randrange(3)

def test_uniform_roughly():
    rng = TimeSeededRandom(12345)
    counts = {k: 0 for k in "abcd"}
    for _ in range(8000):
        counts[reservoir_pick("abcd", rng)] += 1
    for c in counts.values():
        assert 1700 < c < 2300

def test_duplicates_weight_selection():
    rng = random.Random(7)
    hits = sum(reservoir_pick(["x", "x", "x", "y"], rng) == "x" for _ in range(4000))
    assert 2800 < hits < 3200

def test_time_seeded_keeps_seed():
    assert TimeSeededRandom(42).initial_seed == 42
    assert TimeSeededRandom().initial_seed > 0
